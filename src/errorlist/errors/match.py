"""Identity matching between leaves, composites and factories."""

from __future__ import annotations

from .error import Error, message_of
from .errors import Errors, ErrorsException
from .template import Errf
from .types import ErrorLike


def matches(left: ErrorLike, right: ErrorLike) -> bool:
    """Whether left and right denote the same kind of error.

    Two absent values match and absent never matches present. A composite on
    either side matches when any of its elements does, with the right-hand
    composite expanded first. Leaves match on a shared template identity, or,
    when neither carries one, on equal messages.

    A factory stands for every leaf it mints; other values compare by text.
    """
    left, right = _unwrap(left), _unwrap(right)
    match left, right:
        case None, None:
            return True
        case (None, _) | (_, None):
            return False
        case _, Errors():
            return any(matches(left, err) for err in right)
        case Errors(), _:
            return any(matches(err, right) for err in left)

    a, b = _as_leaf(left), _as_leaf(right)
    if a.template_id is not None or b.template_id is not None:
        return a.template_id == b.template_id
    return a.message == b.message


def _unwrap(value: ErrorLike) -> ErrorLike:
    return value.errors if isinstance(value, ErrorsException) else value


def _as_leaf(value: ErrorLike) -> Error:
    """Leaf view of an operand. No stack is captured for comparison-only leaves."""
    match value:
        case Error():
            return value
        case Errf():
            return Error.model_construct(message=value.template, frames=(), template_id=value.template_id)
        case _:
            return Error.model_construct(message=message_of(value), frames=(), template_id=None)
