"""Template factories: comparable but descriptive errors.

A factory binds a printf-style format string to a fresh TemplateId. Every leaf
it mints carries that id, so leaves from one factory match each other whatever
arguments were formatted into their messages.

Example:
    >>> not_found = define_template("%s not found")
    >>> not_found("user 7").matches(not_found("user 9"))
    True
    >>> not_found("user 7").matches(define_template("%s not found")("user 7"))
    False
"""

from __future__ import annotations

import itertools
from collections.abc import Mapping

from .error import Error, leaf
from .types import ErrorLike, TemplateId

_ids = itertools.count(1)


def format_message(fmt: str, args: tuple[object, ...] = (), kwargs: Mapping[str, object] | None = None) -> str:
    """Render fmt with %-style formatting. Never fails.

    No arguments yields fmt verbatim. Keyword arguments (or one mapping
    argument when fmt has %(name)s placeholders) feed named placeholders.
    No argument is ever dropped: ones that do not fit the template are
    appended to it as reprs, and mapping keys the template never names are
    appended as key=repr.
    """
    kwargs = kwargs or {}
    if not args and not kwargs:
        return fmt
    if args and kwargs:
        return _append(fmt, args, kwargs)
    params: object
    if kwargs:
        params = kwargs
    elif len(args) == 1 and isinstance(args[0], Mapping) and "%(" in fmt:
        params = args[0]
    else:
        params = args
    try:
        rendered = fmt % params
    except (TypeError, ValueError, KeyError):
        return _append(fmt, args, kwargs)
    if isinstance(params, Mapping):
        unused = {k: v for k, v in params.items() if f"%({k})" not in fmt}
        return _append(rendered, (), unused)
    return rendered


def _append(text: str, args: tuple[object, ...], kwargs: Mapping[str, object]) -> str:
    return " ".join([text, *map(repr, args), *(f"{k}={v!r}" for k, v in kwargs.items())])


class Errf:
    """Error factory bound to one format string and one template identity."""

    __slots__ = ("template", "template_id")

    def __init__(self, template: str) -> None:
        self.template = template
        self.template_id = TemplateId(next(_ids))

    def __call__(self, *args: object, **kwargs: object) -> Error:
        return leaf(format_message(self.template, args, kwargs), self.template_id)

    def matches(self, other: ErrorLike) -> bool:
        """Whether other was minted by this factory."""
        from .match import matches
        return matches(self, other)

    def __repr__(self) -> str:
        return f"Errf({self.template!r}, template_id={self.template_id})"


def define_template(template: str) -> Errf:
    """Create a factory with a new template identity.

    Identity belongs to the factory instance: two factories built from the
    same text never match each other.
    """
    return Errf(template)
