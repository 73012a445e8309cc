"""Composite errors: an ordered, flattening list of leaf errors.

A composite collects the failures of a batch and behaves as one error value:
it renders to the joined messages, renders the joined stack traces, and takes
part in identity matching. Adding a composite to another copies its leaves in,
so nesting never goes deeper than one level.

Absent is None. ``new(None)`` stays None, while ``Errors()`` is a present but
empty aggregate that can be grown with add().

Example:
    >>> timeout = define_template("timeout after %ds")
    >>> errs = None
    >>> for secs in (5, 10):
    ...     errs = add(errs, timeout(secs))
    >>> render(errs)
    'timeout after 5s\\ntimeout after 10s'
    >>> matches(errs, timeout)
    True
"""

from __future__ import annotations

from collections.abc import Iterator
from types import TracebackType
from typing import overload

from errorlist.config import get_settings

from .error import Error, leaf, message_of, wrap
from .template import Errf, format_message
from .types import ErrorLike, ErrorSink


class Errors:
    """Ordered collection of leaf errors usable wherever a single error is expected.

    Mutation is in place and not safe for concurrent use of one instance; give
    each producer its own composite and merge with combine().

    Args:
        logger: Sink that receives each added error at error level
        verbosity: Sink verbosity required before logging; defaults to
            ERRORLIST_LOG_ADD_THRESHOLD (3)
    """

    __slots__ = ("_errors", "_logger", "_verbosity")

    def __init__(self, *, logger: ErrorSink | None = None, verbosity: int | None = None) -> None:
        self._errors: list[Error] = []
        self._logger = logger
        self._verbosity = verbosity

    # ─── Sequence Protocol ─────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Error]:
        return iter(self._errors)

    @overload
    def __getitem__(self, index: int) -> Error: ...
    @overload
    def __getitem__(self, index: slice) -> list[Error]: ...
    def __getitem__(self, index: int | slice) -> Error | list[Error]:
        return self._errors[index]

    def __repr__(self) -> str:
        return f"Errors({self._errors!r})"

    @property
    def logger(self) -> ErrorSink | None:
        return self._logger

    @property
    def verbosity(self) -> int | None:
        return self._verbosity

    # ─── Mutation ──────────────────────────────────────────────────────

    def add(self, value: ErrorLike) -> Errors:
        """Append value in place and return self.

        Leaves are appended directly, composites are flattened element by
        element, None is a no-op, and anything else is wrapped into a leaf.
        """
        added = self._extend(value)
        if added:
            self._log_added(added)
        return self

    def add_formatted(self, fmt: str, *args: object, **kwargs: object) -> Errors:
        """Add a leaf rendered from a %-style format string."""
        return self.add(leaf(format_message(fmt, args, kwargs)))

    def capture(self, *types: type[BaseException]) -> _Capture:
        """Context manager that adds exceptions raised in its body and suppresses them.

        Example:
            >>> errs = Errors()
            >>> for path in paths:
            ...     with errs.capture(OSError):
            ...         process(path)
        """
        return _Capture(self, types or (Exception,))

    def _extend(self, value: ErrorLike) -> tuple[Error, ...]:
        match value:
            case None:
                return ()
            case Error():
                added: tuple[Error, ...] = (value,)
            case Errors():
                added = tuple(value._errors)  # snapshot: value may be self
            case ErrorsException():
                added = tuple(value.errors._errors)
            case _:
                added = (wrap(value),)
        self._errors.extend(added)
        return added

    def _log_added(self, added: tuple[Error, ...]) -> None:
        if (log := self._logger) is None:
            return
        threshold = get_settings().logging.add_threshold if self._verbosity is None else self._verbosity
        if log.v(threshold):
            log.error("\n".join(err.render() for err in added), total=len(self._errors))

    # ─── Queries ───────────────────────────────────────────────────────

    def render(self) -> str:
        """All messages, one per line, in insertion order."""
        return "\n".join(err.render() for err in self._errors)

    def render_with_trace(self) -> str:
        """All messages with their stack traces, in insertion order."""
        return "\n".join(err.render_with_trace() for err in self._errors)

    def matches(self, other: ErrorLike) -> bool:
        """Whether any element matches other (or any element of other)."""
        from .match import matches
        return matches(self, other)

    __str__ = render


class _Capture:
    """Context manager returned by Errors.capture()."""

    __slots__ = ("_errors", "_types")

    def __init__(self, errors: Errors, types: tuple[type[BaseException], ...]) -> None:
        self._errors, self._types = errors, types

    def __enter__(self) -> Errors:
        return self._errors

    def __exit__(self, exc_type: type[BaseException] | None, exc_val: BaseException | None,
                 exc_tb: TracebackType | None) -> bool:
        if exc_val is None or not isinstance(exc_val, self._types):
            return False
        self._errors.add(exc_val)
        return True


class ErrorsException(Exception):
    """Exception wrapping a composite for raising."""

    __slots__ = ("errors",)

    def __init__(self, errors: Errors) -> None:
        self.errors = errors
        super().__init__(errors.render())


# ═══════════════════════════════════════════════════════════════════════════════
# Free Functions (accept absent receivers)
# ═══════════════════════════════════════════════════════════════════════════════


def new(value: ErrorLike, *, logger: ErrorSink | None = None, verbosity: int | None = None) -> Errors | None:
    """Composite holding value, or None when value is None.

    A composite value is copied (flattened) and lends its logger and verbosity
    unless others are given. Goes through add(), so it logs like add().
    """
    if value is None:
        return None
    if isinstance(value, Errors):
        logger = value._logger if logger is None else logger
        verbosity = value._verbosity if verbosity is None else verbosity
    return Errors(logger=logger, verbosity=verbosity).add(value)


def add(errs: Errors | None, value: ErrorLike) -> Errors | None:
    """Add value to errs, allocating a composite when errs is absent.

    Returns errs unchanged (possibly None) when value is None.
    """
    if value is None:
        return errs
    return (Errors() if errs is None else errs).add(value)


def add_formatted(errs: Errors | None, fmt: str, *args: object, **kwargs: object) -> Errors:
    """Add a leaf rendered from fmt, allocating a composite when errs is absent."""
    return (Errors() if errs is None else errs).add_formatted(fmt, *args, **kwargs)


def combine(a: ErrorLike, b: ErrorLike) -> Errors | None:
    """New composite holding a's errors followed by b's. Neither operand is mutated.

    Any mix of composites, leaves and plain values works the same way. The
    result takes its logger from the first composite operand; only b's errors
    are logged.
    """
    if a is None and b is None:
        return None
    source = a if isinstance(a, Errors) else b if isinstance(b, Errors) else None
    out = Errors() if source is None else Errors(logger=source._logger, verbosity=source._verbosity)
    out._extend(a)
    return out.add(b)


def render(errs: ErrorLike) -> str:
    """Joined messages; empty for None."""
    match errs:
        case None:
            return ""
        case Errors() | Error():
            return errs.render()
        case Errf():
            return wrap(errs).render()
        case _:
            return message_of(errs)


def render_with_trace(errs: ErrorLike) -> str:
    """Joined messages with stack traces; empty for None."""
    match errs:
        case None:
            return ""
        case Errors() | Error():
            return errs.render_with_trace()
        case Errf():
            return wrap(errs).render_with_trace()
        case _:
            return message_of(errs)


def raise_for(errs: Errors | None) -> None:
    """Raise ErrorsException when errs is present and holds at least one error."""
    if errs is not None and len(errs):
        raise ErrorsException(errs)
