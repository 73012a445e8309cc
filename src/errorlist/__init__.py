"""errorlist - Aggregate errors from a batch and compare them by identity.

Collects the errors of many fallible operations into one composite that keeps
every message and creation-time stack trace, flattens nested composites, and
matches errors by template identity rather than by formatted text.

Quick Start:
    >>> from errorlist import add, define_template, matches, render
    >>>
    >>> bad_row = define_template("row %d is malformed")
    >>> errs = None
    >>> for i, row in enumerate(rows):
    ...     if not valid(row):
    ...         errs = add(errs, bad_row(i))
    >>> matches(errs, bad_row)  # any malformed row?
    True
    >>> print(render(errs))
    row 3 is malformed
    row 8 is malformed

Collecting exceptions:
    >>> from errorlist import Errors, raise_for
    >>> errs = Errors()
    >>> for path in paths:
    ...     with errs.capture(OSError):
    ...         load(path)
    >>> raise_for(errs)  # ErrorsException if anything failed

Logging:
    >>> from errorlist.observability import configure_logging, get_logger
    >>> configure_logging(verbosity=3)
    >>> errs = Errors(logger=get_logger("loader"))  # every add() is logged
"""

from __future__ import annotations

__version__ = "0.1.0"

from .errors import (
    Errf,
    Error,
    ErrorLike,
    Errors,
    ErrorSink,
    ErrorsException,
    Frame,
    TemplateId,
    add,
    add_formatted,
    capture_stack,
    combine,
    define_template,
    format_message,
    matches,
    new,
    raise_for,
    render,
    render_with_trace,
    wrap,
)

__all__ = [
    "__version__",
    "Errf",
    "Error",
    "ErrorLike",
    "ErrorSink",
    "Errors",
    "ErrorsException",
    "Frame",
    "TemplateId",
    "add",
    "add_formatted",
    "capture_stack",
    "combine",
    "define_template",
    "format_message",
    "matches",
    "new",
    "raise_for",
    "render",
    "render_with_trace",
    "wrap",
]
