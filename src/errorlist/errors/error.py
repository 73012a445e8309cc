"""Leaf errors: an immutable message plus the call stack captured at creation.

Uses frozen Pydantic models so neither the message nor the trace can change
after construction. Construction goes through model_construct on the hot path.
"""

from __future__ import annotations

import os
import traceback
from types import TracebackType

from pydantic import BaseModel, ConfigDict, Field

from errorlist.config import get_settings

from .types import ErrorLike, TemplateId

# Frames from this directory are trimmed from the tail of every captured stack
_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))

_EMPTY_FRAMES: tuple[Frame, ...] = ()


class Frame(BaseModel):
    """One entry of a captured call stack."""

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    filename: str
    lineno: int = 0
    name: str = ""
    line: str = Field(default="", repr=False)

    def __str__(self) -> str:
        return f'File "{self.filename}", line {self.lineno}, in {self.name}'


class Error(BaseModel):
    """An atomic error with a message and the stack where it was created.

    Errors minted by a template factory carry that factory's template_id, which
    is what identity matching compares instead of the rendered message.

    Build leaves with wrap() or a factory from define_template(); direct
    construction skips stack capture.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", revalidate_instances="never")

    message: str
    frames: tuple[Frame, ...] = Field(default=_EMPTY_FRAMES, repr=False)
    template_id: TemplateId | None = None

    def render(self) -> str:
        """The message alone."""
        return self.message

    def render_with_trace(self) -> str:
        """Message followed by one line per captured frame, most recent call last."""
        if not self.frames:
            return self.message
        return "\n".join([self.message, *(f"  {frame}" for frame in self.frames)])

    def matches(self, other: ErrorLike) -> bool:
        """Whether other denotes the same kind of error."""
        from .match import matches
        return matches(self, other)

    __str__ = render


# ═══════════════════════════════════════════════════════════════════════════════
# Construction helpers
# ═══════════════════════════════════════════════════════════════════════════════


def capture_stack() -> tuple[Frame, ...]:
    """Capture the caller's stack, dropping errorlist.errors frames from the tail.

    Honors ERRORLIST_TRACE_ENABLED and ERRORLIST_TRACE_MAX_FRAMES.
    """
    return _capture(None)


def _capture(tb: TracebackType | None) -> tuple[Frame, ...]:
    """Caller's stack, continued down to the raise site when tb is given.

    The traceback starts in the frame that caught the exception, which
    replaces the stack's own entry for that function.
    """
    cfg = get_settings().trace
    if not cfg.enabled:
        return _EMPTY_FRAMES
    summary = traceback.extract_stack()
    end = len(summary)
    while end and _is_internal(summary[end - 1].filename):
        end -= 1
    kept = list(summary[:end])
    if tb is not None:
        raised = traceback.extract_tb(tb)
        if kept and raised and (kept[-1].filename, kept[-1].name) == (raised[0].filename, raised[0].name):
            kept.pop()
        kept.extend(raised)
    if cfg.max_frames is not None:
        kept = kept[-cfg.max_frames:]
    return tuple(
        Frame.model_construct(filename=fs.filename, lineno=fs.lineno or 0, name=fs.name, line=fs.line or "")
        for fs in kept
    )


def _is_internal(filename: str) -> bool:
    return os.path.dirname(os.path.abspath(filename)) == _PACKAGE_DIR


def message_of(value: object) -> str:
    """Default string rendering used to coerce arbitrary values into leaves."""
    try:
        text = str(value)
    except Exception:  # noqa: BLE001
        return object.__repr__(value)
    if not text and isinstance(value, BaseException):
        return type(value).__name__
    return text


def leaf(message: str, template_id: TemplateId | None = None) -> Error:
    """Build a leaf with a freshly captured stack."""
    return Error.model_construct(message=message, frames=capture_stack(), template_id=template_id)


def wrap(value: ErrorLike) -> Error:
    """Coerce any value into a leaf error. Never fails.

    Leaves are returned as-is. A template factory renders its raw template and
    keeps its identity. Everything else is stringified, and an exception with
    an empty message falls back to its type name. A raised exception keeps
    its traceback, so the trace ends at the raise site.
    """
    from .template import Errf

    match value:
        case Error():
            return value
        case Errf():
            return leaf(value.template, value.template_id)
        case BaseException():
            return Error.model_construct(message=message_of(value), frames=_capture(value.__traceback__),
                                         template_id=None)
        case _:
            return leaf(message_of(value))
