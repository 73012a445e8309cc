"""Error aggregation and identity matching.

- Error/Frame: Immutable leaf errors with the stack captured at creation
- Errf/define_template: Factories minting leaves that share a template identity
- Errors: Ordered, flattening composite of leaves
- matches: Identity comparison across leaves, composites and factories
"""

from .error import Error, Frame, capture_stack, wrap
from .errors import (
    Errors,
    ErrorsException,
    add,
    add_formatted,
    combine,
    new,
    raise_for,
    render,
    render_with_trace,
)
from .match import matches
from .template import Errf, define_template, format_message
from .types import ErrorLike, ErrorSink, TemplateId

__all__ = [
    # Leaves
    "Error", "Frame", "wrap", "capture_stack",
    # Templates
    "Errf", "TemplateId", "define_template", "format_message",
    # Composites
    "Errors", "ErrorsException", "new", "add", "add_formatted", "combine", "raise_for",
    "render", "render_with_trace",
    # Matching
    "matches",
    # Types
    "ErrorLike", "ErrorSink",
]
