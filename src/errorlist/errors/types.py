"""Type aliases and the logging collaborator protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, NewType, Protocol, TypeAlias, runtime_checkable

if TYPE_CHECKING:
    from .error import Error
    from .errors import Errors, ErrorsException
    from .template import Errf

# ═══════════════════════════════════════════════════════════════════════════════
# Type Aliases
# ═══════════════════════════════════════════════════════════════════════════════

TemplateId = NewType("TemplateId", int)

# Anything the constructors, mutators and matcher accept. None is "no error";
# arbitrary objects are coerced to a leaf through str().
ErrorLike: TypeAlias = "Error | Errors | Errf | ErrorsException | BaseException | object | None"

# ═══════════════════════════════════════════════════════════════════════════════
# Collaborators
# ═══════════════════════════════════════════════════════════════════════════════


@runtime_checkable
class ErrorSink(Protocol):
    """Leveled logging sink that composites report mutations to.

    ``v(level)`` follows glog: true when the sink's verbosity is at least ``level``.
    BoundLogger from errorlist.observability satisfies it.
    """

    def v(self, level: int) -> bool: ...
    def error(self, event: str, **kw: object) -> None: ...
