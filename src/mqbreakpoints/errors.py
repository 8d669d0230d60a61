"""
Exception hierarchy for the breakpoint transform.

Every error here is fatal for the run that raised it. Nothing in the
package catches them; they propagate out of ``transform`` unchanged.
"""

from typing import Optional


class BreakpointError(Exception):
    """Base class for all breakpoint transform errors."""
    pass


class BreakpointParseError(BreakpointError):
    """Raised when a typed breakpoint declaration is malformed."""

    def __init__(self, reason: str, name: Optional[str] = None, value: Optional[str] = None):
        self.reason = reason
        self.name = name
        self.value = value
        if name is None:
            message = reason
        else:
            message = f'Error in breakpoint "{name}": {reason}'
        super().__init__(message)

    def for_breakpoint(self, name: str) -> "BreakpointParseError":
        """Return a copy of this error bound to a breakpoint name."""
        return BreakpointParseError(self.reason, name=name, value=self.value)


class DuplicateBreakpointError(BreakpointError):
    """Raised when a breakpoint collides with one already registered."""
    pass


class DuplicateNameError(DuplicateBreakpointError):
    """Raised when a breakpoint name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Breakpoint with name: {name} is already defined!")


class DuplicatePointError(DuplicateBreakpointError):
    """Raised when two typed breakpoints share kind and point."""

    def __init__(self, name: str, kind: str, point: str, existing: str):
        self.name = name
        self.kind = kind
        self.point = point
        self.existing = existing
        super().__init__(
            f"A breakpoint at: {kind} {point} is already defined! "
            f'("{name}" collides with "{existing}")'
        )


class BreakpointConfigError(BreakpointError):
    """Raised when transform configuration is invalid."""
    pass


__all__ = [
    "BreakpointError",
    "BreakpointParseError",
    "DuplicateBreakpointError",
    "DuplicateNameError",
    "DuplicatePointError",
    "BreakpointConfigError",
]
