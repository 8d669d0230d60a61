"""
Media Query Breakpoints Package

Named breakpoints for CSS media queries. Authors declare breakpoints once:

    :root {
        breakpoint-palm: max 340px;
        breakpoint-desk: min 1000px;
        breakpoint-landscape: (orientation: landscape);
    }

and refer to them by name in @media rules (``@media palm and landscape``).
The transform rewrites those names into concrete feature queries.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Parsing CSS text
    - Printing CSS text
    - Any particular plugin host

It works on an already-parsed tree and mutates it in place.
"""

from mqbreakpoints.config import TransformConfig, load_config
from mqbreakpoints.errors import (
    BreakpointConfigError,
    BreakpointError,
    BreakpointParseError,
    DuplicateBreakpointError,
    DuplicateNameError,
    DuplicatePointError,
)
from mqbreakpoints.rewriter import MatchMode
from mqbreakpoints.transform import (
    TransformResult,
    breakpoints,
    transform,
    transform_stylesheet,
)

__version__ = "0.1.0"

__all__ = [
    "TransformConfig",
    "TransformResult",
    "MatchMode",
    "load_config",
    "breakpoints",
    "transform",
    "transform_stylesheet",
    "BreakpointError",
    "BreakpointParseError",
    "BreakpointConfigError",
    "DuplicateBreakpointError",
    "DuplicateNameError",
    "DuplicatePointError",
]
