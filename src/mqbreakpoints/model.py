"""
Core Breakpoint Model Objects

Defines the data structures the transform builds while reading a stylesheet:
    - Breakpoints (named thresholds or custom feature queries)
    - Breakpoint kinds and units
    - Media options (which media type and feature names to emit)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about the stylesheet tree they were read from
        - Are immutable once created
        - Represent definitions, not resolved media queries
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Dict, Optional


# Sub-unit separation for fractional units; px tiers are separated by a whole pixel.
DEFAULT_FRACTIONAL_DELTA = Decimal("0.0001")


class BreakpointKind(Enum):
    """
    Kind of a breakpoint declaration.

    MIN and MAX are typed breakpoints with a numeric point.
    CUSTOM carries an author-written feature query verbatim.
    """

    MIN = "min"
    MAX = "max"
    CUSTOM = "custom"


class Unit(Enum):
    """Units accepted for typed breakpoint points."""

    PX = "px"
    EM = "em"
    REM = "rem"

    @property
    def is_fractional(self) -> bool:
        return self is not Unit.PX


def format_number(value: Decimal) -> str:
    """
    Render a Decimal without exponent or trailing zeros.

    Examples:
        Decimal("340")     -> "340"
        Decimal("80.50")   -> "80.5"
        Decimal("79.9999") -> "79.9999"
    """
    text = format(value.normalize(), "f")
    return text if text != "-0" else "0"


@dataclass(frozen=True)
class Breakpoint:
    """
    A single named breakpoint.

    Properties:
        name:
            Lower-cased identifier, unique across all breakpoints
            Examples: "palm", "tab", "desk-wide"

        kind:
            BreakpointKind; MIN or MAX for typed breakpoints, CUSTOM otherwise

        value:
            Numeric point for typed breakpoints (exact Decimal), else None

        unit:
            Unit of the point for typed breakpoints, else None

        raw:
            Feature query text for custom breakpoints, else None
            Example: "(orientation: landscape)"

        fractional_delta:
            Tie-break delta used for em/rem points

    INVARIANT:
        Typed breakpoints have value and unit; custom breakpoints have raw.
    """

    name: str
    kind: BreakpointKind
    value: Optional[Decimal] = None
    unit: Optional[Unit] = None
    raw: Optional[str] = None
    fractional_delta: Decimal = DEFAULT_FRACTIONAL_DELTA

    @property
    def is_typed(self) -> bool:
        return self.kind is not BreakpointKind.CUSTOM

    @property
    def tie_break_delta(self) -> Decimal:
        """
        Minimal increment separating this point from an adjacent tier.

        1 for px, the fractional delta for em/rem.
        """
        if self.unit is None:
            raise ValueError(f"Custom breakpoint {self.name!r} has no tie-break delta")
        if self.unit.is_fractional:
            return self.fractional_delta
        return Decimal(1)

    @property
    def point(self) -> str:
        """Point as written in a media feature, e.g. '340px'."""
        if self.value is None or self.unit is None:
            raise ValueError(f"Custom breakpoint {self.name!r} has no point")
        return format_point(self.value, self.unit)

    def shifted_point(self, direction: int) -> str:
        """Point moved by one tie-break delta; direction is +1 or -1."""
        return format_point(self.value + direction * self.tie_break_delta, self.unit)


def format_point(value: Decimal, unit: Unit) -> str:
    return f"{format_number(value)}{unit.value}"


@dataclass(frozen=True)
class MediaOptions:
    """
    Options that shape every generated media query.

    Properties:
        device_width:
            Emit min-device-width/max-device-width instead of min-width/max-width
        use_only:
            Emit "only screen" instead of "screen" as the media type
    """

    device_width: bool = False
    use_only: bool = False

    @property
    def media_type(self) -> str:
        return "only screen" if self.use_only else "screen"

    def feature(self, bound: str) -> str:
        """Feature name for a bound ("min" or "max")."""
        if self.device_width:
            return f"{bound}-device-width"
        return f"{bound}-width"

    def with_flags(self, flags: Dict[str, bool]) -> "MediaOptions":
        """
        Overlay option declarations read from a stylesheet.

        Recognized keys: "device" and "use-only". Keys not present
        keep this object's value.
        """
        return MediaOptions(
            device_width=flags.get("device", self.device_width),
            use_only=flags.get("use-only", self.use_only),
        )


KNOWN_OPTION_KEYS = ("device", "use-only")
