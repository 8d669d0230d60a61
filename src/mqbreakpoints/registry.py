"""
Breakpoint Registry.

Accumulates breakpoint definitions and option flags while a stylesheet is
walked. One registry belongs to exactly one transform run.

INVARIANTS:
    - Names are lower-cased on registration and unique across all kinds
    - No two typed breakpoints share (kind, value, unit)
"""

import logging
from decimal import Decimal
from typing import Dict, Iterator, List, Optional, Union

from mqbreakpoints.errors import DuplicateNameError, DuplicatePointError
from mqbreakpoints.model import (
    DEFAULT_FRACTIONAL_DELTA,
    Breakpoint,
    BreakpointKind,
    Unit,
    format_point,
)

logger = logging.getLogger(__name__)


class BreakpointRegistry:
    """Collects breakpoints and options for a single run."""

    def __init__(self, fractional_delta: Decimal = DEFAULT_FRACTIONAL_DELTA):
        self.fractional_delta = fractional_delta
        self._breakpoints: Dict[str, Breakpoint] = {}
        self._options: Dict[str, bool] = {}

    def __len__(self) -> int:
        return len(self._breakpoints)

    def __iter__(self) -> Iterator[Breakpoint]:
        return iter(self._breakpoints.values())

    def __contains__(self, name: str) -> bool:
        return name.lower() in self._breakpoints

    @property
    def options(self) -> Dict[str, bool]:
        return dict(self._options)

    def get(self, name: str) -> Optional[Breakpoint]:
        return self._breakpoints.get(name.lower())

    def typed(self, kind: BreakpointKind) -> List[Breakpoint]:
        """Typed breakpoints of one kind, in registration order."""
        return [bp for bp in self._breakpoints.values() if bp.kind is kind]

    def custom(self) -> List[Breakpoint]:
        return self.typed(BreakpointKind.CUSTOM)

    def register_option(self, key: str, value: bool) -> None:
        """Set an option flag. A later declaration of the same key wins."""
        key = key.lower()
        self._options[key] = value
        logger.debug("Option %s = %s", key, value)

    def register_typed(
        self,
        name: str,
        kind: Union[BreakpointKind, str],
        value: Decimal,
        unit: Union[Unit, str],
    ) -> Breakpoint:
        """
        Register a min/max breakpoint.

        Raises:
            DuplicateNameError: If the name is already registered
            DuplicatePointError: If a breakpoint of the same kind already
                sits at the same point
        """
        name = name.lower()
        kind = BreakpointKind(kind.lower()) if isinstance(kind, str) else kind
        unit = Unit(unit.lower()) if isinstance(unit, str) else unit
        value = Decimal(value)
        if kind is BreakpointKind.CUSTOM:
            raise ValueError("register_typed() requires kind 'min' or 'max'")

        self._check_name(name)
        for existing in self.typed(kind):
            if existing.unit is unit and existing.value == value:
                raise DuplicatePointError(
                    name=name,
                    kind=kind.value,
                    point=format_point(value, unit),
                    existing=existing.name,
                )

        bp = Breakpoint(
            name=name,
            kind=kind,
            value=value,
            unit=unit,
            fractional_delta=self.fractional_delta,
        )
        self._breakpoints[name] = bp
        logger.debug("Breakpoint %s: %s %s", name, kind.value, bp.point)
        return bp

    def register_custom(self, name: str, raw: str) -> Breakpoint:
        """
        Register a custom breakpoint.

        Raises:
            DuplicateNameError: If the name is already registered
        """
        name = name.lower()
        self._check_name(name)
        bp = Breakpoint(name=name, kind=BreakpointKind.CUSTOM, raw=raw)
        self._breakpoints[name] = bp
        logger.debug("Custom breakpoint %s: %s", name, raw)
        return bp

    def reset(self) -> None:
        self._breakpoints.clear()
        self._options.clear()

    def _check_name(self, name: str) -> None:
        if name in self._breakpoints:
            raise DuplicateNameError(name)
