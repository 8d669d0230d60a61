"""
Declaration Classifier.

Reads breakpoint and option declarations out of a rule's declaration list.

Declaration Syntax:
    breakpoint-<name>: <type> <point>        typed breakpoint
    breakpoint-<name>: <feature query>       custom breakpoint
    breakpoints-<key>: <flag>                option
    (each also accepted with a "var-" prefix)

Syntax Notes:
    - <type> is "min" or "max", <point> is a number followed by px, em or rem
    - Type and point may be written in either order ("1000px min")
    - A flag is true for "1", "true" or "yes" (case-insensitive)
"""

import re
import warnings
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Union

from mqbreakpoints.errors import BreakpointParseError
from mqbreakpoints.model import KNOWN_OPTION_KEYS, BreakpointKind, Unit
from mqbreakpoints.registry import BreakpointRegistry


OPTION_PATTERN = re.compile(r'^(?:var-)?breakpoints-(?P<key>.+)$', re.IGNORECASE)
BREAKPOINT_PATTERN = re.compile(r'^(?:var-)?breakpoint-(?P<name>.+)$', re.IGNORECASE)

_TYPE_PATTERN = re.compile(r'^(min|max)$', re.IGNORECASE)
_POINT_PATTERN = re.compile(r'^(\d+(?:\.\d*)?|\.\d+)(px|em|rem)$', re.IGNORECASE)

TRUE_VALUES = frozenset({"1", "true", "yes"})

FORMAT_HINT = 'not in the format: <type> <point>, e.g. "min 1000px" or "max 340px"'
PAIR_HINT = (
    'missing type or point, i.e. "max" or "min" and e.g. "1000px", '
    '"60em" or "40rem" respectively'
)


class DeclarationClass(Enum):
    """What a declaration means to the transform."""

    OPTION = "option"
    BREAKPOINT = "breakpoint"
    OTHER = "other"


@dataclass(frozen=True)
class TypedValue:
    """Parsed value of a typed breakpoint declaration."""

    kind: BreakpointKind
    value: Decimal
    unit: Unit


ParseResult = Union[TypedValue, BreakpointParseError, None]


def classify_property(prop: Optional[str]) -> DeclarationClass:
    if not prop:
        return DeclarationClass.OTHER
    prop = prop.strip()
    if OPTION_PATTERN.match(prop):
        return DeclarationClass.OPTION
    if BREAKPOINT_PATTERN.match(prop):
        return DeclarationClass.BREAKPOINT
    return DeclarationClass.OTHER


def parse_flag(value: Optional[str]) -> bool:
    """Parse an option value; anything outside TRUE_VALUES is False."""
    if value is None:
        return False
    return value.strip().lower() in TRUE_VALUES


def _is_type(token: str) -> bool:
    return bool(_TYPE_PATTERN.match(token))


def _is_point(token: str) -> bool:
    return bool(_POINT_PATTERN.match(token))


def _typed_value(type_token: str, point_token: str) -> TypedValue:
    number, unit = _POINT_PATTERN.match(point_token).groups()
    return TypedValue(
        kind=BreakpointKind(type_token.lower()),
        value=Decimal(number),
        unit=Unit(unit.lower()),
    )


def parse_typed_value(value: str) -> ParseResult:
    """
    Parse a breakpoint value against the typed grammar.

    Returns:
        TypedValue for a well-formed typed value,
        BreakpointParseError for a value meant as typed but malformed,
        None for a custom feature query

    A value is meant as typed when any token is a bare "min"/"max" or a
    point like "340px".
    """
    parts = value.split()

    if not any(_is_type(part) or _is_point(part) for part in parts):
        return None

    if len(parts) != 2:
        return BreakpointParseError(FORMAT_HINT, value=value)

    first, second = parts
    if _is_type(first) and _is_point(second):
        return _typed_value(first, second)
    if _is_type(second) and _is_point(first):
        return _typed_value(second, first)
    return BreakpointParseError(PAIR_HINT, value=value)


def register_declaration(prop: str, value: Optional[str], registry: BreakpointRegistry) -> bool:
    """
    Register one declaration if it is a breakpoint or option.

    Args:
        prop: Property name
        value: Raw value
        registry: Registry of the current run

    Returns:
        True if the declaration was consumed, False if it is unrelated

    Raises:
        BreakpointParseError: If a typed breakpoint value is malformed
        DuplicateBreakpointError: If the registry rejects the breakpoint
    """
    kind = classify_property(prop)
    if kind is DeclarationClass.OTHER:
        return False

    prop = prop.strip()
    if kind is DeclarationClass.OPTION:
        key = OPTION_PATTERN.match(prop).group("key")
        if key.lower() not in KNOWN_OPTION_KEYS:
            warnings.warn(f"Unknown breakpoints option: {key}", UserWarning)
        registry.register_option(key, parse_flag(value))
        return True

    name = BREAKPOINT_PATTERN.match(prop).group("name")
    value = (value or "").strip()
    if not value:
        raise BreakpointParseError("value is empty", name=name.lower(), value=value)

    result = parse_typed_value(value)
    if isinstance(result, BreakpointParseError):
        raise result.for_breakpoint(name.lower())
    if result is None:
        registry.register_custom(name, value)
    else:
        registry.register_typed(name, result.kind, result.value, result.unit)
    return True


def filter_declarations(declarations: List, registry: BreakpointRegistry) -> int:
    """
    Consume breakpoint and option declarations from a declaration list.

    The list is rebuilt from the retained entries and assigned back in
    place, so callers holding a reference see the filtered list.

    Returns:
        Number of declarations consumed
    """
    kept = [
        d for d in declarations
        if not register_declaration(getattr(d, "property", None), getattr(d, "value", None), registry)
    ]
    consumed = len(declarations) - len(kept)
    declarations[:] = kept
    return consumed


__all__ = [
    "DeclarationClass",
    "TypedValue",
    "classify_property",
    "parse_flag",
    "parse_typed_value",
    "register_declaration",
    "filter_declarations",
]
