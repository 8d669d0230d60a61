"""
Range Resolver.

Turns registered breakpoints into media query fragments, one per name,
plus the synthesized "<name>-and-up" and "<name>-and-down" ranges.

Max breakpoints, ascending [m0, m1, ..., mk]:
    mi            (min: m(i-1) + delta) and (max: mi)     first tier has no min
    mi-and-down   (max: mi)
    mi-and-up     (min: m(i-1) + delta)                   i > 0

Min breakpoints, ascending [n0, n1, ..., nk]:
    nj            (min: nj) and (max: n(j+1) - delta)     last tier has no max
    nj-and-up     (min: nj)
    nj-and-down   (max: n(j+1) - delta)                   j < k

Adjacent tiers never overlap: delta is one pixel for px points and a
small fraction for em/rem points. Custom breakpoints resolve verbatim.
"""

import logging
from typing import Dict, List, Tuple

from mqbreakpoints.model import Breakpoint, BreakpointKind, MediaOptions
from mqbreakpoints.registry import BreakpointRegistry

logger = logging.getLogger(__name__)

AND_UP = "-and-up"
AND_DOWN = "-and-down"


def _sorted_points(breakpoints: List[Breakpoint]) -> List[Breakpoint]:
    # Stable: equal magnitudes in different units keep declaration order
    return sorted(breakpoints, key=lambda bp: bp.value)


def _query(options: MediaOptions, *features: Tuple[str, str]) -> str:
    parts = [options.media_type]
    for bound, point in features:
        parts.append(f"({options.feature(bound)}: {point})")
    return " and ".join(parts)


def resolve_max_tiers(breakpoints: List[Breakpoint], options: MediaOptions) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Resolve max breakpoints.

    Returns:
        (named, synthesized) mappings
    """
    named: Dict[str, str] = {}
    synthesized: Dict[str, str] = {}
    tiers = _sorted_points(breakpoints)

    for i, bp in enumerate(tiers):
        synthesized[bp.name + AND_DOWN] = _query(options, ("max", bp.point))
        if i == 0:
            named[bp.name] = _query(options, ("max", bp.point))
            continue
        lower = tiers[i - 1].shifted_point(+1)
        named[bp.name] = _query(options, ("min", lower), ("max", bp.point))
        synthesized[bp.name + AND_UP] = _query(options, ("min", lower))

    return named, synthesized


def resolve_min_tiers(breakpoints: List[Breakpoint], options: MediaOptions) -> Tuple[Dict[str, str], Dict[str, str]]:
    """
    Resolve min breakpoints, top tier first.

    Returns:
        (named, synthesized) mappings
    """
    named: Dict[str, str] = {}
    synthesized: Dict[str, str] = {}
    tiers = _sorted_points(breakpoints)

    for j in range(len(tiers) - 1, -1, -1):
        bp = tiers[j]
        synthesized[bp.name + AND_UP] = _query(options, ("min", bp.point))
        if j == len(tiers) - 1:
            named[bp.name] = _query(options, ("min", bp.point))
            continue
        upper = tiers[j + 1].shifted_point(-1)
        named[bp.name] = _query(options, ("min", bp.point), ("max", upper))
        synthesized[bp.name + AND_DOWN] = _query(options, ("max", upper))

    return named, synthesized


def resolve_breakpoints(registry: BreakpointRegistry, options: MediaOptions) -> Dict[str, str]:
    """
    Build the resolved media map for every registered breakpoint.

    Declared names take precedence over synthesized names of the same
    spelling, e.g. an explicit "tab-and-up" breakpoint.

    Args:
        registry: Registry of the current run
        options: Media type and feature flavour

    Returns:
        Mapping from breakpoint name to media query fragment
    """
    max_named, max_synth = resolve_max_tiers(registry.typed(BreakpointKind.MAX), options)
    min_named, min_synth = resolve_min_tiers(registry.typed(BreakpointKind.MIN), options)
    custom = {bp.name: bp.raw for bp in registry.custom()}

    media_map: Dict[str, str] = {}
    media_map.update(max_synth)
    media_map.update(min_synth)
    media_map.update(max_named)
    media_map.update(min_named)
    media_map.update(custom)

    logger.debug(
        "Resolved %d breakpoints into %d media queries", len(registry), len(media_map)
    )
    return media_map
