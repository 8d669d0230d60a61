"""
Run Controller.

One run = fresh context -> walk -> resolve -> rewrite, over one stylesheet.
Every call builds its own TransformContext, so repeated calls never see
each other's breakpoints, options or media rules.

Usage with a plugin host that calls ``plugin(stylesheet)``:

    host.use(breakpoints())
    host.use(breakpoints(TransformConfig(use_only=True)))

Or directly:

    transform(stylesheet)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from mqbreakpoints.config import TransformConfig
from mqbreakpoints.model import Breakpoint, MediaOptions
from mqbreakpoints.registry import BreakpointRegistry
from mqbreakpoints.resolver import resolve_breakpoints
from mqbreakpoints.rewriter import rewrite_media_rules
from mqbreakpoints.walker import walk_rules

logger = logging.getLogger(__name__)


@dataclass
class TransformContext:
    """State owned by a single run."""

    config: TransformConfig
    registry: BreakpointRegistry
    media_rules: List = field(default_factory=list)

    @classmethod
    def fresh(cls, config: Optional[TransformConfig] = None) -> TransformContext:
        config = config or TransformConfig()
        return cls(config=config, registry=BreakpointRegistry(config.fractional_delta))

    @property
    def media_options(self) -> MediaOptions:
        return self.config.media_options.with_flags(self.registry.options)


@dataclass
class TransformResult:
    """What a run found and changed."""

    breakpoints: List[Breakpoint] = field(default_factory=list)
    media_map: Dict[str, str] = field(default_factory=dict)
    media_rules: List = field(default_factory=list)
    rewritten: int = 0
    options: MediaOptions = field(default_factory=MediaOptions)


def transform_stylesheet(stylesheet, config: Optional[TransformConfig] = None) -> TransformResult:
    """
    Apply breakpoints to a stylesheet in place.

    Args:
        stylesheet: Object with a ``rules`` list
        config: TransformConfig (defaults apply if None)

    Returns:
        TransformResult describing the run

    Raises:
        BreakpointParseError: If a typed breakpoint value is malformed
        DuplicateBreakpointError: If breakpoint names or points collide

    After an error the stylesheet may be partially transformed.
    """
    ctx = TransformContext.fresh(config)

    ctx.media_rules = walk_rules(
        stylesheet.rules, ctx.registry, prune_empty=ctx.config.prune_empty_rules
    )
    options = ctx.media_options
    media_map = resolve_breakpoints(ctx.registry, options)
    rewritten = rewrite_media_rules(ctx.media_rules, media_map, ctx.config.match_mode)

    logger.debug(
        "Applied %d breakpoints: %d of %d media rules rewritten",
        len(ctx.registry), rewritten, len(ctx.media_rules),
    )
    return TransformResult(
        breakpoints=list(ctx.registry),
        media_map=media_map,
        media_rules=ctx.media_rules,
        rewritten=rewritten,
        options=options,
    )


def transform(stylesheet, config: Optional[TransformConfig] = None) -> None:
    """Apply breakpoints to a stylesheet in place."""
    transform_stylesheet(stylesheet, config)


def breakpoints(config: Optional[TransformConfig] = None) -> Callable[[object], None]:
    """Return a single-argument plugin bound to ``config``."""

    def plugin(stylesheet) -> None:
        transform_stylesheet(stylesheet, config)

    return plugin
