"""
Media Rewriter.

Replaces breakpoint names inside media selectors with their resolved
queries.

    "tab and landscape"  ->  "screen and (min-width: 341px) and (max-width: 700px) and (orientation: landscape)"

The selector is split into words on whitespace and commas (separators are
kept verbatim). Each word is looked up case-insensitively; a word either
matches a breakpoint name entirely or is left alone, so "abc-mobile" is
never touched by a breakpoint called "mobile".
"""

import logging
import re
from enum import Enum
from typing import Dict, Iterable, List

logger = logging.getLogger(__name__)

_SEPARATOR = re.compile(r'(\s+|,)')


class MatchMode(Enum):
    """
    How selector text is matched against breakpoint names.

    WORD:
        Every whole word is substituted; names can be combined with
        logical operators and custom breakpoints ("mobile and landscape")
    EXACT:
        The whole selector must equal a single name
    """

    WORD = "word"
    EXACT = "exact"


def tokenize_selector(selector: str) -> List[str]:
    """Split a selector into words and separators; joining restores it."""
    return [token for token in _SEPARATOR.split(selector) if token]


def rewrite_media(selector: str, media_map: Dict[str, str], mode: MatchMode = MatchMode.WORD) -> str:
    """
    Rewrite one media selector.

    Args:
        selector: Media selector text
        media_map: Resolved breakpoint name -> query fragment
        mode: MatchMode

    Returns:
        The rewritten selector (unchanged if nothing matched)
    """
    if mode is MatchMode.EXACT:
        return media_map.get(selector.strip().lower(), selector)

    return "".join(
        media_map.get(token.lower(), token) for token in tokenize_selector(selector)
    )


def rewrite_media_rules(rules: Iterable, media_map: Dict[str, str], mode: MatchMode = MatchMode.WORD) -> int:
    """
    Rewrite the media selector of every collected rule in place.

    Returns:
        Number of selectors that changed
    """
    if not media_map:
        return 0

    changed = 0
    for rule in rules:
        rewritten = rewrite_media(rule.media, media_map, mode)
        if rewritten != rule.media:
            logger.debug("@media %s -> %s", rule.media, rewritten)
            rule.media = rewritten
            changed += 1
    return changed
