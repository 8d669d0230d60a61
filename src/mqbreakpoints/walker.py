"""
Tree Walker.

Depth-first traversal of a rule tree. Breakpoint and option declarations
are handed to the classifier, rules with a media selector are collected
for rewriting, and rules left without declarations are dropped.

The walker duck-types nodes: it reads ``rules``, ``media`` and
``declarations`` attributes and never requires a particular class.
"""

import logging
from typing import List

from mqbreakpoints.declarations import filter_declarations
from mqbreakpoints.registry import BreakpointRegistry

logger = logging.getLogger(__name__)


def walk_rules(rules: List, registry: BreakpointRegistry, prune_empty: bool = True) -> List:
    """
    Walk a rule list, registering breakpoints and collecting media rules.

    Per node, in order:
        1. Walk child rules
        2. Collect the node if it has a media selector
        3. Consume breakpoint/option declarations
        4. Drop the node if its declaration list is now empty (prune_empty)

    Only nodes that carry a declaration list can be dropped; @media rules
    holding nested rules are always kept.

    Args:
        rules: Rule list, rebuilt and assigned back in place
        registry: Registry of the current run
        prune_empty: Drop rules left with no declarations

    Returns:
        Every rule with a media selector, children before parents
    """
    media_rules: List = []
    _walk(rules, registry, prune_empty, media_rules)
    return media_rules


def _walk(rules: List, registry: BreakpointRegistry, prune_empty: bool, media_rules: List) -> None:
    kept = []
    for node in rules:
        children = getattr(node, "rules", None)
        if children:
            _walk(children, registry, prune_empty, media_rules)

        if getattr(node, "media", None):
            media_rules.append(node)

        declarations = getattr(node, "declarations", None)
        if declarations is not None:
            filter_declarations(declarations, registry)
            if prune_empty and not declarations:
                logger.debug("Dropping empty rule %s", getattr(node, "selectors", node))
                continue

        kept.append(node)
    rules[:] = kept
