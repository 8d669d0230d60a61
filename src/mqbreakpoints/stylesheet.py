"""
Stylesheet Tree Objects

Plain data classes mirroring the rework CSS AST: a stylesheet holds a list
of rules, a rule may hold declarations, nested rules and a media selector.

The transform itself only duck-types these attributes (``rules``,
``media``, ``declarations``, ``property``, ``value``), so any parser that
produces the same shape can be used instead.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional


@dataclass
class Declaration:
    """
    A property/value pair inside a rule.

    Comments inside a declaration block are kept as entries with
    type "comment" and no property.
    """

    property: Optional[str] = None
    value: Optional[str] = None
    type: str = "declaration"
    comment: Optional[str] = None


@dataclass
class Rule:
    """
    A rule node.

    Properties:
        type:
            AST node type, e.g. "rule", "media", "page"

        selectors:
            Selectors of an ordinary rule, e.g. [".palm", "body > aside"]

        declarations:
            Declaration list, or None for nodes that cannot hold declarations

        rules:
            Nested rules (for @media and similar at-rules), or None

        media:
            Media selector text of an @media rule, e.g. "palm" or "tab and landscape"
    """

    type: str = "rule"
    selectors: List[str] = field(default_factory=list)
    declarations: Optional[List[Declaration]] = None
    rules: Optional[List["Rule"]] = None
    media: Optional[str] = None


@dataclass
class Stylesheet:
    """Root container for a parsed stylesheet."""

    rules: List[Rule] = field(default_factory=list)

    def iter_rules(self) -> Iterator[Rule]:
        """Yield every rule, depth-first, parents before children."""
        stack = list(reversed(self.rules))
        while stack:
            node = stack.pop()
            yield node
            if node.rules:
                stack.extend(reversed(node.rules))

    def media_rules(self) -> List[Rule]:
        """Return every rule that carries a media selector."""
        return [node for node in self.iter_rules() if node.media]

    def get_rule(self, selector: str) -> Optional[Rule]:
        """
        Retrieve the first rule whose selectors include ``selector``.

        Args:
            selector: Selector text, e.g. ".palm"

        Returns:
            Rule object or None if not found
        """
        for node in self.iter_rules():
            if selector in node.selectors:
                return node
        return None


def rule(selector: str, *declarations: Declaration) -> Rule:
    """Build an ordinary rule for a single selector."""
    return Rule(selectors=[selector], declarations=list(declarations))


def media(selector: str, *rules: Rule) -> Rule:
    """Build an @media rule."""
    return Rule(type="media", media=selector, rules=list(rules))


def decl(prop: str, value: str) -> Declaration:
    return Declaration(property=prop, value=value)
