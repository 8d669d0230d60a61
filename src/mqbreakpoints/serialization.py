"""
Serialization helpers for stylesheet trees (Stylesheet, Rule, Declaration).

Uses the rework JSON AST shape, so trees produced by external CSS parsers
can be loaded, transformed and dumped again:

    {"type": "stylesheet", "stylesheet": {"rules": [
        {"type": "rule", "selectors": [":root"], "declarations": [
            {"type": "declaration", "property": "breakpoint-palm", "value": "max 340px"}]},
        {"type": "media", "media": "palm", "rules": [...]}]}}

Keys a node does not carry are omitted, never written as null.
"""
from __future__ import annotations

import json
from typing import Any, Dict

import yaml

from mqbreakpoints.stylesheet import Declaration, Rule, Stylesheet


def declaration_to_dict(d: Declaration) -> Dict[str, Any]:
    if d.type == "comment":
        return {"type": "comment", "comment": d.comment}
    return {"type": d.type, "property": d.property, "value": d.value}


def declaration_from_dict(d: Dict[str, Any]) -> Declaration:
    return Declaration(
        property=d.get("property"),
        value=d.get("value"),
        type=d.get("type", "declaration"),
        comment=d.get("comment"),
    )


def rule_to_dict(r: Rule) -> Dict[str, Any]:
    out: Dict[str, Any] = {"type": r.type}
    if r.selectors:
        out["selectors"] = list(r.selectors)
    if r.media is not None:
        out["media"] = r.media
    if r.declarations is not None:
        out["declarations"] = [declaration_to_dict(d) for d in r.declarations]
    if r.rules is not None:
        out["rules"] = [rule_to_dict(child) for child in r.rules]
    return out


def rule_from_dict(d: Dict[str, Any]) -> Rule:
    declarations = d.get("declarations")
    rules = d.get("rules")
    return Rule(
        type=d.get("type", "rule"),
        selectors=list(d.get("selectors", [])),
        declarations=None if declarations is None else [declaration_from_dict(x) for x in declarations],
        rules=None if rules is None else [rule_from_dict(x) for x in rules],
        media=d.get("media"),
    )


def stylesheet_to_dict(s: Stylesheet) -> Dict[str, Any]:
    return {
        "type": "stylesheet",
        "stylesheet": {"rules": [rule_to_dict(r) for r in s.rules]},
    }


def stylesheet_from_dict(d: Dict[str, Any]) -> Stylesheet:
    # Accept both the full AST and its bare {"rules": [...]} body
    body = d.get("stylesheet", d)
    return Stylesheet(rules=[rule_from_dict(r) for r in body.get("rules", [])])


def stylesheet_to_json(s: Stylesheet) -> str:
    return json.dumps(stylesheet_to_dict(s), indent=2)


def stylesheet_from_json(s: str) -> Stylesheet:
    d = json.loads(s)
    return stylesheet_from_dict(d)


def stylesheet_to_yaml(s: Stylesheet) -> str:
    return yaml.safe_dump(stylesheet_to_dict(s), sort_keys=False)


def stylesheet_from_yaml(s: str) -> Stylesheet:
    d = yaml.safe_load(s)
    return stylesheet_from_dict(d)


def media_map_to_yaml(media_map: Dict[str, str]) -> str:
    return yaml.safe_dump(dict(media_map), sort_keys=False)
