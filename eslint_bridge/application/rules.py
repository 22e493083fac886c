"""Rule inventory helpers.

Functions
---------
get_rules : Pull the rule map from an in-process engine object
did_rules_change : Compare two rule maps by rule id membership
"""
from __future__ import annotations

from typing import Any, Dict, Mapping


def get_rules(engine: Any) -> Mapping[str, Any]:
    """Rules used by `engine`, keyed by rule id.

    For capabilities that hold an engine object in process. The Node
    adapter applies the same fallbacks inside its runner script.

    Engines exposing ``getRules`` are asked directly. Older engines expose
    the loaded rules only through their internal ``linter`` instance; the
    oldest ones not at all, and yield an empty mapping.
    """
    get = getattr(engine, "getRules", None)
    if callable(get):
        return get()

    linter = getattr(engine, "linter", None)
    if linter is not None and callable(getattr(linter, "getRules", None)):
        return linter.getRules()

    return {}


def did_rules_change(current_rules: Mapping[str, Any], new_rules: Mapping[str, Any]) -> bool:
    """True when a rule id was added or removed. Rule settings are not compared."""
    return set(current_rules.keys()) != set(new_rules.keys())


def rules_snapshot(rules: Mapping[str, Any]) -> Dict[str, Any]:
    return {rule_id: rules[rule_id] for rule_id in sorted(rules)}
