"""Tests for rule inventory helpers."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from eslint_bridge.application.rules import did_rules_change, get_rules, rules_snapshot


@pytest.mark.parametrize(
    "current, new, expected",
    [
        ({"x": 1}, {"x": 1}, False),
        ({"x": 1}, {"x": 1, "y": 2}, True),
        ({"x": 1, "y": 2}, {"x": 1}, True),
        ({"x": 1}, {"y": 1}, True),
        ({"x": 1}, {"x": {"type": "problem"}}, False),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, False),
        ({}, {}, False),
    ],
)
def test_did_rules_change(current, new, expected) -> None:
    assert did_rules_change(current, new) is expected


def test_get_rules_prefers_engine_method() -> None:
    engine = SimpleNamespace(
        getRules=lambda: {"semi": {}},
        linter=SimpleNamespace(getRules=lambda: {"quotes": {}}),
    )

    assert get_rules(engine) == {"semi": {}}


def test_get_rules_falls_back_to_internal_linter() -> None:
    engine = SimpleNamespace(linter=SimpleNamespace(getRules=lambda: {"quotes": {}}))

    assert get_rules(engine) == {"quotes": {}}


def test_get_rules_oldest_engines_yield_empty_mapping() -> None:
    assert dict(get_rules(SimpleNamespace())) == {}


def test_rules_snapshot_is_sorted() -> None:
    assert list(rules_snapshot({"b": 1, "a": 2})) == ["a", "b"]
