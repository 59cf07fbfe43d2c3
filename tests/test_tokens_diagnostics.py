# tests/test_tokens_diagnostics.py
"""Tests for lint checks: dangling references, cycles and transparency violations."""

from __future__ import annotations

import logging

import pytest

from theme_token_resolver.resolution.tokens import (
    TokenRegistry,
    find_dangling_references,
    find_reference_cycles,
    find_transparency_violations,
    if_defined_then_else,
    lint_registry,
    suggest_identifier,
)


@pytest.fixture
def registry() -> TokenRegistry:
    return TokenRegistry.from_seed(
        [
            ("editor.background", "#1E1E1E"),
            ("editor.selection", "#264F78", True),
            ("typo", "editor.backgrond"),
            ("far", "zzz"),
            ("marker", if_defined_then_else("not.there", "#fff", "#000")),
            ("A", "B"),
            ("B", {"light": "A", "dark": "#000"}),
        ]
    )


# ---------- Suggestions ----------
def test_suggest_identifier_threshold():
    known = ["editor.background", "editor.foreground"]
    assert suggest_identifier("editor.backgrond", known) == "editor.background"
    assert suggest_identifier("qqq", known) is None
    assert suggest_identifier("editor.backgrond", known, threshold=100) is None


# ---------- Dangling references ----------
def test_find_dangling_references_with_suggestions(registry):
    found = find_dangling_references(registry)
    by_token = {d["token"]: d for d in found}
    assert set(by_token) == {"typo", "far", "marker"}
    assert by_token["typo"]["missing"] == "editor.backgrond"
    assert by_token["typo"]["suggestion"] == "editor.background"
    assert by_token["far"]["suggestion"] is None
    assert by_token["marker"]["missing"] == "not.there"


def test_override_registers_missing_target(registry):
    view = registry.merge({"zzz": "#fff"})
    assert {d["token"] for d in find_dangling_references(view)} == {"typo", "marker"}


# ---------- Cycles ----------
def test_find_reference_cycles_is_per_variant(registry):
    assert find_reference_cycles(registry, "light") == ["A", "B"]
    assert find_reference_cycles(registry, "dark") == []


# ---------- Transparency ----------
@pytest.mark.parametrize(
    "value, flagged",
    [("#FF0000", True), ("#FF000080", False), ("editor.background", False), (None, False)],
)
def test_find_transparency_violations(registry, value, flagged):
    found = find_transparency_violations(registry, {"editor.selection": value})
    assert bool(found) is flagged
    if flagged:
        assert found == [{"token": "editor.selection", "value": "#FF0000FF"}]


def test_transparency_ignores_tokens_without_the_flag(registry):
    assert find_transparency_violations(registry, {"editor.background": "#000"}) == []


# ---------- Full report ----------
def test_lint_registry_collects_and_logs(registry, caplog):
    with caplog.at_level(logging.WARNING):
        report = lint_registry(registry, {"editor.selection": "#264F78"})

    assert {d["token"] for d in report["dangling"]} == {"typo", "far", "marker"}
    assert report["cycles"] == {"light": ["A", "B"]}
    assert report["transparency"] == [{"token": "editor.selection", "value": "#264F78FF"}]
    assert "did you mean 'editor.background'" in caplog.text
    assert "Reference cycle in light" in caplog.text


def test_lint_registry_clean_table_is_empty():
    reg = TokenRegistry.from_seed({"a": "#fff", "b": "a"})
    assert lint_registry(reg) == {"dangling": [], "cycles": {}, "transparency": []}
