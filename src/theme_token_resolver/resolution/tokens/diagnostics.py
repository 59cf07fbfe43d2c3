# theme_token_resolver/resolution/tokens/diagnostics.py
"""
diagnostics.

Does: Lint a token table before it is used: dangling references (with a
      closest-id suggestion), reference cycles per variant, and overrides that
      give an opaque color to a token registered as needing transparency.
Returns: Plain lists/dicts (JSON-friendly) and WARNING log lines; never raises
         for findings, since resolution already degrades them to "no color".
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any, TypedDict

from rapidfuzz import fuzz, process

from .registry import MergedView, TokenRegistry
from .resolver import Resolver
from .seed import parse_override_value
from .types import ColorIdentifier, LiteralColor, ThemeVariant, TokenDefault, iter_references

__all__ = [
    "DanglingReference",
    "TransparencyViolation",
    "LintReport",
    "suggest_identifier",
    "find_dangling_references",
    "find_reference_cycles",
    "find_transparency_violations",
    "lint_registry",
]

__docformat__ = "google"

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# ── Tunables ─────────────────────────────────────────────────────────────────
SUGGESTION_THRESHOLD = 82


class DanglingReference(TypedDict):
    token: str
    missing: str
    suggestion: str | None


class TransparencyViolation(TypedDict):
    token: str
    value: str


class LintReport(TypedDict):
    dangling: list[DanglingReference]
    cycles: dict[str, list[str]]
    transparency: list[TransparencyViolation]


def suggest_identifier(
    name: str,
    known: Iterable[str],
    threshold: float = SUGGESTION_THRESHOLD,
) -> str | None:
    """Does: Return the known id closest to `name` if it scores >= threshold."""
    match = process.extractOne(name, list(known), scorer=fuzz.ratio, score_cutoff=threshold)
    return match[0] if match else None


def find_dangling_references(
    view: Mapping[ColorIdentifier, TokenDefault],
) -> list[DanglingReference]:
    """Does: List (token, missing id) pairs for references to unregistered ids."""
    known = list(view)
    found: list[DanglingReference] = []
    for token_id in view:
        seen: set[str] = set()
        for ref in iter_references(view[token_id]):
            if ref in view or ref in seen:
                continue
            seen.add(ref)
            found.append(
                DanglingReference(
                    token=token_id,
                    missing=ref,
                    suggestion=suggest_identifier(ref, known),
                )
            )
    return found


def find_reference_cycles(
    registry: TokenRegistry | MergedView,
    variant: ThemeVariant | str,
) -> list[ColorIdentifier]:
    """Does: Ids whose resolution for `variant` runs into a reference cycle."""
    return Resolver(registry).find_cycles(variant)


def find_transparency_violations(
    registry: TokenRegistry,
    overrides: Mapping[str, Any],
) -> list[TransparencyViolation]:
    """Does: Overrides assigning an opaque literal to a needs-transparency token."""
    found: list[TransparencyViolation] = []
    for token_id, raw in overrides.items():
        if not registry.needs_transparency(token_id):
            continue
        value = parse_override_value(raw, token_id=token_id)
        if isinstance(value, LiteralColor) and value.color.is_opaque():
            found.append(TransparencyViolation(token=token_id, value=value.color.to_hex()))
    return found


def lint_registry(
    registry: TokenRegistry,
    overrides: Mapping[str, Any] | None = None,
    variants: Iterable[ThemeVariant | str] = tuple(ThemeVariant),
) -> LintReport:
    """Does: Run every check on `registry` merged with `overrides` and log findings."""
    overrides = overrides or {}
    view = registry.merge(overrides)

    report = LintReport(
        dangling=find_dangling_references(view),
        cycles={},
        transparency=find_transparency_violations(registry, overrides),
    )
    for variant in variants:
        v = ThemeVariant.parse(variant)
        members = find_reference_cycles(view, v)
        if members:
            report["cycles"][v.value] = members

    for d in report["dangling"]:
        hint = f" (did you mean {d['suggestion']!r}?)" if d["suggestion"] else ""
        log.warning("Token %r references unregistered %r%s", d["token"], d["missing"], hint)
    for variant_name, members in report["cycles"].items():
        log.warning("Reference cycle in %s affects: %s", variant_name, ", ".join(members))
    for t in report["transparency"]:
        log.warning("Token %r needs transparency but is overridden with opaque %s",
                    t["token"], t["value"])
    return report
