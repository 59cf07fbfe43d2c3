# tests/test_tokens_resolver.py
"""
Resolver tests
==============

Does: Exercise token resolution end to end: literals, references, every
      transform, per-variant selection, override precedence, cycle handling,
      memoization on diamond graphs and order independence.
"""

from __future__ import annotations

import pytest

from theme_token_resolver.resolution.color import WHITE, Color
from theme_token_resolver.resolution.tokens import (
    Resolver,
    ThemeVariant,
    TokenRegistry,
    darken,
    if_defined_then_else,
    less_prominent,
    lighten,
    one_of,
    opaque,
    transparent,
)

ALL_VARIANTS = list(ThemeVariant)


def _hex(resolver: Resolver, token_id: str, variant=ThemeVariant.DARK) -> str | None:
    color = resolver.resolve_token(token_id, variant)
    return color.to_hex() if color is not None else None


def _single(default) -> Resolver:
    return Resolver(TokenRegistry.from_seed({"t": default}))


# ──────────────────────────────────────────────────────────────────────────────
# Plain values
# ──────────────────────────────────────────────────────────────────────────────
def test_literal_reference_and_unset():
    r = Resolver(TokenRegistry.from_seed({"a": "#123456", "b": "a", "c": None, "d": "missing"}))
    assert _hex(r, "a") == "#123456FF"
    assert _hex(r, "b") == "#123456FF"
    assert r.resolve_token("c", "dark") is None
    assert r.resolve_token("d", "dark") is None
    assert r.resolve_token("not.registered", "dark") is None


def test_per_variant_record_selects_variant():
    r = Resolver(
        TokenRegistry.from_seed(
            {"fg": {"light": "#616161", "dark": "#CCCCCC", "hcDark": "#FFFFFF", "hcLight": None}}
        )
    )
    assert _hex(r, "fg", "light") == "#616161FF"
    assert _hex(r, "fg", "dark") == "#CCCCCCFF"
    assert _hex(r, "fg", ThemeVariant.HIGH_CONTRAST_DARK) == "#FFFFFFFF"
    assert r.resolve_token("fg", "hcLight") is None


# ──────────────────────────────────────────────────────────────────────────────
# Transforms
# ──────────────────────────────────────────────────────────────────────────────
def test_transparent_halves_alpha():
    assert _hex(_single(transparent("#FF0000FF", 0.5)), "t") == "#FF000080"


def test_one_of_skips_undefined():
    assert _hex(_single(one_of("undefined.token", "#00FF00FF")), "t") == "#00FF00FF"
    assert _single(one_of("x", None)).resolve_token("t", "dark") is None


def test_darken_bounds():
    assert _hex(_single(darken("#FFFFFFFF", 1.0)), "t") == "#000000FF"
    assert _hex(_single(darken("#3A3D41", 0.0)), "t") == "#3A3D41FF"


def test_lighten_full_gives_white():
    assert _hex(_single(lighten("#3A3D41", 1.0)), "t") == "#FFFFFFFF"


def test_transforms_with_undefined_operand_are_undefined():
    for default in (
        darken("missing", 0.5),
        lighten("missing", 0.5),
        transparent("missing", 0.5),
        opaque("missing", "#fff"),
        less_prominent("missing", "#fff", 0.5, 0.5),
    ):
        assert _single(default).resolve_token("t", "dark") is None


def test_if_defined_then_else_unregistered_takes_else():
    t = if_defined_then_else("unregistered.token", "#111111FF", "#222222FF")
    assert _hex(_single(t), "t") == "#222222FF"


def test_if_defined_then_else_checks_registration_not_resolution():
    reg = TokenRegistry.from_seed(
        {
            "unset": None,
            "dangling": "nowhere",
            "a": if_defined_then_else("unset", "#111", "#222"),
            "b": if_defined_then_else("dangling", "#111", "#222"),
        }
    )
    r = Resolver(reg)
    assert r.resolve_token("dangling", "dark") is None
    assert _hex(r, "a") == "#222222FF"
    assert _hex(r, "b") == "#111111FF"


def test_if_defined_then_else_sees_overrides():
    reg = TokenRegistry.from_seed({"t": if_defined_then_else("marker", "#111", "#222")})
    assert _hex(Resolver(reg), "t") == "#222222FF"
    assert _hex(Resolver(reg, {"marker": "#999"}), "t") == "#111111FF"


def test_opaque_composites_or_passes_through():
    assert _hex(_single(opaque("#FF000080", "#FFFFFF")), "t") == "#FF7F7FFF"
    assert _hex(_single(opaque("#FF000080", "missing")), "t") == "#FF000080"
    assert _hex(_single(opaque("#FF000080", "#FFFFFF80")), "t") == "#FF000080"


def test_less_prominent_directions_and_missing_background():
    lighter = less_prominent("#000000", "#FFFFFF", 0.5, 0.5)
    darker = less_prominent("#FFFFFF", "#000000", 0.25, 1.0)
    no_bg = less_prominent("#FF0000", "missing", 0.5, 0.5)
    assert _hex(_single(lighter), "t") == "#80808080"
    assert _hex(_single(darker), "t") == "#BFBFBFFF"
    assert _hex(_single(no_bg), "t") == "#FF000040"


def test_nested_transforms_resolve_operands_first():
    reg = TokenRegistry.from_seed(
        {"base": "#808080", "t": transparent(darken("base", 0.5), 0.5)}
    )
    assert _hex(Resolver(reg), "t") == "#40404080"


def test_resolve_value_accepts_ad_hoc_values():
    r = Resolver(TokenRegistry.from_seed({"a": "#fff"}))
    assert r.resolve_value("#fff", "light") == WHITE
    assert r.resolve_value({"op": "transparent", "value": "a", "factor": 0}, "dark") == Color(
        255, 255, 255, 0.0
    )
    assert r.resolve_value(None, "dark") is None


# ──────────────────────────────────────────────────────────────────────────────
# Overrides & variants
# ──────────────────────────────────────────────────────────────────────────────
@pytest.fixture
def themed_registry() -> TokenRegistry:
    return TokenRegistry.from_seed(
        {
            "a": {"light": "#FFFFFF", "dark": "#000000", "hcDark": "#111111", "hcLight": "#EEEEEE"},
            "b": transparent("a", 0.5),
            "c": "#ABCDEF",
        }
    )


@pytest.mark.parametrize("variant", ALL_VARIANTS)
def test_override_replaces_base_for_every_variant(themed_registry, variant):
    r = Resolver(themed_registry, {"a": "#123456"})
    assert _hex(r, "a", variant) == "#123456FF"
    assert _hex(r, "b", variant) == "#12345680"


def test_override_only_ids_are_resolved(themed_registry):
    out = Resolver(themed_registry, {"new.token": "b"}).resolve_theme("light")
    assert out["new.token"] == "#FFFFFF80"
    assert list(out)[-1] == "new.token"


def test_null_override_removes_color(themed_registry):
    out = Resolver(themed_registry, {"c": None}).resolve_theme("dark")
    assert "c" in out and out["c"] is None


def test_variant_independent_default_is_stable(themed_registry):
    r = Resolver(themed_registry)
    assert {_hex(r, "c", v) for v in ALL_VARIANTS} == {"#ABCDEFFF"}


def test_resolver_rejects_overrides_with_a_view(themed_registry):
    view = themed_registry.merge({"c": "#000"})
    assert Resolver(view).view is view
    with pytest.raises(ValueError):
        Resolver(view, {"a": "#fff"})


def test_unknown_variant_raises(themed_registry):
    with pytest.raises(ValueError):
        Resolver(themed_registry).resolve_all("sepia")


# ──────────────────────────────────────────────────────────────────────────────
# Cycles, memoization, purity
# ──────────────────────────────────────────────────────────────────────────────
def test_two_token_cycle_terminates_as_undefined():
    r = Resolver(TokenRegistry.from_seed({"A": "B", "B": "A"}))
    assert r.resolve_all("dark") == {"A": None, "B": None}
    assert r.find_cycles("dark") == ["A", "B"]


def test_self_reference_in_transform_terminates():
    r = Resolver(TokenRegistry.from_seed({"A": darken("A", 0.1), "ok": "#fff"}))
    assert r.resolve_theme("light") == {"A": None, "ok": "#FFFFFFFF"}


def test_cycle_falls_back_through_one_of():
    r = Resolver(
        TokenRegistry.from_seed({"A": one_of("B", "#111111"), "B": one_of("A", "#222222")})
    )
    # Each token is resolved as if it were requested alone.
    assert _hex(r, "A") == "#222222FF"
    assert _hex(r, "B") == "#111111FF"
    assert r.resolve_theme("dark") == {"A": "#222222FF", "B": "#111111FF"}


def test_visiting_argument_blocks_reentry():
    r = Resolver(TokenRegistry.from_seed({"a": "#fff", "b": "a"}))
    assert r.resolve_token("b", "dark", visiting=frozenset({"a"})) is None
    assert r.resolve_token("b", "dark") == WHITE


def test_diamond_graph_resolves_in_linear_time():
    seed: dict = {"t0": "#123456"}
    for i in range(1, 60):
        # Opaque evaluates both operands, so without memoization this is 2**59 calls.
        seed[f"t{i}"] = opaque(f"t{i - 1}", f"t{i - 1}")
    r = Resolver(TokenRegistry.from_seed(seed))
    out = r.resolve_theme("dark")
    assert out["t59"] == "#123456FF"
    assert r.resolve_token("t59", "light") == Color(0x12, 0x34, 0x56)


def test_diamond_graph_over_a_cycle_stays_linear():
    seed: dict = {"loop": "loop", "t0": one_of("loop", "#123456")}
    for i in range(1, 60):
        seed[f"t{i}"] = opaque(f"t{i - 1}", f"t{i - 1}")
    r = Resolver(TokenRegistry.from_seed(seed))
    out = r.resolve_theme("dark")
    assert out["loop"] is None
    assert out["t59"] == "#123456FF"
    assert r.find_cycles("dark") == ["loop"] + [f"t{i}" for i in range(60)]


def test_memo_respects_the_visiting_context():
    # "b" resolves differently when "a" is already being resolved.
    seed = {"a": one_of("b", "#111111"), "b": one_of("a", "#222222"), "c": "b"}
    r = Resolver(TokenRegistry.from_seed(seed))
    out = r.resolve_theme("dark")
    assert out == {"a": "#222222FF", "b": "#111111FF", "c": "#111111FF"}
    assert out == {k: _hex(r, k) for k in reversed(seed)}


def test_resolve_all_is_idempotent_and_order_independent(themed_registry):
    r = Resolver(themed_registry, {"c": one_of("missing", "b")})
    first = r.resolve_all("hcDark")
    second = r.resolve_all("hcDark")
    assert first == second
    assert first == {k: r.resolve_token(k, "hcDark") for k in reversed(list(themed_registry))}


def test_resolution_does_not_mutate_registry(themed_registry):
    before = dict(themed_registry)
    Resolver(themed_registry, {"a": "#000"}).resolve_all("light")
    assert dict(themed_registry) == before


def test_end_to_end_description_foreground():
    reg = TokenRegistry.from_seed(
        {
            "foreground": {"dark": "#CCCCCCFF", "light": "#616161FF"},
            "description": {
                "dark": transparent("foreground", 0.7),
                "light": transparent("foreground", 0.7),
            },
        }
    )
    r = Resolver(reg)
    assert r.resolve_theme("dark")["description"] == "#CCCCCCB3"
    assert r.resolve_theme("light")["description"] == "#616161B3"
