# theme_token_resolver/resolution/tokens/resolver.py
"""
resolver.
========

Does:
    Turn (merged view, variant) into a flat `id -> Color | None` map by
    following references and evaluating transforms recursively.

    - Cycle guard: the ids currently being resolved travel down as a
      frozenset; re-entering one of them yields None for that path.
    - Memoization: one memo per call. Each entry keeps the ids its subtree
      looked at; it is reused whenever the current `visiting` set overlaps
      those ids exactly as it did when the entry was made. The output never
      depends on the order ids are visited in, and a diamond graph stays
      linear even when a cycle sits underneath it.

Returns:
    Colors (or None for "no color"); data problems never raise here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, FrozenSet, NamedTuple, Optional, Tuple

from ..color import Color
from ..general.utils import debug
from .registry import MergedView, TokenRegistry
from .seed import parse_color_value
from .types import (
    ColorIdentifier,
    ColorReference,
    ColorTransform,
    ColorValue,
    Darken,
    IfDefinedThenElse,
    LessProminent,
    Lighten,
    LiteralColor,
    OneOf,
    Opaque,
    PerVariantRecord,
    ThemeVariant,
    Transparent,
    Unset,
)

__all__ = ["Resolver"]

logger = logging.getLogger(__name__)

# (color or None, ids looked at below, True when a cycle cut happened below)
_Outcome = Tuple[Optional[Color], FrozenSet[ColorIdentifier], bool]
_NOTHING: FrozenSet[ColorIdentifier] = frozenset()


class _MemoEntry(NamedTuple):
    context: FrozenSet[ColorIdentifier]  # visiting & touched when computed
    touched: FrozenSet[ColorIdentifier]
    color: Optional[Color]
    cycled: bool


class _Resolution:
    """Per-call state: the variant, the memo and a cycle-cut counter."""

    __slots__ = ("view", "variant", "memo", "cycles")

    def __init__(
        self,
        view: Mapping[ColorIdentifier, Any],
        variant: ThemeVariant,
    ) -> None:
        self.view = view
        self.variant = variant
        self.memo: dict[ColorIdentifier, list[_MemoEntry]] = {}
        self.cycles = 0

    def token(self, token_id: ColorIdentifier, visiting: frozenset[ColorIdentifier]) -> _Outcome:
        if token_id in visiting:
            self.cycles += 1
            logger.debug("Reference cycle cut at %r (%s)", token_id, self.variant.value)
            return None, frozenset((token_id,)), True
        for entry in self.memo.get(token_id, ()):
            if visiting & entry.touched == entry.context:
                return entry.color, entry.touched, entry.cycled

        default = self.view.get(token_id)
        if default is None:
            color, touched, cycled = None, _NOTHING, False
        else:
            if isinstance(default, PerVariantRecord):
                default = default.select(self.variant)
            color, touched, cycled = self.value(default, visiting | {token_id})
        touched = touched | {token_id}

        self.memo.setdefault(token_id, []).append(
            _MemoEntry(visiting & touched, touched, color, cycled)
        )
        return color, touched, cycled

    def value(self, value: ColorValue, visiting: frozenset[ColorIdentifier]) -> _Outcome:
        if isinstance(value, Unset):
            return None, _NOTHING, False
        if isinstance(value, LiteralColor):
            return value.color, _NOTHING, False
        if isinstance(value, ColorReference):
            return self.token(value.id, visiting)
        if isinstance(value, ColorTransform):
            return self.transform(value, visiting)
        return None, _NOTHING, False

    def transform(self, t: ColorTransform, visiting: frozenset[ColorIdentifier]) -> _Outcome:
        touched = _NOTHING
        cycled = False

        def ev(operand: ColorValue) -> Optional[Color]:
            nonlocal touched, cycled
            color, operand_touched, operand_cycled = self.value(operand, visiting)
            touched = touched | operand_touched
            cycled = cycled or operand_cycled
            return color

        result: Optional[Color] = None

        if isinstance(t, Darken):
            color = ev(t.value)
            result = color.darken(t.factor) if color is not None else None

        elif isinstance(t, Lighten):
            color = ev(t.value)
            result = color.lighten(t.factor) if color is not None else None

        elif isinstance(t, Transparent):
            color = ev(t.value)
            result = color.transparent(t.factor) if color is not None else None

        elif isinstance(t, Opaque):
            background = ev(t.background)
            color = ev(t.value)
            if color is not None:
                result = color.make_opaque(background) if background is not None else color

        elif isinstance(t, OneOf):
            for candidate in t.values:
                result = ev(candidate)
                if result is not None:
                    break

        elif isinstance(t, IfDefinedThenElse):
            # Registration check only: a registered default that resolves to
            # nothing still selects `then`.
            stored = self.view.get(t.if_id)
            defined = stored is not None and not isinstance(stored, Unset)
            result = ev(t.then if defined else t.else_)

        elif isinstance(t, LessProminent):
            color = ev(t.value)
            if color is not None:
                background = ev(t.background)
                if background is None:
                    result = color.transparent(t.factor * t.transparency)
                elif color.is_darker_than(background):
                    result = Color.get_lighter_color(color, background, t.factor).transparent(
                        t.transparency
                    )
                else:
                    result = Color.get_darker_color(color, background, t.factor).transparent(
                        t.transparency
                    )

        return result, touched, cycled


class Resolver:
    """Resolve tokens of a registry (optionally overlaid with overrides).

    One Resolver may serve any number of calls and variants; it keeps no
    per-call state between them.
    """

    def __init__(
        self,
        registry: TokenRegistry | MergedView,
        overrides: Mapping[str, Any] | None = None,
    ) -> None:
        if isinstance(registry, MergedView):
            if overrides:
                raise ValueError("Overrides are already merged into the given view")
            self._view = registry
        else:
            self._view = registry.merge(overrides)

    @property
    def view(self) -> MergedView:
        return self._view

    def resolve_token(
        self,
        token_id: ColorIdentifier,
        variant: ThemeVariant | str,
        visiting: frozenset[ColorIdentifier] = frozenset(),
    ) -> Color | None:
        """Resolve one token; ids in `visiting` are treated as being resolved already."""
        run = _Resolution(self._view, ThemeVariant.parse(variant))
        return run.token(token_id, frozenset(visiting))[0]

    def resolve_value(self, value: Any, variant: ThemeVariant | str) -> Color | None:
        """Evaluate an ad-hoc value (hex, id, transform, ...) against this view."""
        run = _Resolution(self._view, ThemeVariant.parse(variant))
        return run.value(parse_color_value(value), frozenset())[0]

    def resolve_all(self, variant: ThemeVariant | str) -> dict[ColorIdentifier, Color | None]:
        """Resolve every id of the view (base and overrides) for `variant`."""
        run = _Resolution(self._view, ThemeVariant.parse(variant))
        resolved = {token_id: run.token(token_id, frozenset())[0] for token_id in self._view}
        unset = sum(1 for c in resolved.values() if c is None)
        logger.debug(
            "Resolved %d tokens for %s (%d without color, %d cycle cuts)",
            len(resolved), run.variant.value, unset, run.cycles,
        )
        debug(
            f"resolve_all[{run.variant.value}]: {len(resolved)} tokens, {unset} unset, "
            f"{run.cycles} cycle cuts",
            topic="resolver",
        )
        return resolved

    def resolve_theme(self, variant: ThemeVariant | str) -> dict[ColorIdentifier, str | None]:
        """`resolve_all` serialized to canonical `#RRGGBBAA` strings (None kept)."""
        return {
            token_id: color.to_hex() if color is not None else None
            for token_id, color in self.resolve_all(variant).items()
        }

    def find_cycles(self, variant: ThemeVariant | str) -> list[ColorIdentifier]:
        """Ids whose resolution for `variant` passes through a reference cycle."""
        run = _Resolution(self._view, ThemeVariant.parse(variant))
        return [token_id for token_id in self._view if run.token(token_id, frozenset())[2]]
