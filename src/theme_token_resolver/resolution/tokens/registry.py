# theme_token_resolver/resolution/tokens/registry.py
"""
registry.
========

Does:
    Hold the canonical default of every built-in token and expose read-only
    views of it merged with caller overrides.

    RegistryBuilder   append-only construction; `register` returns the id so
                      Python seed code can chain references to earlier tokens.
    TokenRegistry     the frozen table (id -> TokenDefault).
    MergedView        overrides first, base second, without copying the base.

Returns:
    Immutable mappings; nothing here is mutated by resolution.
"""

from __future__ import annotations

import logging
from collections import ChainMap
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from .seed import SeedEntry, parse_override_value, parse_seed, parse_token_default
from .types import ColorIdentifier, ColorValue, TokenDefault

__all__ = [
    "RegistryFrozenError",
    "RegistryBuilder",
    "TokenRegistry",
    "MergedView",
]

log = logging.getLogger(__name__)


class RegistryFrozenError(RuntimeError):
    """Raise when registering on a builder that has already been built."""


# =============================================================================
# 1) CONSTRUCTION
# =============================================================================
class RegistryBuilder:
    """Collect token defaults, then freeze them into a TokenRegistry."""

    def __init__(self) -> None:
        self._defaults: dict[ColorIdentifier, TokenDefault] = {}
        self._needs_transparency: set[ColorIdentifier] = set()
        self._frozen = False

    def register(
        self,
        token_id: ColorIdentifier,
        default: Any,
        needs_transparency: bool = False,
    ) -> ColorIdentifier:
        """Store `default` for `token_id` (last write wins) and return the id."""
        if self._frozen:
            raise RegistryFrozenError(f"Cannot register {token_id!r}: registry already built")
        entry = parse_seed([(token_id, default, needs_transparency)])[0]
        self._store(entry)
        return entry.id

    def register_all(self, seed: Iterable[Any] | Mapping[str, Any]) -> RegistryBuilder:
        """Register every row of a seed table (see `parse_seed` for accepted shapes)."""
        if self._frozen:
            raise RegistryFrozenError("Cannot register seed rows: registry already built")
        for entry in parse_seed(seed):
            self._store(entry)
        return self

    def _store(self, entry: SeedEntry) -> None:
        if entry.id in self._defaults:
            log.debug("Token %r registered twice; keeping the last default", entry.id)
        self._defaults[entry.id] = entry.default
        if entry.needs_transparency:
            self._needs_transparency.add(entry.id)
        else:
            self._needs_transparency.discard(entry.id)

    def build(self) -> TokenRegistry:
        self._frozen = True
        registry = TokenRegistry(self._defaults, self._needs_transparency)
        log.debug("Built token registry with %d tokens", len(registry))
        return registry


# =============================================================================
# 2) FROZEN TABLE
# =============================================================================
class TokenRegistry(Mapping[ColorIdentifier, TokenDefault]):
    """Read-only token table. Safe to share across threads and resolutions."""

    def __init__(
        self,
        defaults: Mapping[ColorIdentifier, TokenDefault],
        needs_transparency: Iterable[ColorIdentifier] = (),
    ) -> None:
        self._defaults = MappingProxyType(
            {k: parse_token_default(v, token_id=k) for k, v in defaults.items()}
        )
        self._needs_transparency = frozenset(needs_transparency)

    @classmethod
    def from_seed(cls, seed: Iterable[Any] | Mapping[str, Any]) -> TokenRegistry:
        """Construct from seed rows; duplicate ids are last-write-wins."""
        return RegistryBuilder().register_all(seed).build()

    def __getitem__(self, token_id: ColorIdentifier) -> TokenDefault:
        return self._defaults[token_id]

    def __iter__(self) -> Iterator[ColorIdentifier]:
        return iter(self._defaults)

    def __len__(self) -> int:
        return len(self._defaults)

    def __repr__(self) -> str:
        return f"TokenRegistry({len(self)} tokens)"

    def ids(self) -> tuple[ColorIdentifier, ...]:
        return tuple(self._defaults)

    def needs_transparency(self, token_id: ColorIdentifier) -> bool:
        return token_id in self._needs_transparency

    def merge(self, overrides: Mapping[str, Any] | None = None) -> MergedView:
        """Overlay `overrides` on this table without copying it."""
        return MergedView(self, overrides or {})


# =============================================================================
# 3) MERGED VIEW
# =============================================================================
class MergedView(Mapping[ColorIdentifier, TokenDefault]):
    """Two-level lookup: override first, registry default second.

    Behaves like a shallow copy of the registry with the overrides assigned on
    top: overridden ids keep their base position in iteration order, override-only
    ids come after every base id.
    """

    def __init__(self, base: TokenRegistry, overrides: Mapping[str, Any]) -> None:
        parsed: dict[ColorIdentifier, ColorValue] = {}
        for key, raw in overrides.items():
            if not isinstance(key, str) or not key.strip():
                raise TypeError(f"Override keys must be non-empty strings, got {key!r}")
            parsed[key.strip()] = parse_override_value(raw, token_id=key)
        self._base = base
        self._overrides = MappingProxyType(parsed)
        self._chain: ChainMap[ColorIdentifier, TokenDefault] = ChainMap(self._overrides, base)

    @property
    def base(self) -> TokenRegistry:
        return self._base

    @property
    def overrides(self) -> Mapping[ColorIdentifier, ColorValue]:
        return self._overrides

    def is_overridden(self, token_id: ColorIdentifier) -> bool:
        return token_id in self._overrides

    def __getitem__(self, token_id: ColorIdentifier) -> TokenDefault:
        return self._chain[token_id]

    def __contains__(self, token_id: object) -> bool:
        return token_id in self._chain

    def __iter__(self) -> Iterator[ColorIdentifier]:
        return iter(self._chain)

    def __len__(self) -> int:
        return len(self._chain)

    def __repr__(self) -> str:
        return f"MergedView({len(self._base)} base tokens, {len(self._overrides)} overrides)"
