# theme_token_resolver/resolution/tokens/seed.py
"""
seed.
====

Does:
    Classify raw seed/override values into the ColorValue tagged union and
    load the built-in token table from <data>/seed_colors.json.

    Raw grammar (JSON or Python):
      null / None, "" (blank)      -> UNSET
      "#RGB[A]" / "#RRGGBB[AA]"    -> LiteralColor
      any other non-empty string   -> ColorReference
      {"rgba": [r, g, b, a]}       -> LiteralColor
      {"op": "<kind>", ...}        -> transform (camelCase or snake_case kind)
      {"light": .., "dark": .., "hcDark": .., "hcLight": ..}
                                   -> PerVariantRecord (token defaults only)

Returns:
    ColorValue / TokenDefault instances and SeedEntry rows. Malformed input
    raises SeedDataError naming the token and the offending value.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, NamedTuple

from ..color import Color, InvalidColorError
from ..general.utils import ConfigTypeError, bundled_data_dir, load_config
from .types import (
    UNSET,
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
    TokenDefault,
    TransformKind,
    Transparent,
    UnknownVariantError,
    Unset,
)

__all__ = [
    "SeedDataError",
    "SeedEntry",
    "DEFAULT_SEED_FILE",
    "parse_color_value",
    "parse_token_default",
    "parse_override_value",
    "parse_seed",
    "load_seed",
]

log = logging.getLogger(__name__)

DEFAULT_SEED_FILE = "seed_colors"

_ANONYMOUS = "<anonymous>"

# JSON key -> PerVariantRecord field
_RECORD_FIELDS = {
    ThemeVariant.LIGHT: "light",
    ThemeVariant.DARK: "dark",
    ThemeVariant.HIGH_CONTRAST_DARK: "hc_dark",
    ThemeVariant.HIGH_CONTRAST_LIGHT: "hc_light",
}

# "oneOf", "one_of", "ONEOF" all map to the same kind
_KINDS = {k.value.lower(): k for k in TransformKind}


class SeedDataError(ValueError):
    """Raise when seed or override data cannot be classified into a ColorValue."""


class SeedEntry(NamedTuple):
    id: str
    default: TokenDefault
    needs_transparency: bool = False


# ── Small validators ─────────────────────────────────────────────────────────
def _fail(token_id: str, message: str, raw: Any) -> SeedDataError:
    return SeedDataError(f"Token {token_id!r}: {message}: {raw!r}")


def _number(raw: Mapping[str, Any], key: str, token_id: str) -> float:
    if key not in raw:
        raise _fail(token_id, f"transform is missing '{key}'", dict(raw))
    v = raw[key]
    if isinstance(v, bool) or not isinstance(v, (int, float)) or not math.isfinite(v):
        raise _fail(token_id, f"'{key}' must be a finite number", v)
    return float(v)


def _operand(raw: Mapping[str, Any], key: str, token_id: str) -> ColorValue:
    if key not in raw:
        raise _fail(token_id, f"transform is missing '{key}'", dict(raw))
    return parse_color_value(raw[key], token_id=token_id)


def _identifier(value: Any, token_id: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise _fail(token_id, "identifier must be a non-empty string", value)
    ident = value.strip()
    if ident.startswith("#"):
        raise _fail(token_id, "expected a token identifier, got a color literal", value)
    return ident


def _validate_id(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise SeedDataError(f"Token identifiers must be non-empty strings, got {value!r}")
    return value.strip()


# ── Values ───────────────────────────────────────────────────────────────────
def _parse_literal_rgba(raw: Any, token_id: str) -> LiteralColor:
    if not isinstance(raw, (list, tuple)) or len(raw) != 4:
        raise _fail(token_id, "'rgba' must be a [r, g, b, a] list", raw)
    r, g, b, a = raw
    try:
        return LiteralColor(Color(r, g, b, a))
    except InvalidColorError as e:
        raise _fail(token_id, f"malformed rgba literal ({e})", raw) from e


def _parse_transform(raw: Mapping[str, Any], token_id: str) -> ColorTransform:
    op = raw.get("op")
    kind = _KINDS.get(str(op).replace("_", "").lower()) if isinstance(op, str) else None
    if kind is None:
        raise _fail(token_id, "unknown transform op", op)

    if kind is TransformKind.DARKEN:
        return Darken(_operand(raw, "value", token_id), _number(raw, "factor", token_id))
    if kind is TransformKind.LIGHTEN:
        return Lighten(_operand(raw, "value", token_id), _number(raw, "factor", token_id))
    if kind is TransformKind.TRANSPARENT:
        return Transparent(_operand(raw, "value", token_id), _number(raw, "factor", token_id))
    if kind is TransformKind.OPAQUE:
        return Opaque(_operand(raw, "value", token_id), _operand(raw, "background", token_id))
    if kind is TransformKind.ONE_OF:
        values = raw.get("values")
        if not isinstance(values, (list, tuple)):
            raise _fail(token_id, "'values' must be a list", values)
        return OneOf(tuple(parse_color_value(v, token_id=token_id) for v in values))
    if kind is TransformKind.IF_DEFINED_THEN_ELSE:
        if "if" not in raw:
            raise _fail(token_id, "transform is missing 'if'", dict(raw))
        return IfDefinedThenElse(
            _identifier(raw["if"], token_id),
            _operand(raw, "then", token_id),
            _operand(raw, "else", token_id),
        )
    # TransformKind.LESS_PROMINENT
    return LessProminent(
        _operand(raw, "value", token_id),
        _operand(raw, "background", token_id),
        _number(raw, "factor", token_id),
        _number(raw, "transparency", token_id),
    )


def parse_color_value(raw: Any, *, token_id: str = _ANONYMOUS) -> ColorValue:
    """Classify one raw value (no per-variant records) into a ColorValue."""
    if isinstance(raw, (LiteralColor, ColorReference, ColorTransform, Unset)):
        return raw
    if raw is None:
        return UNSET
    if isinstance(raw, Color):
        return LiteralColor(raw)
    if isinstance(raw, str):
        text = raw.strip()
        if not text:
            return UNSET
        if text.startswith("#"):
            try:
                return LiteralColor(Color.from_hex(text))
            except InvalidColorError as e:
                raise _fail(token_id, "malformed color literal", raw) from e
        return ColorReference(text)
    if isinstance(raw, Mapping):
        if "rgba" in raw:
            return _parse_literal_rgba(raw["rgba"], token_id)
        if "op" in raw:
            return _parse_transform(raw, token_id)
    raise _fail(token_id, "unsupported color value", raw)


def _is_variant_mapping(raw: Mapping[Any, Any]) -> bool:
    if not raw or "op" in raw or "rgba" in raw:
        return False
    try:
        for key in raw:
            ThemeVariant.parse(key)
    except UnknownVariantError:
        return False
    return True


def parse_token_default(raw: Any, *, token_id: str = _ANONYMOUS) -> TokenDefault:
    """Classify a token's stored default: a per-variant record or a single value."""
    if isinstance(raw, PerVariantRecord):
        return raw
    if isinstance(raw, Mapping) and "op" not in raw and "rgba" not in raw:
        if not _is_variant_mapping(raw):
            raise _fail(token_id, "per-variant record has unknown keys", dict(raw))
        parsed = {
            _RECORD_FIELDS[ThemeVariant.parse(key)]: parse_color_value(value, token_id=token_id)
            for key, value in raw.items()
        }
        return PerVariantRecord(**parsed)
    return parse_color_value(raw, token_id=token_id)


def parse_override_value(raw: Any, *, token_id: str = _ANONYMOUS) -> ColorValue:
    """Classify an override; overrides are always variant independent."""
    if isinstance(raw, PerVariantRecord) or (
        isinstance(raw, Mapping) and _is_variant_mapping(raw)
    ):
        raise _fail(token_id, "overrides cannot be per-variant records", raw)
    return parse_color_value(raw, token_id=token_id)


# ── Seed tables ──────────────────────────────────────────────────────────────
def _entry_from_row(row: Any) -> SeedEntry:
    if isinstance(row, SeedEntry):
        token_id = _validate_id(row.id)
        return SeedEntry(token_id, parse_token_default(row.default, token_id=token_id),
                         bool(row.needs_transparency))
    if isinstance(row, Mapping):
        if "id" not in row:
            raise SeedDataError(f"Seed row without 'id': {dict(row)!r}")
        token_id = _validate_id(row["id"])
        raw_default = row.get("defaults", row.get("default"))
        needs = bool(row.get("needsTransparency", row.get("needs_transparency", False)))
        return SeedEntry(token_id, parse_token_default(raw_default, token_id=token_id), needs)
    if isinstance(row, (list, tuple)) and len(row) in (2, 3):
        token_id = _validate_id(row[0])
        needs = bool(row[2]) if len(row) == 3 else False
        return SeedEntry(token_id, parse_token_default(row[1], token_id=token_id), needs)
    raise SeedDataError(f"Unsupported seed row: {row!r}")


def parse_seed(seed: Iterable[Any] | Mapping[str, Any]) -> list[SeedEntry]:
    """Parse a whole seed table.

    Accepts a mapping `id -> raw default`, or an iterable of SeedEntry,
    `(id, raw_default[, needs_transparency])` pairs, or JSON rows
    `{"id", "defaults", "needsTransparency"?}`. Order is preserved;
    duplicates are kept here and resolved last-write-wins by the registry.
    """
    rows: Iterable[Any] = seed.items() if isinstance(seed, Mapping) else seed
    return [_entry_from_row(row) for row in rows]


def load_seed(
    file: str | Path = DEFAULT_SEED_FILE,
    *,
    base_dir: Path | None = None,
) -> list[SeedEntry]:
    """Load and parse a JSON seed table from the data directory.

    The bundled table is always read from the package `data/` dir unless
    `base_dir` says otherwise; other files follow the usual lookup order.
    """
    if base_dir is None and file == DEFAULT_SEED_FILE:
        base_dir = bundled_data_dir()
    raw = load_config(file, mode="raw", base_dir=base_dir)
    if not isinstance(raw, (list, dict)):
        raise ConfigTypeError(
            f"{file}: expected a list of seed rows or an id->default object, "
            f"got {type(raw).__name__}"
        )
    entries = parse_seed(raw)
    log.debug("Loaded %d seed rows from %s", len(entries), file)
    return entries
