# src/theme_token_resolver/cli.py
import argparse
import json
import logging
import sys
from pathlib import Path


def _load_json_object(path: Path) -> dict:
    from .resolution.general.utils import load_config

    return load_config(path.name, mode="validated_dict", base_dir=path.parent.resolve())


def main(argv=None):
    """CLI: resolve every token (or a few) of a theme variant and print them as JSON."""
    from .resolution.general.utils import set_topics
    from .resolution.theme import build_default_registry, default_registry, default_theme_colors
    from .resolution.tokens import Resolver, ThemeVariant, lint_registry

    parser = argparse.ArgumentParser(
        prog="theme-resolve",
        description="Resolve theme color tokens to #RRGGBBAA for one theme variant.",
    )
    parser.add_argument(
        "--variant",
        default=ThemeVariant.DARK.value,
        help="Theme variant: light, dark, hcDark or hcLight (default: dark)",
    )
    parser.add_argument(
        "--overrides",
        type=Path,
        metavar="FILE",
        help="JSON object of token id -> color value, replacing the default theme colors",
    )
    parser.add_argument(
        "--bare",
        action="store_true",
        help="Resolve registry defaults only (no default theme colors)",
    )
    parser.add_argument(
        "--seed",
        type=Path,
        metavar="FILE",
        help="JSON seed table to use instead of the bundled one",
    )
    parser.add_argument(
        "--token",
        action="append",
        dest="tokens",
        metavar="ID",
        help="Only print this token (repeatable)",
    )
    parser.add_argument("--lint", action="store_true", help="Print lint findings instead of colors")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
        set_topics("all")

    try:
        variant = ThemeVariant.parse(args.variant)
        if args.seed is not None:
            registry = build_default_registry(args.seed.name, base_dir=args.seed.parent.resolve())
        else:
            registry = default_registry()

        if args.overrides is not None:
            overrides = _load_json_object(args.overrides)
        elif args.bare:
            overrides = {}
        else:
            overrides = default_theme_colors(variant)

        if args.lint:
            result = lint_registry(registry, overrides)
        else:
            resolver = Resolver(registry, overrides)
            if args.tokens:
                result = {}
                for token_id in args.tokens:
                    color = resolver.resolve_token(token_id, variant)
                    result[token_id] = color.to_hex() if color is not None else None
            else:
                result = resolver.resolve_theme(variant)

        print(json.dumps(result, indent=2, ensure_ascii=False))
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
