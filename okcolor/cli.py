"""Command-line interface for okcolor.

Usage:
    okcolor show "#ab38a3" "#123faa"
    okcolor blend "#ff0000" "#00ff00" 0.3
    okcolor -v lighten "#123faa" 0.2 --gamut compress
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Sequence

from okcolor import defaults, operations
from okcolor.color import Color, as_color, color_to_oklab
from okcolor.errors import ColorError

logger = logging.getLogger(__name__)

_RESET = "\033[0m"


def swatch(color: Color, width: int = defaults.SWATCH_WIDTH) -> str:
    """A truecolor ANSI block painted with the color (alpha ignored)."""
    r, g, b, _ = color.to_rgba8()
    return f"\033[48;2;{r};{g};{b}m{' ' * width}{_RESET}"


def format_color(color: Color, use_color: bool = True) -> str:
    """Hex text of a color, prefixed by a swatch when use_color is set."""
    text = color.to_hex()
    if use_color:
        return f"{swatch(color)}  {text}"
    return text


def _print_color(color: Color, args: argparse.Namespace) -> None:
    print(format_color(color, use_color=not args.no_color))


def _cmd_show(args: argparse.Namespace) -> None:
    for text in args.colors:
        color = as_color(text)
        lab = color_to_oklab(color)
        suffix = f"  oklab({lab.L:.4f} {lab.a:.4f} {lab.b:.4f})"
        print(format_color(color, use_color=not args.no_color) + suffix)


def _cmd_blend(args: argparse.Namespace) -> None:
    _print_color(operations.blend(args.c1, args.c2, args.t, space=args.space, gamut=args.gamut), args)


def _cmd_mix(args: argparse.Namespace) -> None:
    _print_color(operations.mix(args.c1, args.c2, space=args.space, gamut=args.gamut), args)


def _cmd_lighten(args: argparse.Namespace) -> None:
    _print_color(operations.lighten(args.color, args.amount, gamut=args.gamut), args)


def _cmd_darken(args: argparse.Namespace) -> None:
    _print_color(operations.darken(args.color, args.amount, gamut=args.gamut), args)


def _cmd_shade(args: argparse.Namespace) -> None:
    _print_color(operations.shade(args.color, args.lightness, gamut=args.gamut), args)


def _cmd_alpha(args: argparse.Namespace) -> None:
    _print_color(operations.with_alpha(args.color, args.alpha), args)


def _add_gamut_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--gamut",
        choices=("clip", "compress"),
        default=defaults.DEFAULT_GAMUT_METHOD,
        help=f"Gamut mapping for out-of-range results (default: {defaults.DEFAULT_GAMUT_METHOD})",
    )


def _add_space_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--space",
        choices=("oklch", "oklab"),
        default=defaults.DEFAULT_BLEND_SPACE,
        help=f"Interpolation space (default: {defaults.DEFAULT_BLEND_SPACE})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="okcolor",
        description="Manipulate hex colors in the Oklab perceptual color space.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Disable all log messages")
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Print additional debug output")
    parser.add_argument("-b", "--no-color", action="store_true", help="Disable color swatches in output")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("show", help="Print colors with their Oklab coordinates")
    p.add_argument("colors", nargs="+", metavar="COLOR", help="Hex colors (#RRGGBB or #RRGGBBAA)")
    p.set_defaults(func=_cmd_show)

    p = sub.add_parser("blend", help="Interpolate between two colors")
    p.add_argument("c1", metavar="COLOR1")
    p.add_argument("c2", metavar="COLOR2")
    p.add_argument("t", type=float, help="Blend factor (0 = COLOR1, 1 = COLOR2)")
    _add_space_arg(p)
    _add_gamut_arg(p)
    p.set_defaults(func=_cmd_blend)

    p = sub.add_parser("mix", help="Halfway blend of two colors")
    p.add_argument("c1", metavar="COLOR1")
    p.add_argument("c2", metavar="COLOR2")
    _add_space_arg(p)
    _add_gamut_arg(p)
    p.set_defaults(func=_cmd_mix)

    p = sub.add_parser("lighten", help="Raise Oklab lightness")
    p.add_argument("color", metavar="COLOR")
    p.add_argument("amount", type=float)
    _add_gamut_arg(p)
    p.set_defaults(func=_cmd_lighten)

    p = sub.add_parser("darken", help="Lower Oklab lightness")
    p.add_argument("color", metavar="COLOR")
    p.add_argument("amount", type=float)
    _add_gamut_arg(p)
    p.set_defaults(func=_cmd_darken)

    p = sub.add_parser("shade", help="Set Oklab lightness")
    p.add_argument("color", metavar="COLOR")
    p.add_argument("lightness", type=float)
    _add_gamut_arg(p)
    p.set_defaults(func=_cmd_shade)

    p = sub.add_parser("alpha", help="Replace the alpha channel")
    p.add_argument("color", metavar="COLOR")
    p.add_argument("alpha", type=float)
    p.set_defaults(func=_cmd_alpha)

    return parser


def _configure_logging(args: argparse.Namespace) -> None:
    if args.quiet:
        level = logging.CRITICAL + 1
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO
    logging.basicConfig(format="[%(levelname)s] %(message)s")
    logging.getLogger().setLevel(level)


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)

    func: Callable[[argparse.Namespace], None] = args.func
    try:
        func(args)
    except ColorError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
