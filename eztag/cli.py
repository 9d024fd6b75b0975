"""Command-line interface for eztag."""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional

from . import __version__
from .config import PlanError, load_render_plan, render_plan
from .encoding import (
    render_attribute_encoding,
    render_body_encoding,
    render_style_encoding,
)
from .io_utils import warn, write_tags

ENCODERS: Dict[str, Callable[[Optional[str]], str]] = {
    "attr": render_attribute_encoding,
    "body": render_body_encoding,
    "style": render_style_encoding,
}


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    if not input_path.exists():
        raise SystemExit(f"Render plan not found: {input_path}")

    try:
        output = render_plan(load_render_plan(input_path))
    except PlanError as exc:
        for message in exc.errors:
            warn(message)
        raise SystemExit(1) from exc

    if args.output:
        write_tags(Path(args.output), output)
        print(f"Wrote rendered tags to {args.output}.")
    else:
        print(output)


def _handle_encode(args: argparse.Namespace) -> None:
    print(ENCODERS[args.context](args.value))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eztag",
        description="Render declarative HTML elements into tags",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"eztag {__version__}",
        help="Show the eztag version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the elements of a YAML plan.",
        description="Validate a YAML render plan and print one tag per element.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the render plan YAML file.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Write the rendered tags to this file instead of stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    encode_parser = subparsers.add_parser(
        "encode",
        help="Encode a value for an attribute, body or style context.",
        description="Apply one of the literal encoders to VALUE.",
    )
    encode_parser.add_argument("context", choices=sorted(ENCODERS))
    encode_parser.add_argument("value")
    encode_parser.set_defaults(func=_handle_encode)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()


__all__ = ["build_parser", "main"]
