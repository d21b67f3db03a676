"""Command line interface: transform serialized error trees, or serve the REST API."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any

from formshape import __version__
from formshape.parser.loader import TreeLoader, TreeLoadError, TreeSafetyError
from formshape.settings import Settings
from formshape.transform import flatten_dict, flatten_messages, mirror

logger = logging.getLogger("formshape.cli")

_TRANSFORMS: dict[str, Callable[[Any], Any]] = {
    "flatten": flatten_dict,
    "messages": flatten_messages,
    "mirror": mirror,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formshape",
        description="Normalize validation error trees for UI form libraries",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("flatten", "Flat map of dot paths to {kind, message}"),
        ("messages", "Flat map of dot paths to message strings"),
        ("mirror", "Nested structure shaped like the form values"),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("input", help="Error tree file (YAML or JSON); '-' reads stdin")
        cmd.add_argument("-o", "--output", help="Write JSON here instead of stdout")
        cmd.add_argument("--indent", type=int, default=2, help="JSON indentation")

    sub.add_parser("serve", help="Run the REST API server")
    return parser


def _read_tree(loader: TreeLoader, source: str) -> Any:
    if source == "-":
        return loader.loads(sys.stdin.read())
    return loader.load(Path(source))


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    if args.command == "serve":
        from formshape.api.app import main as serve

        serve()
        return 0

    loader = TreeLoader(settings)
    try:
        tree = _read_tree(loader, args.input)
    except (OSError, TreeLoadError, TreeSafetyError) as exc:
        print(f"formshape: cannot load {args.input}: {exc}", file=sys.stderr)
        return 2

    result = _TRANSFORMS[args.command](tree)
    rendered = json.dumps(result, indent=args.indent, ensure_ascii=False)
    if args.output:
        Path(args.output).write_text(rendered + "\n", encoding="utf-8")
        logger.info("Wrote %s output to %s", args.command, args.output)
    else:
        print(rendered)
    return 0


if __name__ == "__main__":
    sys.exit(main())
