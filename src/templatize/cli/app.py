"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from templatize.contracts.exceptions import TemplatizeError


def main(argv: list[str] | None = None) -> int:
    import templatize.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if not args.name:
        print("error: --name is required", file=sys.stderr)
        print(f"usage: {parser.prog} --name <project-name> [--dir <target-dir>]", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        result = cli._run_create(args)
    except TemplatizeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0 if result.ok else 1


__all__ = ["main"]
