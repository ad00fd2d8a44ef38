"""nextroutes CLI — nextroutes generate / nextroutes list.

Entry point for the ``nextroutes`` command-line interface.
"""

from __future__ import annotations

import argparse
import sys


def _add_convention_args(parser: argparse.ArgumentParser) -> None:
    """Arguments shared by every subcommand."""
    parser.add_argument("root", nargs="?", default=".", help="Project root directory")
    parser.add_argument("--pages-dir", default=None, help="Pages directory name")
    parser.add_argument(
        "--prefix", default=None, help="Prefix marking non-routable files",
    )


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the nextroutes CLI."""
    parser = argparse.ArgumentParser(
        prog="nextroutes",
        description="Type-safe route declarations for Next.js pages.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # nextroutes generate
    generate_parser = subparsers.add_parser(
        "generate",
        help="Write the route declaration file",
    )
    _add_convention_args(generate_parser)
    generate_parser.add_argument("--output", default=None, help="Declaration file path")
    generate_parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the declaration file is out of date",
    )

    # nextroutes list
    list_parser = subparsers.add_parser(
        "list",
        help="Print discovered routes",
    )
    _add_convention_args(list_parser)

    return parser


def _get_version() -> str:
    """Get the package version."""
    from nextroutes import __version__

    return __version__


def main(argv: list[str] | None = None) -> None:
    """CLI entry point."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    from nextroutes._errors import NextRoutesError
    from nextroutes.app import check, generate, list_routes
    from nextroutes.console import format_route, print_error, print_summary

    overrides = {
        "pages_dir": args.pages_dir,
        "non_routable_prefix": args.prefix,
    }

    try:
        if args.command == "generate":
            if args.check:
                result = check(args.root, output=args.output, **overrides)
                print_summary(result, check=True)
                sys.exit(1 if result.changed else 0)
            result = generate(args.root, output=args.output, **overrides)
            print_summary(result)
        elif args.command == "list":
            for route in list_routes(args.root, **overrides):
                print(format_route(route))
    except NextRoutesError as exc:
        print_error(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    main()
