from __future__ import annotations

import argparse
import sys
from typing import Sequence, TextIO

from .config import StoreConfig
from .errors import SnippetError, UsageError
from .exception_handler import EXIT_FAILURE, EXIT_OK, ErrorHandler
from .snippet import SnippetStorage

ADD_PROMPT = "Paste your snippet. End input with an empty line:"


def build_parser(config: StoreConfig) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetmanager",
        description="Micro Snippet Manager - Manage code snippets for micro editor",
        epilog=f"Snippets are stored in {config.filepath}",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="command", required=True)

    subparsers.add_parser("list", help="List all snippets")

    add_parser = subparsers.add_parser("add", help="Add snippet (input from stdin)")
    add_parser.add_argument("name", help="Name to store the snippet under")

    show_parser = subparsers.add_parser("show", help="Show snippet content")
    show_parser.add_argument("name", help="Name of the snippet to print")

    delete_parser = subparsers.add_parser("delete", help="Delete snippet")
    delete_parser.add_argument("name", help="Name of the snippet to remove")

    return parser


def main(
    argv: Sequence[str] | None = None,
    *,
    config: StoreConfig | None = None,
    stdin: TextIO | None = None,
) -> int:
    config = config or StoreConfig.from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)

    handler = ErrorHandler()
    storage = SnippetStorage(config)

    try:
        storage.load()
    except SnippetError as exc:
        return handler.handle_error(
            exc, {"prefix": "Error loading snippets", "path": str(config.filepath)}
        )

    if args.command == "list":
        print(storage.format_list())
        return EXIT_OK

    name = args.name
    if args.command == "show":
        content = storage.show(name)
        if content is None:
            print(f"Snippet '{name}' not found.")
        else:
            print(content)
        return EXIT_OK

    if args.command == "add":
        print(ADD_PROMPT)
        try:
            storage.add(name, stdin or sys.stdin)
        except UsageError as exc:
            parser.print_usage(sys.stderr)
            return handler.handle_error(exc, {"command": "add", "name": name})
        except KeyboardInterrupt:
            print("\nAborted, nothing saved.", file=sys.stderr)
            return EXIT_FAILURE
        except SnippetError as exc:
            return handler.handle_error(
                exc, {"prefix": "Error adding snippet", "command": "add", "name": name}
            )
        print(f"Snippet '{name}' added.")
        return EXIT_OK

    if args.command == "delete":
        try:
            storage.delete(name)
        except SnippetError as exc:
            return handler.handle_error(
                exc, {"prefix": "Error deleting snippet", "command": "delete", "name": name}
            )
        print(f"Snippet '{name}' deleted.")
        return EXIT_OK

    # argparse rejects unknown commands before we get here
    raise AssertionError(f"unhandled command {args.command!r}")


def run() -> None:
    try:
        sys.exit(main())
    except Exception as exc:
        sys.exit(ErrorHandler().handle_error(exc, {"prefix": "Fatal error"}))


__all__ = ["ADD_PROMPT", "build_parser", "main", "run"]
