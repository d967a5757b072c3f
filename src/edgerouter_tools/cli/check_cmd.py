"""
Check command: validate one or more config.boot files.

Usage:
    edgerouter-tools check config.boot
    edgerouter-tools check backups/*.boot --quiet

Exit code is 1 when any file fails to parse.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from edgerouter_tools.config import Config
from edgerouter_tools.core import load_boot
from edgerouter_tools.exceptions import EdgeRouterToolsError, ParseError

from .utils import describe_parse_error, print_error


def main(argv: list[str] | None = None) -> int:
    """Main entry point for check command."""
    parser = argparse.ArgumentParser(
        prog="edgerouter-tools check",
        description="Check that config.boot files parse",
    )
    parser.add_argument("files", nargs="+", help="Configuration files to check")
    parser.add_argument("-q", "--quiet", action="store_true", help="Only report failures")
    parser.add_argument("--encoding", help="Input encoding (default: [input] encoding)")

    args = parser.parse_args(argv)

    try:
        config = Config.load()
    except EdgeRouterToolsError as e:
        print_error(e)
        return 1

    console = Console(highlight=False, soft_wrap=True)

    encoding = args.encoding or config.encoding
    quiet = args.quiet or config.quiet

    failed = 0
    for name in args.files:
        path = Path(name)
        try:
            document = load_boot(path, encoding=encoding)
        except ParseError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(describe_parse_error(path, e))}")
            continue
        except EdgeRouterToolsError as e:
            failed += 1
            console.print(f"[red]FAIL[/red] {escape(str(path))}: {escape(e.message)}")
            continue

        if not quiet:
            entries = sum(1 for _ in document.values.iter_all())
            console.print(f"[green]OK[/green]   {escape(str(path))} ({entries} entries)")

    if not quiet or failed:
        console.print(f"Checked {len(args.files)} file(s), {failed} failed")

    return 1 if failed else 0
