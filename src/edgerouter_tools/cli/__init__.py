"""
Command-line interface for edgerouter-tools.

Provides CLI commands for config.boot files via the `edgerouter-tools` or `ert` command:

    edgerouter-tools format [file]        - Print a file in canonical form
    edgerouter-tools check <file>...      - Check that files parse
    edgerouter-tools dump <file>          - Export as text, JSON, YAML or commands
    edgerouter-tools commands <file>      - Print 'set' commands for a file

Examples:
    ert format config.boot
    ert format config.boot -o normalized.boot
    ert check /config/config.boot backups/*.boot
    ert dump config.boot --format yaml
    ert commands config.boot
"""

import argparse
from typing import List, Optional

from edgerouter_tools import __version__
from edgerouter_tools.config import OUTPUT_FORMATS

__all__ = ["main"]


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for edgerouter-tools CLI."""
    parser = argparse.ArgumentParser(
        prog="edgerouter-tools",
        description="Router config.boot toolkit",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"edgerouter-tools {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log parser activity to stderr"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Format subcommand
    format_parser = subparsers.add_parser("format", help="Print a file in canonical form")
    format_parser.add_argument("file", nargs="?", help="Configuration file")
    format_parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    format_parser.add_argument("--encoding", help="Input encoding")

    # Check subcommand
    check_parser = subparsers.add_parser("check", help="Check that files parse")
    check_parser.add_argument("files", nargs="+", help="Configuration files")
    check_parser.add_argument("-q", "--quiet", action="store_true", help="Only report failures")
    check_parser.add_argument("--encoding", help="Input encoding")

    # Dump subcommand
    dump_parser = subparsers.add_parser("dump", help="Export a file")
    dump_parser.add_argument("file", help="Configuration file")
    dump_parser.add_argument("--format", "-f", choices=OUTPUT_FORMATS, help="Output format")
    dump_parser.add_argument("--verb", default="set", help="Verb for commands output")
    dump_parser.add_argument("--encoding", help="Input encoding")

    # Commands subcommand
    commands_parser = subparsers.add_parser("commands", help="Print 'set' commands")
    commands_parser.add_argument("file", help="Configuration file")
    commands_parser.add_argument("--verb", default="set", help="Command verb (default: set)")
    commands_parser.add_argument("--encoding", help="Input encoding")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    _configure_logging(args.verbose)
    return _dispatch(args)


def _configure_logging(verbose: bool) -> None:
    from edgerouter_tools.config import Config, ConfigError
    from edgerouter_tools.logging import enable_verbose

    if not verbose:
        try:
            verbose = Config.load().verbose
        except ConfigError:
            # Reported by the command itself
            return

    if verbose:
        enable_verbose("DEBUG")


def _dispatch(args) -> int:
    """Dispatch to the appropriate command handler."""
    if args.command == "format":
        from .format_cmd import main as format_cmd

        sub_argv = [args.file] if args.file else []
        if args.output:
            sub_argv.extend(["--output", args.output])
        if args.encoding:
            sub_argv.extend(["--encoding", args.encoding])
        return format_cmd(sub_argv)

    elif args.command == "check":
        from .check_cmd import main as check_cmd

        sub_argv = list(args.files)
        if args.quiet:
            sub_argv.append("--quiet")
        if args.encoding:
            sub_argv.extend(["--encoding", args.encoding])
        return check_cmd(sub_argv)

    elif args.command in ("dump", "commands"):
        from .dump_cmd import main as dump_cmd

        sub_argv = [args.file, "--verb", args.verb]
        if args.command == "commands":
            sub_argv.extend(["--format", "commands"])
        elif args.format:
            sub_argv.extend(["--format", args.format])
        if args.encoding:
            sub_argv.extend(["--encoding", args.encoding])
        return dump_cmd(sub_argv)

    return 1
