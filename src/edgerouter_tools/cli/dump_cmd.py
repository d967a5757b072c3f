"""
Dump command: export a parsed config.boot file.

Formats:
    text      canonical config.boot text
    json      the tree as JSON (objects become ordered lists)
    yaml      the same data as YAML
    commands  one 'set ...' line per setting

Usage:
    edgerouter-tools dump config.boot --format json
    edgerouter-tools dump config.boot --format commands
    edgerouter-tools commands config.boot          # shorthand
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from edgerouter_tools.boot import File, serialize_file, to_commands, to_json, to_yaml
from edgerouter_tools.config import OUTPUT_FORMATS, Config
from edgerouter_tools.core import load_boot
from edgerouter_tools.exceptions import EdgeRouterToolsError

from .utils import print_error


def main(argv: list[str] | None = None) -> int:
    """Main entry point for dump command."""
    parser = argparse.ArgumentParser(
        prog="edgerouter-tools dump",
        description="Export a config.boot file",
    )
    parser.add_argument("file", help="Configuration file")
    parser.add_argument(
        "--format",
        "-f",
        choices=OUTPUT_FORMATS,
        help="Output format (default: [defaults] format)",
    )
    parser.add_argument(
        "--verb",
        default="set",
        help="Command verb for --format commands (default: set)",
    )
    parser.add_argument("--encoding", help="Input encoding (default: [input] encoding)")

    args = parser.parse_args(argv)

    try:
        config = Config.load()
        encoding = args.encoding or config.encoding
        document = load_boot(Path(args.file), encoding=encoding)
    except EdgeRouterToolsError as e:
        print_error(e)
        return 1

    output_format = args.format or config.format
    sys.stdout.write(render(document, output_format, verb=args.verb))
    return 0


def render(document: File, output_format: str, verb: str = "set") -> str:
    """Render ``document`` in one of OUTPUT_FORMATS, newline-terminated."""
    if output_format == "text":
        return serialize_file(document)
    if output_format == "json":
        return to_json(document) + "\n"
    if output_format == "yaml":
        return to_yaml(document)
    if output_format == "commands":
        return "".join(f"{line}\n" for line in to_commands(document, verb=verb))
    raise ValueError(f"Unknown output format: {output_format}")
