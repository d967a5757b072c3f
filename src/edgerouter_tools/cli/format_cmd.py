"""
Format command: rewrite a config.boot file in canonical form.

Reads the whole file, parses it and prints the serialized document.
Indentation is normalized to four spaces per level.

Usage:
    edgerouter-tools format config.boot
    edgerouter-tools format config.boot -o normalized.boot
    edgerouter-tools format            # reads [input] default_file
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from edgerouter_tools.boot import serialize_file
from edgerouter_tools.config import Config
from edgerouter_tools.core import load_boot
from edgerouter_tools.exceptions import EdgeRouterToolsError

from .utils import print_error

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for format command."""
    parser = argparse.ArgumentParser(
        prog="edgerouter-tools format",
        description="Print a config.boot file in canonical form",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Configuration file (default: [input] default_file, usually config.boot)",
    )
    parser.add_argument("-o", "--output", help="Write to this file instead of stdout")
    parser.add_argument("--encoding", help="Input encoding (default: [input] encoding)")

    args = parser.parse_args(argv)

    try:
        config = Config.load()
        path = Path(args.file or config.default_file)
        encoding = args.encoding or config.encoding

        document = load_boot(path, encoding=encoding)
        text = serialize_file(document)
    except EdgeRouterToolsError as e:
        print_error(e)
        return 1

    if args.output:
        output = Path(args.output)
        output.write_text(text, encoding=encoding)
        logger.info(f"Wrote {output}")
    else:
        sys.stdout.write(text)

    return 0
