"""
edgerouter-tools: Standalone Python tools for router config.boot files.

This package parses, checks, normalizes and exports the brace-delimited
boot configuration files of embedded router operating systems, without
requiring access to the router.

Modules:
    boot: Grammar, AST, serializer and exporters
    core: File I/O for config.boot files
    config: Tool configuration (.edgerouter-tools.toml)
    cli: The `edgerouter-tools` / `ert` command

Quick Start::

    from edgerouter_tools import load_boot, serialize_file

    doc = load_boot("config.boot")
    eth0 = doc.find("interfaces", "ethernet")
    print(serialize_file(doc))
"""

__version__ = "0.1.0"

# Parsing and serialization
from edgerouter_tools.boot import (
    Document,
    File,
    parse_file,
    parse_string,
    serialize_file,
)
from edgerouter_tools.core import load_boot, save_boot
from edgerouter_tools.exceptions import EdgeRouterToolsError, ParseError

__all__ = [
    # Version
    "__version__",
    # Core
    "File",
    "Document",
    "parse_string",
    "parse_file",
    "serialize_file",
    "load_boot",
    "save_boot",
    # Errors
    "EdgeRouterToolsError",
    "ParseError",
]
