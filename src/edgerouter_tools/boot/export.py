"""
Exporters for parsed config.boot documents.

- ``to_data``: plain Python data (lists, dicts, str, bool, None) for JSON/YAML
- ``to_json`` / ``to_yaml``: text dumps of ``to_data``
- ``to_commands``: one ``set`` command per leaf, ready to paste into a
  configure session

Example::

    person {
        name "John Doe"
        ethernet eth0 {
            disable
        }
    }

    to_commands(doc) ->
        set person name 'John Doe'
        set person ethernet eth0 disable
"""

from __future__ import annotations

import json
from typing import Any, List, Union

import yaml

from .types import (
    Boolean,
    File,
    Key,
    KeyValue,
    Null,
    Object,
    ObjectKeyValue,
    ObjectValue,
    String,
    UnquotedString,
    Value,
)


def to_data(node: Union[File, Value, ObjectValue]) -> Any:
    """
    Convert an AST node to plain data.

    Objects become lists so that order and repeated keys survive:
    ``Key`` → ``"name"``, ``KeyValue`` → ``{"name": value}``,
    ``ObjectKeyValue`` → ``{"category": {"instance": value}}``.
    """
    if isinstance(node, File):
        return {
            "config": to_data(node.values),
            "trailing_lines": list(node.trailing_lines),
        }
    if isinstance(node, Object):
        return [to_data(entry) for entry in node]
    if isinstance(node, Key):
        return node.name
    if isinstance(node, KeyValue):
        return {node.name: to_data(node.value)}
    if isinstance(node, ObjectKeyValue):
        return {node.category: {node.instance: to_data(node.value)}}
    if isinstance(node, (String, UnquotedString)):
        return node.text
    if isinstance(node, Boolean):
        return node.value
    if isinstance(node, Null):
        return None
    raise TypeError(f"Cannot export {node!r}")


def to_json(file: File, indent: int = 2) -> str:
    """Dump a document as JSON."""
    return json.dumps(to_data(file), indent=indent)


def to_yaml(file: File) -> str:
    """Dump a document as YAML, keeping source order."""
    return yaml.safe_dump(to_data(file), sort_keys=False, default_flow_style=False)


def to_commands(file: File, verb: str = "set") -> List[str]:
    """
    Flatten a document into configure-mode commands.

    Every leaf becomes ``<verb> <path...> <leaf>``; an empty object emits
    its own path so it is not lost.
    """
    if not isinstance(file.values, Object):
        raise TypeError("Top level value is not an object")

    commands: List[str] = []
    for path in _leaf_paths(file.values, []):
        commands.append(" ".join([verb, *path]))
    return commands


def _leaf_paths(obj: Object, path: List[str]) -> List[List[str]]:
    paths: List[List[str]] = []

    for entry in obj:
        if isinstance(entry, Key):
            paths.append(path + [entry.name])
            continue

        if isinstance(entry, KeyValue):
            entry_path = path + [entry.name]
        elif isinstance(entry, ObjectKeyValue):
            entry_path = path + [entry.category, entry.instance]
        else:
            raise TypeError(f"Unknown object entry: {entry!r}")

        value = entry.value
        if isinstance(value, Object):
            if len(value) == 0:
                paths.append(entry_path)
            else:
                paths.extend(_leaf_paths(value, entry_path))
        else:
            paths.append(entry_path + [_format_argument(value)])

    return paths


def _format_argument(value: Value) -> str:
    """Format a scalar as a shell-style command argument."""
    if isinstance(value, String):
        if "'" in value.text:
            return f'"{value.text}"'
        return f"'{value.text}'"
    if isinstance(value, UnquotedString):
        return value.text
    if isinstance(value, Boolean):
        return "true" if value.value else "false"
    if isinstance(value, Null):
        return "null"
    raise TypeError(f"Unknown value: {value!r}")
