"""
File I/O utilities for config.boot files.
"""

from pathlib import Path

from edgerouter_tools.boot import File, Object, parse_string, serialize_file
from edgerouter_tools.exceptions import FileFormatError
from edgerouter_tools.exceptions import FileNotFoundError as BootFileNotFoundError
from edgerouter_tools.exceptions import ParseError


def read_boot_text(path: str | Path, encoding: str = "utf-8") -> str:
    """
    Read the raw text of a config.boot file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        FileFormatError: If the file cannot be decoded
    """
    path = Path(path)
    if not path.is_file():
        raise BootFileNotFoundError(
            "Configuration file not found",
            context={"file": str(path)},
            suggestions=[
                "Check that the file path is correct",
                "Router boot configurations usually live at /config/config.boot",
            ],
        )

    try:
        return path.read_text(encoding=encoding)
    except UnicodeDecodeError as e:
        raise FileFormatError(
            "Configuration file is not valid text",
            context={"file": str(path), "encoding": encoding, "reason": e.reason},
            suggestions=["Check that this is a config.boot file and not a binary backup"],
        ) from e


def load_boot(path: str | Path, encoding: str = "utf-8") -> File:
    """
    Load a config.boot file.

    Args:
        path: Path to the configuration file
        encoding: Text encoding of the file

    Returns:
        Parsed File

    Raises:
        FileNotFoundError: If file doesn't exist
        FileFormatError: If file cannot be decoded
        ParseError: If file does not match the grammar
    """
    path = Path(path)
    text = read_boot_text(path, encoding=encoding)
    try:
        return parse_string(text)
    except ParseError as e:
        raise e.with_file(path) from e


def save_boot(file: File, path: str | Path, encoding: str = "utf-8") -> None:
    """
    Save a config.boot file.

    Args:
        file: The parsed document
        path: Path to save to

    Raises:
        FileFormatError: If the document has no root object
    """
    if not isinstance(file.values, Object):
        raise FileFormatError(
            "Document root is not an object",
            context={"got": type(file.values).__name__},
        )

    path = Path(path)
    text = serialize_file(file)
    path.write_text(text, encoding=encoding)
