"""Core file I/O for config.boot documents."""

from .boot_file import load_boot, read_boot_text, save_boot

__all__ = [
    "load_boot",
    "read_boot_text",
    "save_boot",
]
