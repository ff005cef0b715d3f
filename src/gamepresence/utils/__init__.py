"""Common utility functions and helpers for the gamepresence package."""

from gamepresence.utils.file import ensure_directory_exists, write_atomic

__all__ = [
    "ensure_directory_exists",
    "write_atomic",
]
