from __future__ import annotations

from enum import Enum


class PathKind(str, Enum):
    """Classification of an existing filesystem entry."""

    FILE = "file"  # Regular file.
    DIRECTORY = "directory"  # Anything that is not a regular file.
