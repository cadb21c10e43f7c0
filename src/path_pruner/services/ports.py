from __future__ import annotations

from typing import Protocol

from path_pruner.models.enums import PathKind


class PathClassifier(Protocol):
    """Contract for telling files apart from directories."""

    def classify(self, path: str) -> PathKind:
        """Classify one resolved path.

        Raises ``FileNotFoundError`` when the path does not exist.
        """

        ...
