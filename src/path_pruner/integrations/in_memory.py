from __future__ import annotations

import os
from typing import Iterable

from path_pruner.models.enums import PathKind


class InMemoryClassifier:
    """Classifier backed by canned answers instead of the filesystem."""

    def __init__(
        self,
        *,
        directories: Iterable[str] = (),
        files: Iterable[str] = (),
    ) -> None:
        """Register known directories and files by their absolute form."""

        self._kinds: dict[str, PathKind] = {}
        for path in directories:
            self._kinds[os.path.abspath(path)] = PathKind.DIRECTORY
        for path in files:
            self._kinds[os.path.abspath(path)] = PathKind.FILE
        self.calls: list[str] = []

    def classify(self, path: str) -> PathKind:
        """Return the registered kind or fail like a missing stat target."""

        self.calls.append(path)
        try:
            return self._kinds[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", path) from None
