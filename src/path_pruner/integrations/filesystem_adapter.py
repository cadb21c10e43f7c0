from __future__ import annotations

import os
import stat
from pathlib import Path
from typing import Iterable

from path_pruner.models.enums import PathKind
from path_pruner.services.ports import PathClassifier


class FilesystemClassifier:
    """Classify paths by querying the live filesystem."""

    def classify(self, path: str) -> PathKind:
        """Stat the path; a missing path raises ``FileNotFoundError``."""

        mode = os.stat(path).st_mode
        if stat.S_ISREG(mode):
            return PathKind.FILE
        return PathKind.DIRECTORY


def collect_paths(root: Path, patterns: Iterable[str]) -> list[Path]:
    """Collect unique filesystem paths under root matching glob patterns."""

    paths: list[Path] = []
    for pattern in patterns:
        paths.extend(sorted(root.glob(pattern)))
    seen: set[Path] = set()
    uniq: list[Path] = []
    for path in paths:
        if path in seen:
            continue
        seen.add(path)
        uniq.append(path)
    return uniq


def split_by_kind(
    paths: Iterable[Path | str],
    classifier: PathClassifier,
) -> tuple[list[str], list[str]]:
    """Split existing paths into (directories, files) preserving order."""

    directories: list[str] = []
    files: list[str] = []
    for path in paths:
        text = str(path)
        if classifier.classify(os.path.abspath(text)) is PathKind.FILE:
            files.append(text)
        else:
            directories.append(text)
    return directories, files
