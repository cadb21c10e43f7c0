from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable

from path_pruner.integrations.filesystem_adapter import (
    FilesystemClassifier,
    collect_paths,
    split_by_kind,
)
from path_pruner.items import PathSet
from path_pruner.models.pruning import PruneReport, PruneRequest
from path_pruner.services.ports import PathClassifier

logger = logging.getLogger(__name__)


def load_request(path: Path) -> PruneRequest:
    """Read and validate a JSON prune request file."""

    payload = json.loads(path.read_text(encoding="utf-8"))
    return PruneRequest.model_validate(payload)


def _removed(before: list[str], after: list[str]) -> list[str]:
    """Entries of ``before`` missing from ``after``, order and repeats kept."""

    remaining = list(after)
    removed: list[str] = []
    for item in before:
        if item in remaining:
            remaining.remove(item)
        else:
            removed.append(item)
    return removed


def _trim(values: list[str], root: str) -> list[str]:
    return [value[len(root):] if value.startswith(root) else value for value in values]


def prune_paths(
    *,
    directories: Iterable[str] = (),
    files: Iterable[str] = (),
    root: Path | None = None,
    patterns: list[str] | None = None,
    trim_root: str | None = None,
    classifier: PathClassifier | None = None,
) -> PruneReport:
    """Collect, prune and optionally trim paths into a report."""

    classifier = classifier or FilesystemClassifier()
    dirs = list(directories)
    file_list = list(files)
    if patterns:
        matched_dirs, matched_files = split_by_kind(
            collect_paths(root or Path("."), patterns), classifier
        )
        dirs.extend(matched_dirs)
        file_list.extend(matched_files)

    items = PathSet(dirs, file_list, classifier=classifier)
    items.prune()
    removed_dirs = _removed(dirs, items.directories)
    removed_files = _removed(file_list, items.files)

    if trim_root:
        items.trim_root(trim_root)
        removed_dirs = _trim(removed_dirs, trim_root)
        removed_files = _trim(removed_files, trim_root)

    logger.debug("Prune report ready: %d entries removed", len(removed_dirs) + len(removed_files))
    return PruneReport(
        directories=items.directories,
        files=items.files,
        removed_directories=removed_dirs,
        removed_files=removed_files,
        trim_root=trim_root,
    )


def prune_request(
    request: PruneRequest,
    *,
    classifier: PathClassifier | None = None,
) -> PruneReport:
    """Run ``prune_paths`` for a validated request model."""

    return prune_paths(
        directories=request.directories,
        files=request.files,
        trim_root=request.trim_root,
        classifier=classifier,
    )
