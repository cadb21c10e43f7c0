"""Directory/file path sets reduced to a minimal covering set."""

from __future__ import annotations

import logging
import os
import re
from typing import Iterable, Sequence

from path_pruner.integrations.filesystem_adapter import FilesystemClassifier
from path_pruner.models.enums import PathKind
from path_pruner.services.ports import PathClassifier

logger = logging.getLogger(__name__)


def _anchor_patterns(anchor: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    """Build the exact-prefix and strict-descendant patterns for one anchor.

    Matching is a literal string prefix, not a path-segment comparison:
    ``/data/log`` also matches ``/data/logs``. Callers depend on that.
    """

    escaped = re.escape(os.path.abspath(anchor))
    exact_prefix = re.compile(f"(^{escaped})", re.MULTILINE)
    strict_descendant = re.compile(f"(^{escaped})(.+)", re.MULTILINE)
    return exact_prefix, strict_descendant


def _unnecessary_indexes(
    anchors: Sequence[str],
    candidates: Sequence[str],
    classifier: PathClassifier,
) -> set[int]:
    """Return indexes of candidates already covered by some anchor."""

    indexes: set[int] = set()
    for anchor in anchors:
        exact_prefix, strict_descendant = _anchor_patterns(anchor)
        for index, candidate in enumerate(candidates):
            item = os.path.abspath(candidate)
            if classifier.classify(item) is PathKind.FILE:
                if exact_prefix.search(os.path.dirname(item)):
                    indexes.add(index)
            elif strict_descendant.search(item):
                indexes.add(index)
    return indexes


def _keep_unmarked(items: Sequence[str], indexes: set[int]) -> list[str]:
    return [item for index, item in enumerate(items) if index not in indexes]


class PathSet:
    """Ordered directories and files slated for a downstream action.

    The instance owns both lists: setters copy the given sequence and
    every transformation replaces a list as a whole.
    """

    def __init__(
        self,
        directories: Iterable[str] = (),
        files: Iterable[str] = (),
        *,
        classifier: PathClassifier | None = None,
    ) -> None:
        """Create a path set, empty unless initial lists are given."""

        self._directories: list[str] = list(directories)
        self._files: list[str] = list(files)
        self.classifier: PathClassifier = classifier or FilesystemClassifier()

    @property
    def directories(self) -> list[str]:
        return self._directories

    @directories.setter
    def directories(self, value: Iterable[str]) -> None:
        self._directories = list(value)

    @property
    def files(self) -> list[str]:
        return self._files

    @files.setter
    def files(self, value: Iterable[str]) -> None:
        self._files = list(value)

    def prune(self) -> None:
        """Drop entries already covered by a listed directory.

        Example::

            directories: /d/styles/css, /d/js/scripts, /d/styles, /t
            files:       /d/styles/popup.css, /d/manifest.json, /t.txt

        becomes ``/d/js/scripts, /d/styles, /t`` and
        ``/d/manifest.json, /t.txt`` because the whole ``/d/styles``
        folder is already listed.

        Every candidate is classified through ``self.classifier``, so all
        listed paths must exist; a missing one raises ``FileNotFoundError``
        and leaves both lists untouched. Nothing happens when no
        directories are listed.
        """

        if not self.directories:
            return

        marked = _unnecessary_indexes(self.directories, self.directories, self.classifier)
        directories = _keep_unmarked(self.directories, marked)

        marked_files = _unnecessary_indexes(directories, self.files, self.classifier)
        files = _keep_unmarked(self.files, marked_files)

        for index in sorted(marked):
            logger.debug("Covered directory dropped: %s", self.directories[index])
        for index in sorted(marked_files):
            logger.debug("Covered file dropped: %s", self.files[index])
        logger.info(
            "Pruned %d of %d directories and %d of %d files",
            len(marked),
            len(self.directories),
            len(marked_files),
            len(self.files),
        )

        self.directories = directories
        self.files = files

    def trim_root(self, root: str) -> None:
        """Strip a leading ``root`` from every entry, for display only.

        Trimmed entries are no longer absolute, so prune first.
        """

        def trim(value: str) -> str:
            if value.startswith(root):
                return value[len(root):]
            return value

        self.directories = [trim(value) for value in self.directories]
        self.files = [trim(value) for value in self.files]
