from __future__ import annotations

from pydantic import Field

from path_pruner.models.common import StrictModel


class PruneRequest(StrictModel):
    """Directory and file lists to reduce, as read from a JSON request file."""

    directories: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    trim_root: str | None = Field(default=None, min_length=1)


class PruneReport(StrictModel):
    """Result of one prune run, optionally trimmed for display."""

    directories: list[str] = Field(default_factory=list)
    files: list[str] = Field(default_factory=list)
    removed_directories: list[str] = Field(default_factory=list)
    removed_files: list[str] = Field(default_factory=list)
    trim_root: str | None = None

    @property
    def removed_count(self) -> int:
        """Total number of entries eliminated by pruning."""

        return len(self.removed_directories) + len(self.removed_files)
