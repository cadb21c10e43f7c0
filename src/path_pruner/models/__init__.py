"""Public model exports."""

from path_pruner.models.common import StrictModel
from path_pruner.models.enums import PathKind
from path_pruner.models.pruning import PruneReport, PruneRequest

__all__ = [
    "PathKind",
    "PruneReport",
    "PruneRequest",
    "StrictModel",
]
