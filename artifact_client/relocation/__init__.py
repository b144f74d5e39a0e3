"""Relocation module: single-item move/rename and batch move.

Public API:
    RelocationEngine(transport).move_item(source, destination, dry_run) -> str
    RelocationEngine(transport).move_items(source_dir, predicate, destination_dir, dry_run) -> BatchMoveResult
"""

from artifact_client.relocation.engine import DEFAULT_MOVE_CONCURRENCY, RelocationEngine
from artifact_client.relocation.types import (
    BatchMoveError,
    BatchMoveJob,
    BatchMoveResult,
    EmptySourceDirectoryError,
    MoveFailure,
    MoveRejectedError,
    MoveSpec,
    NamePredicate,
)

__all__ = [
    "BatchMoveError",
    "BatchMoveJob",
    "BatchMoveResult",
    "DEFAULT_MOVE_CONCURRENCY",
    "EmptySourceDirectoryError",
    "MoveFailure",
    "MoveRejectedError",
    "MoveSpec",
    "NamePredicate",
    "RelocationEngine",
]
