"""Types for the relocation module.

MoveSpec describes a single move/rename. BatchMoveJob resolves a folder
listing into MoveSpecs, and BatchMoveResult reports how each of them
settled.
"""

from dataclasses import dataclass, field
from typing import Callable, Optional

from artifact_client.core.errors import ArtifactClientError, RequestRejectedError
from artifact_client.paths import as_directory, base_name, is_directory, join
from artifact_client.storage.schemas import FolderChild

NamePredicate = Callable[[str], bool]


@dataclass
class MoveSpec:
    """A single relocation.

    A directory-shaped destination ("dir/") receives the source under its
    own base name. Any other destination is the new full path (rename).
    """

    source: str
    destination: str
    dry_run: bool = False

    @property
    def moves_into_directory(self) -> bool:
        return is_directory(self.destination)

    @property
    def target_path(self) -> str:
        if self.moves_into_directory:
            return join(self.destination, base_name(self.source))
        return self.destination

    def to_dict(self) -> dict:
        return {
            "source": self.source,
            "destination": self.destination,
            "target_path": self.target_path,
            "dry_run": self.dry_run,
        }


@dataclass
class BatchMoveJob:
    """Move the matching files of one folder into another.

    filter_predicate receives each child's base name; None accepts all.
    Filtering happens client-side only.
    """

    source_dir: str
    destination_dir: str
    filter_predicate: Optional[NamePredicate] = None

    def __post_init__(self) -> None:
        self.source_dir = as_directory(self.source_dir)
        self.destination_dir = as_directory(self.destination_dir)

    def candidates(self, children: list[FolderChild]) -> list[FolderChild]:
        """Files (not sub-folders) with a resolvable name."""
        return [child for child in children if not child.folder and child.name]

    def select(self, children: list[FolderChild], dry_run: bool = False) -> list[MoveSpec]:
        return [
            MoveSpec(
                source=join(self.source_dir, child.name),
                destination=self.destination_dir,
                dry_run=dry_run,
            )
            for child in self.candidates(children)
            if self.filter_predicate is None or self.filter_predicate(child.name)
        ]


@dataclass
class MoveFailure:
    spec: MoveSpec
    error: Exception


@dataclass
class BatchMoveResult:
    """Settled outcome of every move in a batch."""

    succeeded: list[MoveSpec] = field(default_factory=list)
    failed: list[MoveFailure] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        return not self.failed

    @property
    def total(self) -> int:
        return len(self.succeeded) + len(self.failed)

    def raise_for_failures(self) -> None:
        if self.failed:
            raise BatchMoveError(self)

    def to_dict(self) -> dict:
        return {
            "succeeded": [s.to_dict() for s in self.succeeded],
            "failed": [
                {**f.spec.to_dict(), "error": str(f.error)} for f in self.failed
            ],
            "is_success": self.is_success,
        }


class MoveRejectedError(RequestRejectedError):
    def __init__(self, source: str, destination: str, status: int):
        self.source = source
        self.destination = destination
        super().__init__(f"Move of '{source}' to '{destination}' rejected", status)


class EmptySourceDirectoryError(ArtifactClientError):
    def __init__(self, source_dir: str):
        self.source_dir = source_dir
        super().__init__(f"No files in {source_dir}")


class BatchMoveError(ArtifactClientError):
    """At least one move in a batch failed.

    `result` lists every move that completed and every one that failed, so
    the caller does not need to inspect the destination folder.
    """

    def __init__(self, result: BatchMoveResult):
        self.result = result
        failed = ", ".join(f.spec.source for f in result.failed)
        super().__init__(
            f"{len(result.failed)} of {result.total} moves failed: {failed}"
        )
