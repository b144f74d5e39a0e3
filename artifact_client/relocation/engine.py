"""Move/rename of repository items, singly or in batches.

The move endpoint renames to the literal target path when a
directory-shaped target does not exist yet: moving "repo/a.txt" to
"repo/dir/" would produce a file called "repo/dir". Both operations
therefore ensure the destination folder exists before moving into it.

Batch flow:
1. List the source folder (fails on an empty folder, nothing else happens)
2. Ensure the destination folder
3. Select files whose base name passes the client-side predicate
4. Dispatch the moves through a bounded pool and let every one settle
5. Report succeeded and failed moves together
"""

import asyncio
import logging
from typing import Optional

from artifact_client.relocation.types import (
    BatchMoveJob,
    BatchMoveResult,
    EmptySourceDirectoryError,
    MoveFailure,
    MoveRejectedError,
    MoveSpec,
    NamePredicate,
)
from artifact_client.storage import ensure_directory, get_folder_info
from artifact_client.transport import TransportClient, routes

logger = logging.getLogger(__name__)

DEFAULT_MOVE_CONCURRENCY = 8


class RelocationEngine:
    """Moves and renames items through a TransportClient.

    max_concurrency bounds in-flight moves during move_items(); 0 means
    every move is dispatched at once.
    """

    def __init__(
        self,
        transport: TransportClient,
        *,
        max_concurrency: int = DEFAULT_MOVE_CONCURRENCY,
    ):
        if max_concurrency < 0:
            raise ValueError("max_concurrency must be >= 0")
        self._transport = transport
        self._max_concurrency = max_concurrency

    async def move_item(
        self,
        source: str,
        destination: str,
        dry_run: bool = False,
    ) -> str:
        """Move *source* into a folder ("dir/") or rename it ("new/name").

        dry_run asks the server to validate the move without relocating
        anything; failures are reported the same way.

        Raises:
            DirectoryCreationError: the destination folder could not be ensured.
            MoveRejectedError: the server rejected the move.
        """
        spec = MoveSpec(source=source, destination=destination, dry_run=dry_run)
        if spec.moves_into_directory:
            await ensure_directory(self._transport, spec.destination)
        return await self._move(spec)

    async def move_items(
        self,
        source_dir: str,
        filter_predicate: Optional[NamePredicate],
        destination_dir: str,
        dry_run: bool = False,
        *,
        max_concurrency: Optional[int] = None,
        raise_on_failure: bool = True,
    ) -> BatchMoveResult:
        """Move the files of *source_dir* whose name passes *filter_predicate*.

        Sub-folders are never moved. Every selected move settles before this
        returns; there is no rollback of the ones that succeeded.

        Raises:
            EmptySourceDirectoryError: the source folder has no children.
            BatchMoveError: raise_on_failure is set and any move failed. Its
                `result` lists the completed moves alongside the failures.
        """
        job = BatchMoveJob(
            source_dir=source_dir,
            destination_dir=destination_dir,
            filter_predicate=filter_predicate,
        )

        listing = await get_folder_info(self._transport, job.source_dir)
        if not listing.children:
            raise EmptySourceDirectoryError(job.source_dir)

        await ensure_directory(self._transport, job.destination_dir)

        specs = job.select(listing.children, dry_run=dry_run)
        logger.info(
            "Start moving %d files to %s (candidate count: %d)",
            len(specs),
            job.destination_dir,
            len(job.candidates(listing.children)),
        )

        limit = self._max_concurrency if max_concurrency is None else max_concurrency
        semaphore = asyncio.Semaphore(limit) if limit > 0 else None

        async def _bounded(spec: MoveSpec) -> str:
            if semaphore is None:
                return await self._move(spec)
            async with semaphore:
                return await self._move(spec)

        outcomes = await asyncio.gather(
            *(_bounded(spec) for spec in specs),
            return_exceptions=True,
        )

        result = BatchMoveResult()
        for spec, outcome in zip(specs, outcomes):
            if isinstance(outcome, Exception):
                result.failed.append(MoveFailure(spec=spec, error=outcome))
            elif isinstance(outcome, BaseException):
                raise outcome
            else:
                result.succeeded.append(spec)

        logger.info(
            "Moved %d/%d files to %s",
            len(result.succeeded),
            result.total,
            job.destination_dir,
        )
        if raise_on_failure:
            result.raise_for_failures()
        return result

    async def _move(self, spec: MoveSpec) -> str:
        logger.debug("Moving %s into %s", spec.source, spec.destination)
        response = await self._transport.request(
            routes.MOVE,
            {"src_path": spec.source},
            method="POST",
            query={
                "to": "/" + spec.destination.lstrip("/"),
                "dry": 1 if spec.dry_run else 0,
            },
        )
        if not response.is_success:
            logger.warning(
                "Move of %s to %s rejected: HTTP %d",
                spec.source, spec.destination, response.status_code,
            )
            raise MoveRejectedError(spec.source, spec.destination, response.status_code)
        return response.text
