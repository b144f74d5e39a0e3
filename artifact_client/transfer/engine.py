"""Streaming upload and download of artifacts.

Upload flow:
1. Resolve the source: http(s) URL (remote) or local path (must exist)
2. HEAD the server path; refuse to overwrite unless forced
3. PUT the source as a streamed request body

Download flow:
1. Require the local parent folder to exist (never created implicitly)
2. GET the artifact; the local file is opened only after a success status
3. Stream the body to disk, overwriting any existing file
4. Optionally compare the local MD5 with the server-reported one

Neither direction buffers the whole payload in memory, and file reads and
writes run in worker threads through anyio. No step is retried.
"""

import logging
from contextlib import aclosing
from pathlib import Path
from typing import AsyncIterator

import anyio
import httpx

from artifact_client.core.errors import ResponseDecodeError
from artifact_client.paths import as_file
from artifact_client.storage import get_file_info, path_exists
from artifact_client.transfer.checksum import DEFAULT_CHUNK_SIZE, ChecksumProvider, md5_file
from artifact_client.transfer.types import (
    DestinationDirMissingError,
    DestinationExistsError,
    DownloadRejectedError,
    DownloadWriteFailedError,
    IntegrityMismatchError,
    SourceNotFoundError,
    TransferSpec,
    UploadRejectedError,
)
from artifact_client.transport import TransportClient, routes

logger = logging.getLogger(__name__)


class TransferEngine:
    """Uploads and downloads artifacts through a TransportClient."""

    def __init__(
        self,
        transport: TransportClient,
        *,
        checksum: ChecksumProvider = md5_file,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
    ):
        self._transport = transport
        self._checksum = checksum
        self._chunk_size = chunk_size

    async def upload_file(
        self,
        server_path: str,
        source: str | Path,
        force_overwrite: bool = False,
    ) -> dict:
        """Deploy a local file or a remote URL's content to *server_path*.

        Returns the server's deploy confirmation as an opaque dict.

        Raises:
            SourceNotFoundError: local source does not exist (no request made).
            DestinationExistsError: server path exists and force_overwrite is
                False (no bytes transferred).
            UploadRejectedError: the PUT returned a non-success status.
            ResponseDecodeError: the deploy succeeded but its confirmation
                body is not JSON.
            httpx.HTTPStatusError: a remote source could not be fetched.
        """
        spec = TransferSpec(
            server_path=as_file(server_path),
            source=str(source),
            force_overwrite=force_overwrite,
        )

        local_source = None
        if not spec.is_remote:
            local_source = spec.local_source()
            if not local_source.is_file():
                raise SourceNotFoundError(local_source)

        if await path_exists(self._transport, spec.server_path) and not spec.force_overwrite:
            logger.warning("Refusing to overwrite existing %s", spec.server_path)
            raise DestinationExistsError(spec.server_path)

        if local_source is not None:
            async with aclosing(_read_file(local_source, self._chunk_size)) as body:
                response = await self._put(
                    spec.server_path,
                    body,
                    {"Content-Length": str(local_source.stat().st_size)},
                )
        else:
            async with self._transport.stream_url(spec.source) as remote:
                remote.raise_for_status()
                response = await self._put(
                    spec.server_path,
                    remote.aiter_bytes(self._chunk_size),
                )

        if not response.is_success:
            logger.warning(
                "Upload of %s to %s rejected: HTTP %d",
                spec.source, spec.server_path, response.status_code,
            )
            raise UploadRejectedError(spec.server_path, response.status_code)

        logger.info("Uploaded %s to %s", spec.source, spec.server_path)
        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as exc:
            raise ResponseDecodeError(
                "deploy confirmation", "response body is not JSON", cause=exc
            ) from exc

    async def download_file(
        self,
        server_path: str,
        destination_path: str | Path,
        verify_integrity: bool = False,
    ) -> Path:
        """Download *server_path* to a local file and return its resolved path.

        An existing file at the destination is overwritten without warning.
        On DownloadWriteFailedError or IntegrityMismatchError the written
        file is left in place; cleanup is the caller's decision.
        """
        destination = _resolve_destination(destination_path)
        server_path = as_file(server_path)

        async with self._transport.stream(routes.FILE_PATH, {"path": server_path}) as response:
            if not response.is_success:
                logger.warning("Download of %s rejected: HTTP %d", server_path, response.status_code)
                raise DownloadRejectedError(server_path, response.status_code)
            await self._write_body(response, destination)

        logger.info("Downloaded %s to %s", server_path, destination)

        if verify_integrity:
            await self._verify(server_path, destination)
        return destination

    async def download_folder(
        self,
        server_path: str,
        destination_file: str | Path,
        archive_type: str = "zip",
    ) -> Path:
        """Download a server-side archive of a folder.

        No integrity check: the server publishes no checksum for archives.
        """
        destination = _resolve_destination(destination_file)

        async with self._transport.stream(
            routes.ARCHIVE_DOWNLOAD,
            {"path": as_file(server_path)},
            query={"archiveType": archive_type},
        ) as response:
            if not response.is_success:
                logger.warning(
                    "Archive download of %s rejected: HTTP %d",
                    server_path, response.status_code,
                )
                raise DownloadRejectedError(server_path, response.status_code)
            await self._write_body(response, destination)

        logger.info("Downloaded %s archive of %s to %s", archive_type, server_path, destination)
        return destination

    async def _put(
        self,
        server_path: str,
        body: AsyncIterator[bytes],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        return await self._transport.request(
            routes.FILE_PATH,
            {"path": server_path},
            method="PUT",
            headers=headers,
            content=body,
        )

    async def _write_body(self, response: httpx.Response, destination: Path) -> None:
        try:
            async with await anyio.open_file(destination, "wb") as f:
                async for chunk in response.aiter_bytes(self._chunk_size):
                    await f.write(chunk)
        except (OSError, httpx.TransportError, httpx.StreamError) as exc:
            # Partial file stays on disk
            logger.error("Writing %s failed: %s", destination, exc)
            raise DownloadWriteFailedError(destination, exc) from exc

    async def _verify(self, server_path: str, destination: Path) -> None:
        info = await get_file_info(self._transport, server_path)
        expected = info.checksums.md5.lower()
        actual = (await anyio.to_thread.run_sync(self._checksum, destination)).lower()
        if actual != expected:
            logger.error(
                "MD5 mismatch for %s: expected %s, got %s",
                server_path, expected, actual,
            )
            raise IntegrityMismatchError(server_path, expected, actual)


def _resolve_destination(destination: str | Path) -> Path:
    resolved = Path(destination).resolve()
    if not resolved.parent.is_dir():
        raise DestinationDirMissingError(resolved.parent)
    return resolved


async def _read_file(path: Path, chunk_size: int) -> AsyncIterator[bytes]:
    async with await anyio.open_file(path, "rb") as f:
        while True:
            chunk = await f.read(chunk_size)
            if not chunk:
                break
            yield chunk
