"""Client facade over the transfer, relocation and storage layers.

`create_client()` is the entry point: it reads Settings, optionally configures
logging and returns an ArtifactRepositoryClient owning a single
TransportClient. Credentials are fixed for the client's lifetime.

    async with create_client() as client:
        await client.upload_file("libs-release/app/app-1.0.jar", "build/app.jar")
        await client.move_items("libs-staging/app/", lambda n: n.endswith(".jar"),
                                "libs-release/app/")
"""

from pathlib import Path
from typing import Optional

import httpx

from artifact_client import storage
from artifact_client.core.config import Settings, get_settings
from artifact_client.core.logging import configure_structlog
from artifact_client.relocation import (
    DEFAULT_MOVE_CONCURRENCY,
    BatchMoveResult,
    NamePredicate,
    RelocationEngine,
)
from artifact_client.storage import EnsureDirectoryOutcome, FileInfo, FolderInfo
from artifact_client.transfer import ChecksumProvider, TransferEngine, md5_file
from artifact_client.transfer.checksum import DEFAULT_CHUNK_SIZE
from artifact_client.transport import TransportClient


class ArtifactRepositoryClient:
    """Every client operation behind one object sharing one transport."""

    def __init__(
        self,
        transport: TransportClient,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        move_concurrency: int = DEFAULT_MOVE_CONCURRENCY,
        checksum: ChecksumProvider = md5_file,
    ):
        self.transport = transport
        self.transfers = TransferEngine(transport, checksum=checksum, chunk_size=chunk_size)
        self.relocations = RelocationEngine(transport, max_concurrency=move_concurrency)

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        http_transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> "ArtifactRepositoryClient":
        transport = TransportClient(
            settings.url,
            settings.auth_config(),
            timeout=settings.timeout,
            verify_ssl=settings.verify_ssl,
            transport=http_transport,
        )
        return cls(
            transport,
            chunk_size=settings.chunk_size,
            move_concurrency=settings.move_concurrency,
        )

    # Transfers

    async def upload_file(self, server_path: str, source: str | Path, force_overwrite: bool = False) -> dict:
        return await self.transfers.upload_file(server_path, source, force_overwrite)

    async def download_file(self, server_path: str, destination: str | Path, verify_integrity: bool = False) -> Path:
        return await self.transfers.download_file(server_path, destination, verify_integrity)

    async def download_folder(self, server_path: str, destination: str | Path, archive_type: str = "zip") -> Path:
        return await self.transfers.download_folder(server_path, destination, archive_type)

    # Relocation

    async def move_item(self, source: str, destination: str, dry_run: bool = False) -> str:
        return await self.relocations.move_item(source, destination, dry_run)

    async def move_items(
        self,
        source_dir: str,
        filter_predicate: Optional[NamePredicate],
        destination_dir: str,
        dry_run: bool = False,
        **kwargs,
    ) -> BatchMoveResult:
        return await self.relocations.move_items(
            source_dir, filter_predicate, destination_dir, dry_run, **kwargs
        )

    # Storage

    async def path_exists(self, path: str) -> bool:
        return await storage.path_exists(self.transport, path)

    async def get_file_info(self, path: str) -> FileInfo:
        return await storage.get_file_info(self.transport, path)

    async def get_folder_info(self, path: str) -> FolderInfo:
        return await storage.get_folder_info(self.transport, path)

    async def create_folder(self, path: str) -> str:
        return await storage.create_folder(self.transport, path)

    async def ensure_directory(self, path: str) -> EnsureDirectoryOutcome:
        return await storage.ensure_directory(self.transport, path)

    async def delete_file(self, path: str) -> str:
        return await storage.delete_file(self.transport, path)

    async def delete_folder(self, path: str) -> str:
        return await storage.delete_folder(self.transport, path)

    async def aclose(self) -> None:
        await self.transport.aclose()

    async def __aenter__(self) -> "ArtifactRepositoryClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()


def create_client(
    settings: Optional[Settings] = None,
    *,
    http_transport: Optional[httpx.AsyncBaseTransport] = None,
    configure_logging: bool = False,
) -> ArtifactRepositoryClient:
    """Build a client from settings (environment by default).

    Logging handlers are left alone unless configure_logging is set, in
    which case structlog renders the package logs (see Settings.debug).
    """
    settings = settings or get_settings()
    if configure_logging:
        configure_structlog(debug=settings.debug)

    return ArtifactRepositoryClient.from_settings(settings, http_transport=http_transport)
