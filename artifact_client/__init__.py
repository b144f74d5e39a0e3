"""Async client for an artifact repository's storage API.

Public API:
    create_client(settings) -> ArtifactRepositoryClient
    TransferEngine: upload_file, download_file, download_folder
    RelocationEngine: move_item, move_items
"""

from artifact_client.client import ArtifactRepositoryClient, create_client
from artifact_client.relocation import BatchMoveResult, RelocationEngine
from artifact_client.transfer import TransferEngine

__all__ = [
    "ArtifactRepositoryClient",
    "BatchMoveResult",
    "RelocationEngine",
    "TransferEngine",
    "create_client",
]
