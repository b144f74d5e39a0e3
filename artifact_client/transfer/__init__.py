"""Transfer module: streaming upload and download with integrity checks.

Public API:
    TransferEngine(transport).upload_file(server_path, source, force_overwrite) -> dict
    TransferEngine(transport).download_file(server_path, destination, verify_integrity) -> Path
    TransferEngine(transport).download_folder(server_path, destination, archive_type) -> Path
    md5_file(path) -> str
"""

from artifact_client.transfer.checksum import ChecksumProvider, md5_file
from artifact_client.transfer.engine import TransferEngine
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

__all__ = [
    "ChecksumProvider",
    "DestinationDirMissingError",
    "DestinationExistsError",
    "DownloadRejectedError",
    "DownloadWriteFailedError",
    "IntegrityMismatchError",
    "SourceNotFoundError",
    "TransferEngine",
    "TransferSpec",
    "UploadRejectedError",
    "md5_file",
]
