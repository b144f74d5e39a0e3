"""Types for the transfer module."""

import re
from dataclasses import dataclass
from pathlib import Path

from artifact_client.core.errors import ArtifactClientError, RequestRejectedError

_REMOTE_SOURCE = re.compile(r"^https?://", re.IGNORECASE)


@dataclass
class TransferSpec:
    """One upload: where it goes, where the bytes come from.

    source is either a local file path or an http(s) URL.
    """

    server_path: str
    source: str
    force_overwrite: bool = False

    @property
    def is_remote(self) -> bool:
        return bool(_REMOTE_SOURCE.match(self.source))

    def local_source(self) -> Path:
        return Path(self.source).resolve()


class SourceNotFoundError(ArtifactClientError):
    def __init__(self, source: Path):
        self.source = source
        super().__init__(f"The file to upload {source} does not exist")


class DestinationExistsError(ArtifactClientError):
    def __init__(self, server_path: str):
        self.server_path = server_path
        super().__init__(
            f"'{server_path}' already exists and force_overwrite was not set"
        )


class DestinationDirMissingError(ArtifactClientError):
    def __init__(self, directory: Path):
        self.directory = directory
        super().__init__(f"The destination folder {directory} does not exist")


class UploadRejectedError(RequestRejectedError):
    def __init__(self, server_path: str, status: int):
        self.server_path = server_path
        super().__init__(f"Upload to '{server_path}' rejected", status)


class DownloadRejectedError(RequestRejectedError):
    def __init__(self, server_path: str, status: int):
        self.server_path = server_path
        super().__init__(f"Could not download '{server_path}'", status)


class DownloadWriteFailedError(ArtifactClientError):
    """Streaming the body to disk failed. The partial file is left in place."""

    def __init__(self, destination: Path, cause: Exception):
        self.destination = destination
        self.cause = cause
        super().__init__(f"Writing {destination} failed: {cause}")


class IntegrityMismatchError(ArtifactClientError):
    """Local MD5 differs from the server's. The downloaded file is kept."""

    def __init__(self, server_path: str, expected: str, actual: str):
        self.server_path = server_path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Checksum (MD5) validation failed for '{server_path}'. "
            f"Expected: {expected} - Actual downloaded: {actual}"
        )
