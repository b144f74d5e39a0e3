"""Types for the storage module."""

from enum import StrEnum

from artifact_client.core.errors import RequestRejectedError


class EnsureDirectoryOutcome(StrEnum):
    """Benign outcomes of ensure_directory().

    Any other outcome is raised as DirectoryCreationError.
    """

    CREATED = "created"
    ALREADY_PRESENT = "already_present"


class StorageRequestError(RequestRejectedError):
    """An info or delete request was rejected by the server."""

    def __init__(self, path: str, status: int):
        self.path = path
        super().__init__(f"Storage request for '{path}' failed", status)


class DirectoryCreationError(RequestRejectedError):
    """A folder could not be created for a reason other than already existing."""

    def __init__(self, path: str, status: int):
        self.path = path
        super().__init__(f"Could not create folder '{path}'", status)
