"""Storage collaborators: existence probe, info records, folders, deletion.

Public API:
    path_exists(transport, path) -> bool
    get_file_info(transport, path) -> FileInfo
    get_folder_info(transport, path) -> FolderInfo
    create_folder(transport, path) -> str
    ensure_directory(transport, path) -> EnsureDirectoryOutcome
    delete_file(transport, path) -> str
    delete_folder(transport, path) -> str
"""

from artifact_client.storage.schemas import Checksums, FileInfo, FolderChild, FolderInfo
from artifact_client.storage.service import (
    create_folder,
    delete_file,
    delete_folder,
    ensure_directory,
    get_file_info,
    get_folder_info,
    path_exists,
)
from artifact_client.storage.types import (
    DirectoryCreationError,
    EnsureDirectoryOutcome,
    StorageRequestError,
)

__all__ = [
    "Checksums",
    "DirectoryCreationError",
    "EnsureDirectoryOutcome",
    "FileInfo",
    "FolderChild",
    "FolderInfo",
    "StorageRequestError",
    "create_folder",
    "delete_file",
    "delete_folder",
    "ensure_directory",
    "get_file_info",
    "get_folder_info",
    "path_exists",
]
