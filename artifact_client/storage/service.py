"""Thin request/response wrappers over the storage endpoints.

Each function takes the TransportClient as its first argument and issues
exactly one request, except ensure_directory() which probes before it
creates.
"""

import logging
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from artifact_client.core.errors import ResponseDecodeError
from artifact_client.paths import as_directory, as_file
from artifact_client.storage.schemas import FileInfo, FolderInfo
from artifact_client.storage.types import (
    DirectoryCreationError,
    EnsureDirectoryOutcome,
    StorageRequestError,
)
from artifact_client.transport import TransportClient, routes

logger = logging.getLogger(__name__)

_Model = TypeVar("_Model", bound=BaseModel)


async def path_exists(transport: TransportClient, path: str) -> bool:
    """HEAD probe. Any non-success status counts as absent."""
    response = await transport.request(routes.FILE_PATH, {"path": path}, method="HEAD")
    return response.is_success


async def get_file_info(transport: TransportClient, path: str) -> FileInfo:
    """GET /api/storage/{path}. Never cached; every call hits the server."""
    return await _get_info(transport, path, FileInfo)


async def get_folder_info(transport: TransportClient, path: str) -> FolderInfo:
    return await _get_info(transport, as_directory(path), FolderInfo)


async def create_folder(transport: TransportClient, path: str) -> str:
    """PUT a directory-shaped path. The server creates missing parents."""
    folder = as_directory(path)
    response = await transport.request(routes.FILE_PATH, {"path": folder}, method="PUT")
    if not response.is_success:
        raise DirectoryCreationError(folder, response.status_code)
    return response.text


async def ensure_directory(
    transport: TransportClient,
    path: str,
) -> EnsureDirectoryOutcome:
    """Make sure a folder exists before something is moved into it.

    Returns CREATED or ALREADY_PRESENT. A 409 on creation means another
    writer created it between the probe and the PUT. Every other failure
    raises DirectoryCreationError.
    """
    folder = as_directory(path)
    if await path_exists(transport, folder):
        return EnsureDirectoryOutcome.ALREADY_PRESENT

    try:
        await create_folder(transport, folder)
    except DirectoryCreationError as exc:
        if exc.status == 409:
            return EnsureDirectoryOutcome.ALREADY_PRESENT
        logger.warning("Could not ensure folder %s: HTTP %d", folder, exc.status)
        raise

    logger.info("Created folder %s", folder)
    return EnsureDirectoryOutcome.CREATED


async def delete_file(transport: TransportClient, path: str) -> str:
    return await _delete(transport, as_file(path))


async def delete_folder(transport: TransportClient, path: str) -> str:
    return await _delete(transport, as_directory(path))


async def _delete(transport: TransportClient, path: str) -> str:
    response = await transport.request(routes.FILE_PATH, {"path": path}, method="DELETE")
    if not response.is_success:
        raise StorageRequestError(path, response.status_code)
    return response.text


async def _get_info(
    transport: TransportClient,
    path: str,
    model: type[_Model],
) -> _Model:
    response = await transport.request(routes.STORAGE_INFO, {"path": path})
    if not response.is_success:
        raise StorageRequestError(path, response.status_code)

    try:
        return model.model_validate(response.json())
    except ValidationError as exc:
        raise ResponseDecodeError(model.__name__, str(exc), cause=exc) from exc
    except ValueError as exc:
        # Body is not JSON at all
        raise ResponseDecodeError(model.__name__, "response body is not JSON", cause=exc) from exc
