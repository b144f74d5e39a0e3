"""HTTP transport for the repository API.

Public API:
    TransportClient(base_url, auth, ...) -> async context manager
    AuthConfig(username, password) | AuthConfig(basic_token=...)
    routes: FILE_PATH, STORAGE_INFO, ARCHIVE_DOWNLOAD, MOVE
"""

from artifact_client.transport import routes
from artifact_client.transport.client import TransportClient
from artifact_client.transport.types import AuthConfig

__all__ = ["AuthConfig", "TransportClient", "routes"]
