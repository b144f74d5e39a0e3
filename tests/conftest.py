"""Shared fixtures for the artifact client test suite.

Network access is replaced by an in-memory FakeRepository served through
httpx.MockTransport. It implements just enough of the repository API
(deploy, download, HEAD, storage info, archive, move, delete) to observe
what the engines actually do on the wire.
"""

import asyncio
import hashlib
import json
from collections.abc import AsyncGenerator
from typing import Optional

import httpx
import pytest

from artifact_client.transport import AuthConfig, TransportClient

BASE_URL = "http://repo.test/artifactory"
REMOTE_HOST = "remote.test"


class BrokenStream(httpx.AsyncByteStream):
    """Response body that dies after the first chunk."""

    async def __aiter__(self):
        yield b"partial-"
        raise httpx.ReadError("connection reset by peer")


class FakeRepository:
    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.folders: set[str] = set()
        self.remote_files: dict[str, bytes] = {}
        self.requests: list[httpx.Request] = []

        # Failure injection
        self.md5_overrides: dict[str, str] = {}
        self.failing_moves: set[str] = set()
        self.broken_downloads: set[str] = set()
        self.status_overrides: dict[tuple[str, str], int] = {}
        self.redirects: dict[str, str] = {}

        # Concurrency tracking for moves
        self.move_delay: float = 0.0
        self.moves_in_flight = 0
        self.max_moves_in_flight = 0

    # -- seeding -----------------------------------------------------------

    def add_file(self, path: str, content: bytes) -> None:
        self.files[path] = content
        self._add_parents(path)

    def add_folder(self, path: str) -> None:
        folder = path.rstrip("/") + "/"
        self.folders.add(folder)
        self._add_parents(folder.rstrip("/"))

    def _add_parents(self, path: str) -> None:
        parts = path.split("/")[:-1]
        for i in range(1, len(parts) + 1):
            self.folders.add("/".join(parts[:i]) + "/")

    # -- inspection --------------------------------------------------------

    def calls(self, method: str, prefix: str = "") -> list[httpx.Request]:
        return [
            r for r in self.requests
            if r.method == method and self._relative(r).startswith(prefix)
        ]

    @staticmethod
    def _relative(request: httpx.Request) -> str:
        return request.url.path.removeprefix("/artifactory/")

    # -- handler -----------------------------------------------------------

    async def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if request.url.host == REMOTE_HOST:
            content = self.remote_files.get(request.url.path)
            if content is None:
                return httpx.Response(404)
            return httpx.Response(200, content=content)

        path = self._relative(request)
        override = self.status_overrides.get((request.method, path))
        if override is not None:
            return httpx.Response(override)

        if path.startswith("api/storage/"):
            return self._storage_info(path.removeprefix("api/storage/"))
        if path.startswith("api/archive/download/"):
            return self._archive(path.removeprefix("api/archive/download/"), request)
        if path.startswith("api/move/"):
            return await self._move(path.removeprefix("api/move/"), request)
        return self._file_path(path, request)

    def _file_path(self, path: str, request: httpx.Request) -> httpx.Response:
        if request.method == "HEAD":
            found = path in self.files or path in self.folders
            return httpx.Response(200 if found else 404)

        if request.method == "PUT":
            if path.endswith("/"):
                self.add_folder(path)
                return httpx.Response(201, text=f"Created {path}")
            self.add_file(path, request.content)
            return httpx.Response(
                201,
                json={
                    "repo": path.split("/")[0],
                    "path": "/" + path.split("/", 1)[-1],
                    "downloadUri": f"{BASE_URL}/{path}",
                    "size": str(len(request.content)),
                    "checksums": {"md5": hashlib.md5(request.content).hexdigest()},
                },
            )

        if request.method == "GET":
            if path in self.redirects:
                return httpx.Response(302, headers={"Location": self.redirects[path]})
            if path in self.broken_downloads:
                return httpx.Response(200, stream=BrokenStream())
            if path not in self.files:
                return httpx.Response(404)
            return httpx.Response(200, content=self.files[path])

        if request.method == "DELETE":
            if path in self.files:
                del self.files[path]
            elif path in self.folders:
                self.folders = {f for f in self.folders if not f.startswith(path)}
                self.files = {k: v for k, v in self.files.items() if not k.startswith(path)}
            else:
                return httpx.Response(404)
            return httpx.Response(204)

        return httpx.Response(405)

    def _storage_info(self, path: str) -> httpx.Response:
        if path.endswith("/"):
            if path not in self.folders:
                return httpx.Response(404)
            return httpx.Response(200, json={
                "repo": path.split("/")[0],
                "path": "/" + path,
                "children": self._children(path),
            })

        if path not in self.files:
            return httpx.Response(404)
        content = self.files[path]
        return httpx.Response(200, json={
            "repo": path.split("/")[0],
            "path": "/" + path,
            "size": str(len(content)),
            "lastModified": "2026-01-01T00:00:00.000Z",
            "checksums": {
                "md5": self.md5_overrides.get(path, hashlib.md5(content).hexdigest()),
                "sha1": hashlib.sha1(content).hexdigest(),
            },
        })

    def _children(self, folder: str) -> list[dict]:
        children = []
        for name in sorted(self.files):
            rest = name.removeprefix(folder)
            if name.startswith(folder) and "/" not in rest:
                children.append({"uri": "/" + rest, "folder": False})
        for sub in sorted(self.folders):
            rest = sub.removeprefix(folder).rstrip("/")
            if sub.startswith(folder) and rest and "/" not in rest:
                children.append({"uri": "/" + rest, "folder": True})
        return children

    def _archive(self, path: str, request: httpx.Request) -> httpx.Response:
        folder = path.rstrip("/") + "/"
        if folder not in self.folders:
            return httpx.Response(404)
        manifest = {
            "archiveType": request.url.params.get("archiveType"),
            "entries": sorted(k for k in self.files if k.startswith(folder)),
        }
        return httpx.Response(200, content=b"PK" + json.dumps(manifest).encode())

    async def _move(self, src: str, request: httpx.Request) -> httpx.Response:
        self.moves_in_flight += 1
        self.max_moves_in_flight = max(self.max_moves_in_flight, self.moves_in_flight)
        try:
            if self.move_delay:
                await asyncio.sleep(self.move_delay)

            if src in self.failing_moves:
                return httpx.Response(500, text="move failed")
            if src not in self.files:
                return httpx.Response(404, text="source not found")

            dst = request.url.params["to"].lstrip("/")
            # A folder target that exists receives the item; anything else
            # is taken as the new literal path.
            if dst.rstrip("/") + "/" in self.folders:
                target = dst.rstrip("/") + "/" + src.rsplit("/", 1)[-1]
            else:
                target = dst.rstrip("/")

            if request.url.params.get("dry") != "1":
                self.add_file(target, self.files.pop(src))
            return httpx.Response(200, text=f"Moved {src} to {target}")
        finally:
            self.moves_in_flight -= 1


@pytest.fixture
def fake_repo() -> FakeRepository:
    return FakeRepository()


@pytest.fixture
def mock_transport(fake_repo: FakeRepository) -> httpx.MockTransport:
    return httpx.MockTransport(fake_repo.handle)


@pytest.fixture
async def transport(
    mock_transport: httpx.MockTransport,
) -> AsyncGenerator[TransportClient, None]:
    client = TransportClient(
        BASE_URL,
        AuthConfig(username="deployer", password="s3cret"),
        transport=mock_transport,
    )
    yield client
    await client.aclose()


def remote_url(path: str, host: Optional[str] = None) -> str:
    return f"https://{host or REMOTE_HOST}{path}"
