"""Pydantic schemas for storage info responses.

Responses are validated on receipt. A missing required field becomes a
ResponseDecodeError at the call site instead of a KeyError wherever the
record is first used.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from artifact_client.paths import base_name


class Checksums(BaseModel):
    md5: str
    sha1: Optional[str] = None
    sha256: Optional[str] = None


class FileInfo(BaseModel):
    """File info record. `checksums.md5` is required for integrity checks."""

    model_config = ConfigDict(populate_by_name=True)

    repo: Optional[str] = None
    path: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = Field(default=None, alias="lastModified")
    size: Optional[int] = None  # sent as a string; pydantic coerces
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    download_uri: Optional[str] = Field(default=None, alias="downloadUri")
    checksums: Checksums


class FolderChild(BaseModel):
    uri: str  # "/name", relative to the listed folder
    folder: bool

    @property
    def name(self) -> str:
        return base_name(self.uri)


class FolderInfo(BaseModel):
    """Folder info record. `children` lists immediate children only."""

    model_config = ConfigDict(populate_by_name=True)

    repo: Optional[str] = None
    path: Optional[str] = None
    created: Optional[str] = None
    last_modified: Optional[str] = Field(default=None, alias="lastModified")
    children: list[FolderChild]
