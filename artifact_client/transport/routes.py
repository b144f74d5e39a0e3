"""Route templates for the repository REST API.

Templates are relative to the instance base URL and are filled with
`str.format(**params)`. Path values are percent-encoded segment by segment
("/" is kept as the separator) so "#", "?" and spaces stay part of the
artifact path. Query strings are passed separately so httpx handles the
encoding.
"""

from urllib.parse import quote

# Deploy (PUT), download (GET), existence probe (HEAD), delete (DELETE).
# A trailing "/" on {path} addresses a folder.
FILE_PATH = "/{path}"

# File and folder info: checksums, size, children.
STORAGE_INFO = "/api/storage/{path}"

# Server-side archive of a folder. Query: archiveType.
ARCHIVE_DOWNLOAD = "/api/archive/download/{path}"

# Move or rename. Query: to=/{dst_path}, dry=0|1.
MOVE = "/api/move/{src_path}"


def render(route: str, params: dict | None = None) -> str:
    """Fill a route template. Leading separators in values are dropped."""
    cleaned = {k: quote(str(v).lstrip("/"), safe="/") for k, v in (params or {}).items()}
    return route.format(**cleaned)
