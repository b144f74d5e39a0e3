"""Local checksum provider used for post-download integrity checks."""

import hashlib
from pathlib import Path
from typing import Callable

ChecksumProvider = Callable[[Path], str]

DEFAULT_CHUNK_SIZE = 64 * 1024


def md5_file(path: Path, chunk_size: int = DEFAULT_CHUNK_SIZE) -> str:
    """Hex MD5 of a local file, read in chunks."""
    digest = hashlib.md5()
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(chunk_size), b""):
            digest.update(chunk)
    return digest.hexdigest()
