"""Repository path normalisation.

Public API:
    as_directory(path) -> str
    as_file(path) -> str
    is_directory(path) -> bool
    base_name(path) -> str
    join(directory, name) -> str
"""

from artifact_client.paths.semantics import (
    SEPARATOR,
    as_directory,
    as_file,
    base_name,
    is_directory,
    join,
)

__all__ = ["SEPARATOR", "as_directory", "as_file", "base_name", "is_directory", "join"]
