"""Path semantics for repository locations.

A trailing separator marks a directory; its absence marks a file. The
server treats the two shapes differently (PUT on "dir/" creates a folder,
PUT on "dir" deploys a file), so directory operations normalise with
`as_directory()` and file operations never carry a trailing separator.

All functions are pure and total. The empty path is returned unchanged.
"""

SEPARATOR = "/"


def is_directory(path: str) -> bool:
    return path.endswith(SEPARATOR)


def as_directory(path: str) -> str:
    """Return *path* with exactly one trailing separator. Idempotent."""
    if not path:
        return path
    return path.rstrip(SEPARATOR) + SEPARATOR


def as_file(path: str) -> str:
    """Return *path* without trailing separators."""
    return path.rstrip(SEPARATOR)


def base_name(path: str) -> str:
    """Return the final segment of *path*, ignoring a trailing separator.

    >>> base_name("libs-release/org/app-1.0.jar")
    'app-1.0.jar'
    >>> base_name("libs-release/org/")
    'org'
    """
    stripped = path.rstrip(SEPARATOR)
    return stripped[stripped.rfind(SEPARATOR) + 1:]


def join(directory: str, name: str) -> str:
    return as_directory(directory) + name.lstrip(SEPARATOR)
