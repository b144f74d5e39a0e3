"""Base exceptions shared by every component of the client."""

from typing import Optional


class ArtifactClientError(Exception):
    """Root of every error raised by this package.

    None of them are retried internally; retry policy belongs to the caller.
    """


class RequestRejectedError(ArtifactClientError):
    """The server answered with a non-success HTTP status."""

    def __init__(self, message: str, status: int):
        self.status = status
        super().__init__(f"{message}: HTTP {status}")


class ResponseDecodeError(ArtifactClientError):
    """A server response was missing fields the client requires."""

    def __init__(self, model: str, detail: str, cause: Optional[Exception] = None):
        self.model = model
        self.cause = cause
        super().__init__(f"Could not decode {model}: {detail}")
