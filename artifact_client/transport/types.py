"""Types for the transport layer."""

from dataclasses import dataclass
from typing import Optional

import httpx


@dataclass(frozen=True)
class AuthConfig:
    """Credentials captured once by TransportClient at construction.

    Either username/password (encoded by httpx.BasicAuth) or a
    pre-encoded basic_token (base64 of "user:password", no "Basic " prefix).
    Frozen: rotating credentials means building a new TransportClient.
    """

    username: str = ""
    password: str = ""
    basic_token: str = ""

    def __post_init__(self) -> None:
        if not self.username and not self.basic_token:
            raise ValueError("AuthConfig needs a username or a basic_token")

    def httpx_auth(self) -> Optional[httpx.Auth]:
        if self.username:
            return httpx.BasicAuth(self.username, self.password)
        return None

    def headers(self) -> dict[str, str]:
        if self.username:
            return {}
        return {"Authorization": f"Basic {self.basic_token}"}

    def __repr__(self) -> str:
        return f"AuthConfig(username={self.username!r}, password='***', basic_token='***')"
