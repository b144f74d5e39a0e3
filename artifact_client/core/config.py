from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from artifact_client.transport.types import AuthConfig


class Settings(BaseSettings):
    """Client settings loaded from environment variables.

    Every variable carries the ``ARTIFACTORY_`` prefix, e.g.
    ``ARTIFACTORY_URL=http://localhost:8081/artifactory``.

    Credentials
    ───────────
    • ARTIFACTORY_USERNAME + ARTIFACTORY_PASSWORD  (plain or encrypted password)
    • ARTIFACTORY_BASIC_TOKEN                      (pre-encoded user:password,
                                                    without the "Basic " prefix)

    When both are set, username/password wins.
    """

    model_config = SettingsConfigDict(
        env_prefix="ARTIFACTORY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Base URL including the context path the instance is served under.
    url: str = "http://localhost:8081/artifactory"

    @field_validator("url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    username: str = ""
    password: str = ""
    basic_token: str = ""

    # Transport
    timeout: float = 30.0
    verify_ssl: bool = True

    # Transfers are streamed in chunks of this many bytes.
    chunk_size: int = 64 * 1024

    # Upper bound on in-flight moves during a batch move. 0 disables the bound.
    move_concurrency: int = 8

    debug: bool = False

    def auth_config(self) -> Optional[AuthConfig]:
        if self.username:
            return AuthConfig(username=self.username, password=self.password)
        if self.basic_token:
            return AuthConfig(basic_token=self.basic_token)
        return None


def get_settings() -> Settings:
    return Settings()
