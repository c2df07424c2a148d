"""Client configuration.

Endpoint constants live at module level; per-client settings are carried
by the frozen ClientConfig dataclass.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

BASE_URL = "https://api.searchbase.dev"
SEARCH_PATH = "/search"
TOKEN_HEADER = "x-searchbase-token"

DEFAULT_PAGE_SIZE = 100
DEFAULT_TIMEOUT = 30.0

# Environment variables read by ClientConfig.from_env()
ENV_API_TOKEN = "SEARCHBASE_API_TOKEN"
ENV_BASE_URL = "SEARCHBASE_BASE_URL"
ENV_TIMEOUT = "SEARCHBASE_TIMEOUT"
ENV_PAGE_SIZE = "SEARCHBASE_PAGE_SIZE"


@dataclass(frozen=True)
class ClientConfig:
    """Settings for a SearchbaseClient.

    Attributes:
        api_token: Opaque token sent in the x-searchbase-token header
        base_url: Service root, without trailing slash
        timeout: Total per-request timeout in seconds
        page_size: Records requested per page by search_all()
    """

    api_token: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    page_size: int = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if not self.api_token:
            raise ValueError("api_token is required")
        if self.page_size <= 0:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))

    @property
    def search_url(self) -> str:
        return f"{self.base_url}{SEARCH_PATH}"

    @classmethod
    def from_env(cls, **overrides) -> ClientConfig:
        """Build a config from SEARCHBASE_* environment variables.

        Keyword overrides take precedence over the environment.

        Raises:
            ValueError: If no token is available or a numeric variable is malformed
        """
        values: dict = {"api_token": os.environ.get(ENV_API_TOKEN, "")}
        if ENV_BASE_URL in os.environ:
            values["base_url"] = os.environ[ENV_BASE_URL]
        if ENV_TIMEOUT in os.environ:
            values["timeout"] = float(os.environ[ENV_TIMEOUT])
        if ENV_PAGE_SIZE in os.environ:
            values["page_size"] = int(os.environ[ENV_PAGE_SIZE])
        values.update(overrides)
        return cls(**values)
