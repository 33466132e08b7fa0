"""
Process-wide configuration.

Everything is hard-coded here and read once at startup; nothing comes from
the environment or the command line.
"""

from functools import lru_cache
from pathlib import Path
from typing import Tuple

from pydantic import BaseModel, ConfigDict


class Tag(BaseModel):
    """A documentation tag grouping related endpoints."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str


DEFAULT_TAGS = (
    Tag(name="tools", description="List of tool endpoints"),
    Tag(name="pages", description="Static HTML pages"),
)


class Settings(BaseModel):
    model_config = ConfigDict(frozen=True)

    # Server
    host: str = "127.0.0.1"
    port: int = 9999

    # Rate limiting (fixed window, per client address)
    rate_limit_max: int = 30
    rate_limit_window: str = "5 minute"

    # Static pages
    home_path: Path = Path("html/home.html")
    creator_path: Path = Path("html/creator.html")

    # API documentation
    title: str = "SxyzJsnx - API"
    description: str = "Base REST API using FastAPI/Swagger."
    version: str = "1.0.0"
    tags: Tuple[Tag, ...] = DEFAULT_TAGS
    docs_url: str = "/docs"
    openapi_url: str = "/openapi.json"
    doc_expansion: str = "list"

    @property
    def rate_limit(self) -> str:
        """Rate limit in `limits` notation, e.g. "30/5 minute"."""
        return f"{self.rate_limit_max}/{self.rate_limit_window}"

    @property
    def openapi_tags(self):
        return [tag.model_dump() for tag in self.tags]


@lru_cache
def get_settings() -> Settings:
    return Settings()
