"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Every field except ``database_url`` has a
default; the storage connection string must be provided by the
deployment and its absence is reported by ``require_database_url``
when the service boots.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from .errors import StartupError


def _env(name: str, default: Optional[str] = None):
    return field(default_factory=lambda: os.getenv(name, default))


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = _env("PROJECT_NAME", "Jokebook API")
    api_version: str = _env("API_VERSION", "1.0.0")
    log_level: str = _env("LOG_LEVEL", "INFO")
    log_file: Optional[str] = _env("LOG_FILE")

    host: str = _env("HOST", "0.0.0.0")
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "3000")))

    # Path of the SQLite file holding the person documents.  A
    # ``sqlite:///`` prefix is accepted so URLs copied from other tools
    # keep working; ``:memory:`` is allowed for throwaway runs.
    database_url: Optional[str] = _env("DATABASE_URL")

    # Upstream joke provider.  The category and amount are fixed per
    # deployment, the client cannot choose them.
    joke_api_url: str = _env("JOKE_API_URL", "https://v2.jokeapi.dev")
    joke_category: str = _env("JOKE_CATEGORY", "Any")
    joke_count: int = field(default_factory=lambda: int(os.getenv("JOKE_COUNT", "10")))
    joke_api_timeout: float = field(default_factory=lambda: float(os.getenv("JOKE_API_TIMEOUT", "15")))

    # Comma‑separated list of origins allowed to call the API from a
    # browser.  ``*`` allows any origin.
    cors_origins: str = _env("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def require_database_url(self) -> str:
        """Return the storage connection string or raise ``StartupError``."""
        if not self.database_url or not self.database_url.strip():
            raise StartupError("Missing DATABASE_URL environment variable")
        return self.database_url.strip()


def get_settings() -> Settings:
    """Build a fresh ``Settings`` from the current environment."""
    return Settings()
