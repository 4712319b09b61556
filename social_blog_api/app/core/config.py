"""
Runtime settings for the Social Blog API.

Every knob (server address, log output, SQLite file and lock timeout)
comes from an environment variable with a local-development default,
so a bare ``python run.py`` serves against ``social_blog.db``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Server, logging and SQLite options for one API process."""

    project_name: str = os.getenv("PROJECT_NAME", "Social Blog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path to the SQLite database file.  Relative paths are resolved
    # against the project root by ``core.db``.
    database_url: str = os.getenv("DATABASE_URL", "social_blog.db")

    # Seconds a connection waits on a locked database before failing.
    database_timeout: float = float(os.getenv("DATABASE_TIMEOUT", "5.0"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Defaults above are read at import; export variables before importing.
settings = Settings()
