"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields and match
the behaviour of the original phonebook service (port 3001, six digit
random ids, four seed entries).
"""

import os
from dataclasses import dataclass


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Phonebook API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file; empty disables file logging.
    log_file: str = os.getenv("LOG_FILE", "")

    # Serve /docs, /redoc and /openapi.json.  Off by default so that only the
    # phonebook routes answer.
    enable_docs: bool = _env_bool("ENABLE_DOCS", "false")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    # Inclusive range new person ids are drawn from.
    id_min: int = int(os.getenv("ID_MIN", "100000"))
    id_max: int = int(os.getenv("ID_MAX", "999999"))
    # How many random draws to make before giving up on finding a free id.
    id_max_attempts: int = int(os.getenv("ID_MAX_ATTEMPTS", "100"))

    # Whether a fresh directory starts with the demo entries.
    seed_directory: bool = _env_bool("SEED_DIRECTORY", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
