"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts without any configuration; override them via the
environment in a real deployment.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Brainstormer API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  When empty only the console
    # handler is installed.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Upper bounds enforced by the request validator.  Names are short
    # labels shown in lists, descriptions may hold a paragraph.
    session_name_max_length: int = int(os.getenv("SESSION_NAME_MAX_LENGTH", "100"))
    idea_name_max_length: int = int(os.getenv("IDEA_NAME_MAX_LENGTH", "100"))
    idea_description_max_length: int = int(os.getenv("IDEA_DESCRIPTION_MAX_LENGTH", "1000"))

    # Preload the in-memory store with a demo session on start-up.
    seed_demo_data: bool = _env_flag("SEED_DEMO_DATA")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must therefore be set before this module is imported.
settings = Settings()
