"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
service starts with no configuration at all and listens on
``localhost:3000``.
"""

import os
from dataclasses import dataclass
from typing import Optional


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Post Feed API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "localhost")
    port: int = int(os.getenv("PORT", "3000"))

    # Prefix under which the feed routes are mounted.  Empty by default
    # so the routes are exactly ``/feed``, ``/post`` and ``/post/{id}``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Whether the store is seeded with two sample posts at startup.
    seed_sample_posts: bool = _env_flag("SEED_SAMPLE_POSTS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
