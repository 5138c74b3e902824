"""Configuration module: ENV-driven settings with fixed provider endpoints."""

from jobfetch.config.settings import (
    Settings,
    get_settings,
    load_settings,
    parse_role_queries,
)

__all__ = ["Settings", "get_settings", "load_settings", "parse_role_queries"]
