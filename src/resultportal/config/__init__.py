"""
Configuration management with typed Pydantic models.

Provides the college-to-sheet mapping and marking rules, loaded from YAML
with environment variable interpolation.
"""

from resultportal.config.loader import load_config
from resultportal.config.settings import (
    CollegeConfig,
    FetchConfig,
    LoggingConfig,
    MarksConfig,
    PortalConfig,
)

__all__ = [
    "CollegeConfig",
    "FetchConfig",
    "LoggingConfig",
    "MarksConfig",
    "PortalConfig",
    "load_config",
]
