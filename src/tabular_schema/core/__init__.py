"""Core module - configuration, logging, and shared models."""

from tabular_schema.core.config import Settings, get_settings
from tabular_schema.core.models.base import Result

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Models - base data structures
    "Result",
]
