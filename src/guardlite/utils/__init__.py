"""Shared helpers."""

from .env import get_bool_env
from .logging import get_logger, set_level, set_rich

__all__ = ["get_bool_env", "get_logger", "set_level", "set_rich"]
