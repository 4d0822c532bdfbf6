"""Core utilities package"""

from .config import settings, get_settings, Settings
from .logging import setup_logging, get_logger
from .errors import RealError, InvalidRealError

__all__ = [
    "settings",
    "get_settings",
    "Settings",
    "setup_logging",
    "get_logger",
    "RealError",
    "InvalidRealError",
]
