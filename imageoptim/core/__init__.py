"""
Core module for the imageoptim client
"""

from .config import settings, Settings, configure_logging

__all__ = ["settings", "Settings", "configure_logging"]
