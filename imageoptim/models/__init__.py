"""
Models for the imageoptim client
"""

from .source import RemoteSource, LocalSource, ImageSource, classify_source

__all__ = ["RemoteSource", "LocalSource", "ImageSource", "classify_source"]
