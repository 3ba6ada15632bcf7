"""
imageoptim
Client library for the ImageOptim image optimization API
"""

from .services.optimization import (
    ImageOptimClient, OptimizationResult, new_client,
    Option, QualityPreset, FULL, FIT, SCALE_DOWN, QUALITY_LOW,
    dimensions, width_x_height, quality, image_format, timeout, join_options
)
from .models.source import RemoteSource, LocalSource, classify_source
from .utils.error_handlers import ImageOptimError, RemoteServiceError, ConfigurationError

__version__ = "0.1.0"

__all__ = [
    "ImageOptimClient",
    "OptimizationResult",
    "new_client",
    "Option",
    "QualityPreset",
    "FULL",
    "FIT",
    "SCALE_DOWN",
    "QUALITY_LOW",
    "dimensions",
    "width_x_height",
    "quality",
    "image_format",
    "timeout",
    "join_options",
    "RemoteSource",
    "LocalSource",
    "classify_source",
    "ImageOptimError",
    "RemoteServiceError",
    "ConfigurationError",
]
