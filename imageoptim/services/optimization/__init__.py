"""
Image optimization through the ImageOptim web API.
"""

from .imageoptim_client import ImageOptimClient, OptimizationResult, new_client
from .options import (
    Option, QualityPreset, FULL, FIT, SCALE_DOWN, QUALITY_LOW,
    dimensions, width_x_height, quality, image_format, timeout, join_options
)

__all__ = [
    'ImageOptimClient',
    'OptimizationResult',
    'new_client',
    'Option',
    'QualityPreset',
    'FULL',
    'FIT',
    'SCALE_DOWN',
    'QUALITY_LOW',
    'dimensions',
    'width_x_height',
    'quality',
    'image_format',
    'timeout',
    'join_options'
]
