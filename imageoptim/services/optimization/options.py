"""
Optimization directives understood by the ImageOptim API.
See https://imageoptim.com/api/post for the option grammar.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Union


class QualityPreset(Enum):
    """Named quality levels accepted by the service."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    LOSSLESS = "lossless"


@dataclass(frozen=True)
class Option:
    """A single encoded optimization directive."""
    value: str
    
    def __str__(self) -> str:
        return self.value


# Fixed directives
FULL = Option("full")
FIT = Option("fit")
SCALE_DOWN = Option("scale-down")
QUALITY_LOW = Option("quality=low")


def dimensions(width, height) -> Option:
    """Resize directive, encoded as ``<width>x<height>``."""
    return Option(f"{width}x{height}")


width_x_height = dimensions


def quality(preset: Union[QualityPreset, str]) -> Option:
    if isinstance(preset, QualityPreset):
        preset = preset.value
    return Option(f"quality={preset}")


def image_format(name: str) -> Option:
    """Output format override, e.g. ``png`` or ``webp``."""
    return Option(f"format={name}")


def timeout(seconds) -> Option:
    """Server-side processing time limit."""
    return Option(f"timeout={seconds}")


def join_options(options: Iterable[Option]) -> str:
    """
    Encode options as the comma-separated path segment.
    
    Order is kept as given and duplicates are not removed; an empty
    sequence yields an empty segment.
    """
    return ",".join(option.value for option in options)
