"""
Image source models
"""

import os
from typing import Union

from pydantic import BaseModel, ConfigDict


REMOTE_PREFIXES = ("http://", "https://")


class RemoteSource(BaseModel):
    """Image fetched by the service itself from a URL"""
    model_config = ConfigDict(frozen=True)
    
    url: str


class LocalSource(BaseModel):
    """Image uploaded from the local filesystem"""
    model_config = ConfigDict(frozen=True)
    
    path: str


ImageSource = Union[RemoteSource, LocalSource]


def classify_source(source: Union[ImageSource, str, os.PathLike]) -> ImageSource:
    """
    Turn a caller-supplied source into a tagged source.
    
    Strings starting with ``http://`` or ``https://`` are remote; any other
    string or path-like object is a local file.
    """
    if isinstance(source, (RemoteSource, LocalSource)):
        return source
    if isinstance(source, os.PathLike):
        return LocalSource(path=os.fspath(source))
    if source.startswith(REMOTE_PREFIXES):
        return RemoteSource(url=source)
    return LocalSource(path=source)
