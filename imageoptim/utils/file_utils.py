"""
File handling utilities
"""

import os
from typing import Union


def get_file_extension(filename: str) -> str:
    """Get file extension from filename"""
    return os.path.splitext(filename)[1].lower()


def upload_filename(path: Union[str, os.PathLike]) -> str:
    """Base name of a local path, as sent in multipart metadata"""
    return os.path.basename(os.fspath(path))


def get_file_size(path: Union[str, os.PathLike]) -> int:
    """Size of a local file in bytes"""
    return os.path.getsize(path)


def get_mime_type(extension: str) -> str:
    """Get MIME type from file extension"""
    mime_types = {
        ".jpg": "image/jpeg",
        ".jpeg": "image/jpeg",
        ".png": "image/png",
        ".webp": "image/webp",
        ".gif": "image/gif",
        ".svg": "image/svg+xml",
        ".avif": "image/avif"
    }
    return mime_types.get(extension, "application/octet-stream")
