"""
Error types raised by the ImageOptim client.
"""

from typing import Any, Dict, Optional, Union
from datetime import datetime, timezone


class ImageOptimError(Exception):
    """Base client error class."""
    
    def __init__(
        self,
        message: str,
        code: str = "IMAGEOPTIM_ERROR",
        status_code: Optional[int] = None,
        details: Optional[Dict] = None,
        user_message: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        self.user_message = user_message or message
        self.timestamp = datetime.now(timezone.utc).isoformat()


class RemoteServiceError(ImageOptimError):
    """The service answered with an error status (>= 400)."""
    
    def __init__(self, body: str, status_code: int, **kwargs):
        super().__init__(
            f"error response from service: {body}",
            code="REMOTE_SERVICE_ERROR",
            status_code=status_code,
            details={"body": body},
            **kwargs
        )
        self.body = body


class ConfigurationError(ImageOptimError):
    """Client settings are missing or unusable."""
    
    def __init__(self, message: str, **kwargs):
        super().__init__(
            message,
            code="CONFIGURATION_ERROR",
            **kwargs
        )


def to_error_dict(error: Union[ImageOptimError, Exception]) -> Dict[str, Any]:
    """
    Render an error in a standardized, serializable shape.
    
    Args:
        error: The error to convert
        
    Returns:
        Dict with error details
    """
    if isinstance(error, ImageOptimError):
        return {
            "error": {
                "code": error.code,
                "message": error.user_message,
                "status_code": error.status_code,
                "details": error.details,
                "timestamp": error.timestamp
            }
        }
    
    # Local I/O and transport errors keep their own type name
    return {
        "error": {
            "code": type(error).__name__,
            "message": str(error),
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    }
