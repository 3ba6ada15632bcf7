"""
Image optimization through the ImageOptim web API (https://im2.io).
"""

import io
import logging
from typing import Tuple, Optional, Dict, Any, Sequence, Union
from dataclasses import dataclass

import requests
from PIL import Image, UnidentifiedImageError
from urllib3.filepost import encode_multipart_formdata

from ...core.config import settings
from ...models.source import RemoteSource, LocalSource, ImageSource, classify_source
from ...utils.error_handlers import RemoteServiceError, ConfigurationError
from ...utils.file_utils import get_file_extension, get_file_size, get_mime_type, upload_filename
from .options import Option, join_options

logger = logging.getLogger(__name__)


@dataclass
class OptimizationResult:
    """Result of image optimization."""
    original_size: int
    optimized_size: int
    reduction_percentage: float
    optimization_method: str
    success: bool
    error_message: Optional[str] = None
    metadata: Dict[str, Any] = None


class ImageOptimClient:
    """
    Client for the ImageOptim API.

    Images are either fetched by the service from a URL or uploaded from a
    local file as multipart form data. Each call issues exactly one POST.
    """

    def __init__(
        self,
        username: str,
        session: Optional[requests.Session] = None,
        base_url: Optional[str] = None
    ):
        """
        Initialize the client.

        Args:
            username: ImageOptim API username, embedded in every request path
            session: Transport used to send requests. A new requests.Session
                is created (and owned) when omitted.
            base_url: Service root, defaults to settings.IMAGEOPTIM_BASE_URL
        """
        self.username = username
        self.base_url = (base_url or settings.IMAGEOPTIM_BASE_URL).rstrip('/')
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    @classmethod
    def from_settings(cls, session: Optional[requests.Session] = None) -> "ImageOptimClient":
        """Build a client from IMAGEOPTIM_USERNAME / IMAGEOPTIM_BASE_URL."""
        if not settings.IMAGEOPTIM_USERNAME:
            raise ConfigurationError(
                "ImageOptim username not provided. Set IMAGEOPTIM_USERNAME environment variable."
            )
        return cls(settings.IMAGEOPTIM_USERNAME, session=session)

    def close(self):
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def optimize(
        self,
        options: Sequence[Option],
        source: Union[ImageSource, str]
    ) -> bytes:
        """
        Optimize an image.

        Args:
            options: Ordered optimization directives
            source: RemoteSource, LocalSource, or a string classified by its
                http:// / https:// prefix

        Returns:
            Optimized image bytes

        Raises:
            OSError: local file could not be opened or read
            requests.RequestException: request could not be built or sent
            RemoteServiceError: service answered with status >= 400
        """
        return self._dispatch(options, classify_source(source))

    def optimize_with_result(
        self,
        options: Sequence[Option],
        source: Union[ImageSource, str]
    ) -> Tuple[bytes, OptimizationResult]:
        """
        Optimize an image and report the size reduction.

        The original size is only known for local files; remote sources
        report 0 and no reduction.

        Returns:
            Tuple of (optimized_bytes, OptimizationResult)
        """
        source = classify_source(source)
        original_size = get_file_size(source.path) if isinstance(source, LocalSource) else 0

        warnings = []
        optimized_bytes = self._dispatch(options, source, warnings)
        optimized_size = len(optimized_bytes)

        reduction = 0.0
        if original_size:
            reduction = ((original_size - optimized_size) / original_size) * 100

        return optimized_bytes, OptimizationResult(
            original_size=original_size,
            optimized_size=optimized_size,
            reduction_percentage=reduction,
            optimization_method="imageoptim",
            success=True,
            metadata={
                'options': [option.value for option in options],
                'source': source.url if isinstance(source, RemoteSource) else source.path,
                'format': self._detect_format(optimized_bytes),
                'warning': warnings[0] if warnings else None
            }
        )

    def _dispatch(self, options, source, warnings=None) -> bytes:
        if isinstance(source, RemoteSource):
            return self._process_request(self._url_for_remote(options, source.url), warnings=warnings)
        return self._process_local_file(options, source, warnings=warnings)

    def _url_for_remote(self, options: Sequence[Option], image_url: str) -> str:
        return f"{self.base_url}/{self.username}/{join_options(options)}/{image_url}"

    def _url_for_local(self, options: Sequence[Option]) -> str:
        return f"{self.base_url}/{self.username}/{join_options(options)}"

    def _process_local_file(
        self,
        options: Sequence[Option],
        source: LocalSource,
        warnings: Optional[list] = None
    ) -> bytes:
        request_url = self._url_for_local(options)
        body, content_type = self._build_multipart(source.path)
        return self._process_request(request_url, body, content_type, warnings=warnings)

    def _build_multipart(self, image_path: str) -> Tuple[bytes, str]:
        """
        Build a multipart body with a single ``file`` field.

        Returns:
            Tuple of (body, content_type) where content_type carries the boundary
        """
        with open(image_path, 'rb') as f:
            content = f.read()

        filename = upload_filename(image_path)
        fields = {
            'file': (filename, content, get_mime_type(get_file_extension(filename)))
        }
        return encode_multipart_formdata(fields)

    def _process_request(
        self,
        request_url: str,
        body: Optional[bytes] = None,
        content_type: Optional[str] = None,
        warnings: Optional[list] = None
    ) -> bytes:
        headers = {}
        if content_type:
            headers['Content-Type'] = content_type

        logger.debug(f"POST {request_url} ({len(body) if body is not None else 0} bytes)")

        # Body is read after the status check
        with self.session.post(request_url, data=body, headers=headers, stream=True) as response:
            if response.status_code >= 400:
                try:
                    error_body = response.text
                except (requests.RequestException, OSError):
                    error_body = ""
                logger.error(f"ImageOptim returned {response.status_code}: {error_body}")
                raise RemoteServiceError(error_body, response.status_code)

            warning = response.headers.get('Warning')
            if warning is not None:
                logger.warning(f"Warning: {warning}")
                if warnings is not None:
                    warnings.append(warning)

            return response.content

    def _detect_format(self, image_bytes: bytes) -> Optional[str]:
        """Detect image format of returned bytes, None if not decodable."""
        try:
            with Image.open(io.BytesIO(image_bytes)) as image:
                return image.format
        except (UnidentifiedImageError, Image.DecompressionBombError):
            return None


def new_client(username: str) -> ImageOptimClient:
    """Create a client owning its own HTTP session."""
    return ImageOptimClient(username)
