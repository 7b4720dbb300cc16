"""Image store for avatar uploads.

The profile core only ever sees the reference string returned by `store`
and saves it verbatim; it never checks its format or reachability.
"""

import hashlib
import logging
import mimetypes
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class UploadFailedError(ValueError):
    """Raised when image bytes cannot be stored."""

    def __init__(self, detail: str = "Upload failed"):
        super().__init__(detail)


class ImageStore(Protocol):
    """Protocol for storing raw image bytes."""

    def store(self, data: bytes, content_type: str | None = None) -> str:
        """Store the bytes and return a stable reference URL."""
        ...


class LocalImageStore:
    """Stores images on the local filesystem under a content-addressed name."""

    def __init__(self, root: str | Path, base_url: str):
        """Initialize the image store.

        Args:
            root: Directory receiving the files
            base_url: Public URL prefix under which `root` is served
        """
        self.root = Path(root)
        self.base_url = base_url.rstrip("/")

    def store(self, data: bytes, content_type: str | None = None) -> str:
        """Write the bytes once and return their URL.

        Raises:
            UploadFailedError: If the data is empty or cannot be written
        """
        if not data:
            raise UploadFailedError("No file provided")

        extension = (mimetypes.guess_extension(content_type) if content_type else None) or ".bin"
        name = f"{hashlib.sha256(data).hexdigest()}{extension}"
        path = self.root / name

        try:
            self.root.mkdir(parents=True, exist_ok=True)
            if not path.exists():
                path.write_bytes(data)
        except OSError as e:
            logger.exception("Failed to write upload %s", name)
            raise UploadFailedError() from e

        return f"{self.base_url}/{name}"
