"""Services used by the profile feature."""

from .image_store import ImageStore, LocalImageStore, UploadFailedError

__all__ = ["ImageStore", "LocalImageStore", "UploadFailedError"]
