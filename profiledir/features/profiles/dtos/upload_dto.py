"""Upload data transfer objects."""

from pydantic import BaseModel


class UploadResponse(BaseModel):
    """Response model for a stored avatar image."""

    url: str
