"""Avatar upload route handler."""

import asyncio
import logging

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from profiledir.core.settings import Settings, get_settings
from profiledir.features.profiles.dependencies import get_image_store
from profiledir.features.profiles.dtos import UploadResponse
from profiledir.features.profiles.services import ImageStore, UploadFailedError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/upload", response_model=UploadResponse)
async def upload_image(
    file: UploadFile | None = File(None),
    image_store: ImageStore = Depends(get_image_store),
    settings: Settings = Depends(get_settings),
) -> UploadResponse:
    """Store an avatar image and return its URL.

    The URL is meant to be sent back as `avatar_ref` on signup or update.
    """
    if file is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "No file provided"},
        )

    data = await file.read(settings.max_upload_bytes + 1)
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "No file provided"},
        )
    if len(data) > settings.max_upload_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"message": "File too large"},
        )

    try:
        url = await asyncio.to_thread(image_store.store, data, file.content_type)
    except UploadFailedError:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Upload failed"},
        )

    logger.info("Stored upload of %d bytes", len(data))
    return UploadResponse(url=url)
