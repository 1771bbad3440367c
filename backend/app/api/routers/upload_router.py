"""
Routes d'upload d'images et de service des fichiers envoyes.
"""
import logging
from fastapi import APIRouter, Depends, File, HTTPException, Request, Response, UploadFile, status
from fastapi.responses import FileResponse

from app.core.settings import get_settings
from app.domain.services.upload_service import (
    UploadService, FileTooLargeError, InvalidFileTypeError, ForbiddenPathError,
)
from app.api.routers._shared import limiter

logger = logging.getLogger(__name__)

router = APIRouter(tags=["uploads"])


def get_upload_service() -> UploadService:
    settings = get_settings()
    return UploadService(settings.UPLOADS_DIR, settings.MAX_UPLOAD_SIZE_BYTES)


@router.post("/api/admin/upload/image")
@limiter.limit("30/minute")
async def upload_image(
    request: Request,
    response: Response,
    file: UploadFile = File(...),
    uploads: UploadService = Depends(get_upload_service),
):
    """Enregistre une image et retourne son URL relative"""
    logger.info(f"Upload d'image: {file.filename}")
    try:
        content = await uploads.read_limited(file)
        filename = uploads.save_image(file.filename, content)
    except FileTooLargeError as e:
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except InvalidFileTypeError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return {"url": f"/uploads/{filename}", "filename": filename}


@router.get("/uploads/{filename:path}")
async def serve_upload(filename: str, uploads: UploadService = Depends(get_upload_service)):
    try:
        path, content_type = uploads.resolve(filename)
    except ForbiddenPathError:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    except FileNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="File not found")
    return FileResponse(path, media_type=content_type)
