"""
Files API endpoints.

POST /files/product          — Upload a product image (jpg, jpeg, png, gif)
GET  /files/product/{name}   — Serve an uploaded product image
"""
from fastapi import APIRouter, Depends, File, UploadFile
from fastapi.responses import FileResponse

from app.config import get_settings
from app.schemas.files import UploadResponse
from app.services.files_service import FilesService

router = APIRouter(prefix="/files", tags=["files"])


def get_files_service() -> FilesService:
    settings = get_settings()
    return FilesService(settings.static_dir, settings.host_api)


@router.get("/product/{image_name}")
async def find_product_image(image_name: str, service: FilesService = Depends(get_files_service)):
    """Send a stored product image."""
    return FileResponse(service.get_static_product_image(image_name))


@router.post("/product", response_model=UploadResponse)
async def upload_product_image(
    file: UploadFile = File(...),
    service: FilesService = Depends(get_files_service),
):
    """Store an uploaded product image and return its public URL."""
    secure_url = await service.upload_product_image(file)
    return UploadResponse(secure_url=secure_url)
