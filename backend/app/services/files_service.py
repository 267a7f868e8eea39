"""
Files Service — product image upload and lookup on local disk.

Images live in ``<static_dir>/products`` under a random UUID name and are
served back through ``GET /files/product/{name}``.
"""
import logging
import uuid
from pathlib import Path

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from app.core.exceptions import BadRequestError

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png", "gif"}


class FilesService:
    """Stores and resolves product image files."""

    def __init__(self, static_dir: str, host_api: str):
        self.products_dir = Path(static_dir) / "products"
        self.host_api = host_api.rstrip("/")

    def get_static_product_image(self, image_name: str) -> Path:
        """Path of a stored image; BadRequest if it does not exist."""
        base = self.products_dir.resolve()
        path = (base / image_name).resolve()

        if path.parent != base or not path.is_file():
            raise BadRequestError(f"No product found with image {image_name}")
        return path

    async def upload_product_image(self, file: UploadFile) -> str:
        """Save an uploaded image and return its public URL."""
        extension = ""
        if file.filename and "." in file.filename:
            extension = file.filename.rsplit(".", 1)[1].lower()
        if extension not in ALLOWED_EXTENSIONS:
            raise BadRequestError("Make sure that the file is an image")

        file_name = f"{uuid.uuid4()}.{extension}"
        content = await file.read()
        await run_in_threadpool(self._write, file_name, content)

        logger.info("Stored product image %s (%d bytes)", file_name, len(content))
        return f"{self.host_api}/files/product/{file_name}"

    def _write(self, file_name: str, content: bytes) -> None:
        self.products_dir.mkdir(parents=True, exist_ok=True)
        (self.products_dir / file_name).write_bytes(content)
