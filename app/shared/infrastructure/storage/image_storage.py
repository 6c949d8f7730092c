# 📄 File: app/shared/infrastructure/storage/image_storage.py

# 🧭 Purpose (Layman Explanation):
# Uploads pictures (user avatars and course thumbnails) to cloud storage and deletes
# old ones when they are replaced.

# 🧪 Purpose (Technical summary):
# Image host client over Supabase Storage: decodes base64/data-URL images, validates
# and optionally resizes them with Pillow, uploads into a folder and returns the
# {public_id, url} pair stored on users and courses.

# 🔗 Dependencies:
# - supabase: Storage client
# - PIL (Pillow): Image validation and resizing
# - asyncio: Runs the blocking storage client off the event loop

# 🔄 Connected Modules / Calls From:
# Called by: UserService.update_avatar, CourseService.create_course/edit_course
# Connects to: Supabase cloud storage

import asyncio
import base64
import binascii
import io
import logging
from typing import Optional
from uuid import uuid4

from PIL import Image, UnidentifiedImageError
from pydantic import BaseModel

from app.shared.config.supabase import SupabaseManager
from app.shared.core.exceptions import ImageStorageError

logger = logging.getLogger(__name__)


class StoredImage(BaseModel):
    """Reference to an uploaded image."""
    public_id: str
    url: str


class ImageStorage:
    """
    Image host backed by a Supabase Storage bucket.
    
    The public id of an image is its object path inside the bucket, so
    `destroy` can remove it without any extra lookup.
    """
    
    def __init__(self, manager: SupabaseManager):
        self._manager = manager
        self.image_quality = 85
    
    @staticmethod
    def _decode(base64_image: str) -> bytes:
        """Decode a raw base64 string or a data URL."""
        data = base64_image
        if data.startswith("data:") and "," in data:
            data = data.split(",", 1)[1]
        try:
            return base64.b64decode(data, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ImageStorageError(f"Invalid image data: {e}", status_code=400)
    
    def _prepare(self, raw: bytes, width: Optional[int]) -> bytes:
        """Validate the image and scale it to `width` keeping the aspect ratio."""
        try:
            with Image.open(io.BytesIO(raw)) as img:
                img.load()
                if img.mode in ("RGBA", "P"):
                    img = img.convert("RGB")
                if width and img.width != width:
                    height = max(1, round(img.height * width / img.width))
                    img = img.resize((width, height), Image.LANCZOS)
                output = io.BytesIO()
                img.save(output, format="JPEG", quality=self.image_quality, optimize=True)
                return output.getvalue()
        except (UnidentifiedImageError, OSError) as e:
            raise ImageStorageError(f"Invalid image file: {e}", status_code=400)
    
    async def upload(
        self,
        base64_image: str,
        folder: str,
        width: Optional[int] = None,
    ) -> StoredImage:
        """
        Upload an image into `folder`.
        
        Args:
            base64_image: Base64 string or data URL
            folder: Destination folder (e.g. "avatars", "courses")
            width: Optional target width in pixels
            
        Returns:
            StoredImage: public id and public URL
        """
        content = self._prepare(self._decode(base64_image), width)
        path = f"{folder}/{uuid4().hex}.jpg"
        bucket = self._manager.get_storage_bucket()
        
        try:
            await asyncio.to_thread(
                bucket.upload,
                path,
                content,
                {"content-type": "image/jpeg", "upsert": "false"},
            )
            url = await asyncio.to_thread(bucket.get_public_url, path)
        except Exception as e:
            logger.error(f"Image upload failed for {path}: {e}")
            raise ImageStorageError(f"Image upload failed: {e}")
        
        logger.info(f"Image uploaded: {path}")
        return StoredImage(public_id=path, url=url)
    
    async def destroy(self, public_id: str) -> None:
        """Delete a previously uploaded image."""
        bucket = self._manager.get_storage_bucket()
        try:
            await asyncio.to_thread(bucket.remove, [public_id])
        except Exception as e:
            logger.error(f"Image delete failed for {public_id}: {e}")
            raise ImageStorageError(f"Image delete failed: {e}")
        
        logger.info(f"Image deleted: {public_id}")
