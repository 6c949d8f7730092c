"""
Storage infrastructure for avatars and course thumbnails.
"""

from .image_storage import ImageStorage, StoredImage

__all__ = ["ImageStorage", "StoredImage"]
