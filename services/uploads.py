"""Image upload helpers shared by the speaker, partner, team and about services."""
import logging
import os
import re
import time
from typing import Any, Dict, Optional

from domain.constants import IMAGE_BUCKET
from services import storage
from services.errors import ValidationError, reraise
from utils.ids import random_token
from utils.settings import get_settings

logger = logging.getLogger(__name__)


def validate_image_file(filename: str, size: int, content_type: Optional[str]):
    """Reject oversized and non-image uploads before anything is stored."""
    if not filename:
        raise ValidationError("Lütfen bir dosya seçiniz")
    limit = get_settings().max_upload_bytes
    if size > limit:
        raise ValidationError(f"Dosya boyutu {limit // (1024 * 1024)}MB'dan büyük olamaz")
    if not (content_type or '').startswith('image/'):
        raise ValidationError("Sadece resim dosyaları yüklenebilir")


def file_extension(filename: str) -> str:
    ext = os.path.splitext(filename)[1].lstrip('.').lower()
    return ext or 'bin'


def slugify(name: str) -> str:
    """Lowercase word characters joined by '-'; path separators never survive."""
    return re.sub(r'[^\w]+', '-', name.strip().lower()).strip('-')


def build_object_path(prefix: str, filename: str, timestamped: bool = False, name: Optional[str] = None) -> str:
    """Object key for an upload.

    ``name`` (about images) gives ``<ms>-<slug>.<ext>``; otherwise a random
    token, optionally preceded by a millisecond timestamp (speakers).
    """
    ext = file_extension(filename)
    stamp = int(time.time() * 1000)
    if name:
        return f"{prefix}/{stamp}-{slugify(name) or random_token()}.{ext}"
    if timestamped:
        return f"{prefix}/{stamp}-{random_token()}.{ext}"
    return f"{prefix}/{random_token()}.{ext}"


def upload_image(prefix: str, filename: str, data: bytes, content_type: Optional[str],
                 error_message: str, timestamped: bool = False, name: Optional[str] = None) -> str:
    """Validate and store an image; returns its public URL."""
    validate_image_file(filename, len(data), content_type)
    path = build_object_path(prefix, filename, timestamped=timestamped, name=name)
    with reraise(error_message):
        url = storage.upload(IMAGE_BUCKET, path, data)
    logger.info("image uploaded prefix=%s path=%s", prefix, path)
    return url


def remove_image(url: Optional[str]) -> bool:
    """Delete the stored object behind ``url``; False when it is not one of ours."""
    parsed = storage.path_from_public_url(url or '')
    if not parsed:
        return False
    bucket, path = parsed
    return bool(storage.remove(bucket, [path]))


def require_fields(values: Dict[str, Any]):
    """Raise ValidationError naming the first blank required field (label -> value)."""
    for label, value in values.items():
        if value is None or (isinstance(value, str) and not value.strip()):
            raise ValidationError(f"{label} zorunludur")


def optional_text(value: Optional[str]) -> Optional[str]:
    """Blank form inputs are stored as None."""
    if value is None:
        return None
    value = value.strip()
    return value or None
