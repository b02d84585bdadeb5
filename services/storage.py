"""Object storage: buckets are directories under ``<DATA_DIR>/storage``.

Public URLs follow the ``<public_url>/storage/v1/object/public/<bucket>/<path>``
layout so rows keep a stable, absolute image address.
"""
import logging
import os
import shutil
from typing import Iterable, List, Optional, Tuple

from services import persistence
from services.errors import StoreError
from utils.settings import get_settings

logger = logging.getLogger(__name__)

PUBLIC_SEGMENT = '/storage/v1/object/public/'


def _bucket_dir(bucket: str) -> str:
    return os.path.join(persistence.DATA_DIR, 'storage', bucket)


def _object_path(bucket: str, path: str) -> str:
    root = os.path.abspath(_bucket_dir(bucket))
    target = os.path.abspath(os.path.join(root, path))
    if not path or os.path.isabs(path) or not target.startswith(root + os.sep):
        raise StoreError(f"Geçersiz dosya yolu: {path}")
    return target


def public_url(bucket: str, path: str) -> str:
    return f"{get_settings().public_url}{PUBLIC_SEGMENT}{bucket}/{path}"


def path_from_public_url(url: str) -> Optional[Tuple[str, str]]:
    """Return ``(bucket, path)`` for a URL produced by ``public_url``; None otherwise."""
    if not url or PUBLIC_SEGMENT not in url:
        return None
    tail = url.split(PUBLIC_SEGMENT, 1)[1]
    bucket, _, path = tail.partition('/')
    if not bucket or not path:
        return None
    return bucket, path


def local_file(url: str) -> Optional[str]:
    """Filesystem location of a stored object, if the URL points into this store and exists."""
    parsed = path_from_public_url(url)
    if not parsed:
        return None
    try:
        target = _object_path(*parsed)
    except StoreError:
        return None
    return target if os.path.exists(target) else None


def upload(bucket: str, path: str, data: bytes, upsert: bool = True) -> str:
    target = _object_path(bucket, path)
    if not upsert and os.path.exists(target):
        raise StoreError(f"Dosya zaten mevcut: {bucket}/{path}")
    try:
        os.makedirs(os.path.dirname(target), exist_ok=True)
        with open(target, 'wb') as f:
            f.write(data)
    except OSError as e:
        logger.error("upload failed bucket=%s path=%s", bucket, path, exc_info=True)
        raise StoreError(f"Dosya yüklenemedi: {e}") from e
    logger.info("uploaded %s/%s (%d bytes)", bucket, path, len(data))
    return public_url(bucket, path)


def remove(bucket: str, paths: Iterable[str]) -> List[str]:
    """Delete objects; missing ones are skipped. Returns the paths actually removed."""
    removed = []
    for path in paths:
        target = _object_path(bucket, path)
        if not os.path.exists(target):
            logger.warning("remove skipped, object missing: %s/%s", bucket, path)
            continue
        try:
            os.remove(target)
        except OSError as e:
            logger.error("remove failed bucket=%s path=%s", bucket, path, exc_info=True)
            raise StoreError(f"Dosya silinemedi: {e}") from e
        removed.append(path)
    return removed


def clear_bucket(bucket: str) -> int:
    """Delete every object in ``bucket``; returns how many files were removed."""
    root = _bucket_dir(bucket)
    if not os.path.isdir(root):
        return 0
    count = sum(len(files) for _, _, files in os.walk(root))
    try:
        shutil.rmtree(root)
    except OSError as e:
        logger.error("clearing bucket %s failed", bucket, exc_info=True)
        raise StoreError(f"'{bucket}' deposu temizlenemedi: {e}") from e
    logger.warning("bucket %s cleared (%d objects)", bucket, count)
    return count
