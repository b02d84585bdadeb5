"""About page images.

The about page has a fixed number of slots (``ABOUT_SLOTS``); ``order_index``
is the slot number. Uploading into an occupied slot replaces the image there,
blob included. Rows are hard-deleted.
"""
import logging
from typing import Dict, List, Optional

from domain.constants import ABOUT_SLOTS, UPLOAD_PREFIXES
from domain.models import AboutImage, about_image_from_dict
from services import persistence, uploads
from services.errors import NotFoundError, ValidationError, reraise

logger = logging.getLogger(__name__)

TABLE = 'about_images'


def list_about_images() -> List[AboutImage]:
    with reraise("Görseller yüklenirken bir hata oluştu"):
        rows = persistence.query(TABLE, order_by='order_index')
    return [about_image_from_dict(r) for r in rows]


def images_by_slot() -> Dict[int, Optional[AboutImage]]:
    by_slot = {img.order_index: img for img in list_about_images()}
    return {slot: by_slot.get(slot) for slot in range(ABOUT_SLOTS)}


def upload_about_image(filename: str, data: bytes, content_type: Optional[str], name: str, slot: int) -> AboutImage:
    if not filename or not (name or '').strip():
        raise ValidationError("Lütfen resim adı ve resim seçiniz")
    if not 0 <= slot < ABOUT_SLOTS:
        raise ValidationError(f"Geçersiz görsel konumu: {slot}")
    uploads.validate_image_file(filename, len(data), content_type)

    with reraise("Görsel yüklenirken bir hata oluştu"):
        for existing in persistence.query(TABLE, {'order_index': slot}):
            uploads.remove_image(existing.get('image_url'))
            persistence.delete(TABLE, existing['id'])
            logger.info("about slot %s: replaced image id=%s", slot, existing['id'])

    url = uploads.upload_image(UPLOAD_PREFIXES[TABLE], filename, data, content_type,
                               "Görsel yüklenirken bir hata oluştu", name=name)
    with reraise("Görsel kaydedilirken bir hata oluştu"):
        row = persistence.insert(TABLE, {'name': name.strip(), 'image_url': url, 'order_index': slot})
    return about_image_from_dict(row)


def delete_about_image(image_id: str):
    with reraise("Görsel silinirken bir hata oluştu"):
        row = persistence.get(TABLE, image_id)
        if row is None:
            raise NotFoundError("Görsel bulunamadı")
        uploads.remove_image(row.get('image_url'))
        persistence.delete(TABLE, image_id)
