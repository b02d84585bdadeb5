"""Speaker service: CRUD, ordering and photo uploads for the ``speakers`` table."""
import logging
from typing import List, Optional

from domain.constants import UPLOAD_PREFIXES
from domain.models import Speaker, speaker_from_dict
from services import ordering, persistence, uploads
from services.errors import NotFoundError, reraise

logger = logging.getLogger(__name__)

TABLE = 'speakers'


def list_speakers() -> List[Speaker]:
    with reraise("Konuşmacılar yüklenirken bir hata oluştu"):
        rows = persistence.query(TABLE, order_by='order_index')
    return [speaker_from_dict(r) for r in rows]


def get_speaker(speaker_id: str) -> Speaker:
    row = persistence.get(TABLE, speaker_id)
    if row is None:
        raise NotFoundError("Konuşmacı bulunamadı")
    return speaker_from_dict(row)


def create_speaker(name: str, title: str, photo: str,
                   twitter: Optional[str] = None, linkedin: Optional[str] = None) -> Speaker:
    uploads.require_fields({'Ad': name, 'Unvan': title, 'Fotoğraf': photo})
    row = {
        'name': name.strip(),
        'title': title.strip(),
        'photo': photo,
        'twitter': uploads.optional_text(twitter),
        'linkedin': uploads.optional_text(linkedin),
    }
    with reraise("Konuşmacı eklenirken bir hata oluştu"):
        created = ordering.append(TABLE, row)
    logger.info("speaker created id=%s order_index=%s", created['id'], created['order_index'])
    return speaker_from_dict(created)


def update_speaker(speaker_id: str, name: str, title: str, photo: Optional[str] = None,
                   twitter: Optional[str] = None, linkedin: Optional[str] = None) -> Speaker:
    """Rewrite the editable fields; the photo is kept unless a new one is given."""
    uploads.require_fields({'Ad': name, 'Unvan': title})
    updates = {
        'name': name.strip(),
        'title': title.strip(),
        'twitter': uploads.optional_text(twitter),
        'linkedin': uploads.optional_text(linkedin),
    }
    if photo:
        updates['photo'] = photo
    with reraise("Konuşmacı güncellenirken bir hata oluştu"):
        get_speaker(speaker_id)
        row = persistence.update(TABLE, speaker_id, updates)
    return speaker_from_dict(row)


def delete_speaker(speaker_id: str):
    with reraise("Konuşmacı silinirken bir hata oluştu"):
        ordering.soft_delete(TABLE, speaker_id)


def move_speaker(speaker_id: str, new_index: int) -> List[str]:
    with reraise("Konuşmacı sıralaması güncellenirken bir hata oluştu"):
        return ordering.reorder(TABLE, speaker_id, new_index)


def upload_speaker_photo(filename: str, data: bytes, content_type: Optional[str]) -> str:
    return uploads.upload_image(UPLOAD_PREFIXES[TABLE], filename, data, content_type,
                                "Fotoğraf yüklenirken bir hata oluştu", timestamped=True)
