"""Team member service for the ``teams`` table."""
import logging
from typing import List, Optional

from domain.constants import UPLOAD_PREFIXES
from domain.models import TeamMember, team_member_from_dict
from services import ordering, persistence, uploads
from services.errors import NotFoundError, reraise

logger = logging.getLogger(__name__)

TABLE = 'teams'

_UNSET = object()
_LINK_FIELDS = ('photo', 'twitter', 'linkedin', 'telegram')


def list_team_members() -> List[TeamMember]:
    with reraise("Takım üyeleri yüklenirken bir hata oluştu"):
        rows = persistence.query(TABLE, order_by='order_index')
    return [team_member_from_dict(r) for r in rows]


def get_team_member(member_id: str) -> TeamMember:
    row = persistence.get(TABLE, member_id)
    if row is None:
        raise NotFoundError("Takım üyesi bulunamadı")
    return team_member_from_dict(row)


def create_team_member(name: str, title: str, photo: Optional[str] = None, twitter: Optional[str] = None,
                       linkedin: Optional[str] = None, telegram: Optional[str] = None) -> TeamMember:
    uploads.require_fields({'Ad': name, 'Unvan': title})
    row = {
        'name': name.strip(),
        'title': title.strip(),
        'photo': photo or None,
        'twitter': uploads.optional_text(twitter),
        'linkedin': uploads.optional_text(linkedin),
        'telegram': uploads.optional_text(telegram),
    }
    with reraise("Takım üyesi eklenirken bir hata oluştu"):
        created = ordering.append(TABLE, row)
    logger.info("team member created id=%s order_index=%s", created['id'], created['order_index'])
    return team_member_from_dict(created)


def update_team_member(member_id: str, name=_UNSET, title=_UNSET, **links) -> TeamMember:
    """Partial update; ``links`` may carry photo, twitter, linkedin, telegram."""
    unknown = set(links) - set(_LINK_FIELDS)
    if unknown:
        raise TypeError(f"unexpected fields: {sorted(unknown)}")
    updates = {}
    if name is not _UNSET:
        uploads.require_fields({'Ad': name})
        updates['name'] = name.strip()
    if title is not _UNSET:
        uploads.require_fields({'Unvan': title})
        updates['title'] = title.strip()
    for key, value in links.items():
        if key == 'photo':
            updates[key] = value or None
        else:
            updates[key] = uploads.optional_text(value)
    with reraise("Takım üyesi güncellenirken bir hata oluştu"):
        get_team_member(member_id)
        row = persistence.update(TABLE, member_id, updates)
    return team_member_from_dict(row)


def delete_team_member(member_id: str):
    with reraise("Takım üyesi silinirken bir hata oluştu"):
        ordering.soft_delete(TABLE, member_id)


def move_team_member(member_id: str, new_index: int) -> List[str]:
    with reraise("Takım sıralaması güncellenirken bir hata oluştu"):
        return ordering.reorder(TABLE, member_id, new_index)


def upload_team_member_photo(filename: str, data: bytes, content_type: Optional[str]) -> str:
    return uploads.upload_image(UPLOAD_PREFIXES[TABLE], filename, data, content_type,
                                "Fotoğraf yüklenirken bir hata oluştu")
