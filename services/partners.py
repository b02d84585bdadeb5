"""
Partner (sponsor) service. Partners are ordered independently within their
tier (``type``); changing the tier moves the partner to the end of the new tier.
"""
import logging
from typing import Dict, List, Optional

from domain.constants import PARTNER_TYPES, UPLOAD_PREFIXES
from domain.models import Partner, partner_from_dict
from services import ordering, persistence, uploads
from services.errors import NotFoundError, ValidationError, reraise

logger = logging.getLogger(__name__)

TABLE = 'partners'

_UNSET = object()


def _check_type(partner_type: str) -> str:
    if partner_type not in PARTNER_TYPES:
        raise ValidationError(f"Geçersiz sponsor türü: {partner_type}")
    return partner_type


def list_partners() -> List[Partner]:
    """All active partners, tier by tier in display order, each tier by order_index."""
    with reraise("Sponsorlar yüklenirken bir hata oluştu"):
        rows = persistence.query(TABLE)
    tier_rank = {t: i for i, t in enumerate(PARTNER_TYPES)}
    rows.sort(key=lambda r: (tier_rank.get(r.get('type'), len(tier_rank)), r.get('order_index') or 0))
    return [partner_from_dict(r) for r in rows]


def list_partners_by_type(partner_type: str) -> List[Partner]:
    _check_type(partner_type)
    with reraise(f"{partner_type} sponsorları yüklenirken bir hata oluştu"):
        rows = ordering.list_group(TABLE, partner_type)
    return [partner_from_dict(r) for r in rows]


def group_by_type(partners: List[Partner]) -> Dict[str, List[Partner]]:
    """Non-empty tiers only, keyed in display order."""
    grouped: Dict[str, List[Partner]] = {t: [] for t in PARTNER_TYPES}
    for p in partners:
        grouped.setdefault(p.type, []).append(p)
    return {t: ps for t, ps in grouped.items() if ps}


def get_partner(partner_id: str) -> Partner:
    row = persistence.get(TABLE, partner_id)
    if row is None:
        raise NotFoundError("Sponsor bulunamadı")
    return partner_from_dict(row)


def create_partner(title: str, partner_type: str, logo: Optional[str] = None, link: Optional[str] = None) -> Partner:
    uploads.require_fields({'Sponsor adı': title})
    row = {
        'title': title.strip(),
        'type': _check_type(partner_type),
        'logo': logo or None,
        'link': uploads.optional_text(link),
    }
    with reraise("Sponsor eklenirken bir hata oluştu"):
        created = ordering.append(TABLE, row)
    logger.info("partner created id=%s type=%s order_index=%s",
                created['id'], created['type'], created['order_index'])
    return partner_from_dict(created)


def update_partner(partner_id: str, title=_UNSET, partner_type=_UNSET, logo=_UNSET, link=_UNSET) -> Partner:
    """Write only the fields that were passed."""
    updates = {}
    if title is not _UNSET:
        uploads.require_fields({'Sponsor adı': title})
        updates['title'] = title.strip()
    if logo is not _UNSET:
        updates['logo'] = logo or None
    if link is not _UNSET:
        updates['link'] = uploads.optional_text(link)

    with reraise("Sponsor güncellenirken bir hata oluştu"):
        current = get_partner(partner_id)
        if partner_type is not _UNSET and _check_type(partner_type) != current.type:
            row = ordering.move_to_group(TABLE, partner_id, partner_type, updates)
        else:
            row = persistence.update(TABLE, partner_id, updates)
    return partner_from_dict(row)


def delete_partner(partner_id: str):
    with reraise("Sponsor silinirken bir hata oluştu"):
        ordering.soft_delete(TABLE, partner_id)


def move_partner(partner_id: str, new_index: int, partner_type: Optional[str] = None) -> List[str]:
    """Reorder within the partner's tier; ``partner_type`` defaults to the stored one."""
    with reraise("Sponsor sıralaması güncellenirken bir hata oluştu"):
        if partner_type is None:
            partner_type = get_partner(partner_id).type
        return ordering.reorder(TABLE, partner_id, new_index, _check_type(partner_type))


def upload_partner_logo(filename: str, data: bytes, content_type: Optional[str]) -> str:
    return uploads.upload_image(UPLOAD_PREFIXES[TABLE], filename, data, content_type,
                                "Logo yüklenirken bir hata oluştu")
