from dataclasses import dataclass, field, fields
from typing import Dict, Optional, Any
import datetime as _dt


def _now_iso():
    return _dt.datetime.now(_dt.timezone.utc).replace(microsecond=0).isoformat().replace('+00:00', 'Z')


def _filter_known(cls, d: Dict[str, Any]) -> Dict[str, Any]:
    """Drop keys the dataclass does not declare (legacy or store-added columns)."""
    allowed = {f.name for f in fields(cls)}
    return {k: v for k, v in d.items() if k in allowed}


@dataclass
class Speaker:
    id: str
    name: str
    title: str
    photo: str
    order_index: int
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    created_at: str = field(default_factory=_now_iso)
    deleted_at: Optional[str] = None


@dataclass
class Partner:
    id: str
    title: str
    type: str  # main | diamond | gold | silver
    order_index: int
    logo: Optional[str] = None
    link: Optional[str] = None
    created_at: str = field(default_factory=_now_iso)
    deleted_at: Optional[str] = None


@dataclass
class TeamMember:
    id: str
    name: str
    title: str
    order_index: int
    photo: Optional[str] = None
    twitter: Optional[str] = None
    linkedin: Optional[str] = None
    telegram: Optional[str] = None
    created_at: str = field(default_factory=_now_iso)
    deleted_at: Optional[str] = None


@dataclass
class FAQ:
    id: str
    question_text: str
    answer_text: str
    created_at: str = field(default_factory=_now_iso)
    updated_at: Optional[str] = None


@dataclass
class AboutImage:
    id: str
    name: str
    image_url: str
    order_index: int  # slot on the about page
    created_at: str = field(default_factory=_now_iso)


@dataclass
class Admin:
    id: str
    email: str
    password_hash: str
    created_at: str = field(default_factory=_now_iso)


def speaker_from_dict(d: Dict[str, Any]) -> Speaker:
    return Speaker(**_filter_known(Speaker, d))


def partner_from_dict(d: Dict[str, Any]) -> Partner:
    return Partner(**_filter_known(Partner, d))


def team_member_from_dict(d: Dict[str, Any]) -> TeamMember:
    return TeamMember(**_filter_known(TeamMember, d))


def faq_from_dict(d: Dict[str, Any]) -> FAQ:
    return FAQ(**_filter_known(FAQ, d))


def about_image_from_dict(d: Dict[str, Any]) -> AboutImage:
    return AboutImage(**_filter_known(AboutImage, d))


def admin_from_dict(d: Dict[str, Any]) -> Admin:
    return Admin(**_filter_known(Admin, d))
