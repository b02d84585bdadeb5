"""Deterministic demo content for an empty dashboard.

Rows are created through the regular services so ordering and validation
apply exactly as they do for admin input.
"""
import random
from typing import Optional

from domain.constants import PARTNER_TYPES
from services import faq, partners, speakers, teams

FIRST_NAMES = ["Ayşe", "Mehmet", "Elif", "Can", "Zeynep", "Burak", "Deniz", "Selin", "Emre", "Ece"]
LAST_NAMES = ["Yılmaz", "Kaya", "Demir", "Şahin", "Çelik", "Aydın", "Öztürk", "Arslan"]
TITLES = ["Yazılım Mühendisi", "Ürün Yöneticisi", "Araştırmacı", "Kurucu", "Topluluk Lideri", "Tasarımcı"]
COMPANIES = ["Anadolu Labs", "Boğaziçi Tech", "Ege Yazılım", "Karadeniz Veri", "Marmara Cloud", "Toros AI"]
SAMPLE_FAQS = [
    ("Etkinlik nerede yapılacak?", "Etkinlik mekanı ve ulaşım bilgileri web sitesinde paylaşılacaktır."),
    ("Bilet fiyatı nedir?", "Biletler ücretsizdir, kayıt zorunludur."),
    ("Konuşmacı olarak nasıl başvurabilirim?", "Başvuru formunu doldurarak konuşma önerinizi iletebilirsiniz."),
]

PLACEHOLDER_PHOTO = "https://placehold.co/400x400.png"


def _names(n: int, rng: random.Random):
    seen = set()
    while len(seen) < n:
        seen.add(f"{rng.choice(FIRST_NAMES)} {rng.choice(LAST_NAMES)}")
    return sorted(seen)


def make_speakers(n: int = 6, seed: Optional[int] = 7):
    rng = random.Random(seed)
    return [speakers.create_speaker(name=nm, title=f"{rng.choice(TITLES)}, {rng.choice(COMPANIES)}",
                                    photo=PLACEHOLDER_PHOTO)
            for nm in _names(n, rng)]


def make_team(n: int = 4, seed: Optional[int] = 11):
    rng = random.Random(seed)
    return [teams.create_team_member(name=nm, title=rng.choice(TITLES)) for nm in _names(n, rng)]


def make_partners(per_type: int = 2):
    created = []
    for t in PARTNER_TYPES:
        for i in range(per_type):
            company = COMPANIES[(PARTNER_TYPES.index(t) * per_type + i) % len(COMPANIES)]
            created.append(partners.create_partner(title=f"{company} {i + 1}", partner_type=t,
                                                   link="https://example.com"))
    return created


def make_faqs():
    return [faq.create_faq(q, a) for q, a in SAMPLE_FAQS]


def seed_all():
    """Create one batch of every content type; returns counts per table."""
    return {
        'speakers': len(make_speakers()),
        'teams': len(make_team()),
        'partners': len(make_partners()),
        'faq': len(make_faqs()),
    }
