"""
Centralized constants for the event admin dashboard: table names, partner
tiers, upload rules and the user-facing (Turkish) labels shared across views.
"""

# Row tables served by services.persistence
TABLES = ['speakers', 'partners', 'teams', 'faq', 'about_images', 'admins']

# Tables whose rows carry an order_index and are soft-deleted
ORDERED_TABLES = ['speakers', 'partners', 'teams']

# Partner tiers, in the order they are displayed
PARTNER_TYPES = ['main', 'diamond', 'gold', 'silver']

PARTNER_TYPE_LABELS = {
    'main': 'Main Sponsor',
    'diamond': 'Diamond Sponsor',
    'gold': 'Gold Sponsor',
    'silver': 'Silver Sponsor',
}

# The about page shows a fixed number of image cards
ABOUT_SLOTS = 4

# Object storage
IMAGE_BUCKET = 'images'
UPLOAD_PREFIXES = {
    'speakers': 'speakers',
    'partners': 'partners',
    'teams': 'teams',
    'about_images': 'about',
}

# Table display names used in messages and page titles
TABLE_LABELS = {
    'speakers': 'Konuşmacılar',
    'partners': 'Sponsorlar',
    'teams': 'Takım',
    'faq': 'SSS',
    'about_images': 'Hakkımızda Görselleri',
    'admins': 'Yöneticiler',
}
