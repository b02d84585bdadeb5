"""
Reusable UI components for the dashboard views.

- `base`: CSS injection, badges and image source resolution.
- `cards`: display cards for speakers, team members, partners and about images.
- `order_controls`: move up / down / to-position controls for ordered lists.
- `person_form`, `partner_form`: add / edit forms.

Import from here (`from ui.components import partner_card`) for the widgets,
and the form modules directly (`from ui.components import person_form`).
"""

from .base import (
    inject_base_css,
    status_badge,
    tier_badge,
    image_source,
    store_upload,
)

from .cards import (
    person_card,
    partner_card,
    about_slot_card,
)

from . import order_controls, person_form, partner_form
