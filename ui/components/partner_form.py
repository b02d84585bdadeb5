import streamlit as st
from typing import Dict, Any, Optional

from domain.constants import PARTNER_TYPES, PARTNER_TYPE_LABELS
from .person_form import IMAGE_TYPES


def render(data: Dict[str, Any], key_prefix: str, is_new: bool = False) -> Optional[Dict[str, Any]]:
    """Add / edit form for a partner. Returns submitted values or None."""
    with st.form(f"form_{key_prefix}", clear_on_submit=is_new):
        title = st.text_input("Sponsor adı", value=data.get('title', ''), key=f"{key_prefix}_title")
        current = data.get('type') if data.get('type') in PARTNER_TYPES else PARTNER_TYPES[0]
        partner_type = st.selectbox("Tür", PARTNER_TYPES, index=PARTNER_TYPES.index(current),
                                    format_func=lambda t: PARTNER_TYPE_LABELS[t], key=f"{key_prefix}_type")
        link = st.text_input("Bağlantı", value=data.get('link') or '', key=f"{key_prefix}_link")
        logo_file = st.file_uploader("Logo" if is_new else "Yeni logo (isteğe bağlı)",
                                     type=IMAGE_TYPES, key=f"{key_prefix}_logo")
        if not is_new and data.get('logo'):
            st.caption("Mevcut logo korunur; yeni logo seçerseniz değiştirilir.")

        if st.form_submit_button("Ekle" if is_new else "Kaydet"):
            if not title.strip():
                st.error("Sponsor adı zorunludur")
                return None
            return {'title': title, 'type': partner_type, 'link': link, 'logo_file': logo_file}
    return None
