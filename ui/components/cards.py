import streamlit as st
from typing import Dict, Optional

from domain.models import AboutImage, Partner
from .base import image_source, tier_badge


def _link_line(links: Dict[str, Optional[str]]) -> str:
    parts = [f"[{label}]({url})" for label, url in links.items() if url]
    return " · ".join(parts)


def person_card(name: str, title: str, photo: Optional[str], links: Dict[str, Optional[str]], index: int):
    """Photo, name, title and social links for a speaker or team member."""
    with st.container(border=True):
        cols = st.columns([1, 4])
        with cols[0]:
            src = image_source(photo)
            if src:
                st.image(src, width=72)
            else:
                st.caption("Fotoğraf yok")
        with cols[1]:
            st.markdown(f"**{index + 1}. {name}**")
            st.caption(title)
            line = _link_line(links)
            if line:
                st.markdown(line)


def partner_card(partner: Partner):
    with st.container(border=True):
        src = image_source(partner.logo)
        if src:
            st.image(src, width=160)
        else:
            st.caption("Logo Yok")
        st.markdown(f"**{partner.order_index + 1}. {partner.title}**")
        st.markdown(tier_badge(partner.type), unsafe_allow_html=True)
        if partner.link:
            st.markdown(f"[{partner.link}]({partner.link})")


def about_slot_card(slot: int, image: Optional[AboutImage]):
    """One about-page card: the stored image or an empty placeholder."""
    st.markdown(f"**{image.name if image else f'Görsel {slot + 1}'}**")
    if image:
        st.image(image_source(image.image_url), use_container_width=True)
    else:
        st.caption("Bu konumda görsel yok")
