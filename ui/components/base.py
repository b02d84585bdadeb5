import streamlit as st
from typing import Optional

from domain.constants import PARTNER_TYPE_LABELS
from services import storage

PRIMARY_ACCENT = "#2563EB"  # blue-600
GREEN = "#059669"  # emerald-600
YELLOW = "#D97706"  # amber-600
RED = "#DC2626"  # red-600
CHIP_BG = "#374151"

# Tier badge colours, same order as PARTNER_TYPES
TIER_COLORS = {
    "main": "#6366F1",  # indigo-500
    "diamond": "#3B82F6",  # blue-500
    "gold": "#F59E0B",  # amber-500
    "silver": "#9CA3AF",  # gray-400
}


def inject_base_css():
    """Badge styles; call once near the top of a view (Streamlit drops them on rerun)."""
    st.markdown(
        f"""
        <style>
        .badge {{
            display:inline-block; padding:2px 8px; border-radius:12px;
            font-size:12px; line-height:16px; font-weight:600;
            background:{CHIP_BG}; color:#F9FAFB; margin-right:4px; margin-bottom:4px;
        }}
        .badge.green {{background:{GREEN};}}
        .badge.yellow {{background:{YELLOW};}}
        .badge.red {{background:{RED};}}
        </style>
        """,
        unsafe_allow_html=True,
    )


def status_badge(ok: bool, label: str) -> str:
    cls = "green" if ok else "red"
    return f'<span class="badge {cls}">{label}</span>'


def tier_badge(partner_type: str, count: Optional[int] = None) -> str:
    color = TIER_COLORS.get(partner_type, CHIP_BG)
    label = PARTNER_TYPE_LABELS.get(partner_type, partner_type)
    if count is not None:
        label = f"{label} · {count}"
    return f'<span class="badge" style="background:{color};">{label}</span>'


def image_source(url: Optional[str]) -> Optional[str]:
    """Local file for objects in our store, the URL itself otherwise."""
    if not url:
        return None
    return storage.local_file(url) or url


def store_upload(uploaded_file, upload_fn) -> Optional[str]:
    """Push a Streamlit UploadedFile through a service upload function; None if no file."""
    if uploaded_file is None:
        return None
    return upload_fn(uploaded_file.name, uploaded_file.getvalue(), uploaded_file.type)
