import streamlit as st
from typing import Optional


def render(item_id: str, index: int, size: int, key_prefix: str) -> Optional[int]:
    """Up / down buttons plus a position picker.

    Returns the requested 0-based target index, or None when nothing was clicked.
    The picker key includes the current index so a shifted row starts from its
    new position instead of a stale selection.
    """
    c1, c2, c3 = st.columns([1, 1, 2])
    if c1.button("▲", key=f"{key_prefix}_up_{item_id}", disabled=index <= 0, help="Yukarı taşı"):
        return index - 1
    if c2.button("▼", key=f"{key_prefix}_down_{item_id}", disabled=index >= size - 1, help="Aşağı taşı"):
        return index + 1
    with c3:
        positions = list(range(1, size + 1))
        current = min(max(index, 0), size - 1) if size else 0
        target = st.selectbox("Sıra", positions, index=current, key=f"{key_prefix}_pos_{item_id}_{index}",
                              label_visibility="collapsed")
        if target - 1 != index:
            return target - 1
    return None
