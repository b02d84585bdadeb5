import streamlit as st
from typing import Dict, Any, Optional

IMAGE_TYPES = ["png", "jpg", "jpeg", "gif", "webp"]


def render(data: Dict[str, Any], key_prefix: str, is_new: bool = False,
           photo_required: bool = False, with_telegram: bool = False) -> Optional[Dict[str, Any]]:
    """
    Renders the shared speaker / team member form for both adding and editing.

    Args:
        data (Dict[str, Any]): Current values used to populate the form.
        key_prefix (str): A unique prefix for Streamlit widget keys.
        is_new (bool): Adjusts labels and requires a photo when photo_required is set.
        photo_required (bool): Speakers must have a photo when created.
        with_telegram (bool): Team members also carry a Telegram link.

    Returns:
        Dict[str, Any]: Submitted values (photo_file is the uploaded file or None),
        or None if the form was not submitted or failed basic validation.
    """
    with st.form(f"form_{key_prefix}", clear_on_submit=is_new):
        name = st.text_input("Ad Soyad", value=data.get('name', ''), key=f"{key_prefix}_name")
        title = st.text_input("Unvan", value=data.get('title', ''), key=f"{key_prefix}_title")
        twitter = st.text_input("Twitter", value=data.get('twitter') or '', key=f"{key_prefix}_twitter")
        linkedin = st.text_input("LinkedIn", value=data.get('linkedin') or '', key=f"{key_prefix}_linkedin")
        telegram = None
        if with_telegram:
            telegram = st.text_input("Telegram", value=data.get('telegram') or '', key=f"{key_prefix}_telegram")

        photo_label = "Fotoğraf" if is_new else "Yeni fotoğraf (isteğe bağlı)"
        photo_file = st.file_uploader(photo_label, type=IMAGE_TYPES, key=f"{key_prefix}_photo")

        submitted = st.form_submit_button("Ekle" if is_new else "Kaydet")
        if submitted:
            if not (name.strip() and title.strip()):
                st.error("Ad ve unvan alanları zorunludur.")
                return None
            if is_new and photo_required and photo_file is None:
                st.error("Lütfen bir fotoğraf seçiniz.")
                return None
            values = {
                'name': name,
                'title': title,
                'twitter': twitter,
                'linkedin': linkedin,
                'photo_file': photo_file,
            }
            if with_telegram:
                values['telegram'] = telegram
            return values

    return None
