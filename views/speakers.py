import streamlit as st
from dataclasses import asdict

from services import speakers as speaker_svc
from services.errors import StoreError
from ui.components import person_card, person_form, order_controls, store_upload, inject_base_css


def _render_add():
    with st.expander("➕ Konuşmacı ekle"):
        values = person_form.render({}, key_prefix="speaker_new", is_new=True, photo_required=True)
        if values:
            try:
                photo_url = store_upload(values['photo_file'], speaker_svc.upload_speaker_photo)
                speaker = speaker_svc.create_speaker(
                    name=values['name'], title=values['title'], photo=photo_url,
                    twitter=values['twitter'], linkedin=values['linkedin'])
                st.success(f"Konuşmacı eklendi: {speaker.name}")
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)


def _render_edit(speaker):
    values = person_form.render(asdict(speaker), key_prefix=f"speaker_edit_{speaker.id}")
    if values:
        try:
            photo_url = store_upload(values['photo_file'], speaker_svc.upload_speaker_photo)
            speaker_svc.update_speaker(speaker.id, name=values['name'], title=values['title'], photo=photo_url,
                                       twitter=values['twitter'], linkedin=values['linkedin'])
            st.success("Konuşmacı güncellendi")
            st.rerun()
        except (ValueError, StoreError) as e:
            st.error(e)

    st.markdown("---")
    confirm = st.checkbox("Silmek istediğime eminim", key=f"speaker_del_confirm_{speaker.id}")
    if st.button("Sil", key=f"speaker_del_{speaker.id}", disabled=not confirm, type="primary"):
        try:
            speaker_svc.delete_speaker(speaker.id)
            st.warning(f"{speaker.name} silindi")
            st.rerun()
        except StoreError as e:
            st.error(e)


def view():
    st.header("🎤 Konuşmacılar")
    inject_base_css()
    _render_add()

    try:
        speakers = speaker_svc.list_speakers()
    except StoreError as e:
        st.error(e)
        return

    if not speakers:
        st.info("Henüz konuşmacı eklenmemiş.")
        return

    st.caption(f"Toplam {len(speakers)} konuşmacı")
    for idx, sp in enumerate(speakers):
        person_card(sp.name, sp.title, sp.photo, {'Twitter': sp.twitter, 'LinkedIn': sp.linkedin}, idx)
        target = order_controls.render(sp.id, sp.order_index, len(speakers), key_prefix="speaker")
        if target is not None:
            try:
                speaker_svc.move_speaker(sp.id, target)
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)
        with st.expander(f"Düzenle: {sp.name}"):
            _render_edit(sp)
