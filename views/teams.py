import streamlit as st
from dataclasses import asdict

from services import teams as team_svc
from services.errors import StoreError
from ui.components import person_card, person_form, order_controls, store_upload


def _render_add():
    with st.expander("➕ Takım üyesi ekle"):
        values = person_form.render({}, key_prefix="team_new", is_new=True, with_telegram=True)
        if values:
            try:
                photo_url = store_upload(values['photo_file'], team_svc.upload_team_member_photo)
                member = team_svc.create_team_member(
                    name=values['name'], title=values['title'], photo=photo_url,
                    twitter=values['twitter'], linkedin=values['linkedin'], telegram=values['telegram'])
                st.success(f"Takım üyesi eklendi: {member.name}")
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)


def _render_edit(member):
    values = person_form.render(asdict(member), key_prefix=f"team_edit_{member.id}", with_telegram=True)
    if values:
        try:
            links = {k: values[k] for k in ('twitter', 'linkedin', 'telegram')}
            photo_url = store_upload(values['photo_file'], team_svc.upload_team_member_photo)
            if photo_url:
                links['photo'] = photo_url
            team_svc.update_team_member(member.id, name=values['name'], title=values['title'], **links)
            st.success("Takım üyesi güncellendi")
            st.rerun()
        except (ValueError, StoreError) as e:
            st.error(e)

    confirm = st.checkbox("Silmek istediğime eminim", key=f"team_del_confirm_{member.id}")
    if st.button("Sil", key=f"team_del_{member.id}", disabled=not confirm, type="primary"):
        try:
            team_svc.delete_team_member(member.id)
            st.warning(f"{member.name} silindi")
            st.rerun()
        except StoreError as e:
            st.error(e)


def view():
    st.header("👥 Takım")
    _render_add()

    try:
        members = team_svc.list_team_members()
    except StoreError as e:
        st.error(e)
        return
    if not members:
        st.info("Henüz takım üyesi eklenmemiş.")
        return

    for idx, m in enumerate(members):
        person_card(m.name, m.title, m.photo,
                    {'Twitter': m.twitter, 'LinkedIn': m.linkedin, 'Telegram': m.telegram}, idx)
        target = order_controls.render(m.id, m.order_index, len(members), key_prefix="team")
        if target is not None:
            try:
                team_svc.move_team_member(m.id, target)
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)
        with st.expander(f"Düzenle: {m.name}"):
            _render_edit(m)
