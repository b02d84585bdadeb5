import streamlit as st
from dataclasses import asdict

from domain.constants import PARTNER_TYPE_LABELS
from services import partners as partner_svc
from services.errors import StoreError
from ui.components import partner_card, partner_form, order_controls, store_upload, tier_badge, inject_base_css


def _render_add():
    with st.expander("➕ Sponsor ekle"):
        values = partner_form.render({}, key_prefix="partner_new", is_new=True)
        if values:
            try:
                logo_url = store_upload(values['logo_file'], partner_svc.upload_partner_logo)
                partner = partner_svc.create_partner(title=values['title'], partner_type=values['type'],
                                                     logo=logo_url, link=values['link'])
                st.success(f"Sponsor eklendi: {partner.title}")
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)


def _render_edit(partner):
    values = partner_form.render(asdict(partner), key_prefix=f"partner_edit_{partner.id}")
    if values:
        try:
            changes = {'title': values['title'], 'partner_type': values['type'], 'link': values['link']}
            logo_url = store_upload(values['logo_file'], partner_svc.upload_partner_logo)
            if logo_url:
                changes['logo'] = logo_url
            partner_svc.update_partner(partner.id, **changes)
            if values['type'] != partner.type:
                st.info(f"Sponsor {PARTNER_TYPE_LABELS[values['type']]} grubunun sonuna taşındı")
            st.success("Sponsor güncellendi")
            st.rerun()
        except (ValueError, StoreError) as e:
            st.error(e)

    confirm = st.checkbox("Silmek istediğime eminim", key=f"partner_del_confirm_{partner.id}")
    if st.button("Sil", key=f"partner_del_{partner.id}", disabled=not confirm, type="primary"):
        try:
            partner_svc.delete_partner(partner.id)
            st.warning(f"{partner.title} silindi")
            st.rerun()
        except StoreError as e:
            st.error(e)


def view():
    st.header("🤝 Sponsorlar")
    inject_base_css()
    _render_add()

    try:
        grouped = partner_svc.group_by_type(partner_svc.list_partners())
    except StoreError as e:
        st.error(e)
        return
    if not grouped:
        st.info("Henüz sponsor eklenmemiş.")
        return

    for partner_type, tier in grouped.items():
        st.markdown(f"### {PARTNER_TYPE_LABELS[partner_type]} {tier_badge(partner_type, len(tier))}",
                    unsafe_allow_html=True)
        cols = st.columns(3)
        for i, p in enumerate(tier):
            with cols[i % 3]:
                partner_card(p)
                target = order_controls.render(p.id, p.order_index, len(tier), key_prefix=f"partner_{partner_type}")
                if target is not None:
                    try:
                        partner_svc.move_partner(p.id, target, partner_type)
                        st.rerun()
                    except (ValueError, StoreError) as e:
                        st.error(e)
                with st.expander("Düzenle"):
                    _render_edit(p)
