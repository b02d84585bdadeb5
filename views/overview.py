import streamlit as st

from domain.constants import PARTNER_TYPES, PARTNER_TYPE_LABELS, TABLE_LABELS
from services import admin as admin_svc
from services.errors import StoreError
from ui.components import inject_base_css, status_badge


def view():
    st.header("📈 Genel Bakış")
    inject_base_css()
    try:
        counts = admin_svc.get_dashboard_counts()
        reports = admin_svc.check_sequences()
    except StoreError as e:
        st.error(e)
        return

    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric(TABLE_LABELS['speakers'], counts['speakers'])
    c2.metric(TABLE_LABELS['partners'], counts['partners'])
    c3.metric(TABLE_LABELS['teams'], counts['teams'])
    c4.metric(TABLE_LABELS['faq'], counts['faq'])
    c5.metric(TABLE_LABELS['about_images'], counts['about_images'])

    st.write("---")
    st.subheader("Sponsor dağılımı")
    tier_counts = {PARTNER_TYPE_LABELS[t]: counts[f"partners_{t}"] for t in PARTNER_TYPES}
    if any(tier_counts.values()):
        st.bar_chart({"Tür": list(tier_counts.keys()), "Adet": list(tier_counts.values())}, x="Tür", y="Adet")
    else:
        st.caption("Henüz sponsor yok.")

    st.write("---")
    st.subheader("Sıralama durumu")
    for r in reports:
        label = TABLE_LABELS[r.table] + (f" / {PARTNER_TYPE_LABELS.get(r.group_key, r.group_key)}" if r.group_key else "")
        if r.ok:
            detail = f"{r.size} kayıt"
        else:
            detail = f"eksik: {r.missing or '-'}, tekrar eden: {r.duplicates or '-'}"
        st.markdown(f"{status_badge(r.ok, 'Tutarlı' if r.ok else 'Onarım gerekli')} **{label}** · {detail}",
                    unsafe_allow_html=True)
    if not all(r.ok for r in reports):
        st.info("Sıralamayı 'Veri Yönetimi' sayfasından onarabilirsiniz.")
