import streamlit as st

from services import faq as faq_svc
from services.errors import StoreError


def view():
    st.header("❓ Sıkça Sorulan Sorular")

    with st.form("faq_new", clear_on_submit=True):
        st.subheader("Yeni soru")
        question = st.text_input("Soru")
        answer = st.text_area("Cevap")
        if st.form_submit_button("Ekle"):
            try:
                faq_svc.create_faq(question, answer)
                st.success("FAQ başarıyla eklendi")
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)

    try:
        faqs = faq_svc.list_faqs()
    except StoreError as e:
        st.error(e)
        return
    if not faqs:
        st.info("Henüz soru eklenmemiş.")
        return

    for item in faqs:
        with st.expander(item.question_text):
            st.write(item.answer_text)
            if item.updated_at:
                st.caption(f"Son güncelleme: {item.updated_at}")
            with st.form(f"faq_edit_{item.id}"):
                q = st.text_input("Soru", value=item.question_text, key=f"faq_q_{item.id}")
                a = st.text_area("Cevap", value=item.answer_text, key=f"faq_a_{item.id}")
                if st.form_submit_button("Kaydet"):
                    try:
                        faq_svc.update_faq(item.id, q, a)
                        st.success("FAQ başarıyla güncellendi")
                        st.rerun()
                    except (ValueError, StoreError) as e:
                        st.error(e)
            if st.button("Sil", key=f"faq_del_{item.id}"):
                try:
                    faq_svc.delete_faq(item.id)
                    st.success("FAQ başarıyla silindi")
                    st.rerun()
                except StoreError as e:
                    st.error(e)
