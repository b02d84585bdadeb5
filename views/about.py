import streamlit as st

from services import about as about_svc
from services.errors import StoreError
from ui.components import about_slot_card, person_form


def view():
    st.header("🖼️ Hakkımızda Görselleri")
    st.markdown("Her kart bir konumu temsil eder; dolu bir konuma yükleme yapmak mevcut görseli değiştirir.")

    try:
        slots = about_svc.images_by_slot()
    except StoreError as e:
        st.error(e)
        return

    cols = st.columns(2)
    for slot, image in slots.items():
        with cols[slot % 2]:
            with st.container(border=True):
                about_slot_card(slot, image)
                with st.form(f"about_{slot}", clear_on_submit=True):
                    name = st.text_input("Görsel adı", key=f"about_name_{slot}")
                    file = st.file_uploader("Görsel", type=person_form.IMAGE_TYPES, key=f"about_file_{slot}")
                    if st.form_submit_button("Değiştir" if image else "Yükle"):
                        if file is None:
                            st.error("Lütfen resim adı ve resim seçiniz")
                        else:
                            try:
                                about_svc.upload_about_image(file.name, file.getvalue(), file.type, name, slot)
                                st.success("Görsel yüklendi")
                                st.rerun()
                            except (ValueError, StoreError) as e:
                                st.error(e)
                if image and st.button("Sil", key=f"about_del_{slot}"):
                    try:
                        about_svc.delete_about_image(image.id)
                        st.warning("Görsel silindi")
                        st.rerun()
                    except StoreError as e:
                        st.error(e)
