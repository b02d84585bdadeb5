import streamlit as st
import time

from domain.constants import TABLE_LABELS
from services import admin as admin_svc
from services.errors import StoreError


def view():
    """Provides data management functions: sample content, export, sequence repair and reset."""
    st.header("💾 Veri Yönetimi")

    with st.container(border=True):
        st.subheader("Örnek içerik oluştur")
        if st.button("Örnek konuşmacı, sponsor, takım ve SSS ekle"):
            try:
                counts = admin_svc.seed_sample_content()
                st.success("Örnek içerik eklendi: " + ", ".join(f"{TABLE_LABELS[k]} {v}" for k, v in counts.items()))
                st.rerun()
            except (ValueError, StoreError) as e:
                st.error(e)

    with st.container(border=True):
        st.subheader("Dışa aktar (CSV)")
        cols = st.columns(len(admin_svc.CONTENT_TABLES))
        for col, table in zip(cols, admin_svc.CONTENT_TABLES):
            if col.button(TABLE_LABELS[table], key=f"export_{table}"):
                csv_text = admin_svc.export_to_csv(table)
                if csv_text:
                    st.download_button(f"İndir: {table}.csv", csv_text, f"{table}.csv", "text/csv")
                else:
                    st.caption(f"{TABLE_LABELS[table]}: dışa aktarılacak kayıt yok.")

    with st.container(border=True):
        st.subheader("Sıralama onarımı")
        st.caption("Yarım kalan bir sıralama işleminden sonra boşluk veya tekrar eden sıra değerlerini düzeltir.")
        broken = [r for r in admin_svc.check_sequences() if not r.ok]
        if not broken:
            st.success("Tüm sıralamalar tutarlı.")
        else:
            for r in broken:
                st.write(f"- {TABLE_LABELS[r.table]} {r.group_key or ''}: eksik {r.missing}, tekrar eden {r.duplicates}")
            if st.button("Sıralamayı onar"):
                try:
                    changed = admin_svc.repair_all_sequences()
                    st.success(f"{changed} kayıt yeniden numaralandırıldı.")
                    st.rerun()
                except StoreError as e:
                    st.error(e)

    with st.expander("🚨 Tehlikeli Bölge: Verileri sıfırla"):
        st.warning("Dikkat: Bu işlem tüm konuşmacı, sponsor, takım, SSS ve görsel kayıtlarını ve yüklenen görsel dosyalarını kalıcı olarak siler. Geri alınamaz.")
        if st.checkbox("Riski anlıyorum ve tüm verilerin silinmesini onaylıyorum."):
            if st.text_input("Onaylamak için 'TUMUNU SIL' yazın.") == "TUMUNU SIL":
                if st.button("Tüm verileri kalıcı olarak sil", type="primary"):
                    try:
                        removed = admin_svc.reset_all_data()
                    except StoreError as e:
                        st.error(e)
                    else:
                        st.success(f"Tüm içerik ve {removed} görsel dosyası silindi (yönetici hesapları korunur).")
                        time.sleep(2)
                        st.rerun()
