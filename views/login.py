import streamlit as st

from services import auth
from services.errors import StoreError


def view():
    st.header("🔐 Yönetici Girişi")

    login_tab, signup_tab = st.tabs(["Giriş", "Kayıt ol"])
    with login_tab:
        with st.form("login_form"):
            email = st.text_input("E-posta", key="login_email")
            password = st.text_input("Şifre", type="password", key="login_password")
            if st.form_submit_button("Giriş yap"):
                try:
                    admin = auth.log_in(email, password)
                    auth.start_session(st.session_state, admin)
                    st.success("Giriş başarılı")
                    st.rerun()
                except (ValueError, StoreError) as e:
                    st.error(e)

    with signup_tab:
        if not auth.has_admins():
            st.info("Henüz yönetici hesabı yok. İlk hesabı oluşturun.")
        with st.form("signup_form", clear_on_submit=True):
            email = st.text_input("E-posta", key="signup_email")
            password = st.text_input("Şifre", type="password", key="signup_password")
            password2 = st.text_input("Şifre (tekrar)", type="password", key="signup_password2")
            if st.form_submit_button("Kayıt ol"):
                if password != password2:
                    st.error("Şifreler eşleşmiyor")
                else:
                    try:
                        admin = auth.sign_up(email, password)
                        auth.start_session(st.session_state, admin)
                        st.success("Kayıt başarılı")
                        st.rerun()
                    except (ValueError, StoreError) as e:
                        st.error(e)
