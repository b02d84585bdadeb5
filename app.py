import streamlit as st
import datetime as dt
from urllib.parse import unquote

from services import auth
from utils.logging_setup import configure_logging
from utils.settings import get_settings

# Import the page rendering functions from the view modules
from views import overview, speakers, partners, teams, faq, about, data, login

# --- Page Registry ---
# Maps a page key to its sidebar label and rendering function.
PAGE_REGISTRY = {
    "overview": {
        "label": "📈 Genel Bakış",
        "render_func": overview.view,
    },
    "speakers": {
        "label": "🎤 Konuşmacılar",
        "render_func": speakers.view,
    },
    "partners": {
        "label": "🤝 Sponsorlar",
        "render_func": partners.view,
    },
    "teams": {
        "label": "👥 Takım",
        "render_func": teams.view,
    },
    "faq": {
        "label": "❓ SSS",
        "render_func": faq.view,
    },
    "about": {
        "label": "🖼️ Hakkımızda",
        "render_func": about.view,
    },
    "data": {
        "label": "💾 Veri Yönetimi",
        "render_func": data.view,
    },
}

LOGIN_PAGE = login.view


def main():
    """
    Main application router.

    Until an admin is logged in only the login / sign-up page is shown.
    Afterwards the sidebar lists every dashboard page; the selection is
    mirrored into the ``page`` query parameter so reloads keep the page.
    """
    configure_logging()
    st.set_page_config(page_title="Etkinlik Yönetim Paneli", layout="wide")

    st.sidebar.title("Yönetim Paneli")

    if 'admin_id' not in st.session_state:
        LOGIN_PAGE()
        return

    st.sidebar.caption(f"Giriş yapan: {st.session_state.get('admin_email', '-')}")
    if st.sidebar.button("Çıkış yap"):
        auth.log_out(st.session_state)
        st.rerun()

    page_keys = list(PAGE_REGISTRY.keys())
    page_labels = [v["label"] for v in PAGE_REGISTRY.values()]

    # Query param persistence
    qs = st.query_params
    if 'page' in qs and 'navigation_radio' not in st.session_state:
        raw_param = qs.get('page')
        raw = unquote(raw_param) if isinstance(raw_param, str) else ''
        if raw in page_labels:
            st.session_state.navigation_radio = raw

    selected_page_label = st.sidebar.radio(
        "Sayfalar",
        page_labels,
        key="navigation_radio"
    )
    st.query_params['page'] = selected_page_label
    selected_page_key = page_keys[page_labels.index(selected_page_label)]

    # --- Page Rendering ---
    PAGE_REGISTRY[selected_page_key]["render_func"]()

    # --- Footer ---
    st.sidebar.markdown("---")
    st.sidebar.caption(
        f"Data dir: {get_settings().data_dir} | {dt.datetime.now(dt.timezone.utc).strftime('%H:%M:%S')}Z"
    )


if __name__ == "__main__":
    main()
