from __future__ import annotations

import streamlit as st

from oleum.config import get_settings
from oleum.device import browser_storage, flush
from oleum.session import SessionStore
from oleum.shell import TAB_TITLES, Tab, enter_screen, route
from oleum.utils import configure_logging

st.set_page_config(page_title="Oleum", page_icon="🫒", layout="centered")

settings = get_settings()
configure_logging(settings.log_level)

storage = browser_storage(st.session_state)
flush(storage)

session = SessionStore(storage, st.session_state)
user = session.restore()

if user is None:
    # Auth owns the whole screen until a session exists.
    st.navigation([st.Page("auth.py", title="Sign In", icon="🍃", url_path="auth")], position="hidden").run()
    st.stop()


def _sign_out() -> None:
    session.clear()


header_l, header_r = st.columns([4, 1], vertical_alignment="center")
with header_l:
    st.markdown("### 🫒 Oleum")
    st.caption(f"Hello, {user.name}")
with header_r:
    st.button("Sign out", icon="🚪", key="sign_out", on_click=_sign_out, use_container_width=True)

pages = {
    Tab.ORDER: st.Page("pages/1_🫒_New_Order.py", title=TAB_TITLES[Tab.ORDER], icon="➕", url_path="order", default=True),
    Tab.NETWORK: st.Page("pages/2_🌍_Network.py", title=TAB_TITLES[Tab.NETWORK], icon="🌍", url_path="network"),
    Tab.TRIPS: st.Page("pages/3_🚚_Trips.py", title=TAB_TITLES[Tab.TRIPS], icon="🚚", url_path="trips"),
}

current = st.navigation(list(pages.values()), position="top")
requested = next(t for t, p in pages.items() if p.title == current.title)
tab = route(st.session_state, requested)
if tab != requested:
    st.switch_page(pages[tab])

enter_screen(st.session_state, tab)
current.run()
