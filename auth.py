from __future__ import annotations

import streamlit as st

from oleum.backend import get_client
from oleum.config import get_settings
from oleum.device import browser_storage
from oleum.errors import OleumError
from oleum.services.auth import login, signup
from oleum.session import SessionStore

st.markdown("<h1 style='text-align:center'>🍃 Oleum</h1>", unsafe_allow_html=True)
st.markdown("<p style='text-align:center'>Supply Chain Management</p>", unsafe_allow_html=True)

settings = get_settings()
session = SessionStore(browser_storage(st.session_state), st.session_state)

st.session_state.setdefault("auth_mode", "login")
st.session_state.setdefault("auth_error", None)
st.session_state.setdefault("auth_busy", False)
is_login = st.session_state["auth_mode"] == "login"
busy = st.session_state["auth_busy"]


def _toggle_mode() -> None:
    st.session_state["auth_mode"] = "signup" if st.session_state["auth_mode"] == "login" else "login"
    st.session_state["auth_error"] = None


def _begin() -> None:
    st.session_state["auth_busy"] = True
    st.session_state["auth_error"] = None


with st.form("auth_form", border=True):
    st.text_input("Username", placeholder="Enter your username", key="auth_username")
    st.text_input("Password", type="password", placeholder="••••••••", key="auth_password")
    st.form_submit_button(
        "Sign In" if is_login else "Sign Up",
        type="primary",
        key="auth_submit",
        on_click=_begin,
        disabled=busy,
        use_container_width=True,
    )

if busy:
    user = None
    try:
        with st.spinner("Signing in..." if is_login else "Creating account..."):
            client = get_client(settings)
            username = st.session_state.get("auth_username", "")
            password = st.session_state.get("auth_password", "")
            user = login(client, username, password) if is_login else signup(client, username, password)
    except OleumError as e:
        st.session_state["auth_error"] = str(e)
    finally:
        st.session_state["auth_busy"] = False
    if user is not None:
        session.save(user)
    st.rerun()

if st.session_state["auth_error"]:
    st.error(st.session_state["auth_error"])

c1, c2 = st.columns([3, 2], vertical_alignment="center")
c1.caption("New to Oleum?" if is_login else "Already have an account?")
c2.button("Sign Up" if is_login else "Log In", key="auth_toggle", on_click=_toggle_mode, type="tertiary", disabled=busy)
