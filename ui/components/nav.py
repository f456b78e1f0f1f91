# ui/components/nav.py
import streamlit as st

from core.config import APP_TITLE
from core.constants import Tab
from services.auth_service import SessionContext
from ui.state import MOBILE_NAV_KEY, TOP_NAV_KEY, get_active_tab, reset_session_state, set_active_tab


def _on_nav(widget_key: str):
    set_active_tab(st.session_state[widget_key])

def _ensure_nav_value(widget_key: str):
    if widget_key not in st.session_state:
        st.session_state[widget_key] = get_active_tab()

def render_header(ctx: SessionContext):
    left, right = st.columns([0.8, 0.2])
    with left:
        st.markdown(f"### {APP_TITLE}")
        st.caption(f"Welcome back, **{ctx.user.name}**")
    with right:
        if st.button("🚪 Logout", width="stretch", key="header_logout"):
            logout(ctx)

def render_top_nav():
    _ensure_nav_value(TOP_NAV_KEY)
    st.radio(
        "Navigate", list(Tab), key=TOP_NAV_KEY,
        format_func=lambda t: t.label, horizontal=True, label_visibility="collapsed",
        on_change=_on_nav, args=(TOP_NAV_KEY,),
    )

def render_mobile_nav():
    _ensure_nav_value(MOBILE_NAV_KEY)
    st.sidebar.radio(
        "Menu", list(Tab), key=MOBILE_NAV_KEY,
        format_func=lambda t: t.label,
        on_change=_on_nav, args=(MOBILE_NAV_KEY,),
    )

def logout(ctx: SessionContext):
    ctx.invalidate()
    reset_session_state()
    st.rerun()
