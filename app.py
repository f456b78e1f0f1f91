# app.py
import streamlit as st

from core.config import APP_TITLE, LOG_LEVEL, PAGE_ICON
from core.constants import Tab
from core.db import get_storage
from core.logging_config import setup_logging
from services.auth_service import SessionContext
from ui.auth import render_auth_screen
from ui.components.nav import render_header, render_mobile_nav, render_top_nav
from ui.state import get_active_tab
from ui.tabs.connections_tab import render_connections_tab
from ui.tabs.dashboard_tab import render_dashboard_tab
from ui.tabs.messages_tab import render_messages_tab
from ui.tabs.profile_tab import render_profile_tab
from ui.tabs.progress_tab import render_progress_tab

TAB_VIEWS = {
    Tab.DASHBOARD: render_dashboard_tab,
    Tab.CONNECTIONS: render_connections_tab,
    Tab.MESSAGES: render_messages_tab,
    Tab.PROGRESS: render_progress_tab,
    Tab.PROFILE: render_profile_tab,
}

setup_logging(LOG_LEVEL)
st.set_page_config(page_title=APP_TITLE, page_icon=PAGE_ICON, layout="wide")

ctx = SessionContext.restore(get_storage())

if not ctx.is_authenticated:
    render_auth_screen(ctx)
    st.stop()

render_header(ctx)
render_top_nav()
render_mobile_nav()
st.divider()

TAB_VIEWS[get_active_tab()](ctx)
