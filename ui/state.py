# ui/state.py
from typing import Any, Callable, Dict

import streamlit as st

from core.constants import DEFAULT_TAB, Tab

ACTIVE_TAB_KEY = "active_tab"
TOP_NAV_KEY = "nav_top"
MOBILE_NAV_KEY = "nav_mobile"


def _tab_key(tab: Tab) -> str:
    return f"tab::{tab.value}"

def get_active_tab() -> Tab:
    if ACTIVE_TAB_KEY not in st.session_state:
        st.session_state[ACTIVE_TAB_KEY] = DEFAULT_TAB
    return st.session_state[ACTIVE_TAB_KEY]

def set_active_tab(tab: Tab) -> None:
    prev = st.session_state.get(ACTIVE_TAB_KEY)
    if prev is not None and prev != tab:
        drop_tab_state(prev)
    st.session_state[ACTIVE_TAB_KEY] = tab
    # keep both nav controls on the same selection
    st.session_state[TOP_NAV_KEY] = tab
    st.session_state[MOBILE_NAV_KEY] = tab

def tab_state(tab: Tab, factory: Callable[[], Dict[str, Any]]) -> Dict[str, Any]:
    """Local state for `tab`, created on mount and dropped on tab switch."""
    key = _tab_key(tab)
    if key not in st.session_state:
        st.session_state[key] = factory()
    return st.session_state[key]

def drop_tab_state(tab: Tab) -> None:
    prefix = _tab_key(tab)
    for k in [k for k in st.session_state.keys() if str(k).startswith(prefix)]:
        del st.session_state[k]

def widget_key(tab: Tab, name: str) -> str:
    """Widget keys carry the tab prefix so they are dropped with it."""
    return f"{_tab_key(tab)}::{name}"

def reset_session_state() -> None:
    for k in list(st.session_state.keys()):
        del st.session_state[k]
