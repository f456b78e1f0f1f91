# ui/tabs/messages_tab.py
import streamlit as st

from core.constants import Tab
from core.time_utils import relative_label
from services import messages_service as svc
from services.auth_service import SessionContext
from ui.state import tab_state, widget_key

TAB = Tab.MESSAGES


def _render_list(state):
    for conv in state["conversations"]:
        with st.container(border=True):
            info, act = st.columns([0.75, 0.25])
            with info:
                dot = "🔵 " if conv["unread"] else ""
                st.markdown(f"{dot}**{conv['name']}** · {relative_label(conv['last_at'])}")
                st.caption(conv["last_message"])
            with act:
                if st.button("Open", key=widget_key(TAB, f"open_{conv['id']}"), width="stretch"):
                    svc.open_conversation(state, conv["id"])
                    st.rerun()

def _render_thread(state, conv):
    if st.button("← Back", key=widget_key(TAB, "back")):
        svc.close_conversation(state)
        st.rerun()
    st.subheader(conv["name"])

    for msg in state["messages"]:
        with st.chat_message("user" if msg["is_mine"] else "assistant"):
            st.markdown(msg["text"])
            st.caption(f"{msg['sender']} · {msg['time']}")

    text = st.chat_input("Type a message…", key=widget_key(TAB, "input"))
    if text is not None and svc.send_message(state["messages"], text):
        st.rerun()

def render_messages_tab(ctx: SessionContext):
    state = tab_state(TAB, svc.initial_state)
    st.header("💬 Messages")
    conv = svc.selected_conversation(state)
    if conv is None:
        _render_list(state)
    else:
        _render_thread(state, conv)
