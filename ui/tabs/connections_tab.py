# ui/tabs/connections_tab.py
import streamlit as st

from core.constants import REQUEST_SENT, Tab
from services import connections_service as svc
from services.auth_service import SessionContext
from ui.state import tab_state, widget_key

TAB = Tab.CONNECTIONS


def _tags(interests):
    return " · ".join(interests) if interests else "—"

def render_connections_tab(ctx: SessionContext):
    state = tab_state(TAB, svc.initial_state)
    st.header("👥 Connections")

    st.subheader(f"📨 Requests ({len(state['requests'])})")
    if not state["requests"]:
        st.info("No pending requests.")
    for i, req in enumerate(state["requests"]):
        with st.container(border=True):
            info, act = st.columns([0.65, 0.35])
            with info:
                st.markdown(f"**{req['name']}** · {req['days']} days")
                st.caption(_tags(req["interests"]))
            with act:
                if req["status"] == REQUEST_SENT:
                    st.caption("⏳ Request sent")
                    continue
                a, d = st.columns(2)
                if a.button("Accept", key=widget_key(TAB, f"accept_{i}_{req['id']}"), width="stretch"):
                    svc.accept(state, req["id"])
                    st.rerun()
                if d.button("Decline", key=widget_key(TAB, f"decline_{i}_{req['id']}"), width="stretch"):
                    svc.decline(state, req["id"])
                    st.rerun()

    st.divider()
    st.subheader(f"🤝 My Connections ({len(state['connections'])})")
    for conn in state["connections"]:
        with st.container(border=True):
            st.markdown(f"**{conn['name']}** · {conn['days']} days")
            st.caption(_tags(conn["interests"]))

    st.divider()
    st.subheader("✨ Potential Matches")
    for m in state["matches"]:
        with st.container(border=True):
            info, act = st.columns([0.65, 0.35])
            with info:
                st.markdown(f"**{m['name']}** · {m['days']} days · {m['compatibility']}% match")
                st.caption(_tags(m["interests"]))
            with act:
                if st.button("Connect", key=widget_key(TAB, f"connect_{m['id']}"), width="stretch"):
                    svc.connect(state, m["id"])
                    st.toast(f"Request sent to {m['name']}")
                    st.rerun()
