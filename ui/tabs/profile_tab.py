# ui/tabs/profile_tab.py
import streamlit as st

from core.constants import Tab
from services import profile_service as svc
from services.auth_service import SessionContext
from ui.components.nav import logout
from ui.state import tab_state, widget_key

TAB = Tab.PROFILE


def render_profile_tab(ctx: SessionContext):
    user = ctx.user
    state = tab_state(TAB, lambda: svc.initial_state(ctx.store, user.id))

    st.header("🙂 Profile")
    st.markdown(f"**{user.name}**  \n{user.email}")
    st.caption(f"Recovery start: {user.recovery_date} · Joined: {user.joined_date[:10]}")

    st.subheader("About me")
    bio = st.text_area("Bio", value=state["bio"], key=widget_key(TAB, "bio"), height=120)
    if st.button("💾 Save Bio", key=widget_key(TAB, "save_bio")):
        state["bio"] = svc.save_bio(ctx.store, user.id, bio)
        st.toast("Bio saved")

    st.subheader("Interests")
    for i, tag in enumerate(list(state["interests"])):
        c1, c2 = st.columns([0.85, 0.15])
        c1.markdown(f"• {tag}")
        if c2.button("✕", key=widget_key(TAB, f"rm_{i}_{tag}")):
            svc.remove_interest(state["interests"], tag)
            st.rerun()

    with st.form(widget_key(TAB, "interest_form"), clear_on_submit=True):
        new_tag = st.text_input("Add an interest")
        if st.form_submit_button("➕ Add"):
            svc.add_interest(state["interests"], new_tag)
            st.rerun()

    st.divider()
    if st.button("🚪 Log out", key=widget_key(TAB, "logout"), type="primary"):
        logout(ctx)
