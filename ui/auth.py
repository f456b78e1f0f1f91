# ui/auth.py
from datetime import timedelta

import streamlit as st

from core.config import APP_TITLE
from core.time_utils import now_local
from services.auth_service import SessionContext, authenticate


def render_auth_screen(ctx: SessionContext):
    _, mid, _ = st.columns([1, 2, 1])
    with mid:
        st.title(APP_TITLE)
        st.caption("Recovery connection and support")

        signing_up = st.toggle("New here? Create an account", key="auth_sign_up")
        today = now_local().date()

        with st.form("auth_form", clear_on_submit=False):
            name = st.text_input("Name") if signing_up else None
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            recovery = (
                st.date_input("Recovery start date", value=today,
                              min_value=today - timedelta(days=365 * 50))
                if signing_up else None
            )
            submitted = st.form_submit_button(
                "Create Account" if signing_up else "Sign In", width="stretch"
            )

        if submitted:
            if authenticate(ctx, email, password, name=name, recovery_date=recovery) is not None:
                st.rerun()
