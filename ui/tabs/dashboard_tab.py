# ui/tabs/dashboard_tab.py
import streamlit as st

from core.constants import CHECKIN_SCALE_MAX, CHECKIN_SCALE_MIN, Tab
from core.time_utils import today_iso
from data_access.checkins_repo import get_checkin, list_checkins, save_checkin
from services.auth_service import SessionContext
from services.recovery_service import build_checkin, days_in_recovery, next_milestone
from ui.state import tab_state, widget_key

TAB = Tab.DASHBOARD


def render_dashboard_tab(ctx: SessionContext):
    user = ctx.user
    local = tab_state(TAB, lambda: {"checked_in": False})
    today = today_iso()
    days = days_in_recovery(user.recovery_date)

    st.header(f"👋 Hi, {user.name}")
    c1, c2, c3 = st.columns(3)
    c1.metric("Days in recovery", days)
    c2.metric("Check-ins logged", len(list_checkins(ctx.store)))
    nxt = next_milestone(days)
    if nxt:
        c3.metric("Next milestone", nxt["title"], f"{nxt['remaining']} days to go", delta_color="off")
    else:
        c3.metric("Next milestone", "All reached 🎉")

    st.divider()
    st.subheader("📝 Daily Check-in")

    if local["checked_in"]:
        st.success("✅ Check-in complete! Thanks for showing up for yourself today.")
        return

    if get_checkin(ctx.store, today) is not None:
        st.info("You already checked in today. Submitting again replaces today's entry.")

    with st.form(widget_key(TAB, "checkin_form"), clear_on_submit=False):
        energy = st.slider("Energy level", CHECKIN_SCALE_MIN, CHECKIN_SCALE_MAX, 5, step=1)
        connection = st.slider("Connection level", CHECKIN_SCALE_MIN, CHECKIN_SCALE_MAX, 5, step=1)
        win = st.text_input("Today's win")
        focus = st.text_input("Tomorrow's focus")
        submitted = st.form_submit_button("Submit Check-in", width="stretch")

    if submitted:
        save_checkin(ctx.store, build_checkin(today, energy, connection, win, focus))
        local["checked_in"] = True
        st.rerun()
