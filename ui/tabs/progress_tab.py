# ui/tabs/progress_tab.py
import pandas as pd
import plotly.express as px
import streamlit as st

from core import seed
from data_access.checkins_repo import list_checkins
from services.auth_service import SessionContext
from services.recovery_service import checkin_averages, days_in_recovery, milestone_status


def render_progress_tab(ctx: SessionContext):
    st.header("📈 Progress")
    days = days_in_recovery(ctx.user.recovery_date)
    st.metric("Days in recovery", days)
    st.caption(f"Since {ctx.user.recovery_date}")

    st.subheader("🏆 Milestones")
    cols = st.columns(5)
    for col, m in zip(cols, milestone_status(days)):
        with col:
            st.markdown(f"{'🏅' if m['achieved'] else '🔒'} **{m['days']} days**")
            st.caption(m["title"])

    st.divider()
    st.subheader("📅 This Week")
    wk = st.columns(len(seed.WEEKLY_STATS))
    for col, s in zip(wk, seed.WEEKLY_STATS):
        col.metric(s["label"], f"{s['value']}/{s['target']}")

    st.subheader("🌱 Growth Areas")
    for g in seed.GROWTH_AREAS:
        st.progress(g["pct"] / 100.0, text=f"{g['area']} · {g['pct']}%")

    st.divider()
    st.subheader("🧭 Check-in History")
    history = list_checkins(ctx.store)
    if not history:
        st.info("No check-ins yet. Submit one from the Dashboard to start your history.")
        return

    avg = checkin_averages(history)
    a1, a2, a3 = st.columns(3)
    a1.metric("Check-ins", avg["count"])
    a2.metric("Avg energy", f"{avg['energy']:.1f}")
    a3.metric("Avg connection", f"{avg['connection']:.1f}")

    df = pd.DataFrame([c.to_doc() for c in history])
    df["date"] = pd.to_datetime(df["date"], errors="coerce")
    df.dropna(subset=["date"], inplace=True)
    fig = px.line(df, x="date", y=["energy", "connection"], markers=True,
                  range_y=[0, 10], labels={"value": "level", "variable": ""})
    st.plotly_chart(fig, width="stretch")
    st.dataframe(
        df.sort_values("date", ascending=False)[["date", "energy", "connection", "win", "focus"]],
        width="stretch", hide_index=True
    )
