# tabs/home_tab.py
import pandas as pd
import streamlit as st

from analytics.daily_summary import (
    WORKOUT_PLAN,
    build_exercise_cards,
    build_summary_metrics,
    format_metric,
    plan_progress_label,
)
from clients.image_loader import load_profile_image
from utils.home_state import HomeState, greeting


def _render_calendar(home: HomeState):
    with st.container(border=True):
        c_title, c_close = st.columns([4, 1])
        with c_title:
            st.subheader("Select a Date")
        with c_close:
            st.button("✕", key="calendar_close", on_click=home.close_calendar)

        picked = st.date_input("Date", value=home.selected_date)
        if picked != home.selected_date:
            home.select_date(picked)

        st.button("Done", key="calendar_done", on_click=home.close_calendar)


def render(home: HomeState, profile, image_loader):
    c_avatar, c_header, c_cal = st.columns([1, 4, 1])
    with c_avatar:
        st.image(load_profile_image(profile.snapshot(), image_loader), width=50)
    with c_header:
        st.caption(greeting(profile.name))
        st.subheader(home.header_date())
    with c_cal:
        st.button("📅", key="calendar_toggle", on_click=home.toggle_calendar)

    if home.calendar_open:
        _render_calendar(home)

    metrics = build_summary_metrics()
    with st.container(border=True):
        kcal = metrics[metrics["metric"] == "Total Kilocalories"].iloc[0]
        st.markdown("**Total Kilocalories**")
        st.metric("Today", format_metric(kcal["value"], kcal["target"], kcal["unit"]), label_visibility="collapsed")
        st.progress(kcal["progress"])

        c_dist, c_steps = st.columns(2)
        for col, name in ((c_dist, "Distance"), (c_steps, "Steps")):
            row = metrics[metrics["metric"] == name].iloc[0]
            with col:
                st.metric(name, format_metric(row["value"], row["target"], row["unit"]))
                if pd.notna(row["target"]):
                    st.progress(row["progress"])

        st.button("Details", key="details_toggle", on_click=home.toggle_details)
        if home.details_open:
            st.dataframe(metrics, hide_index=True)

    cards = build_exercise_cards()
    cols = st.columns(len(cards))
    for col, card in zip(cols, cards.itertuples(index=False)):
        with col:
            with st.container(border=True):
                st.markdown(f"{card.icon} **{card.title}**")
                st.caption(card.label)

    st.subheader("My Plan")
    st.caption(WORKOUT_PLAN["month"])
    with st.container(border=True):
        st.caption(WORKOUT_PLAN["week"])
        st.markdown(f"**{WORKOUT_PLAN['program']}**")
        st.write(plan_progress_label())
        st.caption("Next exercise")
        st.write(WORKOUT_PLAN["next_exercise"])
