"""End-to-end tests for the Streamlit shell via streamlit.testing.AppTest."""

import pytest
import streamlit as st
from streamlit.testing.v1 import AppTest

from core.config import APP_TITLE
from core.constants import Tab

APP_PATH = "../app.py"


@pytest.fixture(autouse=True)
def fresh_storage():
    # get_storage() is a cache_resource; start every test with an empty store
    st.cache_resource.clear()
    yield
    st.cache_resource.clear()


def _launch():
    return AppTest.from_file(APP_PATH, default_timeout=30).run()


def _sign_in():
    at = _launch()
    at.text_input[0].input("sam@example.com")
    at.text_input[1].input("secret")
    at.button[0].click().run()
    return at


def _button(at, label):
    return next(b for b in at.button if b.label == label)


def _submit_checkin(at):
    at.slider[0].set_value(7)
    at.slider[1].set_value(9)
    at.text_input[0].input("slept well")
    at.text_input[1].input("exercise")
    _button(at, "Submit Check-in").click().run()
    return at


class TestAuthGate:
    def test_starts_on_auth_screen(self):
        at = _launch()
        assert not at.exception
        assert at.title[0].value == APP_TITLE
        assert [t.label for t in at.text_input] == ["Email", "Password"]

    def test_sign_in_opens_dashboard(self):
        at = _sign_in()
        assert not at.exception
        assert len(at.title) == 0
        assert at.header[0].value.endswith("Hi, sam")

    def test_session_survives_reload(self):
        _sign_in()
        at = _launch()
        assert len(at.title) == 0
        assert at.radio(key="nav_top").value == Tab.DASHBOARD


class TestDashboardCheckin:
    def test_submit_shows_confirmation(self):
        at = _submit_checkin(_sign_in())
        assert not at.exception
        assert "Check-in complete!" in at.success[0].value
        assert len(at.slider) == 0

    def test_logged_count_reflects_store(self):
        at = _sign_in()
        metric = next(m for m in at.metric if m.label == "Check-ins logged")
        assert metric.value == "0"
        _submit_checkin(at)
        metric = next(m for m in at.metric if m.label == "Check-ins logged")
        assert metric.value == "1"


class TestTabRouting:
    def test_top_bar_drives_mobile_bar(self):
        at = _sign_in()
        at.radio(key="nav_top").set_value(Tab.PROGRESS).run()
        assert at.radio(key="nav_mobile").value == Tab.PROGRESS
        assert at.header[0].value == "📈 Progress"

    def test_mobile_bar_drives_top_bar(self):
        at = _sign_in()
        at.radio(key="nav_mobile").set_value(Tab.MESSAGES).run()
        assert at.radio(key="nav_top").value == Tab.MESSAGES
        assert at.header[0].value == "💬 Messages"

    def test_switching_tabs_discards_local_state(self):
        at = _submit_checkin(_sign_in())
        assert len(at.success) == 1
        at.radio(key="nav_top").set_value(Tab.PROGRESS).run()
        at.radio(key="nav_top").set_value(Tab.DASHBOARD).run()
        assert len(at.success) == 0
        assert len(at.slider) == 2
        assert any("already checked in" in i.value for i in at.info)


class TestLogout:
    def test_logout_returns_to_auth_screen(self):
        at = _sign_in()
        at.button(key="header_logout").click().run()
        assert at.title[0].value == APP_TITLE
        assert [t.label for t in at.text_input] == ["Email", "Password"]

    def test_logout_clears_persisted_session(self):
        at = _sign_in()
        at.button(key="header_logout").click().run()
        at = _launch()
        assert at.title[0].value == APP_TITLE
