"""Tests for services.auth_service."""

from datetime import date

import pytest

from core.config import SESSION_KEY
from data_access import session_repo
from services.auth_service import SessionContext, authenticate, build_user, display_name_for


class TestBuildUser:
    def test_name_defaults_to_email_local_part(self, fixed_now):
        u = build_user("jordan.lee@example.com", now=fixed_now)
        assert u.name == "jordan.lee"

    def test_blank_name_falls_back(self, fixed_now):
        assert build_user("a@b.com", name="   ", now=fixed_now).name == "a"

    def test_explicit_name_kept(self, fixed_now):
        assert build_user("a@b.com", name="Alex", now=fixed_now).name == "Alex"

    def test_local_part_is_before_first_at(self):
        assert display_name_for("x@y@z.com") == "x"
        assert display_name_for("no-at-sign") == "no-at-sign"

    def test_defaults(self, fixed_now):
        u = build_user("a@b.com", now=fixed_now)
        assert u.recovery_date == "2024-01-15"
        assert u.joined_date == fixed_now.isoformat()
        assert u.id == str(int(fixed_now.timestamp() * 1000))

    def test_recovery_date_given(self, fixed_now):
        assert build_user("a@b.com", recovery_date=date(2023, 6, 1), now=fixed_now).recovery_date == "2023-06-01"
        assert build_user("a@b.com", recovery_date="2023-06-02", now=fixed_now).recovery_date == "2023-06-02"

    def test_malformed_email_accepted(self, fixed_now):
        assert build_user("not-an-email", now=fixed_now).email == "not-an-email"

    def test_name_ignores_surrounding_whitespace(self, fixed_now):
        u = build_user(" bob@x.com ", now=fixed_now)
        assert u.email == "bob@x.com"
        assert u.name == "bob"

    def test_bad_recovery_date_rejected(self, fixed_now):
        with pytest.raises(ValueError):
            build_user("a@b.com", recovery_date="someday", now=fixed_now)


class TestSessionContext:
    def test_restore_empty(self, memory_store):
        ctx = SessionContext.restore(memory_store)
        assert ctx.user is None
        assert not ctx.is_authenticated

    def test_authenticate_persists(self, memory_store, fixed_now):
        ctx = SessionContext.restore(memory_store)
        u = authenticate(ctx, "sam@example.com", "pw", now=fixed_now)
        assert u is not None and ctx.user == u
        assert session_repo.load(memory_store) == u
        assert SessionContext.restore(memory_store).user == u

    def test_authenticate_requires_email_and_password(self, memory_store):
        ctx = SessionContext.restore(memory_store)
        assert authenticate(ctx, "", "pw") is None
        assert authenticate(ctx, "sam@example.com", "") is None
        assert memory_store.get_item(SESSION_KEY) is None

    def test_invalidate_clears_store(self, memory_store, user):
        ctx = SessionContext(user=None, store=memory_store)
        ctx.sign_in(user)
        ctx.invalidate()
        assert ctx.user is None
        assert memory_store.get_item(SESSION_KEY) is None
        assert not SessionContext.restore(memory_store).is_authenticated
