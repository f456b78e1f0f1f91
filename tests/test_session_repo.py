"""Tests for data_access.session_repo."""

import json

from core.config import SESSION_KEY
from data_access import session_repo


class TestSessionRepo:
    def test_load_empty(self, store):
        assert session_repo.load(store) is None

    def test_save_then_load(self, store, user):
        session_repo.save(store, user)
        assert session_repo.load(store) == user

    def test_wire_format(self, store, user):
        session_repo.save(store, user)
        doc = json.loads(store.get_item(SESSION_KEY))
        assert doc == {
            "id": user.id,
            "email": "sam@example.com",
            "name": "Sam",
            "recoveryDate": "2023-12-01",
            "joinedDate": "2024-01-15T14:30:00+00:00",
        }

    def test_clear(self, store, user):
        session_repo.save(store, user)
        session_repo.clear(store)
        assert session_repo.load(store) is None
        assert store.get_item(SESSION_KEY) is None

    def test_malformed_json_is_absent(self, store):
        store.set_item(SESSION_KEY, "{not json")
        assert session_repo.load(store) is None

    def test_wrong_shape_is_absent(self, store):
        store.set_item(SESSION_KEY, "[1, 2]")
        assert session_repo.load(store) is None
        store.set_item(SESSION_KEY, json.dumps({"id": "1", "email": "a@b.c"}))
        assert session_repo.load(store) is None

    def test_bad_recovery_date_is_absent(self, store, user):
        doc = user.to_doc()
        doc["recoveryDate"] = "yesterday"
        store.set_item(SESSION_KEY, json.dumps(doc))
        assert session_repo.load(store) is None
