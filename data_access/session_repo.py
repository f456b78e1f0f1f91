# data_access/session_repo.py
import json
import logging
from typing import Optional

from core.config import SESSION_KEY
from core.models import User
from core.storage import KeyValueStore

logger = logging.getLogger(__name__)


def load(store: KeyValueStore) -> Optional[User]:
    raw = store.get_item(SESSION_KEY)
    if raw is None:
        return None
    try:
        doc = json.loads(raw)
        if not isinstance(doc, dict):
            raise TypeError(f"expected object, got {type(doc).__name__}")
        return User.from_doc(doc)
    except (ValueError, TypeError, KeyError) as e:
        logger.warning("Ignoring malformed session record: %s", e)
        return None

def save(store: KeyValueStore, user: User) -> User:
    store.set_item(SESSION_KEY, json.dumps(user.to_doc()))
    return user

def clear(store: KeyValueStore) -> None:
    store.remove_item(SESSION_KEY)
