# data_access/checkins_repo.py
import json
import logging
from typing import List, Optional

from core.config import CHECKIN_KEY_PREFIX
from core.models import CheckIn
from core.storage import KeyValueStore

logger = logging.getLogger(__name__)


def checkin_key(day: str) -> str:
    return f"{CHECKIN_KEY_PREFIX}{day}"

def _parse(raw: Optional[str], key: str) -> Optional[CheckIn]:
    if raw is None:
        return None
    try:
        doc = json.loads(raw)
        if not isinstance(doc, dict):
            raise TypeError(f"expected object, got {type(doc).__name__}")
        return CheckIn.from_doc(doc)
    except (ValueError, TypeError, KeyError) as e:
        logger.warning("Ignoring malformed check-in %s: %s", key, e)
        return None

def save_checkin(store: KeyValueStore, checkin: CheckIn) -> str:
    """Write the check-in under its date key, replacing any entry for that day."""
    key = checkin_key(checkin.date)
    store.set_item(key, json.dumps(checkin.to_doc()))
    return key

def get_checkin(store: KeyValueStore, day: str) -> Optional[CheckIn]:
    key = checkin_key(day)
    return _parse(store.get_item(key), key)

def list_checkins(store: KeyValueStore) -> List[CheckIn]:
    out = []
    for key in store.keys(CHECKIN_KEY_PREFIX):
        ci = _parse(store.get_item(key), key)
        if ci is not None:
            out.append(ci)
    return sorted(out, key=lambda c: c.date)
