# core/storage.py
"""Key-value persistence shim.

Values are plain strings (callers store JSON text), the same contract as
browser local storage: get/set/remove by key and enumerate keys by prefix.
"""
import re
from typing import Dict, List, Optional

from core.time_utils import utc_now_naive


class KeyValueStore:
    def get_item(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set_item(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove_item(self, key: str) -> None:
        raise NotImplementedError

    def keys(self, prefix: str = "") -> List[str]:
        raise NotImplementedError


class MemoryStore(KeyValueStore):
    """Process-local store; lives as long as the Streamlit server process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self, prefix: str = "") -> List[str]:
        return sorted(k for k in self._data if k.startswith(prefix))


class MongoStore(KeyValueStore):
    """One document per key: {_id: key, value: str, updated_at}."""

    def __init__(self, collection):
        self.col = collection

    def get_item(self, key: str) -> Optional[str]:
        doc = self.col.find_one({"_id": key}, {"value": 1})
        if not doc:
            return None
        val = doc.get("value")
        return None if val is None else str(val)

    def set_item(self, key: str, value: str) -> None:
        now = utc_now_naive()
        self.col.update_one(
            {"_id": key},
            {"$setOnInsert": {"created_at": now},
             "$set": {"value": str(value), "updated_at": now}},
            upsert=True
        )

    def remove_item(self, key: str) -> None:
        self.col.delete_one({"_id": key})

    def keys(self, prefix: str = "") -> List[str]:
        q = {"_id": {"$regex": f"^{re.escape(prefix)}"}} if prefix else {}
        return sorted(d["_id"] for d in self.col.find(q, {"_id": 1}))
