# services/profile_service.py
from typing import Any, Dict, List, Optional

from core import seed
from core.storage import KeyValueStore
from data_access import profile_repo


def initial_state(store: Optional[KeyValueStore] = None, user_id: Optional[str] = None) -> Dict[str, Any]:
    saved = profile_repo.load_bio(store, user_id) if (store is not None and user_id) else None
    return {
        "interests": list(seed.DEFAULT_INTERESTS),
        "bio": saved if saved is not None else seed.DEFAULT_BIO,
    }

def add_interest(interests: List[str], text: str) -> bool:
    tag = (text or "").strip()
    if not tag or tag in interests:
        return False
    interests.append(tag)
    return True

def remove_interest(interests: List[str], tag: str) -> bool:
    if tag not in interests:
        return False
    interests.remove(tag)
    return True

def save_bio(store: KeyValueStore, user_id: str, bio: str) -> str:
    profile_repo.save_bio(store, user_id, bio)
    return bio
