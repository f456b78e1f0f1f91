# data_access/profile_repo.py
from typing import Optional

from core.config import BIO_KEY_PREFIX
from core.storage import KeyValueStore


def load_bio(store: KeyValueStore, user_id: str) -> Optional[str]:
    return store.get_item(f"{BIO_KEY_PREFIX}{user_id}")

def save_bio(store: KeyValueStore, user_id: str, bio: str) -> None:
    store.set_item(f"{BIO_KEY_PREFIX}{user_id}", bio)
