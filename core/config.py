# core/config.py
import os
from typing import Optional

import streamlit as st


def _setting(key: str, default: Optional[str] = None) -> Optional[str]:
    try:
        val = st.secrets.get(key)
    except Exception:
        # no secrets.toml in this environment
        val = None
    if val is None or str(val).strip() == "":
        val = os.getenv(key)
    return str(val).strip() if (val is not None and str(val).strip() != "") else default


APP_TITLE = _setting("APP_TITLE", "GLRS Recovery Connect")
PAGE_ICON = _setting("PAGE_ICON", "🤝")

MONGO_URI = _setting("MONGO_URI") or _setting("mongo_uri")
DB_NAME = _setting("DB_NAME", "GLRS_DB")
KV_COLLECTION = _setting("KV_COLLECTION", "local_storage")
STORAGE_BACKEND = (_setting("STORAGE_BACKEND") or ("mongo" if MONGO_URI else "memory")).lower()

APP_TIMEZONE = _setting("APP_TIMEZONE", "UTC")
LOG_LEVEL = _setting("LOG_LEVEL", "INFO")

# storage keys
SESSION_KEY = "glrs_user"
CHECKIN_KEY_PREFIX = "glrs_checkin_"
BIO_KEY_PREFIX = "glrs_bio_"
