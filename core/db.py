# core/db.py
import logging

import certifi
import streamlit as st
from pymongo import MongoClient

from core.config import DB_NAME, KV_COLLECTION, MONGO_URI, STORAGE_BACKEND
from core.storage import KeyValueStore, MemoryStore, MongoStore

logger = logging.getLogger(__name__)


@st.cache_resource
def get_db():
    uri = (MONGO_URI or "").strip()
    if not uri:
        st.error("MONGO_URI is not configured (set it in .streamlit/secrets.toml or the environment).")
        st.stop()
    try:
        client = MongoClient(uri, serverSelectionTimeoutMS=8000, tlsCAFile=certifi.where())
        client.admin.command("ping")
        return client[DB_NAME]
    except Exception as e:
        logger.exception("MongoDB connection failed")
        st.error(f"Could not connect to MongoDB: {e}")
        st.stop()


@st.cache_resource
def get_storage() -> KeyValueStore:
    if STORAGE_BACKEND == "mongo":
        logger.info("Using Mongo storage (%s.%s)", DB_NAME, KV_COLLECTION)
        return MongoStore(get_db()[KV_COLLECTION])
    logger.info("Using in-memory storage")
    return MemoryStore()
