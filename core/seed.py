# core/seed.py
"""Demo records every session starts from. Callers get fresh copies."""
import copy
from datetime import timedelta
from typing import Any, Dict, List, Optional

from core.constants import REQUEST_CONNECTED, REQUEST_PENDING
from core.time_utils import now_local

_REQUESTS = [
    {"id": 1, "name": "Sarah M.", "days": 45, "interests": ["Yoga", "Reading"], "status": REQUEST_PENDING},
    {"id": 2, "name": "Mike T.", "days": 120, "interests": ["Hiking", "Music"], "status": REQUEST_PENDING},
]

_CONNECTIONS = [
    {"id": 10, "name": "Jessica R.", "days": 200, "interests": ["Art", "Meditation"], "status": REQUEST_CONNECTED},
    {"id": 11, "name": "David K.", "days": 90, "interests": ["Running", "Cooking"], "status": REQUEST_CONNECTED},
    {"id": 12, "name": "Emma L.", "days": 365, "interests": ["Writing", "Yoga"], "status": REQUEST_CONNECTED},
]

_MATCHES = [
    {"id": 3, "name": "Alex P.", "days": 60, "interests": ["Music", "Gaming"], "compatibility": 92},
    {"id": 4, "name": "Rachel S.", "days": 30, "interests": ["Yoga", "Journaling"], "compatibility": 88},
    {"id": 5, "name": "Chris B.", "days": 150, "interests": ["Hiking", "Photography"], "compatibility": 85},
]

_CONVERSATIONS = [
    {"id": 1, "name": "Jessica R.", "minutes_ago": 5, "unread": True},
    {"id": 2, "name": "David K.", "minutes_ago": 60, "unread": False},
    {"id": 3, "name": "Support Group", "minutes_ago": 60 * 26, "unread": False},
]

_THREADS = {
    1: [
        {"id": 1, "sender": "Jessica R.", "text": "Hey! How was your day?", "time": "10:30", "is_mine": False},
        {"id": 2, "sender": "Me", "text": "Pretty good! Made it to my meeting this morning.", "time": "10:32", "is_mine": True},
        {"id": 3, "sender": "Jessica R.", "text": "That's awesome! Proud of you 💪", "time": "10:33", "is_mine": False},
    ],
    2: [
        {"id": 1, "sender": "David K.", "text": "Thanks for the support yesterday", "time": "09:15", "is_mine": False},
        {"id": 2, "sender": "Me", "text": "Anytime. We've got this.", "time": "09:20", "is_mine": True},
    ],
    3: [
        {"id": 1, "sender": "Emma L.", "text": "Meeting moved to 7pm tonight", "time": "18:02", "is_mine": False},
    ],
}

WEEKLY_STATS = [
    {"label": "Check-ins", "value": 6, "target": 7},
    {"label": "Meetings attended", "value": 3, "target": 3},
    {"label": "Peer messages", "value": 24, "target": 20},
]

GROWTH_AREAS = [
    {"area": "Emotional wellness", "pct": 75},
    {"area": "Physical health", "pct": 60},
    {"area": "Social connection", "pct": 85},
    {"area": "Mindfulness", "pct": 50},
]

DEFAULT_INTERESTS = ["Meditation", "Reading", "Music"]
DEFAULT_BIO = "One day at a time. Grateful for this community and the people who keep showing up."


def requests() -> List[Dict[str, Any]]:
    return copy.deepcopy(_REQUESTS)

def connections() -> List[Dict[str, Any]]:
    return copy.deepcopy(_CONNECTIONS)

def potential_matches() -> List[Dict[str, Any]]:
    return copy.deepcopy(_MATCHES)

def conversations(now=None) -> List[Dict[str, Any]]:
    now = now or now_local()
    out = []
    for c in _CONVERSATIONS:
        thread = _THREADS.get(c["id"], [])
        out.append({
            "id": c["id"],
            "name": c["name"],
            "last_message": thread[-1]["text"] if thread else "",
            "last_at": now - timedelta(minutes=c["minutes_ago"]),
            "unread": c["unread"],
        })
    return out

def thread(conversation_id: int) -> Optional[List[Dict[str, Any]]]:
    msgs = _THREADS.get(conversation_id)
    return copy.deepcopy(msgs) if msgs is not None else None
