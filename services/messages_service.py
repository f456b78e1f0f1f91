# services/messages_service.py
from datetime import datetime
from typing import Any, Dict, List, Optional

from core import seed
from core.constants import MY_SENDER
from core.time_utils import format_hhmm, now_local


def initial_state(now: Optional[datetime] = None) -> Dict[str, Any]:
    return {
        "conversations": seed.conversations(now),
        "selected": None,       # conversation id, None = list view
        "messages": [],
    }

def open_conversation(state: Dict[str, Any], conversation_id: int) -> bool:
    conv = next((c for c in state["conversations"] if c["id"] == conversation_id), None)
    if conv is None:
        return False
    state["selected"] = conversation_id
    state["messages"] = seed.thread(conversation_id) or []
    conv["unread"] = False
    return True

def close_conversation(state: Dict[str, Any]) -> None:
    state["selected"] = None
    state["messages"] = []

def selected_conversation(state: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    sel = state.get("selected")
    if sel is None:
        return None
    return next((c for c in state["conversations"] if c["id"] == sel), None)

def send_message(messages: List[Dict[str, Any]], text: str,
                 now: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
    """Append an outgoing message; blank text is ignored."""
    if not text or not text.strip():
        return None
    msg = {
        "id": len(messages) + 1,
        "sender": MY_SENDER,
        "text": text,
        "time": format_hhmm(now or now_local()),
        "is_mine": True,
    }
    messages.append(msg)
    return msg
