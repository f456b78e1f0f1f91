# services/connections_service.py
import logging
from typing import Any, Dict, Optional

from core import seed
from core.constants import REQUEST_CONNECTED, REQUEST_SENT

logger = logging.getLogger(__name__)


def initial_state() -> Dict[str, Any]:
    return {
        "requests": seed.requests(),
        "connections": seed.connections(),
        "matches": seed.potential_matches(),
    }

def _find(items, item_id) -> Optional[Dict[str, Any]]:
    return next((it for it in items if it["id"] == item_id), None)

def connect(state: Dict[str, Any], match_id: int) -> bool:
    """Queue a "sent" request for a potential match.

    The match stays in the candidate list and repeated calls queue repeated
    requests.
    """
    match = _find(state["matches"], match_id)
    if match is None:
        return False
    state["requests"].append({
        "id": match["id"],
        "name": match["name"],
        "days": match["days"],
        "interests": list(match["interests"]),
        "status": REQUEST_SENT,
    })
    logger.info("Connection request sent to match %s", match_id)
    return True

def accept(state: Dict[str, Any], request_id: int) -> bool:
    req = _find(state["requests"], request_id)
    if req is None:
        return False
    state["connections"].append({**req, "interests": list(req["interests"]), "status": REQUEST_CONNECTED})
    state["requests"] = [r for r in state["requests"] if r["id"] != request_id]
    logger.info("Accepted connection request %s", request_id)
    return True

def decline(state: Dict[str, Any], request_id: int) -> bool:
    before = len(state["requests"])
    state["requests"] = [r for r in state["requests"] if r["id"] != request_id]
    removed = len(state["requests"]) != before
    if removed:
        logger.info("Declined connection request %s", request_id)
    return removed
