# services/recovery_service.py
from datetime import date, datetime
from typing import Any, Dict, List, Optional, Sequence, Union

import numpy as np

from core.constants import MILESTONES
from core.models import CheckIn, clamp_level
from core.time_utils import days_since, now_local


def days_in_recovery(recovery_date: Union[date, str], now: Optional[datetime] = None) -> int:
    return days_since(recovery_date, now or now_local())

def milestone_status(days: int) -> List[Dict[str, Any]]:
    return [{"days": d, "title": title, "achieved": days >= d} for d, title in MILESTONES]

def next_milestone(days: int) -> Optional[Dict[str, Any]]:
    for d, title in MILESTONES:
        if days < d:
            return {"days": d, "title": title, "remaining": d - days}
    return None

def build_checkin(day: str, energy: int, connection: int, win: str = "", focus: str = "") -> CheckIn:
    return CheckIn(
        date=day,
        energy=clamp_level(energy),
        connection=clamp_level(connection),
        win=win or "",
        focus=focus or "",
    )

def checkin_averages(checkins: Sequence[CheckIn]) -> Dict[str, float]:
    if not checkins:
        return {"energy": 0.0, "connection": 0.0, "count": 0}
    energy = np.array([c.energy for c in checkins], dtype=float)
    conn = np.array([c.connection for c in checkins], dtype=float)
    return {
        "energy": round(float(energy.mean()), 1),
        "connection": round(float(conn.mean()), 1),
        "count": len(checkins),
    }
