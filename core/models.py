# core/models.py
from dataclasses import dataclass
from datetime import date
from typing import Any, Dict

from core.constants import CHECKIN_SCALE_MAX, CHECKIN_SCALE_MIN
from core.time_utils import parse_iso_date


@dataclass(frozen=True)
class User:
    id: str
    email: str
    name: str
    recovery_date: str      # ISO date
    joined_date: str        # ISO timestamp

    def __post_init__(self):
        parse_iso_date(self.recovery_date)

    @property
    def recovery_start(self) -> date:
        return parse_iso_date(self.recovery_date)

    def to_doc(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "name": self.name,
            "recoveryDate": self.recovery_date,
            "joinedDate": self.joined_date,
        }

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "User":
        return cls(
            id=str(doc["id"]),
            email=str(doc["email"]),
            name=str(doc["name"]),
            recovery_date=str(doc["recoveryDate"]),
            joined_date=str(doc["joinedDate"]),
        )


def clamp_level(value: Any) -> int:
    return min(max(int(value), CHECKIN_SCALE_MIN), CHECKIN_SCALE_MAX)


@dataclass(frozen=True)
class CheckIn:
    date: str               # ISO date, one per day
    energy: int
    connection: int
    win: str = ""
    focus: str = ""

    def to_doc(self) -> Dict[str, Any]:
        return {
            "energy": int(self.energy),
            "connection": int(self.connection),
            "win": self.win,
            "focus": self.focus,
            "date": self.date,
        }

    @classmethod
    def from_doc(cls, doc: Dict[str, Any]) -> "CheckIn":
        return cls(
            date=str(doc["date"]),
            energy=int(doc["energy"]),
            connection=int(doc["connection"]),
            win=str(doc.get("win") or ""),
            focus=str(doc.get("focus") or ""),
        )
