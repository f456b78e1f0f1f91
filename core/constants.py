# core/constants.py
from enum import Enum
from typing import List, Tuple


class Tab(Enum):
    DASHBOARD = "dashboard"
    CONNECTIONS = "connections"
    MESSAGES = "messages"
    PROGRESS = "progress"
    PROFILE = "profile"

    @property
    def label(self) -> str:
        return TAB_LABELS[self]


TAB_LABELS = {
    Tab.DASHBOARD: "🏠 Dashboard",
    Tab.CONNECTIONS: "👥 Connections",
    Tab.MESSAGES: "💬 Messages",
    Tab.PROGRESS: "📈 Progress",
    Tab.PROFILE: "🙂 Profile",
}

DEFAULT_TAB = Tab.DASHBOARD

# (days, title)
MILESTONES: List[Tuple[int, str]] = [
    (30, "30 Days Strong"),
    (60, "Two Months"),
    (90, "Quarter Year"),
    (180, "Half Year Hero"),
    (365, "One Year Champion"),
]

CHECKIN_SCALE_MIN = 0
CHECKIN_SCALE_MAX = 10

REQUEST_PENDING = "pending"
REQUEST_SENT = "sent"
REQUEST_CONNECTED = "connected"
ALLOWED_REQUEST_STATUSES = {REQUEST_PENDING, REQUEST_SENT, REQUEST_CONNECTED}

MY_SENDER = "Me"
