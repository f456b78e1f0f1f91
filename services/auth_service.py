# services/auth_service.py
import logging
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional, Union

from core.models import User
from core.storage import KeyValueStore
from core.time_utils import now_local
from data_access import session_repo

logger = logging.getLogger(__name__)


def display_name_for(email: str, name: Optional[str] = None) -> str:
    if name and name.strip():
        return name.strip()
    return (email or "").strip().split("@", 1)[0]

def build_user(email: str, name: Optional[str] = None,
               recovery_date: Union[date, str, None] = None,
               now: Optional[datetime] = None) -> User:
    """Make the session record for a sign-in or sign-up.

    There is no credential check: the id is the sign-in time in epoch millis,
    recovery defaults to today and the name to the email's local part.
    """
    now = now or now_local()
    if recovery_date is None or recovery_date == "":
        recovery_date = now.date()
    if isinstance(recovery_date, (date, datetime)):
        recovery_date = recovery_date.isoformat()[:10]
    return User(
        id=str(int(now.timestamp() * 1000)),
        email=email.strip(),
        name=display_name_for(email, name),
        recovery_date=str(recovery_date),
        joined_date=now.isoformat(),
    )

def credentials_present(email: str, password: str) -> bool:
    return bool((email or "").strip()) and bool(password)


@dataclass
class SessionContext:
    """The signed-in user plus the store it was loaded from."""

    user: Optional[User]
    store: KeyValueStore

    @classmethod
    def restore(cls, store: KeyValueStore) -> "SessionContext":
        return cls(user=session_repo.load(store), store=store)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, user: User) -> User:
        session_repo.save(self.store, user)
        self.user = user
        logger.info("Signed in user %s", user.id)
        return user

    def invalidate(self) -> None:
        if self.user is not None:
            logger.info("Signed out user %s", self.user.id)
        session_repo.clear(self.store)
        self.user = None


def authenticate(ctx: SessionContext, email: str, password: str, *,
                 name: Optional[str] = None,
                 recovery_date: Union[date, str, None] = None,
                 now: Optional[datetime] = None) -> Optional[User]:
    if not credentials_present(email, password):
        return None
    return ctx.sign_in(build_user(email, name=name, recovery_date=recovery_date, now=now))
