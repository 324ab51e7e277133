# repository/namespaces.py
from typing import Final

LOCKERS: Final[str] = "lockers"
NOTIFICATIONS: Final[str] = "notifications"


def locker_notifications(locker_id: str) -> str:
    return f"{LOCKERS}/{locker_id}/{NOTIFICATIONS}"
