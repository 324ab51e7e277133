# repository/user_directory.py
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

DEFAULT_USERS: Mapping[str, str] = MappingProxyType({"user1": "pass1"})

# user -> owned locker
DEFAULT_LOCKER_ASSIGNMENTS: Mapping[str, str] = MappingProxyType(
    {"user1": "LOCKER001"}
)


class UserDirectory(Protocol):
    """Read-only identity lookup backing the login endpoint."""

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        ...

    def locker_for(self, username: str) -> Optional[str]:
        ...


class StaticUserDirectory:
    def __init__(
        self,
        users: Mapping[str, str] = DEFAULT_USERS,
        lockers: Mapping[str, str] = DEFAULT_LOCKER_ASSIGNMENTS,
    ) -> None:
        self._users = MappingProxyType(dict(users))
        self._lockers = MappingProxyType(dict(lockers))

    def verify(self, username: Optional[str], password: Optional[str]) -> bool:
        if not username or password is None:
            return False
        expected = self._users.get(username)
        return bool(expected) and expected == password

    def locker_for(self, username: str) -> Optional[str]:
        # Empty assignments count as unassigned.
        return self._lockers.get(username) or None
