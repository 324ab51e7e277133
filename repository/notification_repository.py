# repository/notification_repository.py
from typing import Protocol
from starlette.concurrency import run_in_threadpool
from config.firebase import reference
from repository.namespaces import locker_notifications


class NotificationStore(Protocol):
    async def clear(self, locker_id: str) -> None:
        ...


class NotificationRepository:
    """
    Firebase Realtime Database access for per-locker notification subtrees.

    The Admin SDK is blocking, so each call is pushed to the threadpool and
    only the awaiting request is suspended.
    """

    @staticmethod
    def _path(locker_id: str) -> str:
        return locker_notifications(locker_id)

    async def clear(self, locker_id: str) -> None:
        # Removes the whole subtree; deleting a missing path is a no-op upstream.
        ref = reference(self._path(locker_id))
        await run_in_threadpool(ref.delete)
