# service/notification_service.py
import logging
from model.api import ClearNotificationsResponse
from repository.notification_repository import NotificationStore
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


class NotificationService:
    def __init__(self, store: NotificationStore) -> None:
        self._store = store

    async def clear(self, locker_id: str | None) -> ClearNotificationsResponse:
        """
        Delete every notification recorded for a locker.
        Any caller-supplied locker id is accepted; ownership is not checked.
        """
        if not locker_id:
            raise AppError.of(ErrorMessage.LOCKER_ID_REQUIRED)

        try:
            await self._store.clear(locker_id)
        except Exception as e:
            logger.error("notifications.clear.error locker=%s err=%s", locker_id, e)
            raise AppError.of(
                ErrorMessage.CLEAR_NOTIFICATIONS_FAILED, details=str(e)
            ) from e

        logger.info("notifications.cleared locker=%s", locker_id)
        return ClearNotificationsResponse(
            message="Notifications cleared successfully."
        )
