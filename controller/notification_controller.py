# controller/notification_controller.py
from fastapi import APIRouter, Depends, status
from controller.controller_dependencies import get_notification_service
from model.api import ClearNotificationsRequest, ClearNotificationsResponse
from service.notification_service import NotificationService
from util.constants import InternalURIs

notification_router = APIRouter()


@notification_router.post(
    InternalURIs.CLEAR_NOTIFICATIONS,
    response_model=ClearNotificationsResponse,
    status_code=status.HTTP_200_OK,
)
async def clear_notifications(
    payload: ClearNotificationsRequest | None = None,
    service: NotificationService = Depends(get_notification_service),
) -> ClearNotificationsResponse:
    # A POST without a body carries no lockerId.
    payload = payload or ClearNotificationsRequest()
    return await service.clear(payload.lockerId)
