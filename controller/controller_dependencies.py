# controller/controller_dependencies.py
from fastapi import Depends
from repository.notification_repository import (
    NotificationRepository,
    NotificationStore,
)
from repository.user_directory import StaticUserDirectory, UserDirectory
from service.auth_service import AuthService
from service.notification_service import NotificationService

_directory = StaticUserDirectory()


def get_user_directory() -> UserDirectory:
    return _directory


def get_notification_store() -> NotificationStore:
    return NotificationRepository()


def get_auth_service(
    directory: UserDirectory = Depends(get_user_directory),
) -> AuthService:
    return AuthService(directory)


def get_notification_service(
    store: NotificationStore = Depends(get_notification_store),
) -> NotificationService:
    return NotificationService(store)
