# routes.py
from fastapi import FastAPI
from controller.auth_controller import auth_router
from controller.notification_controller import notification_router


def register_routes(app: FastAPI) -> None:
    """Register & Access control controllers here."""
    app.include_router(auth_router)
    app.include_router(notification_router)
