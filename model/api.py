# model/api.py
from pydantic import BaseModel


class LoginRequest(BaseModel):
    # Missing fields fall through to "Invalid credentials" rather than 400.
    username: str | None = None
    password: str | None = None


class LoginResponse(BaseModel):
    message: str
    username: str
    lockerId: str


class ClearNotificationsRequest(BaseModel):
    lockerId: str | None = None


class ClearNotificationsResponse(BaseModel):
    message: str


class HealthResponse(BaseModel):
    ok: bool
