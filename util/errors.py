# util/errors.py
from typing import Any, Optional
from fastapi import HTTPException, status
from util.enums import ErrorMessage


class AppError(HTTPException):
    # Flow: raise AppError to short-circuit with a typed status & message.
    def __init__(
        self,
        message: str,
        http_status: int = status.HTTP_400_BAD_REQUEST,
        *,
        field: str = "message",
        details: Optional[Any] = None,
    ) -> None:
        super().__init__(status_code=http_status, detail=message)
        self.field = field
        self.details = details

    @classmethod
    def of(cls, error: ErrorMessage, details: Optional[Any] = None) -> "AppError":
        info = error.value
        return cls(
            info.message, info.http_status, field=info.field, details=details
        )

    def to_content(self) -> dict:
        content: dict = {self.field: self.detail}
        if self.details is not None:
            content["details"] = self.details
        return content


class CredentialError(Exception):
    """Service account could not be resolved; the process must not start."""
