# util/enums.py
from enum import Enum
from typing import NamedTuple
from fastapi import status


class Color(str, Enum):
    RESET = "\033[0m"
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    MAGENTA = "\033[35m"
    CYAN = "\033[36m"
    BOLD = "\033[1m"

    def __str__(self):
        return self.value


class Environment(str, Enum):
    DEV = "dev"
    PROD = "prod"


class ErrorInfo(NamedTuple):
    message: str
    http_status: int
    # Key the message is rendered under in the JSON body.
    field: str = "message"


class ErrorMessage(Enum):
    INVALID_CREDENTIALS = ErrorInfo(
        "Invalid credentials", status.HTTP_401_UNAUTHORIZED
    )
    NO_LOCKER_ASSIGNED = ErrorInfo(
        "No locker assigned to this user.", status.HTTP_403_FORBIDDEN
    )
    LOCKER_ID_REQUIRED = ErrorInfo(
        "Locker ID is required.", status.HTTP_400_BAD_REQUEST, "error"
    )
    CLEAR_NOTIFICATIONS_FAILED = ErrorInfo(
        "Failed to clear notifications.",
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "error",
    )
    INVALID_BODY = ErrorInfo(
        "Invalid request body.", status.HTTP_400_BAD_REQUEST, "error"
    )
