# service/auth_service.py
import logging
from model.api import LoginRequest, LoginResponse
from repository.user_directory import UserDirectory
from util.enums import ErrorMessage
from util.errors import AppError

logger = logging.getLogger(__name__)


class AuthService:
    """
    Checks credentials against the user directory and resolves the locker
    owned by the user. Nothing is persisted between requests.
    """

    def __init__(self, directory: UserDirectory) -> None:
        self._directory = directory

    def login(self, payload: LoginRequest) -> LoginResponse:
        if not self._directory.verify(payload.username, payload.password):
            # Same response for unknown user and wrong password.
            logger.warning("auth.login.invalid")
            raise AppError.of(ErrorMessage.INVALID_CREDENTIALS)

        locker_id = self._directory.locker_for(payload.username)
        if not locker_id:
            logger.warning("auth.login.no_locker user=%s", payload.username)
            raise AppError.of(ErrorMessage.NO_LOCKER_ASSIGNED)

        logger.info("auth.login.ok user=%s locker=%s", payload.username, locker_id)
        return LoginResponse(
            message="Login successful",
            username=payload.username,
            lockerId=locker_id,
        )
