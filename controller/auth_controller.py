# controller/auth_controller.py
from fastapi import APIRouter, Depends, status
from controller.controller_dependencies import get_auth_service
from model.api import LoginRequest, LoginResponse
from service.auth_service import AuthService
from util.constants import InternalURIs

auth_router = APIRouter()


@auth_router.post(
    InternalURIs.LOGIN,
    response_model=LoginResponse,
    status_code=status.HTTP_200_OK,
)
async def login(
    payload: LoginRequest | None = None,
    service: AuthService = Depends(get_auth_service),
) -> LoginResponse:
    return service.login(payload or LoginRequest())
