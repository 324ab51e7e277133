# main.py
import sys
import routes
from contextlib import asynccontextmanager
from util.enums import Environment, Color, ErrorMessage
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.cors import CORSMiddleware
from config.settings import settings
from config.firebase import bootstrap, close_firebase
from fastapi.responses import JSONResponse
from model.api import HealthResponse
from util.constants import InternalURIs
from util.errors import AppError, CredentialError
from util.logger import init_logger


@asynccontextmanager
async def lifespan(fastApi: FastAPI):
    try:
        logger = init_logger()
        print(f"{Color.GREEN}Initializing...{Color.RESET}")
        firebase_app = bootstrap()
        print(f"{Color.BLUE}Server Started{Color.RESET}")
        logger.info("Firebase Project ID: %s", firebase_app.project_id)
    except CredentialError as e:
        print("Failed to initialize Firebase:", e, file=sys.stderr)
        raise

    try:
        yield
    finally:
        try:
            close_firebase()
        except Exception as e:
            print("Error closing Firebase app:", e)

        print(f"{Color.RED}Server Shutdown{Color.RESET}")


app: FastAPI = FastAPI(lifespan=lifespan)

# Wildcard origin is for testing; restrict ALLOWED_ORIGIN in production.
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.ALLOWED_ORIGIN],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],  # Echo whatever the preflight asks for
)


@app.get(InternalURIs.HEALTHZ, response_model=HealthResponse)
async def healthz():
    return HealthResponse(ok=True)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    error = AppError.of(ErrorMessage.INVALID_BODY, details=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=error.status_code, content=error.to_content())


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    # Body decode failures (e.g. invalid UTF-8) arrive here as a bare 400.
    if exc.status_code == ErrorMessage.INVALID_BODY.value.http_status:
        error = AppError.of(ErrorMessage.INVALID_BODY, details=exc.detail)
    else:
        error = AppError(str(exc.detail), exc.status_code, field="error")
    return JSONResponse(
        status_code=error.status_code,
        content=error.to_content(),
        headers=getattr(exc, "headers", None),
    )


routes.register_routes(app)


def run() -> None:
    """Entry point: fail before binding the port when the service account is unusable."""
    import uvicorn

    logger = init_logger()
    try:
        bootstrap()
    except CredentialError as e:
        logger.critical("%s", e)
        sys.exit(1)

    logger.info("Backend server listening on port %d", settings.PORT)
    reload = settings.APP_ENV == Environment.DEV
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, reload=reload)


if __name__ == "__main__":
    run()
