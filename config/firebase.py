# config/firebase.py
from typing import Optional
import logging
import firebase_admin
from firebase_admin import App, credentials, db
from config.credentials import load_service_account
from config.settings import settings
from model.credential import ServiceAccount
from util.constants import ExternalURIs

logger = logging.getLogger(__name__)

_app: Optional[App] = None


def database_url_for(project_id: str) -> str:
    return ExternalURIs.FIREBASE_DATABASE.format(project_id=project_id)


def init_firebase(account: ServiceAccount) -> App:
    global _app
    if _app is None:
        # No reachability check here; the first read/write surfaces errors.
        _app = firebase_admin.initialize_app(
            credentials.Certificate(account.certificate_info()),
            {"databaseURL": database_url_for(account.project_id)},
        )
        logger.info("firebase.init project=%s", account.project_id)
    return _app


def bootstrap() -> App:
    """Load the service account from settings and initialize the app once."""
    if _app is not None:
        return _app
    account = load_service_account(
        settings.GOOGLE_APPLICATION_CREDENTIALS_JSON,
        settings.FIREBASE_SERVICE_ACCOUNT_KEY_PATH,
    )
    return init_firebase(account)


def get_app() -> App:
    if _app is None:
        raise RuntimeError("Firebase app is not initialized; call bootstrap() first")
    return _app


def reference(path: str) -> db.Reference:
    return db.reference(path, app=get_app())


def close_firebase() -> None:
    global _app
    if _app is not None:
        firebase_admin.delete_app(_app)
        _app = None
