# config/credentials.py
import json
import logging
from pathlib import Path
from typing import Any, Optional
from pydantic import ValidationError
from model.credential import ServiceAccount
from util.constants import EnvVars
from util.errors import CredentialError

logger = logging.getLogger(__name__)


def _parse(raw: str) -> ServiceAccount:
    data: Any = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("service account JSON must be an object")
    return ServiceAccount.model_validate(data)


def load_service_account(
    inline_json: Optional[str], key_path: Optional[str]
) -> ServiceAccount:
    """
    Resolve the Firebase service account used to build the database client.

    - Inline JSON (GOOGLE_APPLICATION_CREDENTIALS_JSON) wins when set.
    - Otherwise the key file at FIREBASE_SERVICE_ACCOUNT_KEY_PATH is read.
    - The account must carry a project_id; the database URL is derived from it.

    Raises CredentialError on any failure. Callers treat it as fatal.
    """
    if inline_json:
        try:
            account = _parse(inline_json)
        except (ValueError, ValidationError) as e:
            raise CredentialError(
                f"Error parsing {EnvVars.CREDENTIALS_JSON}: {e}"
            ) from e
        logger.info(
            "Firebase service account loaded from %s.", EnvVars.CREDENTIALS_JSON
        )
    else:
        if not key_path:
            raise CredentialError(
                f"{EnvVars.SERVICE_ACCOUNT_KEY_PATH} or {EnvVars.CREDENTIALS_JSON} "
                "is not set in .env file or environment."
            )
        path = Path(key_path).expanduser()
        try:
            account = _parse(path.read_text(encoding="utf-8"))
        except (OSError, ValueError, ValidationError) as e:
            raise CredentialError(
                f"Error loading service account key from {key_path}: {e}. "
                "Please ensure the path is correct and the file exists."
            ) from e
        logger.info("Firebase service account loaded from file: %s", key_path)

    if not account.project_id:
        raise CredentialError(
            "Could not find project_id in the service account key data."
        )
    return account
