# model/credential.py
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class ServiceAccount(BaseModel):
    """
    Firebase service account key data.

    Only the fields we read are declared; every other key from the JSON
    document is preserved so the Admin SDK receives the full certificate.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    type: str | None = None
    project_id: str | None = None
    private_key_id: str | None = None
    private_key: str | None = None
    client_email: str | None = None

    def certificate_info(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)
