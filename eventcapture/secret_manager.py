from __future__ import annotations

import json
import logging

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import secretmanager
from google.oauth2 import service_account

from eventcapture.config import CaptureSettings
from eventcapture.errors import MissingEnvError, SecretFetchError, ServiceAccountKeyError

logger = logging.getLogger(__name__)


def secret_version_name(project: str, secret: str, version: str = "latest") -> str:
    return f"projects/{project}/secrets/{secret}/versions/{version}"


class GoogleSecretManager:
    """Thin async wrapper around Google Cloud Secret Manager.

    Authenticates with the service-account key file named by the
    ``SERVICE_ACCOUNT`` environment variable.
    """

    def __init__(self, client: secretmanager.SecretManagerServiceAsyncClient) -> None:
        self._client = client

    @classmethod
    def from_settings(cls, settings: CaptureSettings) -> GoogleSecretManager:
        path = settings.service_account
        if not path:
            raise MissingEnvError("SERVICE_ACCOUNT")
        try:
            with open(path, encoding="utf-8") as key_file:
                info = json.load(key_file)
        except (OSError, ValueError) as exc:
            raise ServiceAccountKeyError(path, str(exc)) from exc
        if not isinstance(info, dict):
            raise ServiceAccountKeyError(path, "expected a JSON object")
        try:
            credentials = service_account.Credentials.from_service_account_info(info)
        except (ValueError, auth_exceptions.GoogleAuthError) as exc:
            raise ServiceAccountKeyError(path, str(exc)) from exc
        logger.debug("Authenticating to Secret Manager as %s", credentials.service_account_email)
        return cls(secretmanager.SecretManagerServiceAsyncClient(credentials=credentials))

    async def get_secret(self, project: str, secret: str) -> str:
        """Return the latest version of a secret decoded as UTF-8."""
        name = secret_version_name(project, secret)
        try:
            response = await self._client.access_secret_version(request={"name": name})
        except (google_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError) as exc:
            raise SecretFetchError(name, str(exc)) from exc

        data = response.payload.data if response.payload else b""
        if not data:
            raise SecretFetchError(name, "secret payload is empty")
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SecretFetchError(name, "secret payload is not valid UTF-8") from exc

    async def close(self) -> None:
        await self._client.transport.close()
