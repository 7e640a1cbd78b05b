from __future__ import annotations

import logging
from dataclasses import dataclass, field

from eventcapture import secret_manager
from eventcapture.config import DEFAULT_HOST, CaptureSettings, load_settings
from eventcapture.errors import ConfigError, MissingEnvError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiOptions:
    """Resolved API key and ingestion host."""

    api_key: str = field(repr=False)
    host: str = DEFAULT_HOST

    @classmethod
    def from_env(cls, settings: CaptureSettings | None = None) -> ApiOptions:
        settings = settings or load_settings()
        if not settings.posthog_api_key:
            raise MissingEnvError("POSTHOG_API_KEY")
        logger.debug("Resolved API key from POSTHOG_API_KEY")
        return cls(api_key=settings.posthog_api_key, host=settings.posthog_host)

    @classmethod
    async def from_google_secret_manager(
        cls,
        project: str | None = None,
        secret: str | None = None,
        settings: CaptureSettings | None = None,
    ) -> ApiOptions:
        settings = settings or load_settings()
        manager = secret_manager.GoogleSecretManager.from_settings(settings)
        project = project or settings.google_cloud_project
        secret = secret or settings.posthog_secret_name
        try:
            if not project:
                raise MissingEnvError("GOOGLE_CLOUD_PROJECT")
            key = await manager.get_secret(project, secret)
        finally:
            await manager.close()
        logger.debug("Resolved API key from secret %s in project %s", secret, project)
        return cls(api_key=key, host=settings.posthog_host)

    @classmethod
    async def auto(
        cls,
        project: str | None = None,
        secret: str | None = None,
        settings: CaptureSettings | None = None,
    ) -> ApiOptions:
        """Resolve from the environment, falling back to Secret Manager.

        When both sources fail the Secret Manager error is raised.
        """
        try:
            return cls.from_env(settings)
        except ConfigError as exc:
            logger.debug("Falling back to Secret Manager: %s", exc)
        return await cls.from_google_secret_manager(project, secret, settings)
