"""Shared HTTP plumbing for upstream provider services."""

from typing import TypeVar

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from weatherdash.config import is_configured_key, settings
from weatherdash.core.exceptions import ProviderError

logger = structlog.get_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class ProviderService:
    """Base class for services that issue one-shot GETs to a JSON API."""

    provider_name = "provider"

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.timeout = timeout if timeout is not None else settings.http_timeout
        # Tests inject an httpx.MockTransport here
        self.transport = transport

    async def _get_json(
        self,
        url: str,
        params: dict[str, str | float | int],
        schema: type[SchemaT],
        subject: str = "weather",
    ) -> SchemaT:
        """
        Issue a GET and validate the JSON body against ``schema``.

        Args:
            url: Endpoint URL
            params: Query parameters
            schema: Pydantic model describing the expected payload
            subject: Noun used in error messages ("weather", "air quality", ...)

        Returns:
            Validated payload

        Raises:
            ProviderError: On network failure, non-2xx status or schema mismatch
        """
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(url, params=params)
        except httpx.HTTPError as e:
            logger.warning(
                "provider_request_failed",
                provider=self.provider_name,
                subject=subject,
                error=str(e) or e.__class__.__name__,
            )
            raise ProviderError(
                f"Failed to fetch {subject} data: {str(e) or e.__class__.__name__}"
            ) from e

        if not response.is_success:
            logger.warning(
                "provider_bad_status",
                provider=self.provider_name,
                subject=subject,
                status_code=response.status_code,
            )
            raise ProviderError(
                f"{subject.capitalize()} API error: {response.status_code} {response.reason_phrase}"
            )

        try:
            return schema.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            logger.warning(
                "provider_payload_invalid",
                provider=self.provider_name,
                subject=subject,
                error=str(e),
            )
            raise ProviderError(f"Failed to parse {subject} data: {e}") from e

    def _require_key(self, api_key: str, setting_name: str) -> str:
        """Return ``api_key`` or fail if it is empty or a placeholder."""
        if not is_configured_key(api_key):
            raise ProviderError(f"{self.provider_name} API key is not configured ({setting_name})")
        return api_key
