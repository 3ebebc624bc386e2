import json
import logging
from typing import Dict, Optional

import httpx

from utility.config import Settings
from utility.errors import ConfigurationError, UpstreamHTTPError, UpstreamShapeError, TransportError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Async client for the generativelanguage generateContent endpoint.
    One request in, one parsed JSON envelope out; no retries, no streaming.
    """

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self.transport = transport

    def endpoint(self, model: str) -> str:
        return f"{self.settings.api_base}/models/{model}:generateContent"

    def _headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-goog-api-key": self.settings.api_key,
        }

    def _timeout(self):
        if self.settings.upstream_timeout is None:
            return httpx.USE_CLIENT_DEFAULT
        return self.settings.upstream_timeout

    async def generate_content(self, model: str, payload: Dict) -> Dict:
        """
        POST the payload to the model's generateContent endpoint.

        Raises ConfigurationError before any I/O when no api key is set,
        TransportError on network failure, UpstreamHTTPError on non-2xx,
        UpstreamShapeError when the body is not a JSON object.
        """
        if not self.settings.has_api_key:
            raise ConfigurationError("GOOGLE_API_KEY is not set")

        url = self.endpoint(model)
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(url, headers=self._headers(), json=payload, timeout=self._timeout())
                body = response.text
        except httpx.RequestError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise UpstreamHTTPError(response.status_code, body, response.reason_phrase)

        try:
            envelope = json.loads(body)
        except json.JSONDecodeError as e:
            raise UpstreamShapeError(f"response body is not JSON: {e}", envelope=body) from e

        if not isinstance(envelope, dict):
            raise UpstreamShapeError("response body is not a JSON object", envelope=envelope)

        logger.debug("generateContent %s -> %s", model, response.status_code)
        return envelope
