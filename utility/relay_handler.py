from __future__ import annotations

import logging
from typing import Dict, Optional

from utility.config import Settings
from utility.errors import (
    ConfigurationError,
    InvalidRequest,
    RelayError,
    TransportError,
    UpstreamHTTPError,
    UpstreamShapeError,
)
from utility.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


class RelayHandler:
    """
    Shared plumbing for handlers that forward one request upstream.

    Subclasses set `label` (used in caller-facing messages) and call
    `_generate()`; every failure comes back as a RelayError whose
    public_message is safe to return to the caller.
    """

    label = "Upstream"

    def __init__(self, settings: Settings, client: Optional[GeminiClient] = None):
        self.settings = settings
        self.client = client or GeminiClient(settings)

    # --------------------------------------------------
    # Helpers
    # --------------------------------------------------
    @staticmethod
    def _require(**fields: Optional[str]) -> None:
        missing = [name for name, value in fields.items() if not isinstance(value, str) or not value]
        if missing:
            raise InvalidRequest(
                f"missing {missing}",
                public_message=f"Missing required fields: {' and '.join(fields)}",
            )

    def failed(self, detail: str = "") -> RelayError:
        return RelayError(detail, public_message=f"{self.label} failed")

    def shape_error(self, detail: str, envelope: object) -> UpstreamShapeError:
        logger.error("%s: unexpected API response structure (%s): %r", self.label, detail, envelope)
        return UpstreamShapeError(detail, envelope=envelope).with_message(
            f"Unexpected {self.label} API response structure"
        )

    async def _generate(self, model: str, payload: Dict) -> Dict:
        try:
            return await self.client.generate_content(model, payload)
        except ConfigurationError:
            logger.error("%s: upstream API key not configured", self.label)
            raise
        except UpstreamHTTPError as e:
            logger.error("%s API HTTP error: %s %s %s", self.label, e.status, e.reason, e.body)
            raise e.with_message(f"{self.label} service error: {e.status}")
        except UpstreamShapeError as e:
            raise self.shape_error(e.detail, e.envelope) from e
        except TransportError as e:
            logger.error("%s: could not reach upstream: %s", self.label, e.detail)
            raise e.with_message(f"{self.label} failed")
