"""
Error taxonomy shared by both relay handlers.

Every error carries the HTTP status the caller should see and a
caller-safe message. Diagnostic detail (upstream status, raw body)
stays on the exception for logging and is never sent to the caller.
"""
from __future__ import annotations

from typing import Optional


class RelayError(Exception):
    status_code: int = 500
    public_message: str = "Request failed"

    def __init__(self, detail: str = "", public_message: Optional[str] = None):
        super().__init__(detail or self.public_message)
        self.detail = detail
        if public_message is not None:
            self.public_message = public_message

    def with_message(self, public_message: str) -> "RelayError":
        self.public_message = public_message
        return self


class InvalidRequest(RelayError):
    """Client omitted a required field."""
    status_code = 400
    public_message = "Invalid request"


class ConfigurationError(RelayError):
    """Deployment is missing the upstream credential."""
    public_message = "API key not configured"


class UpstreamHTTPError(RelayError):
    """Upstream answered with a non-success status."""

    def __init__(self, status: int, body: str = "", reason: str = ""):
        super().__init__(f"upstream returned HTTP {status} {reason}".strip())
        self.status = status
        self.body = body
        self.reason = reason


class UpstreamShapeError(RelayError):
    """Upstream answered 2xx but the envelope lacks what we need."""
    public_message = "Unexpected API response structure"

    def __init__(self, detail: str = "", envelope: object = None):
        super().__init__(detail)
        self.envelope = envelope


class TransportError(RelayError):
    """Network failure while reaching upstream."""
