"""Utility for logging API requests when OCTRANSPO_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"
_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key", "ocp-apim-subscription-key"}
_SENSITIVE_PARAMS = {"apikey"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via OCTRANSPO_LOG_REQUESTS environment variable."""
    return os.getenv("OCTRANSPO_LOG_REQUESTS", "").lower() == "true"


def redact_params(params: dict[str, Any] | None) -> dict[str, Any]:
    """Redact credentials from query or form parameters."""
    if not params:
        return {}
    return {k: REDACTED if k.lower() in _SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _redact_sensitive_headers(headers: dict[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    if isinstance(payload, dict):
        payload = redact_params(payload)
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if OCTRANSPO_LOG_REQUESTS is enabled.

    The ``apiKey`` credential is never written out, whether it travels as a
    query parameter or in a form payload.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional, sensitive headers are redacted).
        payload: Request payload/body as a dict of form fields (optional).
    """
    if not should_log_requests():
        return

    full_url = _build_url_with_params(url, redact_params(params))
    log_parts = [f"{method} {full_url}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append(f"Headers: {json.dumps(safe_headers, indent=2)}")

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))
