"""Payload logging for request/response inspection.

Enabled with ``DEBUG_LOG_PAYLOADS=true``; the flag is checked on every call.
Records go to the ``twcai.debug.payloads`` logger at INFO level, one record
per request and one per response, with credential headers masked.
"""

import json
import logging
from typing import Any, Dict, Optional

from ..config import payload_log_max_length, payload_logging_enabled

logger = logging.getLogger("twcai.debug.payloads")

MASKED_HEADERS = frozenset({"authorization", "x-api-key"})


def _clip(text: str, limit: int) -> str:
    if 0 < limit < len(text):
        return f"{text[:limit]}... [{len(text) - limit} more chars]"
    return text


def _as_json(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False, default=str)
    except ValueError as e:  # circular reference
        return f"<unserializable: {e}>"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Copy of ``headers`` with credential values replaced by ``***``."""
    masked = dict(headers)
    for name in masked:
        if name.lower() in MASKED_HEADERS:
            masked[name] = "***"
    return masked


def log_outgoing_request(
    request_id: str,
    method: str,
    url: str,
    headers: Optional[Dict[str, str]] = None,
    body: Optional[Any] = None,
) -> None:
    if not payload_logging_enabled():
        return

    lines = [f"[{request_id}] >>> {method} {url}"]
    if headers:
        lines.append(f"    headers: {_as_json(mask_headers(headers))}")
    if body is not None:
        lines.append(f"    body: {_clip(_as_json(body), payload_log_max_length())}")
    logger.info("\n".join(lines))


def log_incoming_response(
    request_id: str,
    status_code: int,
    body: Optional[str] = None,
) -> None:
    if not payload_logging_enabled():
        return

    text = _clip(body, payload_log_max_length()) if body else "<empty>"
    logger.info(f"[{request_id}] <<< {status_code}\n    body: {text}")
