"""Utility modules."""

from .debug_logger import (
    log_incoming_response,
    log_outgoing_request,
    mask_headers,
)

__all__ = [
    "log_incoming_response",
    "log_outgoing_request",
    "mask_headers",
]
