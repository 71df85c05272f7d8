"""Shared request pipeline used by every endpoint group.

Builds the URL (with an optional query string), attaches authentication and
tracing headers, sends through the shared ``httpx.AsyncClient`` and decodes
the typed response or raises the matching ``TwcError``.

Retry behavior:
    None. Every failure is raised to the caller, who decides whether to retry.

Suspension:
    The only await is the HTTP round trip; URL building and decoding are
    synchronous.

Timeout:
    ``ClientConfig.timeout`` bounds the whole round trip, body read included.
    The httpx client's own timeout only limits each phase (connect, each
    read, ...), so a server trickling bytes would otherwise never expire.
"""

import asyncio
import logging
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, ValidationError

from ..errors import DecodeError, TransportError, classify
from ..middleware.auth import ClientConfig, build_headers, new_request_id
from ..utils.debug_logger import log_incoming_response, log_outgoing_request

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Query = Union[BaseModel, Mapping[str, Any]]


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query_string(query: Optional[Query]) -> str:
    """
    Encode query parameters.

    Keys keep their declaration (model) or insertion (mapping) order, ``None``
    values are dropped, lists become repeated keys (``include=a&include=b``)
    and everything is percent-encoded. Returns ``""`` when nothing is left.
    """
    if query is None:
        return ""

    if isinstance(query, BaseModel):
        items = query.model_dump(mode="json", exclude_none=True).items()
    else:
        items = query.items()

    pairs = []
    for key, value in items:
        if value is None:
            continue
        values = value if isinstance(value, (list, tuple)) else [value]
        for v in values:
            pairs.append((key, _query_value(v)))

    return urlencode(pairs, quote_via=quote)


def _dump_body(body: Any) -> Any:
    """Convert a request body to a JSON-ready value, omitting unset fields."""
    if isinstance(body, BaseModel):
        return body.model_dump(mode="json", exclude_none=True)
    return body


class Dispatcher:
    """Request dispatcher bound to one immutable ``ClientConfig``."""

    def __init__(self, config: ClientConfig):
        self.config = config

    def build_url(self, path: str, query: Optional[Query] = None) -> str:
        """Base address + path, with ``?query`` only when the query is non-empty."""
        url = f"{self.config.base_url}{path}"
        query_string = build_query_string(query)
        if query_string:
            url = f"{url}?{query_string}"
        return url

    async def _request(
        self,
        method: str,
        path: str,
        *,
        auth: bool = True,
        body: Any = None,
        query: Optional[Query] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request and return the response if its status is 2xx."""
        request_id = new_request_id()
        url = self.build_url(path, query)
        payload = _dump_body(body)
        request_headers = build_headers(
            self.config, auth=auth, request_id=request_id, extra=headers
        )

        log_outgoing_request(request_id, method, url, request_headers, payload)
        logger.debug(f"[{request_id}] {method} {url}")

        try:
            response = await asyncio.wait_for(
                self.config.http_client.request(
                    method,
                    url,
                    json=payload,
                    headers=request_headers,
                ),
                timeout=self.config.timeout,
            )
        except asyncio.TimeoutError as e:
            logger.warning(f"[{request_id}] {method} {url} timed out after {self.config.timeout}s")
            raise TransportError(f"Request timed out after {self.config.timeout}s") from e
        except httpx.HTTPError as e:
            logger.warning(f"[{request_id}] {method} {url} failed: {type(e).__name__}: {e}")
            raise TransportError(str(e) or type(e).__name__) from e

        logger.debug(f"[{request_id}] {method} {url} -> {response.status_code}")

        if response.is_success:
            log_incoming_response(request_id, response.status_code, response.text)
            return response

        # httpx decodes with errors="replace", so any body yields text
        message = response.text
        log_incoming_response(request_id, response.status_code, message)
        error = classify(response.status_code, message)
        logger.warning(
            f"[{request_id}] {method} {url} returned {response.status_code} ({error.kind.value})"
        )
        raise error

    async def send(
        self,
        method: str,
        path: str,
        response_model: Type[T],
        *,
        auth: bool = True,
        body: Any = None,
        query: Optional[Query] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> T:
        """Send a request and decode the JSON success body as ``response_model``.

        Raises:
            TransportError: no response was received.
            DecodeError: a 2xx body did not match ``response_model``.
            TwcError: the classified error for any non-2xx status.
        """
        response = await self._request(
            method, path, auth=auth, body=body, query=query, headers=headers
        )
        try:
            return response_model.model_validate_json(response.content)
        except ValidationError as e:
            raise DecodeError(f"Failed to decode {response_model.__name__}: {e}") from e

    async def send_text(
        self,
        method: str,
        path: str,
        *,
        auth: bool = True,
        query: Optional[Query] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        """Send a request and return the raw success body as text."""
        response = await self._request(
            method, path, auth=auth, query=query, headers=headers
        )
        return response.text

    async def send_empty(
        self,
        method: str,
        path: str,
        *,
        auth: bool = True,
        body: Any = None,
        query: Optional[Query] = None,
    ) -> None:
        """Send a request whose success (typically 204) carries no body."""
        await self._request(method, path, auth=auth, body=body, query=query)
