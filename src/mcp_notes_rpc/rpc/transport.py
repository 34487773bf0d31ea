"""JSON-RPC 2.0 transport over HTTP."""

import itertools
import logging
from typing import Any

import httpx

from mcp_notes_rpc.common.exceptions import (
    HttpError,
    NoResponseError,
    RequestSetupError,
    RpcError,
)
from mcp_notes_rpc.shared.models import JsonRpcRequest, JsonRpcResponse

logger = logging.getLogger(__name__)


class JsonRpcTransport:
    """Sends one JSON-RPC request per call to a fixed HTTP endpoint.

    Every call is a single attempt with its own HTTP client; there is no
    retry and no connection reuse. ``timeout=None`` waits indefinitely.
    """

    def __init__(
        self,
        url: str,
        timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.url = url
        self.timeout = timeout
        self._transport = transport
        self._ids = itertools.count(1)

    def build_request(
        self, method: str, params: dict[str, Any] | None = None
    ) -> JsonRpcRequest:
        """Build the request envelope for ``method`` with a fresh id."""
        return JsonRpcRequest(
            method=method,
            params={} if params is None else params,
            id=next(self._ids),
        )

    def send(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Call ``method`` on the server and return its result.

        Returns ``None`` when the response carries no result. Raises
        ``RpcError``, ``HttpError``, ``NoResponseError`` or
        ``RequestSetupError``; anything else propagates unchanged.
        """
        request = self.build_request(method, params)
        logger.debug("-> %s id=%s params=%s", method, request.id, request.params)

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.post(
                    self.url,
                    json=request.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise HttpError(e.response.status_code, e.response.reason_phrase) from e
        except (httpx.InvalidURL, httpx.UnsupportedProtocol) as e:
            raise RequestSetupError(str(e)) from e
        except httpx.TransportError as e:
            logger.debug("No response for %s: %r", method, e)
            raise NoResponseError(self.url) from e

        payload = JsonRpcResponse.model_validate(response.json())
        if payload.error is not None:
            logger.debug("<- %s id=%s error=%s", method, payload.id, payload.error.code)
            raise RpcError(payload.error.code, payload.error.message)

        logger.debug("<- %s id=%s", method, payload.id)
        return payload.result
