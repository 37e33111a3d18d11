from __future__ import annotations

import itertools
import logging
from typing import Any, Protocol

import httpx

from txlookup.errors import RpcError

logger = logging.getLogger(__name__)

RPC_TIMEOUT = 5.0


class Transport(Protocol):
    async def request(self, method: str, params: list) -> Any: ...


def _rpc_payload(method: str, params: list, req_id: int = 1) -> dict:
    return {"jsonrpc": "2.0", "id": req_id, "method": method, "params": params}


class HttpTransport:
    """JSON-RPC 2.0 over HTTP POST. One client per call, no retries."""

    def __init__(self, url: str, timeout: float = RPC_TIMEOUT):
        self.url = url
        self.timeout = timeout
        self._ids = itertools.count(1)

    async def request(self, method: str, params: list) -> Any:
        payload = _rpc_payload(method, params, next(self._ids))
        logger.debug("RPC %s -> %s params=%s", method, self.url.split("?")[0], params)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            resp = await client.post(self.url, json=payload)

        try:
            resp_json = resp.json()
        except ValueError:
            resp.raise_for_status()
            raise

        # nodes often pair an HTTP error status with a JSON-RPC error body
        if isinstance(resp_json, dict) and resp_json.get("error"):
            logger.error("RPC ERROR for %s: status=%s %s", method, resp.status_code, resp_json["error"])
            raise RpcError(resp_json["error"])
        resp.raise_for_status()
        return resp_json.get("result")
