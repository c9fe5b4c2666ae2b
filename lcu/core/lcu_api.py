#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU API Request Handler
Handles HTTP requests to LCU API
"""

import time
from typing import Any, Optional

import requests

from config import LCU_API_TIMEOUT_S
from utils.core.logging import get_logger

from ..errors import LCUError, RequestError
from ..types import NO_BODY, RequestSuccess

log = get_logger()


def encode_query(params: Optional[dict]) -> Optional[dict]:
    """Convert query values to the strings the LCU expects

    Booleans are sent lower-case, ``None`` values are dropped.
    """
    if params is None:
        return None
    encoded = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (list, tuple)):
            encoded[key] = [("true" if v else "false") if isinstance(v, bool) else v for v in value]
        else:
            encoded[key] = value
    return encoded


def join_url(base: str, path: str) -> str:
    """Join the base url and an endpoint path with exactly one slash"""
    return base + "/" + path.lstrip("/")


def body_kwargs(body: Any) -> dict:
    """requests arguments for a body; ``None`` is sent as a JSON ``null``"""
    if body is NO_BODY:
        return {}
    if body is None:
        return {"data": "null", "headers": {"Content-Type": "application/json"}}
    return {"json": body}


def decode_body(resp: requests.Response) -> Any:
    """Decode a response body as JSON, falling back to text"""
    if not resp.content:
        return None
    try:
        return resp.json()
    except ValueError:
        return resp.text


class LCUAPI:
    """Handles HTTP requests to LCU API"""

    def __init__(self, connection):
        """Initialize API handler

        Args:
            connection: LCUConnection instance
        """
        self.connection = connection

    def request(
        self,
        method: str,
        path: str,
        body: Any = NO_BODY,
        params: Optional[dict] = None,
        timeout: float = LCU_API_TIMEOUT_S,
    ) -> RequestSuccess:
        """Send one request to the LCU

        Returns:
            RequestSuccess for 2xx responses

        Raises:
            LCUError: the LCU answered with a non-success status
            RequestError: the request could not be completed
        """
        if not self.connection.ok:
            raise RequestError("NOT_CONNECTED", "Not connected to the League of Legends client")

        url = join_url(self.connection.base, path)
        try:
            t0 = time.perf_counter()
            resp = self.connection.session.request(
                method,
                url,
                params=encode_query(params),
                timeout=timeout,
                **body_kwargs(body),
            )
            dt_ms = (time.perf_counter() - t0) * 1000.0
        except requests.exceptions.RequestException as exc:
            log.debug(f"[LCU] {method} {path} failed ({type(exc).__name__}): {exc}")
            raise RequestError(type(exc).__name__, str(exc) or None) from exc

        log.debug(f"[LCU] {method} {path} -> {resp.status_code} in {dt_ms:.1f}ms")
        payload = decode_body(resp)
        if not resp.ok:
            raise LCUError.from_response(resp.status_code, payload, resp.reason)
        return RequestSuccess(status_code=resp.status_code, body=payload)
