#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Type definitions for LCU API data
Provides dataclasses and TypedDict definitions for structured data
"""

import base64
from dataclasses import dataclass
from typing import Any, Optional, TypedDict

from config import LCU_HOST, LCU_USERNAME


@dataclass(frozen=True)
class Credentials:
    """Port and password of a running League Client"""
    port: int
    password: str
    protocol: str = "https"
    pid: Optional[int] = None
    name: str = "LeagueClient"

    @property
    def base_url(self) -> str:
        return f"{self.protocol}://{LCU_HOST}:{self.port}"

    @property
    def basic_auth_token(self) -> str:
        raw = f"{LCU_USERNAME}:{self.password}".encode("utf-8")
        return base64.b64encode(raw).decode("ascii")


@dataclass(frozen=True)
class RequestSuccess:
    """A 2xx response from the LCU"""
    status_code: int
    body: Any

    def to_dict(self) -> dict:
        return {"statusCode": self.status_code, "body": self.body}


class LCUEvent(TypedDict, total=False):
    """Payload of an OnJsonApiEvent frame"""
    data: Any
    eventType: str
    uri: str


class _NoBody:
    """Marks a request sent without a body, as opposed to a JSON ``null`` body"""

    def __repr__(self) -> str:
        return "NO_BODY"


NO_BODY = _NoBody()
