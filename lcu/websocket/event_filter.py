#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WebSocket Event Routing
Decodes WAMP frames and matches them against listener filters
"""

import json
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from config import WAMP_EVENT, WS_JSON_API_EVENT
from utils.core.logging import get_logger

from ..types import LCUEvent

log = get_logger()


def event_name_for_uri(uri: str) -> str:
    """Name the LCU gives the event of a single endpoint

    ``/lol-gameflow/v1/gameflow-phase`` -> ``OnJsonApiEvent_lol-gameflow_v1_gameflow-phase``
    """
    return WS_JSON_API_EVENT + uri.replace("/", "_")


def parse_frame(msg: str) -> Optional[Tuple[str, LCUEvent]]:
    """Decode a ``[8, <event name>, <payload>]`` frame

    Returns:
        (event name, payload) or None for anything that is not an event
    """
    try:
        data = json.loads(msg)
    except (TypeError, ValueError):
        log.trace(f"[ws] Ignoring non-JSON frame: {msg!r}")
        return None
    if (
        isinstance(data, list)
        and len(data) >= 3
        and data[0] == WAMP_EVENT
        and isinstance(data[1], str)
        and isinstance(data[2], dict)
    ):
        return data[1], data[2]
    return None


@dataclass(frozen=True)
class EventFilter:
    """Selects events by endpoint name or path and by event type"""
    name: Optional[str] = None
    path: Optional[str] = None
    types: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.name and self.path:
            raise ValueError("An event filter takes either a name or a path, not both")

    def matches(self, event_name: str, payload: LCUEvent) -> bool:
        uri = payload.get("uri") or ""
        if self.path is not None and uri != self.path:
            return False
        if self.name is not None and self.name not in (event_name, event_name_for_uri(uri)):
            return False
        if self.types and payload.get("eventType") not in self.types:
            return False
        return True


@dataclass(frozen=True)
class EventSubscription:
    """A registered listener"""
    filter: EventFilter
    callback: Callable[[LCUEvent], None]
