#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU WebSocket Package
Contains WebSocket connection and event routing functionality
"""

from .websocket_connection import WebSocketConnection
from .event_filter import EventFilter, EventSubscription, event_name_for_uri, parse_frame

__all__ = [
    'WebSocketConnection',
    'EventFilter',
    'EventSubscription',
    'event_name_for_uri',
    'parse_frame',
]
