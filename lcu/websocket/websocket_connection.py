#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
WebSocket Connection Management
Handles WebSocket connection lifecycle and callbacks
"""

import json
import ssl
import threading
from typing import Callable, Optional

import websocket  # websocket-client

from config import (
    WAMP_SUBSCRIBE,
    WS_JSON_API_EVENT,
    WS_PING_INTERVAL_DEFAULT,
    WS_PING_TIMEOUT_DEFAULT,
    WS_RECONNECT_DELAY,
    WS_SUBPROTOCOL,
)
from utils.core.logging import get_logger, log_event, log_section

log = get_logger()


class WebSocketConnection:
    """Keeps a WAMP websocket to the LCU open and forwards its messages"""

    def __init__(
        self,
        connection,
        on_message: Callable[[str], None],
        stop_event: Optional[threading.Event] = None,
        ping_interval: int = WS_PING_INTERVAL_DEFAULT,
        ping_timeout: int = WS_PING_TIMEOUT_DEFAULT,
    ):
        """Initialize WebSocket connection manager

        Args:
            connection: LCUConnection instance providing port and password
            on_message: Called with every raw text frame
            stop_event: Set to end the connection loop
            ping_interval: WebSocket ping interval
            ping_timeout: WebSocket ping timeout
        """
        self.connection = connection
        self.on_message = on_message
        self.stop_event = stop_event or threading.Event()
        self.ping_interval = ping_interval
        self.ping_timeout = ping_timeout

        self.ws = None

    def run(self):
        """Main WebSocket connection loop"""
        while not self.stop_event.is_set():
            if not self.connection.ok:
                self.connection.refresh_if_needed()
            if not self.connection.ok:
                self.stop_event.wait(WS_RECONNECT_DELAY)
                continue

            credentials = self.connection.credentials
            url = f"wss://127.0.0.1:{credentials.port}/"
            ctx = ssl.SSLContext(ssl.PROTOCOL_TLS_CLIENT)
            ctx.check_hostname = False
            ctx.verify_mode = ssl.CERT_NONE

            self.ws = websocket.WebSocketApp(
                url,
                header=[f"Authorization: Basic {credentials.basic_auth_token}"],
                subprotocols=[WS_SUBPROTOCOL],
                on_open=self._on_open,
                on_message=self._on_message,
                on_error=self._on_error,
                on_close=self._on_close,
            )
            self.ws.run_forever(
                origin=credentials.base_url,
                sslopt={"context": ctx},
                ping_interval=self.ping_interval,
                ping_timeout=self.ping_timeout,
            )

            if self.stop_event.wait(WS_RECONNECT_DELAY):
                break
            # The client may have restarted on a new port
            self.connection.refresh_if_needed()

        if self.ws:
            self.ws.close()
            log.debug("[ws] WebSocket closed on thread exit")

    def _on_open(self, ws):
        """WebSocket connection opened"""
        ws.send(json.dumps([WAMP_SUBSCRIBE, WS_JSON_API_EVENT]))
        log_event(log, "WebSocket subscribed", "🔌", {"Event": WS_JSON_API_EVENT})

    def _on_message(self, ws, msg):
        """WebSocket message received"""
        self.on_message(msg)

    def _on_error(self, ws, err):
        log.debug(f"WebSocket: Error: {err}")

    def _on_close(self, ws, status, msg):
        """WebSocket connection closed"""
        log_section(log, "WebSocket Disconnected", "🔌", {"Status Code": status, "Message": msg})

    def stop(self):
        """Stop the WebSocket connection"""
        self.stop_event.set()
        if self.ws:
            self.ws.close()
            log.debug("[ws] WebSocket close requested")
