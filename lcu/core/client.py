#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API client
Main orchestrator for LCU API interactions
"""

import queue
import threading
from typing import Any, Callable, Dict, Iterable, List, Optional

from config import LCU_CONNECT_RETRY_DELAY_S
from utils.core.logging import get_logger, log_section

from ..errors import ConnectionAborted
from ..types import NO_BODY, Credentials, LCUEvent, RequestSuccess
from ..websocket import EventFilter, EventSubscription, WebSocketConnection, parse_frame
from .lcu_api import LCUAPI
from .lcu_connection import LCUConnection

log = get_logger()

CONNECTION_ATTEMPT_FAILED = "connection-attempt-failed"
CONNECTED = "connected"


class LCU:
    """League Client API client - main orchestrator"""

    def __init__(self, lockfile_path: Optional[str] = None, stop_event: Optional[threading.Event] = None):
        """Initialize LCU client

        Args:
            lockfile_path: Optional explicit path to lockfile
            stop_event: Cancels the readiness wait and the websocket loop when set
        """
        self.stop_event = stop_event or threading.Event()
        self._connection = LCUConnection(lockfile_path)
        self._api = LCUAPI(self._connection)
        self._handlers: Dict[str, List[Callable]] = {
            CONNECTION_ATTEMPT_FAILED: [],
            CONNECTED: [],
        }
        self._subscriptions: List[EventSubscription] = []
        self._subscriptions_lock = threading.Lock()
        self._websocket: Optional[WebSocketConnection] = None
        self._websocket_thread: Optional[threading.Thread] = None

    # Connection properties (delegated to connection)
    @property
    def ok(self) -> bool:
        """Check if LCU connection is active"""
        return self._connection.ok

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._connection.credentials

    @property
    def port(self) -> Optional[int]:
        """Get LCU port"""
        return self._connection.port

    @property
    def base_url(self) -> Optional[str]:
        """Get LCU base URL"""
        return self._connection.base

    @property
    def basic_auth_token(self) -> Optional[str]:
        """Get the base64 ``riot:<password>`` token"""
        credentials = self._connection.credentials
        return credentials.basic_auth_token if credentials else None

    def on(self, event: str, callback: Callable) -> None:
        """Register a lifecycle callback (``connection-attempt-failed`` or ``connected``)"""
        if event not in self._handlers:
            raise ValueError(f"Unknown client event '{event}'")
        self._handlers[event].append(callback)

    def _emit(self, event: str, *args) -> None:
        for callback in list(self._handlers[event]):
            callback(*args)

    def connect(self, retry_delay: float = LCU_CONNECT_RETRY_DELAY_S) -> None:
        """Block until a running League Client answers

        Every failed attempt notifies ``connection-attempt-failed`` listeners
        with the attempt number, then waits ``retry_delay`` seconds.

        Raises:
            ConnectionAborted: stop_event was set while waiting
        """
        attempt = 0
        while not self.stop_event.is_set():
            attempt += 1
            self._connection.refresh_if_needed()
            if self._connection.probe():
                log_section(log, "LCU Connected", "🔗", {"Port": self.port, "Status": "Ready"})
                self._emit(CONNECTED)
                return
            self._emit(CONNECTION_ATTEMPT_FAILED, attempt)
            if self.stop_event.wait(retry_delay):
                break
        raise ConnectionAborted("Stopped while waiting for the League of Legends client")

    def request(self, method: str, path: str, body: Any = NO_BODY, params: Optional[dict] = None) -> RequestSuccess:
        """Send one HTTP request; see LCUAPI.request"""
        return self._api.request(method, path, body=body, params=params)

    # Event subscriptions
    def add_event_listener(
        self,
        callback: Callable[[LCUEvent], None],
        name: Optional[str] = None,
        path: Optional[str] = None,
        types: Optional[Iterable[str]] = None,
    ) -> EventSubscription:
        """Call ``callback`` from the websocket thread for every matching event"""
        subscription = EventSubscription(
            EventFilter(name=name, path=path, types=tuple(types) if types else None),
            callback,
        )
        with self._subscriptions_lock:
            self._subscriptions.append(subscription)
        self._ensure_websocket()
        return subscription

    def remove_event_listener(self, subscription: EventSubscription) -> None:
        with self._subscriptions_lock:
            if subscription in self._subscriptions:
                self._subscriptions.remove(subscription)

    def subscribe(
        self,
        name: Optional[str] = None,
        path: Optional[str] = None,
        types: Optional[Iterable[str]] = None,
    ) -> "queue.Queue[LCUEvent]":
        """Deliver matching events onto a queue in arrival order"""
        events: "queue.Queue[LCUEvent]" = queue.Queue()
        self.add_event_listener(events.put, name=name, path=path, types=types)
        return events

    def _dispatch_message(self, msg: str) -> None:
        frame = parse_frame(msg)
        if frame is None:
            return
        event_name, payload = frame
        with self._subscriptions_lock:
            subscriptions = list(self._subscriptions)
        for subscription in subscriptions:
            if subscription.filter.matches(event_name, payload):
                subscription.callback(payload)

    def _ensure_websocket(self) -> None:
        if self._websocket_thread is not None:
            return
        self._websocket = WebSocketConnection(
            self._connection,
            on_message=self._dispatch_message,
            stop_event=self.stop_event,
        )
        self._websocket_thread = threading.Thread(
            target=self._websocket.run,
            daemon=True,
            name="LCUWebSocket",
        )
        self._websocket_thread.start()

    def close(self) -> None:
        """Stop the websocket thread and release the HTTP session"""
        if self._websocket is not None:
            self._websocket.stop()
        if self._websocket_thread is not None:
            self._websocket_thread.join(timeout=2.0)
        self._connection.close()
