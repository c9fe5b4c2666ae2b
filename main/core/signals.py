#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Signal handlers for graceful shutdown
"""

import os
import signal
import sys
import threading

from config import EXIT_INTERRUPTED


def setup_signal_handlers(stop_event: threading.Event) -> None:
    """Set ``stop_event`` on SIGINT/SIGTERM; a second signal exits immediately"""

    def signal_handler(signum, frame):
        if stop_event.is_set():
            # Prevent multiple shutdown attempts from hanging
            os._exit(EXIT_INTERRUPTED)
        print(f"\nReceived signal {signum}, initiating graceful shutdown...", file=sys.stderr)
        stop_event.set()

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)
