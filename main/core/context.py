#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command context
What every command handler receives besides its own options
"""

import threading
from dataclasses import dataclass, field
from typing import Callable, Optional

from lcu import CONNECTION_ATTEMPT_FAILED, LCU
from utils.core.logging import get_logger

from ..setup.arguments import GlobalOptions

log = get_logger()

WAITING_MESSAGE = "Waiting for League of Legends client..."


def create_client(options: GlobalOptions, stop_event: threading.Event) -> LCU:
    """Create a client and wait until the League Client is ready"""
    client = LCU(lockfile_path=options.lockfile, stop_event=stop_event)
    client.on(CONNECTION_ATTEMPT_FAILED, lambda attempt: log.info(WAITING_MESSAGE))
    client.connect()
    return client


@dataclass
class CommandContext:
    global_options: GlobalOptions = field(default_factory=GlobalOptions)
    stop_event: threading.Event = field(default_factory=threading.Event)
    client_factory: Optional[Callable[[GlobalOptions, threading.Event], LCU]] = None

    def connect(self) -> LCU:
        """A ready client; blocks during the readiness wait"""
        factory = self.client_factory or create_client
        return factory(self.global_options, self.stop_event)
