#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
listen command
Prints LCU websocket events until the process is stopped
"""

import queue
from typing import Optional

from config import EXIT_OK, LISTEN_EVENTS_FILENAME, LISTEN_IDLE_DELAY_S
from lcu import LCUEvent
from utils.core.logging import get_logger, log_section

from ..core.context import CommandContext
from ..core.output import OutputTarget, append_json, resolve_output_target
from ..setup.arguments import ListenOptions
from ..setup.console import echo, format_json

log = get_logger()


def handle_event(event: LCUEvent, target: Optional[OutputTarget]) -> None:
    """Record one event: append it to the target, then print it"""
    if target:
        append_json(target.file(LISTEN_EVENTS_FILENAME), event)
    echo(f"Received event: {format_json(event)}")


def drain_events(events: "queue.Queue[LCUEvent]", target: Optional[OutputTarget], stop_event) -> int:
    """Handle queued events in arrival order until ``stop_event`` is set

    Returns:
        Number of events handled
    """
    handled = 0
    while not stop_event.is_set():
        try:
            event = events.get(timeout=LISTEN_IDLE_DELAY_S)
        except queue.Empty:
            continue
        handle_event(event, target)
        handled += 1
    return handled


def run_listen(options: ListenOptions, context: CommandContext) -> int:
    client = context.connect()
    try:
        target = resolve_output_target(options.out)
        events = client.subscribe(name=options.name, path=options.path, types=options.types)
        log_section(log, "Listening for events", "👂", {
            "Filter": options.name or options.path or "all",
            "Types": ", ".join(options.types) if options.types else "all",
            "Output": target.file(LISTEN_EVENTS_FILENAME) if target else "console",
        })
        handled = drain_events(events, target, context.stop_event)
        log.info(f"Stopped listening after {handled} events")
        return EXIT_OK
    finally:
        client.close()
