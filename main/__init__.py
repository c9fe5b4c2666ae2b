#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Main entry point for hasagi
"""

import sys
import threading
from typing import Optional, Sequence

# Python version check
MIN_PYTHON = (3, 9)
if sys.version_info < MIN_PYTHON:
    raise RuntimeError(
        f"hasagi requires Python {MIN_PYTHON[0]}.{MIN_PYTHON[1]} or newer. "
        "Please upgrade your interpreter."
    )

from config import EXIT_INTERRUPTED
from lcu import ConnectionAborted
from utils.core.logging import get_logger

from .commands import COMMANDS
from .core.context import CommandContext
from .core.signals import setup_signal_handlers
from .setup.arguments import setup_arguments
from .setup.console import setup_console
from .setup.initialization import setup_logging_and_cleanup

log = get_logger()


def run_hasagi(argv: Optional[Sequence[str]] = None, context: Optional[CommandContext] = None) -> int:
    """Parse arguments, run one command, and return the exit code"""
    global_options, options = setup_arguments(argv)
    setup_logging_and_cleanup(global_options, options)

    if context is None:
        context = CommandContext(global_options=global_options, stop_event=threading.Event())
        setup_signal_handlers(context.stop_event)
    else:
        context.global_options = global_options

    handler = COMMANDS[options.command]
    try:
        return handler(options, context)
    except ConnectionAborted:
        log.warning("Stopped before the League of Legends client was found")
        return EXIT_INTERRUPTED


def main() -> None:
    """Program entry point"""
    setup_console()
    sys.exit(run_hasagi())


if __name__ == "__main__":
    main()
