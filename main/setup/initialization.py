#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Initialization setup (logging)
"""

from utils.core.logging import cleanup_logs, get_logger, log_section, setup_logging

from .arguments import CommandOptions, GlobalOptions

log = get_logger()


def log_mode_for(options: GlobalOptions) -> str:
    """Determine log mode based on flags"""
    if options.debug:
        return 'debug'
    if options.verbose:
        return 'verbose'
    return 'customer'


def setup_logging_and_cleanup(options: GlobalOptions, command: CommandOptions) -> None:
    """Setup logging and clean up old session logs"""
    if options.write_logs:
        cleanup_logs()

    log_mode = log_mode_for(options)
    setup_logging(log_mode, write_logs=options.write_logs)

    if log_mode != 'customer':
        log_section(log, "hasagi Starting", "🚀", {
            "Command": command.command,
            "Lockfile": options.lockfile or "auto-detect",
        })
