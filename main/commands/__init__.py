#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command handlers, keyed by command name
"""

from .credentials import run_credentials
from .listen import run_listen
from .request import run_request
from .schema import run_schema

COMMANDS = {
    "request": run_request,
    "listen": run_listen,
    "schema": run_schema,
    "credentials": run_credentials,
}

__all__ = [
    'COMMANDS',
    'run_credentials',
    'run_listen',
    'run_request',
    'run_schema',
]
