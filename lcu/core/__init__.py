#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Core Package
Contains core connection, API, and credential discovery functionality
"""

from .client import LCU, CONNECTED, CONNECTION_ATTEMPT_FAILED
from .lcu_connection import LCUConnection
from .lcu_api import LCUAPI
from .lockfile import (
    discover_credentials,
    find_lockfile,
    find_process_credentials,
    parse_client_arguments,
    parse_lockfile,
)

__all__ = [
    'LCU',
    'CONNECTED',
    'CONNECTION_ATTEMPT_FAILED',
    'LCUConnection',
    'LCUAPI',
    'discover_credentials',
    'find_lockfile',
    'find_process_credentials',
    'parse_client_arguments',
    'parse_lockfile',
]
