#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
League Client API package
Main entry point for LCU functionality
"""

from .core.client import LCU, CONNECTED, CONNECTION_ATTEMPT_FAILED
from .errors import ConnectionAborted, LCUError, RequestError
from .types import NO_BODY, Credentials, LCUEvent, RequestSuccess

__all__ = [
    'LCU',
    'CONNECTED',
    'CONNECTION_ATTEMPT_FAILED',
    'ConnectionAborted',
    'LCUError',
    'RequestError',
    'Credentials',
    'LCUEvent',
    'RequestSuccess',
    'NO_BODY',
]
