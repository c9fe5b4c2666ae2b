#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Core subpackage
"""

from .context import CommandContext, create_client
from .output import OutputTarget, resolve_output_target
from .signals import setup_signal_handlers

__all__ = [
    'CommandContext',
    'create_client',
    'OutputTarget',
    'resolve_output_target',
    'setup_signal_handlers',
]
