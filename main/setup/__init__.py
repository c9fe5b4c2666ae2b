#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Setup subpackage
"""

from .arguments import (
    CommandOptions,
    CredentialsOptions,
    GlobalOptions,
    ListenOptions,
    RequestOptions,
    SchemaOptions,
    build_parser,
    setup_arguments,
)
from .console import echo, format_json, setup_console
from .initialization import setup_logging_and_cleanup

__all__ = [
    'CommandOptions',
    'CredentialsOptions',
    'GlobalOptions',
    'ListenOptions',
    'RequestOptions',
    'SchemaOptions',
    'build_parser',
    'setup_arguments',
    'echo',
    'format_json',
    'setup_console',
    'setup_logging_and_cleanup',
]
