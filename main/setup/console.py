#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Console output
Command results go to stdout, one prefixed line per message
"""

import json
import sys
from typing import Any

from config import CONSOLE_PREFIX, JSON_INDENT


def setup_console() -> None:
    """Use UTF-8 on Windows terminals so event payloads print unmangled"""
    if sys.platform != "win32":
        return
    for stream in (sys.stdout, sys.stderr):
        try:
            stream.reconfigure(encoding="utf-8")
        except (AttributeError, OSError):
            pass  # stream doesn't support reconfigure or is redirected


def format_json(value: Any) -> str:
    """Pretty JSON as written to the console and output files"""
    return json.dumps(value, indent=JSON_INDENT, ensure_ascii=False)


def echo(text: str) -> None:
    """Print one message to stdout"""
    print(f"{CONSOLE_PREFIX} {text}", flush=True)
