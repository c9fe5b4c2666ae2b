#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
credentials command
"""

from config import EXIT_OK

from ..core.context import CommandContext
from ..setup.arguments import CredentialsOptions
from ..setup.console import echo, format_json


def run_credentials(options: CredentialsOptions, context: CommandContext) -> int:
    """Print the LCU base url and the Basic auth header value"""
    client = context.connect()
    try:
        echo(format_json({
            "url": client.base_url,
            "Authorization": f"Basic {client.basic_auth_token}",
        }))
        return EXIT_OK
    finally:
        client.close()
