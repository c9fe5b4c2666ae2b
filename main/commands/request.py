#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
request command
Sends one http request to the LCU and reports the result
"""

from typing import Union

from config import EXIT_OK
from lcu import LCUError, RequestError, RequestSuccess
from utils.core.logging import get_logger

from ..core.context import CommandContext
from ..core.output import request_filename, resolve_output_target, write_json
from ..setup.arguments import RequestOptions
from ..setup.console import echo, format_json

log = get_logger()

RequestResult = Union[RequestSuccess, LCUError, RequestError]


def report_result(result: RequestResult) -> None:
    """Print a request result to stdout"""
    if isinstance(result, LCUError):
        echo(f"Received response with non-success status code '{result.status_code}'.")
        echo(f"Error code: '{result.error_code}'.")
        echo(f"Error message: '{result.message}'")
        if result.implementation_details:
            echo(f"Additional details: {format_json(result.implementation_details)}")
    elif isinstance(result, RequestError):
        echo(f"{result.error_code or 'RequestError'}: {result.message or 'An error occurred'}")
    else:
        echo(f"Received response with status code '{result.status_code}'.")
        echo(f"Response: {format_json(result.body)}")


def run_request(options: RequestOptions, context: CommandContext) -> int:
    client = context.connect()
    try:
        method = options.method.upper()
        path = options.path if options.path.startswith("/") else "/" + options.path
        target = resolve_output_target(options.out)

        echo(f"Sending '{method}' request to '{client.base_url}{path}'...")
        try:
            result: RequestResult = client.request(method, path, body=options.body, params=options.query)
        except (LCUError, RequestError) as err:
            result = err

        if target:
            write_json(target.file(request_filename(method, path)), result.to_dict())

        report_result(result)
        return EXIT_OK
    finally:
        client.close()
