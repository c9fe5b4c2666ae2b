#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
schema command
Exports the LCU help schemas, a Swagger document and TypeScript declarations
"""

from config import (
    EXIT_OK,
    RAW_CONSOLE_SCHEMA_FILENAME,
    RAW_EXTENDED_SCHEMA_FILENAME,
    RAW_FULL_SCHEMA_FILENAME,
    SWAGGER_FILENAME,
    TS_ENDPOINTS_FILENAME,
    TS_EVENTS_FILENAME,
    TS_TYPES_FILENAME,
)
from lcu_schema import get_extended_help, get_swagger, get_typescript
from utils.core.logging import get_logger, log_success

from ..core.context import CommandContext
from ..core.output import ensure_directory, write_json, write_text
from ..setup.arguments import SchemaOptions

log = get_logger()


def run_schema(options: SchemaOptions, context: CommandContext) -> int:
    if not options.requested:
        log.debug("No schema output requested")
        return EXIT_OK

    client = context.connect()
    try:
        extended_help = get_extended_help(client)
    finally:
        client.close()

    if options.raw is not None:
        out = ensure_directory(options.raw)
        write_json(out / RAW_CONSOLE_SCHEMA_FILENAME, extended_help.console_schema)
        write_json(out / RAW_FULL_SCHEMA_FILENAME, extended_help.full_schema)
        write_json(out / RAW_EXTENDED_SCHEMA_FILENAME, extended_help.extended_schema)
        log_success(log, f"Raw schemas written to {out}")

    swagger = None
    if options.swagger is not None or options.typescript is not None:
        swagger = get_swagger(extended_help.extended_schema)

    if options.swagger is not None:
        out = ensure_directory(options.swagger)
        write_json(out / SWAGGER_FILENAME, swagger)
        log_success(log, f"Swagger document written to {out}")

    if options.typescript is not None:
        declarations = get_typescript(swagger, extended_help.extended_schema, options.tsnamespace)
        out = ensure_directory(options.typescript)
        write_text(out / TS_TYPES_FILENAME, declarations.lcu_types)
        write_text(out / TS_ENDPOINTS_FILENAME, declarations.lcu_endpoints)
        write_text(out / TS_EVENTS_FILENAME, declarations.lcu_events)
        log_success(log, f"TypeScript declarations written to {out}")

    return EXIT_OK
