#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Command line argument parsing
"""

import argparse
import json
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

from config import APP_NAME, APP_VERSION, DEFAULT_VERBOSE, LCU_EVENT_TYPES
from lcu import NO_BODY


@dataclass(frozen=True)
class GlobalOptions:
    """Options shared by every command"""
    verbose: bool = DEFAULT_VERBOSE
    debug: bool = False
    write_logs: bool = False
    lockfile: Optional[str] = None


@dataclass(frozen=True)
class RequestOptions:
    method: str
    path: str
    body: Any = NO_BODY
    query: Optional[dict] = None
    out: Optional[str] = None
    command: str = "request"


@dataclass(frozen=True)
class ListenOptions:
    name: Optional[str] = None
    path: Optional[str] = None
    types: Optional[Tuple[str, ...]] = None
    out: Optional[str] = None
    command: str = "listen"


@dataclass(frozen=True)
class SchemaOptions:
    typescript: Optional[str] = None
    tsnamespace: Optional[str] = None
    swagger: Optional[str] = None
    raw: Optional[str] = None
    command: str = "schema"

    @property
    def requested(self) -> bool:
        """True when at least one artifact was asked for"""
        return self.raw is not None or self.swagger is not None or self.typescript is not None


@dataclass(frozen=True)
class CredentialsOptions:
    command: str = "credentials"


CommandOptions = Union[RequestOptions, ListenOptions, SchemaOptions, CredentialsOptions]


def json_value(text: str) -> Any:
    """argparse type for a JSON-encoded option"""
    try:
        return json.loads(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid JSON: {e}")


def json_object(text: str) -> dict:
    """argparse type for a JSON object option"""
    value = json_value(text)
    if not isinstance(value, dict):
        raise argparse.ArgumentTypeError("expected a JSON object")
    return value


def _add_out_option(parser: argparse.ArgumentParser, help_text: str) -> None:
    # -o without a value means the current directory
    parser.add_argument("-o", "--out", nargs="?", const="", default=None, metavar="PATH", help=help_text)


def build_parser() -> argparse.ArgumentParser:
    """Build the hasagi argument parser"""
    ap = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Command line tools for the League of Legends client API",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")

    # General arguments
    ap.add_argument("--verbose", action="store_true", default=DEFAULT_VERBOSE,
                   help="Enable verbose logging (developer mode - shows all technical details)")
    ap.add_argument("--debug", action="store_true", default=False,
                   help="Enable ultra-detailed debug logging (includes function traces)")
    ap.add_argument("--write-logs", action="store_true", default=False,
                   help="Also write a session log file to the user data directory")
    ap.add_argument("--lockfile", type=str, default=None,
                   help="Explicit path to the League Client lockfile")

    commands = ap.add_subparsers(dest="command", metavar="<command>")
    commands.required = True

    request = commands.add_parser("request", help="send a http request to the LCU")
    request.add_argument("method", help="the http method")
    request.add_argument("path", help="the request path")
    request.add_argument("-b", "--body", type=json_value, default=NO_BODY, help="JSON request body")
    request.add_argument("-q", "--query", type=json_object, default=None, help="JSON object of query parameters")
    _add_out_option(request, "write the result to this file, or to a new file in this directory")

    listen = commands.add_parser("listen", help="listen to LCU websocket events")
    target = listen.add_mutually_exclusive_group()
    target.add_argument("-p", "--path", type=str, default=None, help="only events of this endpoint path")
    target.add_argument("-n", "--name", type=str, default=None, help="only events with this name")
    listen.add_argument("-t", "--type", dest="types", nargs="+", choices=LCU_EVENT_TYPES, default=None,
                        help="only events of these types")
    _add_out_option(listen, "append events to this file, or to a file in this directory")

    schema = commands.add_parser("schema", help="export the LCU API schema")
    schema.add_argument("-t", "--typescript", nargs="?", const="", default=None, metavar="DIR",
                        help="write TypeScript declaration files")
    schema.add_argument("--tsnamespace", type=str, default=None,
                        help="wrap the TypeScript declarations in this namespace")
    schema.add_argument("-s", "--swagger", nargs="?", const="", default=None, metavar="DIR",
                        help="write the Swagger document")
    schema.add_argument("-r", "--raw", nargs="?", const="", default=None, metavar="DIR",
                        help="write the raw help schemas")

    commands.add_parser("credentials", help="prints the lcu port and auth token")

    return ap


def to_options(args: argparse.Namespace) -> Tuple[GlobalOptions, CommandOptions]:
    """Split a parsed namespace into typed option records"""
    global_options = GlobalOptions(
        verbose=args.verbose,
        debug=args.debug,
        write_logs=args.write_logs,
        lockfile=args.lockfile,
    )
    if args.command == "request":
        options = RequestOptions(
            method=args.method,
            path=args.path,
            body=args.body,
            query=args.query,
            out=args.out,
        )
    elif args.command == "listen":
        options = ListenOptions(
            name=args.name,
            path=args.path,
            types=tuple(args.types) if args.types else None,
            out=args.out,
        )
    elif args.command == "schema":
        options = SchemaOptions(
            typescript=args.typescript,
            tsnamespace=args.tsnamespace,
            swagger=args.swagger,
            raw=args.raw,
        )
    else:
        options = CredentialsOptions()
    return global_options, options


def setup_arguments(argv: Optional[Sequence[str]] = None) -> Tuple[GlobalOptions, CommandOptions]:
    """Parse and return command line options

    Usage errors print the usage and exit with status 2.
    """
    ap = build_parser()
    args = ap.parse_args(argv)
    return to_options(args)
