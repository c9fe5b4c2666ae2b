#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Help Schema
Fetches the console and full help schemas and joins them into the extended schema
"""

import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config import SCHEMA_HELP_METHOD, SCHEMA_HELP_PATH, SCHEMA_HELP_WORKERS
from utils.core.logging import get_logger, log_action, log_success

log = get_logger()

PATH_PARAM_RE = re.compile(r"\{\+?([^}]+)\}")


@dataclass
class ExtendedHelp:
    """The three schemas written by ``schema --raw``"""
    console_schema: Dict[str, Any]
    full_schema: Dict[str, Any]
    extended_schema: Dict[str, Any]


def path_params(url: Optional[str]) -> List[str]:
    """Names of the ``{param}`` segments of an endpoint url"""
    if not url:
        return []
    return PATH_PARAM_RE.findall(url)


def _fetch_help(client, params: dict) -> Any:
    return client.request(SCHEMA_HELP_METHOD, SCHEMA_HELP_PATH, params=params).body


def fetch_function_help(client, name: str) -> Dict[str, Any]:
    """Console help of one function, which carries its http method and url"""
    data = _fetch_help(client, {"target": name, "format": "Console"})
    if isinstance(data, dict):
        return data.get(name) or {}
    return {}


def extend_function(function: Dict[str, Any], console_help: Dict[str, Any]) -> Dict[str, Any]:
    """Add http_method, url and path_params to a Full-format function"""
    url = console_help.get("url")
    method = console_help.get("http_method")
    extended = dict(function)
    extended["http_method"] = method.upper() if isinstance(method, str) and method else None
    extended["url"] = url or None
    extended["path_params"] = path_params(url)
    return extended


def build_extended_schema(full_schema: Dict[str, Any], function_help: Dict[str, Dict[str, Any]]) -> Dict[str, Any]:
    """Join the Full schema with per-function console help"""
    functions = [
        extend_function(function, function_help.get(function.get("name"), {}))
        for function in full_schema.get("functions") or []
    ]
    return {
        "functions": functions,
        "types": list(full_schema.get("types") or []),
        "events": list(full_schema.get("events") or []),
    }


def get_extended_help(client, max_workers: int = SCHEMA_HELP_WORKERS) -> ExtendedHelp:
    """Fetch every help schema from a connected LCU client

    Args:
        client: connected ``lcu.LCU``
        max_workers: parallel per-function help requests

    Raises:
        LCUError, RequestError: a help request failed
    """
    log_action(log, "Fetching console help schema...", "📖")
    console_schema = _fetch_help(client, {"format": "Console"})
    log_action(log, "Fetching full help schema...", "📖")
    full_schema = _fetch_help(client, {"format": "Full"})

    names = [f.get("name") for f in full_schema.get("functions") or [] if f.get("name")]
    log_action(log, f"Fetching help for {len(names)} functions...", "📖")
    # Workers share the client's requests.Session
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        results = executor.map(lambda name: fetch_function_help(client, name), names)
        function_help = dict(zip(names, results))

    extended_schema = build_extended_schema(full_schema, function_help)
    endpoints = sum(1 for f in extended_schema["functions"] if f["url"])
    log_success(log, f"Extended schema ready ({endpoints} endpoints, {len(extended_schema['types'])} types)")
    return ExtendedHelp(
        console_schema=console_schema,
        full_schema=full_schema,
        extended_schema=extended_schema,
    )
