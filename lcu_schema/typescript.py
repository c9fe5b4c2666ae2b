#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
TypeScript Declaration Generation
Renders lcu-types.d.ts, lcu-endpoints.d.ts and lcu-events.d.ts
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from config import LCU_EVENT_TYPES, TS_TYPES_FILENAME
from lcu.websocket.event_filter import event_name_for_uri
from utils.core.logging import get_logger, log_success

from .swagger import SCHEMA_REF_PREFIX, lcu_type_to_schema

log = get_logger()

INDENT = "    "
HEADER = "// Generated by hasagi. Do not edit.\n"
IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
TYPES_IMPORT_ALIAS = "LCUTypes"
TYPES_IMPORT = f'import type * as {TYPES_IMPORT_ALIAS} from "./{TS_TYPES_FILENAME[:-len(".d.ts")]}";'


@dataclass
class TypeScriptDeclarations:
    """Contents of the three declaration files"""
    lcu_types: str
    lcu_endpoints: str
    lcu_events: str


def property_key(name: str) -> str:
    return name if IDENTIFIER_RE.match(name) else json.dumps(name)


def schema_to_ts(schema: Optional[Dict[str, Any]], ref_prefix: str = "") -> str:
    """Render a JSON schema as a TypeScript type expression"""
    if not schema:
        return "unknown"
    if "$ref" in schema:
        return ref_prefix + schema["$ref"][len(SCHEMA_REF_PREFIX):]
    if "enum" in schema:
        return " | ".join(json.dumps(value) for value in schema["enum"])

    kind = schema.get("type")
    if kind == "array":
        item = schema_to_ts(schema.get("items"), ref_prefix)
        return f"({item})[]" if " " in item else f"{item}[]"
    if kind in ("integer", "number"):
        return "number"
    if kind == "boolean":
        return "boolean"
    if kind == "string":
        return "string"
    if kind == "object":
        if "additionalProperties" in schema:
            return f"Record<string, {schema_to_ts(schema['additionalProperties'], ref_prefix)}>"
        if "properties" in schema:
            return render_object(schema, ref_prefix, 0)
        return "Record<string, unknown>"
    return "unknown"


def render_object(schema: Dict[str, Any], ref_prefix: str, depth: int) -> str:
    """Render an object schema with its properties as ``{ ... }``"""
    properties = schema.get("properties") or {}
    if not properties:
        return "{}"
    required = set(schema.get("required") or [])
    pad = INDENT * (depth + 1)
    lines = ["{"]
    for name, prop in properties.items():
        optional = "" if name in required else "?"
        lines.append(f"{pad}{property_key(name)}{optional}: {schema_to_ts(prop, ref_prefix)};")
    lines.append(INDENT * depth + "}")
    return "\n".join(lines)


def _wrap(body: List[str], namespace: Optional[str], imports: str = "") -> str:
    """Put declarations either inside ``declare namespace`` or at module level"""
    if namespace:
        inner = "\n".join((INDENT + line) if line else "" for line in "\n".join(body).split("\n"))
        return f"{HEADER}\ndeclare namespace {namespace} {{\n{inner}\n}}\n"
    prefix = f"{imports}\n" if imports else ""
    return f"{HEADER}{prefix}\n" + "\n".join(body) + "\n"


def render_types(swagger: Dict[str, Any], namespace: Optional[str] = None) -> str:
    """lcu-types.d.ts: one declaration per component schema"""
    body = []
    for name, schema in (swagger.get("components", {}).get("schemas") or {}).items():
        if schema.get("description"):
            body.append(f"/** {schema['description']} */")
        if "enum" in schema:
            body.append(f"export type {name} = {schema_to_ts(schema)};")
        else:
            body.append(f"export interface {name} {render_object(schema, '', 0)}")
        body.append("")
    return _wrap(body, namespace)


def _operation_entry(operation: Dict[str, Any], ref_prefix: str) -> Dict[str, Any]:
    path_props: Dict[str, Any] = {}
    query_props: Dict[str, Any] = {}
    query_required: List[str] = []
    for param in operation.get("parameters") or []:
        if param["in"] == "path":
            path_props[param["name"]] = param.get("schema")
        else:
            query_props[param["name"]] = param.get("schema")
            if param.get("required"):
                query_required.append(param["name"])

    entry: Dict[str, Any] = {"properties": {}, "required": []}

    def add(key: str, type_expr: str, required: bool):
        entry["properties"][key] = type_expr
        if required:
            entry["required"].append(key)

    if path_props:
        add("path", render_object(
            {"properties": path_props, "required": list(path_props)}, ref_prefix, 3), True)
    if query_props:
        add("query", render_object(
            {"properties": query_props, "required": query_required}, ref_prefix, 3), bool(query_required))
    body = operation.get("requestBody")
    if body:
        schema = body["content"]["application/json"]["schema"]
        add("body", schema_to_ts(schema, ref_prefix), body.get("required", False))

    response = operation.get("responses", {}).get("200")
    if response:
        add("response", schema_to_ts(response["content"]["application/json"]["schema"], ref_prefix), True)
    else:
        add("response", "void", True)
    return entry


def render_endpoints(swagger: Dict[str, Any], namespace: Optional[str] = None) -> str:
    """lcu-endpoints.d.ts: request/response shape of every method of every path"""
    ref_prefix = "" if namespace else f"{TYPES_IMPORT_ALIAS}."
    body = ["export interface LCUEndpoints {"]
    for path, operations in (swagger.get("paths") or {}).items():
        body.append(f"{INDENT}{json.dumps(path)}: {{")
        for method, operation in operations.items():
            entry = _operation_entry(operation, ref_prefix)
            body.append(f"{INDENT * 2}{method.upper()}: {{")
            for key, type_expr in entry["properties"].items():
                optional = "" if key in entry["required"] else "?"
                body.append(f"{INDENT * 3}{key}{optional}: {type_expr};")
            body.append(f"{INDENT * 2}}};")
        body.append(f"{INDENT}}};")
    body.append("}")
    body.append("")
    body.append("export type LCUEndpoint = keyof LCUEndpoints;")
    return _wrap(body, namespace, TYPES_IMPORT)


def render_events(swagger: Dict[str, Any], extended_schema: Dict[str, Any], namespace: Optional[str] = None) -> str:
    """lcu-events.d.ts: named help events plus one json api event per GET endpoint"""
    ref_prefix = "" if namespace else f"{TYPES_IMPORT_ALIAS}."
    event_type = " | ".join(json.dumps(t) for t in LCU_EVENT_TYPES)
    body = [f"export type LCUEventType = {event_type};", "", "export interface LCUEvents {"]
    for event in extended_schema.get("events") or []:
        name = event.get("name")
        if not name:
            continue
        if event.get("description"):
            body.append(f"{INDENT}/** {event['description']} */")
        body.append(f"{INDENT}{json.dumps(name)}: {schema_to_ts(lcu_type_to_schema(event.get('type')), ref_prefix)};")
    body.append("}")
    body.append("")
    body.append("export interface LCUJsonApiEvents {")
    for path, operations in (swagger.get("paths") or {}).items():
        get = operations.get("get")
        if not get:
            continue
        response = get.get("responses", {}).get("200")
        data = schema_to_ts(response["content"]["application/json"]["schema"], ref_prefix) if response else "unknown"
        body.append(f"{INDENT}{json.dumps(event_name_for_uri(path))}: {{")
        body.append(f"{INDENT * 2}data: {data};")
        body.append(f"{INDENT * 2}eventType: LCUEventType;")
        body.append(f"{INDENT * 2}uri: string;")
        body.append(f"{INDENT}}};")
    body.append("}")
    return _wrap(body, namespace, TYPES_IMPORT)


def get_typescript(
    swagger: Dict[str, Any],
    extended_schema: Dict[str, Any],
    namespace: Optional[str] = None,
) -> TypeScriptDeclarations:
    """Render all three declaration files"""
    declarations = TypeScriptDeclarations(
        lcu_types=render_types(swagger, namespace),
        lcu_endpoints=render_endpoints(swagger, namespace),
        lcu_events=render_events(swagger, extended_schema, namespace),
    )
    log_success(log, "TypeScript declarations rendered" + (f" (namespace {namespace})" if namespace else ""))
    return declarations
