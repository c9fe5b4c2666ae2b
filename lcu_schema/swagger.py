#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Swagger Generation
Builds an OpenAPI 3 document from the extended help schema
"""

from typing import Any, Dict, Optional

from config import APP_VERSION, SWAGGER_OPENAPI_VERSION, SWAGGER_TITLE
from utils.core.logging import get_logger, log_success

from .help import PATH_PARAM_RE

log = get_logger()

SCHEMA_REF_PREFIX = "#/components/schemas/"
BODY_METHODS = {"POST", "PUT", "PATCH"}

# LCU primitive type -> JSON schema
PRIMITIVE_SCHEMAS = {
    "bool": {"type": "boolean"},
    "int8": {"type": "integer", "format": "int32"},
    "int16": {"type": "integer", "format": "int32"},
    "int32": {"type": "integer", "format": "int32"},
    "int64": {"type": "integer", "format": "int64"},
    "uint8": {"type": "integer", "format": "int32", "minimum": 0},
    "uint16": {"type": "integer", "format": "int32", "minimum": 0},
    "uint32": {"type": "integer", "format": "int64", "minimum": 0},
    "uint64": {"type": "integer", "format": "int64", "minimum": 0},
    "float": {"type": "number", "format": "float"},
    "double": {"type": "number", "format": "double"},
    "string": {"type": "string"},
    "object": {"type": "object"},
}


def is_primitive(type_info: Optional[dict]) -> bool:
    return (type_info or {}).get("type", "") in PRIMITIVE_SCHEMAS


def lcu_type_to_schema(type_info: Optional[dict]) -> Dict[str, Any]:
    """Convert an LCU ``{"type", "elementType"}`` pair to a JSON schema"""
    type_info = type_info or {}
    name = type_info.get("type") or ""
    element = type_info.get("elementType") or ""
    if name == "vector":
        return {"type": "array", "items": lcu_type_to_schema({"type": element})}
    if name == "map":
        return {"type": "object", "additionalProperties": lcu_type_to_schema({"type": element})}
    if name in PRIMITIVE_SCHEMAS:
        return dict(PRIMITIVE_SCHEMAS[name])
    if not name:
        return {}
    return {"$ref": SCHEMA_REF_PREFIX + name}


def type_to_component(lcu_type: dict) -> Dict[str, Any]:
    """Convert an LCU struct or enum type to a component schema"""
    component: Dict[str, Any] = {}
    if lcu_type.get("description"):
        component["description"] = lcu_type["description"]

    values = lcu_type.get("values") or []
    if values:
        component["type"] = "string"
        component["enum"] = [value["name"] for value in values]
        return component

    component["type"] = "object"
    properties = {}
    required = []
    for field in lcu_type.get("fields") or []:
        schema = lcu_type_to_schema(field.get("type"))
        if field.get("description") and "$ref" not in schema:
            schema["description"] = field["description"]
        properties[field["name"]] = schema
        if not field.get("optional"):
            required.append(field["name"])
    component["properties"] = properties
    if required:
        component["required"] = required
    return component


def function_to_operation(function: dict) -> Dict[str, Any]:
    """Convert an extended-schema function to an OpenAPI operation"""
    method = function["http_method"]
    path_names = set(function.get("path_params") or [])
    operation: Dict[str, Any] = {"operationId": function["name"]}
    if function.get("description"):
        operation["summary"] = function["description"]
    if function.get("tags"):
        operation["tags"] = list(function["tags"])

    parameters = []
    body_arg = None
    arguments = function.get("arguments") or []
    by_name = {arg.get("name"): arg for arg in arguments}

    for name in function.get("path_params") or []:
        arg = by_name.get(name, {})
        parameters.append({
            "name": name,
            "in": "path",
            "required": True,
            "schema": lcu_type_to_schema(arg.get("type")) or {"type": "string"},
        })

    for arg in arguments:
        name = arg.get("name")
        if name in path_names:
            continue
        if method in BODY_METHODS and body_arg is None and (name == "body" or not is_primitive(arg.get("type"))):
            body_arg = arg
            continue
        param = {
            "name": name,
            "in": "query",
            "required": not arg.get("optional", False),
            "schema": lcu_type_to_schema(arg.get("type")),
        }
        if arg.get("description"):
            param["description"] = arg["description"]
        parameters.append(param)

    if parameters:
        operation["parameters"] = parameters
    if body_arg is not None:
        operation["requestBody"] = {
            "required": not body_arg.get("optional", False),
            "content": {"application/json": {"schema": lcu_type_to_schema(body_arg.get("type"))}},
        }

    returns = lcu_type_to_schema(function.get("returns"))
    if returns:
        operation["responses"] = {
            "200": {
                "description": "Successful response",
                "content": {"application/json": {"schema": returns}},
            }
        }
    else:
        operation["responses"] = {"204": {"description": "No content"}}
    return operation


def get_swagger(extended_schema: Dict[str, Any]) -> Dict[str, Any]:
    """Build the OpenAPI document of every function that has an http endpoint"""
    paths: Dict[str, Dict[str, Any]] = {}
    for function in extended_schema.get("functions") or []:
        if not function.get("url") or not function.get("http_method"):
            continue
        url = PATH_PARAM_RE.sub(lambda m: "{" + m.group(1) + "}", function["url"])
        paths.setdefault(url, {})[function["http_method"].lower()] = function_to_operation(function)

    schemas = {
        lcu_type["name"]: type_to_component(lcu_type)
        for lcu_type in extended_schema.get("types") or []
        if lcu_type.get("name")
    }

    swagger = {
        "openapi": SWAGGER_OPENAPI_VERSION,
        "info": {"title": SWAGGER_TITLE, "version": APP_VERSION},
        "servers": [{"url": "https://127.0.0.1:{port}", "variables": {"port": {"default": "2999"}}}],
        "paths": dict(sorted(paths.items())),
        "components": {
            "schemas": dict(sorted(schemas.items())),
            "securitySchemes": {"basicAuth": {"type": "http", "scheme": "basic"}},
        },
        "security": [{"basicAuth": []}],
    }
    log_success(log, f"Swagger document built ({len(paths)} paths, {len(schemas)} schemas)")
    return swagger
