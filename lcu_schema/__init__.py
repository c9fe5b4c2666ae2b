#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Schema Package
Extracts the LCU help schema and renders Swagger and TypeScript from it
"""

from .help import ExtendedHelp, get_extended_help
from .swagger import get_swagger
from .typescript import TypeScriptDeclarations, get_typescript

__all__ = [
    'ExtendedHelp',
    'get_extended_help',
    'get_swagger',
    'TypeScriptDeclarations',
    'get_typescript',
]
