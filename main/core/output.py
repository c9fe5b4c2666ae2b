#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Output targets
Resolves -o/--out style options and writes result files
"""

import os
import stat
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from config import OUTPUT_CWD
from utils.core.logging import get_logger

from ..setup.console import format_json

log = get_logger()


@dataclass(frozen=True)
class OutputTarget:
    """Where a command writes its file output"""
    path: str
    is_directory: bool

    def file(self, filename: str) -> Path:
        """The file to write: ``filename`` inside a directory target, the target itself otherwise"""
        if self.is_directory:
            return Path(self.path) / filename
        return Path(self.path)


def resolve_output_path(value: Optional[str]) -> Optional[str]:
    """Unset means no output, an empty value means the current directory"""
    if value is None:
        return None
    return value if value != "" else OUTPUT_CWD


def is_directory(path: str) -> bool:
    """One stat call; a missing path counts as a file path"""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


def resolve_output_target(value: Optional[str]) -> Optional[OutputTarget]:
    """Resolve an output option to a target, or None for no file output"""
    path = resolve_output_path(value)
    if path is None:
        return None
    return OutputTarget(path=path, is_directory=is_directory(path))


def request_filename(method: str, path: str, timestamp_ms: Optional[int] = None) -> str:
    """``{METHOD}-{path with '/' as '_'}-{millis}.json`` for directory targets"""
    if timestamp_ms is None:
        timestamp_ms = int(time.time() * 1000)
    stem = path[1:] if path.startswith("/") else path
    return f"{method}-{stem.replace('/', '_')}-{timestamp_ms}.json"


def ensure_directory(value: str) -> Path:
    """Resolve a directory option and create it if needed"""
    directory = Path(resolve_output_path(value))
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def write_json(path: Path, value: Any) -> None:
    """Write pretty JSON, replacing the file"""
    Path(path).write_text(format_json(value), encoding="utf-8")
    log.debug(f"Wrote {path}")


def write_text(path: Path, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
    log.debug(f"Wrote {path}")


def append_json(path: Path, value: Any) -> None:
    """Append one pretty JSON blob and a newline in a single write"""
    with open(path, "a", encoding="utf-8") as f:
        f.write(format_json(value) + "\n")
