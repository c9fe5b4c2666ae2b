#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Credential Discovery
Handles finding the League Client lockfile or process arguments
"""

import os
from pathlib import Path
from typing import Iterable, Optional

import psutil

from config import LCU_LOCKFILE_ENV, LCU_PROCESS_NAMES
from utils.core.logging import get_logger

from ..types import Credentials

log = get_logger()


def find_lockfile(explicit: Optional[str] = None) -> Optional[str]:
    """Find League Client lockfile using pathlib

    Args:
        explicit: Optional explicit path to lockfile

    Returns:
        Path to lockfile if found, None otherwise
    """
    if explicit:
        explicit_path = Path(explicit)
        if explicit_path.is_file():
            return str(explicit_path)

    env = os.environ.get(LCU_LOCKFILE_ENV)
    if env:
        env_path = Path(env)
        if env_path.is_file():
            return str(env_path)

    # Check common installation paths
    if os.name == "nt":
        common_paths = [
            Path("C:/Riot Games/League of Legends/lockfile"),
            Path("C:/Program Files/Riot Games/League of Legends/lockfile"),
            Path("C:/Program Files (x86)/Riot Games/League of Legends/lockfile"),
        ]
    else:
        common_paths = [
            Path("/Applications/League of Legends.app/Contents/LoL/lockfile"),
            Path.home() / ".local/share/League of Legends/lockfile",
        ]

    for p in common_paths:
        if p.is_file():
            return str(p)

    # Try to find via process scanning
    try:
        for proc in psutil.process_iter(attrs=["name", "exe"]):
            nm = (proc.info.get("name") or "").lower()
            if "leagueclient" in nm:
                exe = proc.info.get("exe") or ""
                if exe:
                    exe_path = Path(exe)
                    for directory in [exe_path.parent, exe_path.parent.parent]:
                        lockfile = directory / "lockfile"
                        if lockfile.is_file():
                            return str(lockfile)
    except (psutil.Error, OSError) as e:
        log.debug(f"Failed to find lockfile via process iteration: {e}")

    return None


def parse_lockfile(lockfile_path: str) -> Optional[Credentials]:
    """Parse a ``name:pid:port:password:protocol`` lockfile

    Returns:
        Parsed Credentials or None if failed
    """
    path = Path(lockfile_path)
    if not path.is_file():
        return None

    try:
        content = path.read_text(encoding="utf-8").strip()
        name, pid, port, pw, proto = content.split(":")[:5]
        return Credentials(
            port=int(port),
            password=pw,
            protocol=proto or "https",
            pid=int(pid),
            name=name,
        )
    except (OSError, ValueError) as e:
        log.debug(f"Failed to parse lockfile: {e}")
        return None


def parse_client_arguments(cmdline: Iterable[str], pid: Optional[int] = None) -> Optional[Credentials]:
    """Extract credentials from LeagueClientUx command line arguments

    The client is started with ``--app-port=<port>`` and
    ``--remoting-auth-token=<password>``.
    """
    port = None
    password = None
    for arg in cmdline:
        arg = arg.strip('"')
        if arg.startswith("--app-port="):
            port = arg.split("=", 1)[1]
        elif arg.startswith("--remoting-auth-token="):
            password = arg.split("=", 1)[1]

    if not port or not password:
        return None
    try:
        return Credentials(port=int(port), password=password, pid=pid, name="LeagueClientUx")
    except ValueError:
        return None


def find_process_credentials() -> Optional[Credentials]:
    """Scan running processes for a LeagueClientUx with credentials on its command line"""
    try:
        for proc in psutil.process_iter(attrs=["name", "pid"]):
            if (proc.info.get("name") or "") not in LCU_PROCESS_NAMES:
                continue
            try:
                credentials = parse_client_arguments(proc.cmdline(), pid=proc.info.get("pid"))
            except (psutil.AccessDenied, psutil.NoSuchProcess) as e:
                log.debug(f"Cannot read client command line: {e}")
                continue
            if credentials:
                return credentials
    except (psutil.Error, OSError) as e:
        log.debug(f"Failed to scan processes for client arguments: {e}")
    return None


def discover_credentials(explicit_lockfile: Optional[str] = None) -> Optional[Credentials]:
    """Find credentials from the lockfile, falling back to the client process"""
    lf = find_lockfile(explicit_lockfile)
    if lf:
        credentials = parse_lockfile(lf)
        if credentials:
            log.trace(f"Credentials read from lockfile {lf}")
            return credentials
    return find_process_credentials()
