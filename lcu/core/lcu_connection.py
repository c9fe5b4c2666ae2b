#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU Connection Management
Handles credential lookup, session setup, and refresh
"""

from typing import Optional

import requests

from config import APP_USER_AGENT, LCU_PROBE_PATH, LCU_PROBE_TIMEOUT_S, LCU_USERNAME
from utils.core.logging import get_logger, log_success

from ..types import Credentials
from .lockfile import discover_credentials

log = get_logger()


class LCUConnection:
    """Manages LCU connection lifecycle"""

    def __init__(self, lockfile_path: Optional[str] = None):
        """Initialize LCU connection

        Args:
            lockfile_path: Optional explicit path to lockfile
        """
        self.ok = False
        self.credentials: Optional[Credentials] = None
        self.session: Optional[requests.Session] = None
        self._explicit_lockfile = lockfile_path

    @property
    def port(self) -> Optional[int]:
        return self.credentials.port if self.credentials else None

    @property
    def base(self) -> Optional[str]:
        return self.credentials.base_url if self.credentials else None

    def _init_from_credentials(self, credentials: Credentials):
        """Open a session for the given credentials"""
        if self.session is not None:
            self.session.close()
        self.credentials = credentials
        self.session = requests.Session()
        self.session.verify = False
        self.session.auth = (LCU_USERNAME, credentials.password)
        self.session.headers.update({
            "Accept": "application/json",
            "User-Agent": APP_USER_AGENT,
        })
        self.ok = True

    def _disable(self, reason: str):
        """Disable LCU connection"""
        if self.ok:
            log.debug(f"LCU disabled: {reason}")
        self.ok = False
        self.credentials = None
        if self.session is not None:
            self.session.close()
            self.session = None

    def refresh_if_needed(self, force: bool = False):
        """Re-read credentials when not connected or when they changed"""
        credentials = discover_credentials(self._explicit_lockfile)
        if credentials is None:
            self._disable("credentials not found")
            return

        if force or not self.ok or credentials != self.credentials:
            old = self.credentials
            self._init_from_credentials(credentials)
            if old is not None and old != credentials:
                log_success(log, f"LCU reloaded (port={self.port})", "🔄")

    def probe(self) -> bool:
        """Check that the LCU web server answers at all

        Any HTTP response counts, the status code is irrelevant.
        """
        if not self.ok:
            return False
        try:
            self.session.get(self.base + LCU_PROBE_PATH, timeout=LCU_PROBE_TIMEOUT_S)
            return True
        except requests.exceptions.RequestException as e:
            log.debug(f"LCU probe failed: {e}")
            self._disable(f"probe failed ({type(e).__name__})")
            return False

    def close(self):
        if self.session is not None:
            self.session.close()
