#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
LCU error types
Protocol-level and transport-level failures of a request
"""

from typing import Any, Optional


class LCUError(Exception):
    """The LCU answered with a non-success status code"""

    def __init__(
        self,
        status_code: int,
        error_code: Optional[str],
        message: str,
        implementation_details: Any = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.error_code = error_code
        self.message = message
        self.implementation_details = implementation_details

    @classmethod
    def from_response(cls, status_code: int, payload: Any, reason: Optional[str] = None) -> "LCUError":
        """Build an error from an LCU error body

        The LCU reports failures as
        ``{"errorCode": ..., "httpStatus": ..., "message": ..., "implementationDetails": ...}``.
        Anything else falls back to the HTTP reason phrase.
        """
        if isinstance(payload, dict):
            return cls(
                status_code=payload.get("httpStatus") or status_code,
                error_code=payload.get("errorCode"),
                message=payload.get("message") or reason or "",
                implementation_details=payload.get("implementationDetails") or None,
            )
        message = payload if isinstance(payload, str) and payload else (reason or "")
        return cls(status_code=status_code, error_code=None, message=message)

    def to_dict(self) -> dict:
        return {
            "statusCode": self.status_code,
            "errorCode": self.error_code,
            "message": self.message,
            "implementationDetails": self.implementation_details,
        }


class RequestError(Exception):
    """The request/response exchange could not be completed"""

    def __init__(self, error_code: Optional[str] = None, message: Optional[str] = None):
        super().__init__(message or error_code or "RequestError")
        self.error_code = error_code
        self.message = message

    def to_dict(self) -> dict:
        return {
            "errorCode": self.error_code,
            "message": self.message,
        }


class ConnectionAborted(Exception):
    """The readiness wait was cancelled before the client was found"""
