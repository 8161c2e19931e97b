# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Custom exception hierarchy for SSI.

Every error raised by the package derives from :class:`SsiException`, so
callers can catch one type and still tell failures apart by subclass.
Identity-specific errors live next to the code that raises them
(``ssi.identity.*``); this module holds the shared base and the
cross-cutting categories.
"""

from __future__ import annotations

from typing import Any


class SsiException(Exception):  # noqa: N818
    """Base exception for all SSI errors.

    All SSI-specific exceptions should inherit from this class.
    """

    def __init__(self, message: str, details: dict | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization."""
        return {
            "error": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(SsiException):
    """Exception for invalid input values.

    Raised when:
    - A byte string has the wrong length for a key or signature
    - A secret key is outside the algorithm's valid range
    - A tag byte or name is not part of a closed enumeration
    """

    def __init__(self, message: str, field: str | None = None, value: Any = None):
        details = {}
        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        super().__init__(message, details)
        self.field = field
        self.value = value


class ConfigException(SsiException):
    """Exception for configuration errors.

    Raised when:
    - A required setting (e.g. the signing secret) is missing
    - A configured algorithm or network name is unknown
    """

    def __init__(self, message: str, missing_vars: list[str] | None = None):
        details = {}
        if missing_vars:
            details["missing_vars"] = missing_vars
        super().__init__(message, details)
        self.missing_vars = missing_vars or []
