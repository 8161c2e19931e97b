# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""UIDs: human-readable claims of the form ``name <schema:id>``.

The name may contain spaces, so parsing splits on the *last* space and then
on the *first* colon of the remainder. Inside an identity URI a UID travels
in its plain form (no angle brackets), percent-encoded with spaces as ``+``.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import quote_plus, unquote_plus

from ssi.core.exceptions import SsiException

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class UidParseError(SsiException):
    """Base exception for malformed UID text."""

    def __init__(self, message: str, text: str):
        super().__init__(message, {"uid": text})
        self.text = text


class UidNoIdError(UidParseError):
    """Raised when a UID has no space separating the name from ``schema:id``."""

    def __init__(self, text: str):
        super().__init__(f"UID '{text}' without identity part", text)


class UidNoSchemeError(UidParseError):
    """Raised when the identity part of a UID has no ``schema:`` prefix."""

    def __init__(self, text: str):
        super().__init__(f"UID '{text}' without identity schema", text)


class UidEncodingError(UidParseError):
    """Raised when a URL-encoded UID does not decode to UTF-8 text."""

    def __init__(self, text: str):
        super().__init__(f"non-UTF-8 UID '{text}'", text)


class UidFieldError(UidParseError):
    """Raised when a schema or id holds a separator the grammar splits on."""

    def __init__(self, field: str, text: str):
        super().__init__(f"UID {field} '{text}' contains a separator", text)
        self.field = field


# ---------------------------------------------------------------------------
# Uid
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Uid:
    """A single claim; ordered lexicographically by ``(name, schema, id)``."""

    name: str
    schema: str
    id: str

    def __post_init__(self) -> None:
        # Plain text is split on the last space, then on the first colon
        if " " in self.schema or ":" in self.schema:
            raise UidFieldError("schema", self.schema)
        if " " in self.id:
            raise UidFieldError("id", self.id)

    def __str__(self) -> str:
        return f"{self.name} <{self.schema}:{self.id}>"

    def to_plain(self) -> str:
        """Display form without angle brackets, for embedding in other formats."""
        return f"{self.name} {self.schema}:{self.id}"

    def to_url_str(self) -> str:
        return quote_plus(self.to_plain(), safe="")

    @classmethod
    def from_str(cls, text: str) -> Uid:
        """Parse the display form; angle brackets are optional and ignored."""
        return cls._parse(text.replace("<", "").replace(">", ""))

    @classmethod
    def from_url_str(cls, text: str) -> Uid:
        try:
            decoded = unquote_plus(text, errors="strict")
        except UnicodeDecodeError as exc:
            raise UidEncodingError(text) from exc
        return cls._parse(decoded)

    @classmethod
    def _parse(cls, text: str) -> Uid:
        name, sep, rest = text.rpartition(" ")
        if not sep:
            raise UidNoIdError(text)
        schema, sep, id_ = rest.partition(":")
        if not sep:
            raise UidNoSchemeError(rest)
        return cls(name=name, schema=schema, id=id_)
