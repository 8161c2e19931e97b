# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Baid64: checksummed, URL-safe text encoding for fixed-size binary values.

Text form is ``<body>`` or ``<hri>:<body>`` where ``hri`` is a short
human-readable domain tag (``ssi``, ``ssi-sig``, ...) and ``body`` is the
unpadded URL-safe base64 of ``payload || checksum``. The checksum is the first
four bytes of SHA-256 over the HRI followed by the payload, so the same bytes
encoded under a different HRI never decode.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import re

from ssi.core.exceptions import SsiException

CHECKSUM_LEN = 4

_BODY_RE = re.compile(r"[A-Za-z0-9_-]*")


class Baid64ParseError(SsiException):
    """Raised when Baid64 text is malformed, corrupted or of the wrong kind."""

    def __init__(self, message: str, text: str | None = None):
        details = {"text": text} if text is not None else None
        super().__init__(message, details)
        self.text = text


def checksum(hri: str, payload: bytes) -> bytes:
    """Compute the 4-byte checksum of *payload* under *hri*."""
    return hashlib.sha256(hri.encode("utf-8") + payload).digest()[:CHECKSUM_LEN]


def _b64url_encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def _b64url_decode(token: str) -> bytes:
    padding = "=" * (-len(token) % 4)
    return base64.urlsafe_b64decode(token + padding)


def encode(payload: bytes, hri: str, *, prefix: bool = False) -> str:
    """Encode *payload* as Baid64 text.

    Args:
        payload: Raw bytes to encode.
        hri: Human-readable domain tag mixed into the checksum.
        prefix: Emit ``<hri>:`` in front of the body.
    """
    body = _b64url_encode(payload + checksum(hri, payload))
    return f"{hri}:{body}" if prefix else body


def decode(text: str, hri: str, length: int) -> bytes:
    """Decode Baid64 *text* into exactly *length* payload bytes.

    The ``<hri>:`` prefix is optional; any other prefix is rejected.

    Raises:
        Baid64ParseError: On a foreign prefix, characters outside the
            URL-safe alphabet, a non-canonical body, a wrong length or a
            checksum mismatch.
    """
    body = text
    if ":" in text:
        found, body = text.split(":", 1)
        if found != hri:
            raise Baid64ParseError(f"expected '{hri}:' prefix, found '{found}:'", text)

    if not body or not _BODY_RE.fullmatch(body):
        raise Baid64ParseError("invalid Baid64 characters", text)

    try:
        raw = _b64url_decode(body)
    except (binascii.Error, ValueError) as exc:
        raise Baid64ParseError(f"invalid Baid64 encoding: {exc}", text) from exc

    # Reject bodies whose unused trailing bits are set
    if _b64url_encode(raw) != body:
        raise Baid64ParseError("non-canonical Baid64 encoding", text)

    if len(raw) != length + CHECKSUM_LEN:
        raise Baid64ParseError(
            f"Baid64 payload has {len(raw) - CHECKSUM_LEN} bytes, expected {length}",
            text,
        )

    payload, check = raw[:length], raw[length:]
    if check != checksum(hri, payload):
        raise Baid64ParseError("Baid64 checksum mismatch", text)
    return payload
