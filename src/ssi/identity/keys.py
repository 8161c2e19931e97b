# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Public keys, signatures and verification errors.

:class:`SsiPub` is algorithm-agnostic: the algorithm that produced it is read
from the tag in byte 30, never trusted from context. Verification dispatches
on that tag to the per-algorithm backend.
"""

from __future__ import annotations

import base64
import hashlib
from dataclasses import dataclass

from ssi.core.exceptions import SsiException, ValidationException
from ssi.identity import baid64
from ssi.identity.tags import (
    ALGORITHM_TAG_OFFSET,
    NETWORK_TAG_OFFSET,
    Algorithm,
    Network,
    UnknownAlgorithmError,
    UnknownNetworkError,
)

PUBLIC_KEY_LEN = 32
SIGNATURE_LEN = 64
DIGEST_LEN = 32
FINGERPRINT_LEN = 8

PUB_HRI = "ssi"
SIG_HRI = "ssi-sig"

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class VerifyError(SsiException):
    """Base exception for failed signature verification."""


class InvalidPubkeyError(VerifyError):
    """Raised when key bytes are not a valid key for the tagged algorithm."""


class InvalidSignatureError(VerifyError):
    """Raised when a well-formed signature does not verify."""


# ---------------------------------------------------------------------------
# Fingerprint
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class Fingerprint:
    """Short identifier of a public key (first 8 bytes of its SHA-256)."""

    data: bytes

    def __str__(self) -> str:
        return base64.urlsafe_b64encode(self.data).decode("ascii").rstrip("=")


# ---------------------------------------------------------------------------
# Public key
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class SsiPub:
    """A 32-byte public key carrying ``(algorithm, network)`` tags.

    ``str(pub)`` renders ``ssi:<baid64>``; :meth:`from_str` accepts the text
    with or without the ``ssi:`` prefix.
    """

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != PUBLIC_KEY_LEN:
            raise ValidationException(
                f"public key must be {PUBLIC_KEY_LEN} bytes, got {len(self.data)}",
                field="public_key",
            )

    @classmethod
    def from_str(cls, text: str) -> SsiPub:
        """Parse Baid64 text; raises :class:`~ssi.identity.baid64.Baid64ParseError`."""
        return cls(baid64.decode(text, PUB_HRI, PUBLIC_KEY_LEN))

    def to_baid64(self, *, prefix: bool = True) -> str:
        return baid64.encode(self.data, PUB_HRI, prefix=prefix)

    def __str__(self) -> str:
        return self.to_baid64()

    def __repr__(self) -> str:
        return f"SsiPub({self.to_baid64()!r})"

    @property
    def algorithm(self) -> Algorithm:
        """Algorithm named by the tag byte; raises UnknownAlgorithmError."""
        return Algorithm.from_byte(self.data[ALGORITHM_TAG_OFFSET])

    @property
    def network(self) -> Network:
        """Network named by the tag byte; raises UnknownNetworkError."""
        return Network.from_byte(self.data[NETWORK_TAG_OFFSET])

    def fingerprint(self) -> Fingerprint:
        return Fingerprint(hashlib.sha256(self.data).digest()[:FINGERPRINT_LEN])

    def check_tags(self, algorithm: Algorithm | None = None) -> Algorithm:
        """Check the embedded tags are known and, optionally, name *algorithm*.

        Returns:
            The algorithm named by the key.

        Raises:
            InvalidPubkeyError: If a tag is unknown or does not match.
        """
        try:
            found = self.algorithm
            _ = self.network
        except (UnknownAlgorithmError, UnknownNetworkError) as exc:
            raise InvalidPubkeyError(f"public key {self} has {exc.message}") from exc
        if algorithm is not None and found != algorithm:
            raise InvalidPubkeyError(
                f"public key {self} is tagged {found.label}, expected {algorithm.label}"
            )
        return found

    def verify(self, digest: bytes, sig: SsiSig) -> None:
        """Verify *sig* over a 32-byte *digest*.

        Raises:
            InvalidPubkeyError: If the key is unusable for its tagged algorithm.
            InvalidSignatureError: If the signature does not verify.
        """
        if len(digest) != DIGEST_LEN:
            raise ValidationException(
                f"digest must be {DIGEST_LEN} bytes, got {len(digest)}", field="digest"
            )
        algorithm = self.check_tags()

        from ssi.identity import bip340, ed25519

        if algorithm == Algorithm.BIP340:
            bip340.verify(self, digest, sig)
        else:
            ed25519.verify(self, digest, sig)


# ---------------------------------------------------------------------------
# Signature
# ---------------------------------------------------------------------------


@dataclass(frozen=True, order=True)
class SsiSig:
    """A 64-byte signature, opaque beyond its length."""

    data: bytes

    def __post_init__(self) -> None:
        if len(self.data) != SIGNATURE_LEN:
            raise ValidationException(
                f"signature must be {SIGNATURE_LEN} bytes, got {len(self.data)}",
                field="signature",
            )

    @classmethod
    def from_str(cls, text: str) -> SsiSig:
        return cls(baid64.decode(text, SIG_HRI, SIGNATURE_LEN))

    def __str__(self) -> str:
        return baid64.encode(self.data, SIG_HRI)

    def __repr__(self) -> str:
        return f"SsiSig({str(self)!r})"
