# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Secret keys: the algorithm-independent interface and key pairs.

Concrete algorithms live in :mod:`ssi.identity.bip340` and
:mod:`ssi.identity.ed25519`. A secret is never part of an identity record;
its only text form is ``ssi-priv:<baid64>`` for handing it to a signer.
"""

from __future__ import annotations

import abc
import threading
from dataclasses import dataclass
from typing import Any, ClassVar

from ssi.core.exceptions import SsiException, ValidationException
from ssi.identity import baid64, vanity
from ssi.identity.keys import DIGEST_LEN, SsiPub, SsiSig
from ssi.identity.tags import Algorithm, Network, UnknownAlgorithmError

SECRET_LEN = 32
SECRET_HRI = "ssi-priv"


class InvalidSecretKeyError(ValidationException, ValueError):
    """Raised when bytes are not a valid secret key for the algorithm."""


class SecretParseError(SsiException):
    """Raised when secret key text cannot be decoded."""


class SsiSecret(abc.ABC):
    """A 32-byte secret key for one signature algorithm.

    Subclasses set :attr:`algorithm` and implement key loading, public key
    derivation and signing of 32-byte digests.
    """

    algorithm: ClassVar[Algorithm]

    def __init__(self, data: bytes) -> None:
        data = bytes(data)
        if len(data) != SECRET_LEN:
            raise InvalidSecretKeyError(
                f"secret key must be {SECRET_LEN} bytes, got {len(data)}", field="secret"
            )
        try:
            self._key = self._load(data)
        except ValueError as exc:
            raise InvalidSecretKeyError(
                f"invalid {self.algorithm.label} secret key", field="secret"
            ) from exc
        self._data = data

    @classmethod
    def new(
        cls,
        network: Network,
        *,
        rng: vanity.RandomSource | None = None,
        max_attempts: int | None = None,
        cancel: threading.Event | None = None,
    ) -> SsiSecret:
        """Generate a vanity secret whose public key is tagged for *network*."""
        return vanity.generate(
            cls, network, rng=rng, max_attempts=max_attempts, cancel=cancel
        )

    @abc.abstractmethod
    def _load(self, data: bytes) -> Any:
        """Build the backend key object; raise ValueError if *data* is invalid."""

    @abc.abstractmethod
    def public_bytes(self) -> bytes:
        """Derive the raw 32-byte public key."""

    @abc.abstractmethod
    def _sign(self, digest: bytes) -> bytes: ...

    def to_public(self) -> SsiPub:
        return SsiPub(self.public_bytes())

    def sign(self, digest: bytes) -> SsiSig:
        """Sign a 32-byte digest. Callers must pre-hash their message."""
        if len(digest) != DIGEST_LEN:
            raise ValidationException(
                f"digest must be {DIGEST_LEN} bytes, got {len(digest)}", field="digest"
            )
        return SsiSig(self._sign(digest))

    def to_bytes(self) -> bytes:
        return self._data

    def to_baid64(self) -> str:
        return baid64.encode(bytes([self.algorithm]) + self._data, SECRET_HRI, prefix=True)

    @staticmethod
    def from_baid64(text: str) -> SsiSecret:
        """Parse ``ssi-priv:<baid64>`` text into the matching secret type.

        Raises:
            SecretParseError: If the text is corrupted, names an unknown
                algorithm or holds an invalid key.
        """
        try:
            payload = baid64.decode(text.strip(), SECRET_HRI, SECRET_LEN + 1)
            cls = secret_class(Algorithm.from_byte(payload[0]))
            return cls(payload[1:])
        except (baid64.Baid64ParseError, UnknownAlgorithmError, InvalidSecretKeyError) as exc:
            raise SecretParseError(f"invalid secret key: {exc.message}") from exc

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SsiSecret):
            return NotImplemented
        return self.algorithm == other.algorithm and self._data == other._data

    def __hash__(self) -> int:
        return hash((self.algorithm, self._data))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pub={self.to_public()})"


def secret_class(algorithm: Algorithm) -> type[SsiSecret]:
    """Return the secret key type implementing *algorithm*."""
    from ssi.identity.bip340 import Bip340Secret
    from ssi.identity.ed25519 import Ed25519Secret

    classes: dict[Algorithm, type[SsiSecret]] = {
        Algorithm.BIP340: Bip340Secret,
        Algorithm.ED25519: Ed25519Secret,
    }
    return classes[algorithm]


@dataclass(frozen=True)
class SsiPair:
    """A public key together with the secret it was derived from."""

    pub: SsiPub
    secret: SsiSecret

    def __post_init__(self) -> None:
        if self.secret.to_public() != self.pub:
            raise ValidationException("secret key does not match public key", field="pub")

    @classmethod
    def from_secret(cls, secret: SsiSecret) -> SsiPair:
        return cls(secret.to_public(), secret)
