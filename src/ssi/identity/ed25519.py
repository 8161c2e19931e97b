# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Ed25519 keys backed by ``cryptography``."""

from __future__ import annotations

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    PublicFormat,
)
from nacl.bindings import crypto_core_ed25519_is_valid_point

from ssi.identity.keys import InvalidPubkeyError, InvalidSignatureError, SsiPub, SsiSig
from ssi.identity.secret import SsiSecret
from ssi.identity.tags import Algorithm


class Ed25519Secret(SsiSecret):
    """A 32-byte Ed25519 seed."""

    algorithm = Algorithm.ED25519

    def _load(self, data: bytes) -> Ed25519PrivateKey:
        return Ed25519PrivateKey.from_private_bytes(data)

    def public_bytes(self) -> bytes:
        return self._key.public_key().public_bytes(Encoding.Raw, PublicFormat.Raw)

    def _sign(self, digest: bytes) -> bytes:
        return self._key.sign(digest)


def verify(pub: SsiPub, digest: bytes, sig: SsiSig) -> None:
    """Verify an Ed25519 signature over a 32-byte digest.

    ``cryptography`` loads any 32 bytes as a public key, so the point is
    checked with libsodium first; it must decode onto the curve and lie in
    the prime-order subgroup.
    """
    if not crypto_core_ed25519_is_valid_point(pub.data):
        raise InvalidPubkeyError(f"{pub} is not a valid Ed25519 point")
    try:
        key = Ed25519PublicKey.from_public_bytes(pub.data)
    except ValueError as exc:
        raise InvalidPubkeyError(f"{pub} is not a valid Ed25519 key") from exc
    try:
        key.verify(sig.data, digest)
    except InvalidSignature as exc:
        raise InvalidSignatureError("Ed25519 signature does not verify") from exc
