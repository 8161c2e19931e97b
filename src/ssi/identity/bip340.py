# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""BIP-340 Schnorr keys over secp256k1, backed by ``coincurve``.

Public keys are the 32-byte x-only encoding. Signing uses fresh auxiliary
randomness per signature as BIP-340 recommends.
"""

from __future__ import annotations

import secrets

from coincurve.keys import PrivateKey, PublicKeyXOnly

from ssi.identity.keys import InvalidPubkeyError, InvalidSignatureError, SsiPub, SsiSig
from ssi.identity.secret import SsiSecret
from ssi.identity.tags import Algorithm


class Bip340Secret(SsiSecret):
    """A secp256k1 scalar in ``[1, n-1]``."""

    algorithm = Algorithm.BIP340

    def _load(self, data: bytes) -> PrivateKey:
        return PrivateKey(data)

    def public_bytes(self) -> bytes:
        return self._key.public_key_xonly.format()

    def _sign(self, digest: bytes) -> bytes:
        return self._key.sign_schnorr(digest, secrets.token_bytes(32))


def verify(pub: SsiPub, digest: bytes, sig: SsiSig) -> None:
    """Verify a BIP-340 signature over a 32-byte digest."""
    try:
        key = PublicKeyXOnly(pub.data)
    except ValueError as exc:
        raise InvalidPubkeyError(f"{pub} is not a valid secp256k1 x-only key") from exc
    try:
        valid = key.verify(sig.data, digest)
    except ValueError as exc:
        raise InvalidSignatureError("malformed BIP-340 signature") from exc
    if not valid:
        raise InvalidSignatureError("BIP-340 signature does not verify")
