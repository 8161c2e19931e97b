# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Algorithm and network tags embedded in public key bytes.

A vanity public key reserves its last two bytes: byte 30 names the signature
algorithm and byte 31 the network the identity is meant for.
"""

from __future__ import annotations

import enum

from ssi.core.exceptions import ValidationException

ALGORITHM_TAG_OFFSET = 30
NETWORK_TAG_OFFSET = 31


class UnknownAlgorithmError(ValidationException, ValueError):
    """Raised for an algorithm byte or name outside :class:`Algorithm`."""

    def __init__(self, value: int | str):
        super().__init__(f"unknown signature algorithm {value!r}", field="algorithm", value=value)


class UnknownNetworkError(ValidationException, ValueError):
    """Raised for a network byte or name outside :class:`Network`."""

    def __init__(self, value: int | str):
        super().__init__(f"unknown network {value!r}", field="network", value=value)


class Algorithm(enum.IntEnum):
    """Signature algorithm; the value is the tag stored in key byte 30."""

    ED25519 = 0x13
    BIP340 = 0x14

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_byte(cls, value: int) -> Algorithm:
        try:
            return cls(value)
        except ValueError:
            raise UnknownAlgorithmError(value) from None

    @classmethod
    def from_name(cls, name: str) -> Algorithm:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownAlgorithmError(name) from None


class Network(enum.IntEnum):
    """Target network; the value is the tag stored in key byte 31."""

    BITCOIN = 0x01
    TESTNET = 0x02
    SIGNET = 0x03
    REGTEST = 0x04
    LIQUID = 0x05

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def from_byte(cls, value: int) -> Network:
        try:
            return cls(value)
        except ValueError:
            raise UnknownNetworkError(value) from None

    @classmethod
    def from_name(cls, name: str) -> Network:
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise UnknownNetworkError(name) from None


def has_tags(public_bytes: bytes, algorithm: Algorithm, network: Network) -> bool:
    """Return True if *public_bytes* carries the given algorithm/network tags."""
    return (
        len(public_bytes) > NETWORK_TAG_OFFSET
        and public_bytes[ALGORITHM_TAG_OFFSET] == algorithm
        and public_bytes[NETWORK_TAG_OFFSET] == network
    )
