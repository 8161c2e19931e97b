# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""Vanity key generation by rejection sampling.

A candidate secret is drawn from a secure random source and kept only when
its public key ends with the ``(algorithm, network)`` tag bytes. One fixed tag
pair out of 65536 means 65536 draws on average. Without a cap the search
never gives up; ``max_attempts`` and ``cancel`` bound it for callers that
cannot wait indefinitely.
"""

from __future__ import annotations

import logging
import secrets
import threading
from collections.abc import Callable, Iterator
from typing import TYPE_CHECKING, TypeVar

from ssi.core.exceptions import SsiException
from ssi.identity.tags import Network, has_tags

if TYPE_CHECKING:
    from ssi.identity.secret import SsiSecret

logger = logging.getLogger(__name__)

SECRET_LEN = 32

RandomSource = Callable[[int], bytes]

S = TypeVar("S", bound="SsiSecret")


class VanityExhaustedError(SsiException):
    """Raised when a bounded vanity search stops before finding a key."""

    def __init__(self, message: str, attempts: int):
        super().__init__(message, {"attempts": attempts})
        self.attempts = attempts


def candidates(secret_cls: type[S], rng: RandomSource | None = None) -> Iterator[S]:
    """Yield an endless stream of random secrets of *secret_cls*.

    Draws that are not valid secrets for the algorithm (e.g. a BIP-340
    scalar outside the curve order) are skipped silently.
    """
    rng = rng or secrets.token_bytes
    while True:
        raw = rng(SECRET_LEN)
        try:
            candidate = secret_cls(raw)
        except ValueError:
            continue
        yield candidate


def generate(
    secret_cls: type[S],
    network: Network,
    *,
    rng: RandomSource | None = None,
    max_attempts: int | None = None,
    cancel: threading.Event | None = None,
) -> S:
    """Search for a secret whose public key carries the tags of *network*.

    Args:
        secret_cls: Concrete secret type; fixes the algorithm tag.
        network: Network tag to embed.
        rng: Random source returning *n* bytes; ``secrets.token_bytes`` by default.
        max_attempts: Stop after this many candidates.
        cancel: Stop once this event is set.

    Raises:
        VanityExhaustedError: If ``max_attempts`` is reached or ``cancel`` is set.
    """
    algorithm = secret_cls.algorithm
    attempts = 0
    for candidate in candidates(secret_cls, rng):
        attempts += 1
        if has_tags(candidate.public_bytes(), algorithm, network):
            logger.debug(
                "Found %s/%s vanity key after %d attempts",
                algorithm.label,
                network.label,
                attempts,
            )
            return candidate
        if max_attempts is not None and attempts >= max_attempts:
            raise VanityExhaustedError(
                f"no {algorithm.label}/{network.label} key found in {attempts} attempts",
                attempts,
            )
        if cancel is not None and cancel.is_set():
            raise VanityExhaustedError(
                f"{algorithm.label}/{network.label} key search cancelled", attempts
            )
    raise AssertionError("candidate stream ended")  # pragma: no cover
