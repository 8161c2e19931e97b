# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""SSI - self-sovereign identity records.

An identity binds a public key, human-readable claims (UIDs) and an optional
expiry into one line of text, signed by the key holder::

    ssi:<public key>?uid=Alice+dns%3Aalice.example&sig=<signature>

Anyone holding the text can verify it without an external authority.

Layout:
  ssi.identity  Keys, vanity generation, UIDs and the Ssi record
  ssi.core      Configuration, logging and the base exception
  ssi.cli       ``ssi`` command-line entry point
"""

__version__ = "0.1.0"

from ssi.identity import (
    Algorithm,
    Network,
    Ssi,
    SsiParseError,
    SsiPub,
    SsiSecret,
    SsiSig,
    Uid,
)

__all__ = [
    "Algorithm",
    "Network",
    "Ssi",
    "SsiParseError",
    "SsiPub",
    "SsiSecret",
    "SsiSig",
    "Uid",
    "__version__",
]
