# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""CLI commands for creating and checking identities.

Commands::

    ssi new [--algo ALGO] [--network NET] [--uid UID]... [--expiry DATE]
    ssi sign [--secret SECRET] [--uid UID]... [--expiry DATE]
    ssi check IDENTITY

``new`` runs the vanity search and prints both the signed identity and its
secret. ``sign`` re-issues an identity for an existing secret, read from
``--secret`` or ``SSI_SECRET``. ``check`` parses and verifies identity text
and exits non-zero unless it is signed, valid and unexpired.
"""

from __future__ import annotations

import argparse
import logging
from datetime import date
from typing import Any

from ssi.core.config import get_config
from ssi.core.exceptions import ConfigException, SsiException
from ssi.identity import (
    Algorithm,
    Network,
    Ssi,
    SsiSecret,
    Uid,
    VerifyError,
    WrongExpiryError,
    parse_expiry,
    secret_class,
)

from ..output import output_error, output_result

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------


def register(subparsers: argparse._SubParsersAction) -> None:
    """Register the ``new``, ``sign`` and ``check`` commands."""
    new_p = subparsers.add_parser(
        "new",
        help="Generate a vanity key and a signed identity for it",
    )
    new_p.add_argument(
        "--algo",
        choices=[a.label for a in Algorithm],
        default=None,
        help="Signature algorithm (default: SSI_DEFAULT_ALGORITHM or bip340)",
    )
    new_p.add_argument(
        "--network",
        choices=[n.label for n in Network],
        default=None,
        help="Network tag (default: SSI_DEFAULT_NETWORK or bitcoin)",
    )
    new_p.add_argument(
        "--max-attempts",
        type=int,
        default=None,
        metavar="N",
        help="Give up after N candidate keys (default: unbounded)",
    )
    _add_record_arguments(new_p)
    new_p.set_defaults(func=cmd_new)

    sign_p = subparsers.add_parser(
        "sign",
        help="Sign a new identity with an existing secret",
    )
    sign_p.add_argument(
        "--secret",
        default=None,
        metavar="SECRET",
        help="Secret key in ssi-priv text form (default: SSI_SECRET)",
    )
    _add_record_arguments(sign_p)
    sign_p.set_defaults(func=cmd_sign)

    check_p = subparsers.add_parser(
        "check",
        help="Parse and verify identity text",
    )
    check_p.add_argument("identity", help="Identity text (ssi:...)")
    check_p.add_argument("--json", action="store_true", help="Output as JSON")
    check_p.set_defaults(func=cmd_check)


def _add_record_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--uid",
        action="append",
        type=_uid_arg,
        default=[],
        metavar="UID",
        help="Claim as 'Name <schema:id>' (repeatable)",
    )
    parser.add_argument(
        "--expiry",
        type=_expiry_arg,
        default=None,
        metavar="YYYY-MM-DD",
        help="Expiration date",
    )
    parser.add_argument("--json", action="store_true", help="Output as JSON")


def _uid_arg(value: str) -> Uid:
    try:
        return Uid.from_str(value)
    except SsiException as exc:
        raise argparse.ArgumentTypeError(exc.message) from exc


def _expiry_arg(value: str) -> date:
    try:
        return parse_expiry(value)
    except WrongExpiryError as exc:
        raise argparse.ArgumentTypeError(f"invalid date '{value}', expected YYYY-MM-DD") from exc


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def cmd_new(args: argparse.Namespace) -> int:
    """Generate a vanity secret and print the signed identity."""
    config = get_config()
    try:
        algorithm = Algorithm.from_name(args.algo or config.default_algorithm)
        network = Network.from_name(args.network or config.default_network)
        max_attempts = args.max_attempts or config.vanity_max_attempts

        logger.info(
            "Searching for %s/%s vanity key (about 65536 candidates on average)",
            algorithm.label,
            network.label,
        )
        secret = secret_class(algorithm).new(network, max_attempts=max_attempts)
        ssi = Ssi.new(args.uid, args.expiry, secret)
    except SsiException as exc:
        output_error(exc.message, exc.details, args.json)
        return 1

    result = _describe(ssi)
    result["secret"] = secret.to_baid64()
    output_result(result, args.json)
    return 0


def cmd_sign(args: argparse.Namespace) -> int:
    """Issue a signed identity for an existing secret."""
    try:
        secret = _load_secret(args.secret)
        ssi = Ssi.new(args.uid, args.expiry, secret)
    except SsiException as exc:
        output_error(exc.message, exc.details, args.json)
        return 1

    output_result(_describe(ssi), args.json)
    return 0


def cmd_check(args: argparse.Namespace) -> int:
    """Verify identity text; 0 only for a signed, valid, unexpired identity."""
    try:
        ssi = Ssi.parse(args.identity.strip())
    except SsiException as exc:
        output_error(exc.message, exc.details, args.json)
        return 1

    result = _describe(ssi)
    signed = ssi.check_integrity()
    expired = ssi.is_expired()
    result["signed"] = signed
    result["expired"] = expired
    output_result(result, args.json)

    if not signed:
        logger.warning("Identity %s carries no signature", ssi.pub.fingerprint())
    return 0 if signed and not expired else 1


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _load_secret(text: str | None) -> SsiSecret:
    text = text or get_config().secret
    if not text:
        raise ConfigException("no secret given; use --secret or SSI_SECRET", ["SSI_SECRET"])
    return SsiSecret.from_baid64(text)


def _describe(ssi: Ssi) -> dict[str, Any]:
    try:
        algorithm = ssi.pub.check_tags().label
        network = ssi.pub.network.label
    except VerifyError:
        algorithm = network = "unknown"
    return {
        "identity": str(ssi),
        "fingerprint": str(ssi.pub.fingerprint()),
        "algorithm": algorithm,
        "network": network,
        "uids": [str(uid) for uid in sorted(ssi.uids)],
        "expiry": ssi.expiry.isoformat() if ssi.expiry else None,
    }
