# SPDX-License-Identifier: MIT
# Copyright (c) 2026 Ourochronos Contributors

"""The identity record and its URI form.

Wire format::

    ssi:<pub>[?uid=<uid>[&uid=...]][&expiry=YYYY-MM-DD][&sig=<sig>]

The signature covers the record's own text up to the last ``sig=``, so the
serializer doubles as the builder of the signed message: both sides render
the record, cut before the signature and hash twice with SHA-256. UIDs are
always emitted in sorted order, making the text (and thus the signature) a
function of the record's content rather than of insertion order.
"""

from __future__ import annotations

import hashlib
import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from urllib.parse import SplitResult, urlsplit

from ssi.core.exceptions import SsiException, ValidationException
from ssi.identity.baid64 import Baid64ParseError
from ssi.identity.keys import SsiPub, SsiSig, VerifyError
from ssi.identity.secret import SsiSecret
from ssi.identity.uid import Uid, UidParseError

logger = logging.getLogger(__name__)

SCHEME = "ssi"
EXPIRY_FORMAT = "%Y-%m-%d"

# RFC 3986 unreserved, reserved and percent characters
_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]*")
_BAD_PERCENT_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_EXPIRY_RE = re.compile(r"\d{4}-\d{2}-\d{2}")

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class SsiParseError(SsiException):
    """Base exception for identity text that cannot be accepted."""


class InvalidUriError(SsiParseError):
    """Raised when the text is not a syntactically valid URI."""


class InvalidSchemeError(SsiParseError):
    """Raised when the URI scheme is not ``ssi``."""

    def __init__(self, scheme: str):
        super().__init__("SSI must start with 'ssi:' prefix (URI scheme)", {"scheme": scheme})
        self.scheme = scheme


class InvalidPubError(SsiParseError):
    """Raised when the URI path is not a valid Baid64 public key."""


class InvalidQueryParamError(SsiParseError):
    """Raised for a query parameter without ``=``."""

    def __init__(self, param: str):
        super().__init__(f"SSI contains invalid attribute '{param}'", {"param": param})
        self.param = param


class UnknownParamError(SsiParseError):
    """Raised for a query parameter other than ``uid``, ``expiry`` or ``sig``."""

    def __init__(self, param: str):
        super().__init__(f"SSI contains unknown attribute '{param}'", {"param": param})
        self.param = param


class RepeatedExpiryError(SsiParseError):
    """Raised when ``expiry`` appears more than once."""

    def __init__(self) -> None:
        super().__init__("SSI contains multiple expiration dates")


class RepeatedSigError(SsiParseError):
    """Raised when ``sig`` appears more than once."""

    def __init__(self) -> None:
        super().__init__("SSI contains multiple signatures")


class WrongExpiryError(SsiParseError):
    """Raised when ``expiry`` is not a ``YYYY-MM-DD`` date."""

    def __init__(self, value: str):
        super().__init__(f"SSI contains invalid expiration date '{value}'", {"expiry": value})
        self.value = value


class InvalidSigError(SsiParseError):
    """Raised when ``sig`` is not a valid Baid64 signature."""


class InvalidUidError(SsiParseError):
    """Raised when a ``uid`` value cannot be decoded."""


class WrongSigError(SsiParseError):
    """Raised when a present signature does not verify."""


# ---------------------------------------------------------------------------
# Ssi
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Ssi:
    """A self-certifying identity record.

    Records are immutable. Any change to the public key, UIDs or expiry
    produces a new, unsigned record that has to be signed again.

    Attributes:
        pub: Public key of the identity holder.
        uids: Claims attached to the identity, deduplicated.
        expiry: Optional date after which the identity should not be trusted.
        sig: Signature over the canonical message, if signed.
    """

    pub: SsiPub
    uids: frozenset[Uid] = field(default_factory=frozenset)
    expiry: date | None = None
    sig: SsiSig | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.uids, frozenset):
            object.__setattr__(self, "uids", frozenset(self.uids))
        if isinstance(self.expiry, datetime):
            object.__setattr__(self, "expiry", self.expiry.date())

    # -- construction -------------------------------------------------------

    @classmethod
    def new(cls, uids: Iterable[Uid], expiry: date | None, secret: SsiSecret) -> Ssi:
        """Build a record for *secret*'s public key and sign it."""
        return cls.unsigned(secret.to_public(), uids, expiry).signed(secret)

    @classmethod
    def unsigned(cls, pub: SsiPub, uids: Iterable[Uid] = (), expiry: date | None = None) -> Ssi:
        return cls(pub=pub, uids=frozenset(uids), expiry=expiry)

    def signed(self, secret: SsiSecret) -> Ssi:
        """Return a copy of this record signed by *secret*.

        Raises:
            ValidationException: If *secret* does not belong to :attr:`pub`.
        """
        if secret.to_public() != self.pub:
            raise ValidationException("secret key does not match the identity public key", field="pub")
        unsigned = Ssi(pub=self.pub, uids=self.uids, expiry=self.expiry)
        return Ssi(
            pub=self.pub,
            uids=self.uids,
            expiry=self.expiry,
            sig=secret.sign(unsigned.to_message()),
        )

    # -- integrity ----------------------------------------------------------

    def to_message(self) -> bytes:
        """Return the 32-byte digest that is signed and verified.

        Everything before the last ``sig=`` of the record text, stripped of
        trailing ``&``/``?``, hashed twice with SHA-256.
        """
        text = str(self)
        head, sep, _ = text.rpartition("sig=")
        if sep:
            text = head
        text = text.rstrip("&?")
        return hashlib.sha256(hashlib.sha256(text.encode("utf-8")).digest()).digest()

    def check_integrity(self) -> bool:
        """Verify the signature.

        Returns:
            True if signed and valid, False if there is no signature.

        Raises:
            VerifyError: If a signature is present but does not verify.
        """
        if self.sig is None:
            return False
        self.pub.verify(self.to_message(), self.sig)
        return True

    def is_expired(self, today: date | None = None) -> bool:
        if self.expiry is None:
            return False
        today = today or datetime.now(UTC).date()
        return self.expiry < today

    # -- text form ----------------------------------------------------------

    def __str__(self) -> str:
        parts = [f"uid={uid.to_url_str()}" for uid in sorted(self.uids)]
        if self.expiry is not None:
            parts.append(f"expiry={self.expiry.strftime(EXPIRY_FORMAT)}")
        if self.sig is not None:
            parts.append(f"sig={self.sig}")
        text = str(self.pub)
        if parts:
            text += "?" + "&".join(parts)
        return text

    @classmethod
    def from_str(cls, text: str) -> Ssi:
        return cls.parse(text)

    @classmethod
    def parse(cls, text: str) -> Ssi:
        """Parse and verify identity text.

        A record without a signature is accepted; a record whose signature
        does not verify is rejected.

        Raises:
            SsiParseError: The subclass names the rule that failed.
        """
        try:
            return cls._parse(text)
        except SsiParseError as exc:
            logger.debug("Rejected identity %r: %s", text, exc.message)
            raise

    @classmethod
    def _parse(cls, text: str) -> Ssi:
        parts = _split_uri(text)
        if parts.scheme != SCHEME:
            raise InvalidSchemeError(parts.scheme)

        if parts.netloc:
            raise InvalidPubError(f"SSI contains URI authority '{parts.netloc}' instead of a public key")
        if ":" in parts.path:
            raise InvalidPubError(f"SSI contains invalid public key '{parts.path}'")
        try:
            pub = SsiPub.from_str(parts.path)
        except Baid64ParseError as exc:
            raise InvalidPubError(f"SSI contains invalid public key - {exc.message}") from exc

        uids: set[Uid] = set()
        expiry: date | None = None
        sig: SsiSig | None = None
        for param in parts.query.split("&") if parts.query else ():
            key, sep, value = param.partition("=")
            if not sep:
                raise InvalidQueryParamError(param)
            if key == "uid":
                try:
                    uids.add(Uid.from_url_str(value))
                except UidParseError as exc:
                    raise InvalidUidError(f"SSI contains {exc.message}", exc.details) from exc
            elif key == "expiry":
                if expiry is not None:
                    raise RepeatedExpiryError()
                expiry = parse_expiry(value)
            elif key == "sig":
                if sig is not None:
                    raise RepeatedSigError()
                try:
                    sig = SsiSig.from_str(value)
                except Baid64ParseError as exc:
                    raise InvalidSigError(
                        f"SSI contains non-parsable signature - {exc.message}"
                    ) from exc
            else:
                raise UnknownParamError(key)

        ssi = cls(pub=pub, uids=frozenset(uids), expiry=expiry, sig=sig)
        try:
            ssi.check_integrity()
        except VerifyError as exc:
            raise WrongSigError(f"SSI contains {exc.message}") from exc
        return ssi


def _split_uri(text: str) -> SplitResult:
    """Split identity text into URI components after checking generic syntax."""
    if not _URI_CHARS_RE.fullmatch(text) or _BAD_PERCENT_RE.search(text):
        raise InvalidUriError("SSI must be a valid URI")
    if "#" in text:
        raise InvalidUriError("SSI must not contain a URI fragment")
    try:
        parts = urlsplit(text)
    except ValueError as exc:
        raise InvalidUriError("SSI must be a valid URI") from exc
    if not parts.scheme:
        raise InvalidUriError("SSI must be a valid URI containing schema part")
    # urlsplit lowercases the scheme; compare it as written
    return parts._replace(scheme=text[: len(parts.scheme)])


def parse_expiry(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` expiry date; raises WrongExpiryError."""
    if not _EXPIRY_RE.fullmatch(value):
        raise WrongExpiryError(value)
    try:
        return datetime.strptime(value, EXPIRY_FORMAT).date()
    except ValueError as exc:
        raise WrongExpiryError(value) from exc
