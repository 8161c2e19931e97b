"""Self-sovereign identity records.

An identity is a single line of text::

    ssi:<public key>?uid=<claim>&expiry=<date>&sig=<signature>

binding a public key to human-readable claims. Anyone holding the text can
check it was authored by the key holder, with no external authority.

Key concepts:
- **SsiSecret / SsiPub / SsiSig**: multi-algorithm keys (BIP-340, Ed25519).
  Public keys embed ``(algorithm, network)`` tags in their last two bytes.
- **Vanity generation**: secrets are sampled until the public key carries
  the tags (see :mod:`ssi.identity.vanity`).
- **Uid**: a claim ``name <schema:id>``.
- **Ssi**: the signed record with its URI codec.
"""

from ssi.identity.baid64 import Baid64ParseError
from ssi.identity.bip340 import Bip340Secret
from ssi.identity.ed25519 import Ed25519Secret
from ssi.identity.keys import (
    Fingerprint,
    InvalidPubkeyError,
    InvalidSignatureError,
    SsiPub,
    SsiSig,
    VerifyError,
)
from ssi.identity.record import (
    InvalidPubError,
    InvalidQueryParamError,
    InvalidSchemeError,
    InvalidSigError,
    InvalidUidError,
    InvalidUriError,
    RepeatedExpiryError,
    RepeatedSigError,
    Ssi,
    SsiParseError,
    UnknownParamError,
    WrongExpiryError,
    WrongSigError,
    parse_expiry,
)
from ssi.identity.secret import (
    InvalidSecretKeyError,
    SecretParseError,
    SsiPair,
    SsiSecret,
    secret_class,
)
from ssi.identity.tags import (
    Algorithm,
    Network,
    UnknownAlgorithmError,
    UnknownNetworkError,
)
from ssi.identity.uid import (
    Uid,
    UidEncodingError,
    UidFieldError,
    UidNoIdError,
    UidNoSchemeError,
    UidParseError,
)
from ssi.identity.vanity import VanityExhaustedError

__all__ = [
    "Algorithm",
    "Baid64ParseError",
    "Bip340Secret",
    "Ed25519Secret",
    "Fingerprint",
    "InvalidPubError",
    "InvalidPubkeyError",
    "InvalidQueryParamError",
    "InvalidSchemeError",
    "InvalidSecretKeyError",
    "InvalidSigError",
    "InvalidSignatureError",
    "InvalidUidError",
    "InvalidUriError",
    "Network",
    "RepeatedExpiryError",
    "RepeatedSigError",
    "SecretParseError",
    "Ssi",
    "SsiPair",
    "SsiParseError",
    "SsiPub",
    "SsiSecret",
    "SsiSig",
    "Uid",
    "UidEncodingError",
    "UidFieldError",
    "UidNoIdError",
    "UidNoSchemeError",
    "UidParseError",
    "UnknownAlgorithmError",
    "UnknownNetworkError",
    "UnknownParamError",
    "VanityExhaustedError",
    "VerifyError",
    "WrongExpiryError",
    "WrongSigError",
    "parse_expiry",
    "secret_class",
]
