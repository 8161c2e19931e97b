"""Tests for algorithm/network tags and the Baid64 codec."""

from __future__ import annotations

import pytest

from ssi.identity import baid64
from ssi.identity.baid64 import Baid64ParseError
from ssi.identity.tags import (
    Algorithm,
    Network,
    UnknownAlgorithmError,
    UnknownNetworkError,
    has_tags,
)

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

# ---------------------------------------------------------------------------
# Tags
# ---------------------------------------------------------------------------


class TestAlgorithm:
    def test_tag_bytes_are_stable(self):
        assert Algorithm.ED25519 == 0x13
        assert Algorithm.BIP340 == 0x14

    def test_from_name_is_case_insensitive(self):
        assert Algorithm.from_name("bip340") is Algorithm.BIP340
        assert Algorithm.from_name(" Ed25519 ") is Algorithm.ED25519

    def test_label(self):
        assert Algorithm.BIP340.label == "bip340"

    def test_unknown_byte(self):
        with pytest.raises(UnknownAlgorithmError):
            Algorithm.from_byte(0xFF)

    def test_unknown_name_is_value_error(self):
        with pytest.raises(ValueError):
            Algorithm.from_name("rsa")


class TestNetwork:
    def test_round_trip_through_byte(self):
        for network in Network:
            assert Network.from_byte(int(network)) is network

    def test_unknown(self):
        with pytest.raises(UnknownNetworkError) as exc_info:
            Network.from_name("dogecoin")
        assert exc_info.value.details["field"] == "network"


class TestHasTags:
    def test_matches_last_two_bytes(self):
        data = bytes(30) + bytes([Algorithm.BIP340, Network.LIQUID])
        assert has_tags(data, Algorithm.BIP340, Network.LIQUID)
        assert not has_tags(data, Algorithm.ED25519, Network.LIQUID)
        assert not has_tags(data, Algorithm.BIP340, Network.BITCOIN)

    def test_short_input(self):
        assert not has_tags(b"\x14\x01", Algorithm.BIP340, Network.BITCOIN)


# ---------------------------------------------------------------------------
# Baid64
# ---------------------------------------------------------------------------


class TestBaid64:
    def test_round_trip(self):
        payload = bytes(range(32))
        text = baid64.encode(payload, "ssi")
        assert baid64.decode(text, "ssi", 32) == payload

    def test_body_is_url_safe_without_padding(self):
        text = baid64.encode(b"\xff" * 64, "ssi-sig")
        assert "=" not in text
        assert set(text) <= set(_ALPHABET)

    def test_prefix_is_optional_on_decode(self):
        payload = b"\x07" * 32
        text = baid64.encode(payload, "ssi", prefix=True)
        assert text.startswith("ssi:")
        assert baid64.decode(text, "ssi", 32) == payload
        assert baid64.decode(text.split(":", 1)[1], "ssi", 32) == payload

    def test_foreign_prefix_rejected(self):
        text = baid64.encode(b"\x07" * 32, "ssi", prefix=True)
        with pytest.raises(Baid64ParseError, match="prefix"):
            baid64.decode(text, "ssi-sig", 32)

    def test_checksum_depends_on_hri(self):
        body = baid64.encode(b"\x07" * 32, "ssi")
        with pytest.raises(Baid64ParseError, match="checksum"):
            baid64.decode(body, "ssi-priv", 32)

    def test_corruption_detected(self):
        body = baid64.encode(b"\x07" * 32, "ssi")
        flipped = ("B" if body[5] != "B" else "C").join([body[:5], body[6:]])
        with pytest.raises(Baid64ParseError):
            baid64.decode(flipped, "ssi", 32)

    def test_wrong_length(self):
        body = baid64.encode(b"\x07" * 16, "ssi")
        with pytest.raises(Baid64ParseError, match="expected 32"):
            baid64.decode(body, "ssi", 32)

    @pytest.mark.parametrize("bad", ["", "abc+def", "abc/def", "ab cd", "abc=="])
    def test_invalid_characters(self, bad):
        with pytest.raises(Baid64ParseError):
            baid64.decode(bad, "ssi", 32)

    def test_non_canonical_trailing_bits(self):
        # 1 payload byte + 4 checksum bytes = 40 bits in 7 characters; the
        # lowest two bits of the last character are unused.
        body = baid64.encode(b"\x00", "t")
        last = _ALPHABET[_ALPHABET.index(body[-1]) ^ 1]
        with pytest.raises(Baid64ParseError, match="non-canonical"):
            baid64.decode(body[:-1] + last, "t", 1)

    def test_error_carries_text(self):
        with pytest.raises(Baid64ParseError) as exc_info:
            baid64.decode("!!", "ssi", 32)
        assert exc_info.value.details == {"text": "!!"}
