"""Tests for HMAC request signing."""

import base64
import hashlib
import hmac

import pytest

from hitbtc_sdk import Signature, SigningError, sign_message
from conftest import PRIVATE_KEY


def _expected(prehash: str) -> str:
    mac = hmac.new(b"secret", prehash.encode(), hashlib.sha256)
    return base64.b64encode(mac.digest()).decode()


class TestSignMessage:
    """Test sign_message."""

    def test_signs_with_body(self):
        signature = sign_message(PRIVATE_KEY, "/order", "post", {"a": 1}, timestamp=1700000000.5)

        assert isinstance(signature, Signature)
        assert signature.timestamp == 1700000000.5
        assert signature.digest == _expected('1700000000.5POST/order{"a":1}')

    def test_signs_without_body(self):
        signature = sign_message(PRIVATE_KEY, "/trading/balance", "GET", timestamp=1700000000.5)

        assert signature.digest == _expected("1700000000.5GET/trading/balance")

    def test_empty_body_is_signed(self):
        with_empty = sign_message(PRIVATE_KEY, "/order", "POST", {}, timestamp=1.5)
        without = sign_message(PRIVATE_KEY, "/order", "POST", timestamp=1.5)

        assert with_empty.digest != without.digest
        assert with_empty.digest == _expected("1.5POST/order{}")

    def test_non_ascii_body_signed_unescaped(self):
        signature = sign_message(PRIVATE_KEY, "/order", "POST", {"a": "\u00e9"}, timestamp=1.5)

        assert signature.digest == _expected('1.5POST/order{"a":"\u00e9"}')

    def test_same_timestamp_same_digest(self):
        first = sign_message(PRIVATE_KEY, "/order", "POST", {"a": 1}, timestamp=1700000000.0)
        second = sign_message(PRIVATE_KEY, "/order", "POST", {"a": 1}, timestamp=1700000000.0)

        assert first.digest == second.digest

    def test_different_timestamp_different_digest(self):
        first = sign_message(PRIVATE_KEY, "/order", "POST", {"a": 1}, timestamp=1700000000.0)
        second = sign_message(PRIVATE_KEY, "/order", "POST", {"a": 1}, timestamp=1700000001.0)

        assert first.digest != second.digest

    def test_default_timestamp_is_fractional_epoch_seconds(self, monkeypatch):
        monkeypatch.setattr("hitbtc_sdk.signing.time.time", lambda: 1700000000.25)

        signature = sign_message(PRIVATE_KEY, "/order", "DELETE")

        assert signature.timestamp == 1700000000.25
        assert signature.digest == _expected("1700000000.25DELETE/order")

    def test_invalid_key_raises(self):
        with pytest.raises(SigningError):
            sign_message("not base64!", "/order", "GET", timestamp=1.0)
