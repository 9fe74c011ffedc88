"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from filemorph.core.config import get_settings
from filemorph.main import app

PREFIX = get_settings().api_v1_prefix


class TestCipherEndpoints:
    """Test /encrypt and /decrypt."""

    @pytest.fixture
    def client(self):
        with TestClient(app) as client:
            yield client

    def test_encrypt_shift(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "shift", "text": "Hello, World!", "key": 3},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["result"] == "Khoor, Zruog!"
        assert body["operation"] == "encode"
        assert body["cipher_type"] == "shift"
        assert body["key_used"] == 3

    def test_decrypt_shift_with_string_key(self, client):
        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "shift", "text": "Khoor, Zruog!", "key": "3"},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "Hello, World!"

    def test_grid_substitution_roundtrip(self, client):
        encoded = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "grid-substitution", "text": "Hi There"},
        ).json()["result"]

        response = client.post(
            f"{PREFIX}/decrypt",
            json={"cipher_type": "grid-substitution", "text": encoded},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "HI THERE"

    def test_zigzag_without_key_uses_default(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "zigzag-transposition", "text": "WEAREDISCOVEREDFLEEATONCE"},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["key_used"] == get_settings().default_rails

    def test_keyed_columnar(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "keyed-columnar", "text": "HELLOWORLD", "key": "KEY"},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "EORXHLODLWLX"

    def test_missing_key_returns_400(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "keyed-columnar", "text": "HELLOWORLD"},
        )

        assert response.status_code == 400
        assert "required" in response.json()["detail"]

    def test_negative_shift_returns_400(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "shift", "text": "HELLO", "key": -1},
        )

        assert response.status_code == 400

    def test_unknown_cipher_returns_404(self, client):
        for path in ("encrypt", "decrypt"):
            response = client.post(
                f"{PREFIX}/{path}",
                json={"cipher_type": "enigma", "text": "HELLO"},
            )

            assert response.status_code == 404
            assert "enigma" in response.json()["detail"]

    def test_legacy_cipher_name(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "caesar", "text": "HELLO", "key": 7},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["cipher_type"] == "shift"
        assert body["result"] == "OLSSV"

    @pytest.mark.parametrize("key", [True, 3.0, 2.5])
    def test_boolean_and_float_keys_return_400(self, client, key):
        """Keys are not coerced to integers before the cipher sees them."""
        for cipher_type in ("shift", "zigzag-transposition", "keyed-columnar"):
            response = client.post(
                f"{PREFIX}/encrypt",
                json={"cipher_type": cipher_type, "text": "HELLOWORLD", "key": key},
            )

            assert response.status_code == 400, (cipher_type, key)

    def test_text_over_configured_maximum_returns_400(self, client):
        max_length = get_settings().max_text_length
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "shift", "text": "A" * (max_length + 1), "key": 1},
        )

        assert response.status_code == 400
        assert str(max_length) in response.json()["detail"]

    def test_text_at_configured_maximum_is_accepted(self, client):
        max_length = get_settings().max_text_length
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "shift", "text": "A" * max_length, "key": 1},
        )

        assert response.status_code == 200
        assert response.json()["result"] == "B" * max_length

    def test_empty_text_is_rejected(self, client):
        response = client.post(
            f"{PREFIX}/encrypt",
            json={"cipher_type": "shift", "text": "", "key": 1},
        )

        assert response.status_code == 422


class TestInfoEndpoints:
    """Test /ciphers and /health."""

    @pytest.fixture
    def client(self):
        with TestClient(app) as client:
            yield client

    def test_list_ciphers(self, client):
        response = client.get(f"{PREFIX}/ciphers")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 4

        requires_key = {c["cipher_type"]: c["requires_key"] for c in body["ciphers"]}
        assert requires_key == {
            "shift": True,
            "grid-substitution": False,
            "zigzag-transposition": False,
            "keyed-columnar": True,
        }

    def test_health(self, client):
        response = client.get(f"{PREFIX}/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "ok"
        assert set(body["supported_ciphers"]) == {
            "shift",
            "grid-substitution",
            "zigzag-transposition",
            "keyed-columnar",
        }
