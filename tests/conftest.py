"""Pytest configuration and shared fixtures for SSI client tests."""

import time
from typing import Any, Callable, Optional

import pytest
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)
from jose import jwt

from ssi_client import SSIClient

CLIENT_ID = "relying-party-42"
CLIENT_SECRET = "s3cr3t-shared-with-the-provider"
SERVICE_URL = "https://example/"
SERVICE_NAME = "ssi-service-provider"


@pytest.fixture
def client() -> SSIClient:
    """Client configured against a test provider with an HMAC secret."""
    return SSIClient(CLIENT_ID, CLIENT_SECRET, SERVICE_URL, SERVICE_NAME)


@pytest.fixture
def response_claims() -> dict[str, Any]:
    """Claims of a successful verify response as the provider sends them."""
    return {
        "type": "age-check",
        "data": {"over18": True, "country": "NL"},
        "status": "succes",
        "connector": "irma",
        "requestId": "req-1",
    }


@pytest.fixture
def provider_token() -> Callable[..., str]:
    """Factory signing a response token the way the provider does.

    Keyword overrides replace the default ``iss``/``aud``/``sub``/key; passing
    ``None`` for a registered claim leaves it out of the token.
    """

    def _sign(
        claims: dict[str, Any],
        subject: Optional[str] = "credential-verify-response",
        *,
        key: str = CLIENT_SECRET,
        algorithm: str = "HS256",
        issuer: Optional[str] = SERVICE_NAME,
        audience: Optional[str] = CLIENT_ID,
        expires_in: Optional[int] = None,
    ) -> str:
        now = int(time.time())
        payload = dict(claims, iat=now)
        for claim, value in (("iss", issuer), ("aud", audience), ("sub", subject)):
            if value is not None:
                payload[claim] = value
        if expires_in is not None:
            payload["exp"] = now + expires_in
        return jwt.encode(payload, key, algorithm=algorithm)

    return _sign


def _ec_pem_pair() -> tuple[str, str]:
    private_key = ec.generate_private_key(ec.SECP256R1())
    private_pem = private_key.private_bytes(
        Encoding.PEM, PrivateFormat.PKCS8, NoEncryption()
    ).decode()
    public_pem = private_key.public_key().public_bytes(
        Encoding.PEM, PublicFormat.SubjectPublicKeyInfo
    ).decode()
    return private_pem, public_pem


@pytest.fixture(scope="session")
def client_keypair() -> tuple[str, str]:
    """PEM encoded EC P-256 keypair of the relying party."""
    return _ec_pem_pair()


@pytest.fixture(scope="session")
def provider_keypair() -> tuple[str, str]:
    """PEM encoded EC P-256 keypair of the provider."""
    return _ec_pem_pair()
