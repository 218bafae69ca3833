"""Client for the SSI service provider's verify and issue flows.

Requests are sent to the provider as signed JWTs embedded in a URL the
holder opens; the provider answers with a signed JWT the relying party
hands to :meth:`SSIClient.parse_verify_response` or
:meth:`SSIClient.parse_issue_response`.

Tokens are signed with ``iss`` set to the client id and ``aud`` set to the
service name. Responses are expected the other way around.
"""

import time
from typing import Any, Optional
from urllib.parse import urlencode, urljoin

from jose import jwt
from jose.exceptions import JWTError

from .config import DEFAULT_ALGORITHM, DEFAULT_NAME, DEFAULT_URL, SSIClientSettings
from .logging import get_logger
from .models import (
    ISSUE_REQUEST_SUBJECT,
    ISSUE_RESPONSE_SUBJECT,
    VERIFY_REQUEST_SUBJECT,
    VERIFY_RESPONSE_SUBJECT,
    CredentialIssueResponse,
    CredentialVerifyResponse,
    SSIData,
    SSIFunction,
)

logger = get_logger(__name__)


class SSIClient:
    """Builds credential request URLs and parses provider responses."""

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        url: Optional[str] = None,
        name: Optional[str] = None,
        *,
        algorithm: str = DEFAULT_ALGORITHM,
        verification_key: Optional[str] = None,
        expires_in: Optional[int] = None,
    ):
        """Initialize the client.

        Args:
            client_id: Identifier issued by the provider, used as token issuer
            client_secret: Key used to sign request tokens
            url: Base URL of the provider; defaults to the public provider
            name: Service name of the provider, used as token audience
            algorithm: JWS algorithm for signing and verifying tokens
            verification_key: Key used to verify responses; defaults to
                client_secret, which only works for HMAC algorithms
            expires_in: Lifetime of request tokens in seconds

        Raises:
            ValueError: If client_id or client_secret is empty, or
                expires_in is not positive
        """
        if not client_id:
            raise ValueError("client_id must not be empty")
        if not client_secret:
            raise ValueError("client_secret must not be empty")
        if expires_in is not None and expires_in <= 0:
            raise ValueError(f"expires_in must be positive, got {expires_in}")

        self._client_id = client_id
        self._client_secret = client_secret
        self._url = url or DEFAULT_URL
        self._name = name or DEFAULT_NAME
        self._algorithm = algorithm
        self._verification_key = verification_key or client_secret
        self._expires_in = expires_in

    @classmethod
    def from_settings(cls, settings: Optional[SSIClientSettings] = None) -> "SSIClient":
        """Create a client from settings, reading the environment if none are given."""
        if settings is None:
            settings = SSIClientSettings()
        return cls(
            settings.client_id,
            settings.client_secret,
            settings.url,
            settings.name,
            algorithm=settings.algorithm,
            verification_key=settings.verification_key,
            expires_in=settings.expires_in,
        )

    @property
    def client_id(self) -> str:
        return self._client_id

    @property
    def url(self) -> str:
        return self._url

    @property
    def name(self) -> str:
        return self._name

    @property
    def algorithm(self) -> str:
        return self._algorithm

    def verify_url(self, type: str, request_id: str) -> str:
        """Build the URL that asks a holder to present a credential of ``type``."""
        token = self._encode_token({"type": type}, VERIFY_REQUEST_SUBJECT, request_id)
        return self._request_url("verify", token)

    def issue_url(self, type: str, data: SSIData, request_id: str) -> str:
        """Build the URL that offers a holder a credential of ``type`` with ``data``."""
        token = self._encode_token(
            {"type": type, "data": data}, ISSUE_REQUEST_SUBJECT, request_id
        )
        return self._request_url("issue", token)

    def parse_verify_response(self, token: str) -> CredentialVerifyResponse:
        """Verify and parse the provider's answer to a verify request.

        Raises:
            jose.exceptions.ExpiredSignatureError: If the token has expired
            jose.exceptions.JWTClaimsError: On issuer, audience or subject mismatch
            jose.exceptions.JWTError: On a bad signature or malformed token
            pydantic.ValidationError: If response fields are missing
        """
        claims = self._decode_token(token, VERIFY_RESPONSE_SUBJECT)
        return CredentialVerifyResponse.model_validate(claims)

    def parse_issue_response(self, token: str) -> CredentialIssueResponse:
        """Verify and parse the provider's answer to an issue request.

        Raises the same errors as :meth:`parse_verify_response`.
        """
        claims = self._decode_token(token, ISSUE_RESPONSE_SUBJECT)
        return CredentialIssueResponse.model_validate(claims)

    def _request_url(self, endpoint: SSIFunction, token: str) -> str:
        return f"{urljoin(self._url, endpoint)}?{urlencode({'token': token})}"

    def _encode_token(self, claims: dict[str, Any], subject: str, token_id: str) -> str:
        issued_at = int(time.time())
        payload = {
            **claims,
            "iss": self._client_id,
            "aud": self._name,
            "sub": subject,
            "jti": token_id,
            "iat": issued_at,
        }
        if self._expires_in is not None:
            payload["exp"] = issued_at + self._expires_in

        logger.debug(
            "Signed credential request",
            subject=subject,
            request_id=token_id,
            credential_type=claims.get("type"),
        )
        return jwt.encode(payload, self._client_secret, algorithm=self._algorithm)

    def _decode_token(self, token: str, subject: str) -> dict[str, Any]:
        try:
            return jwt.decode(
                token,
                self._verification_key,
                algorithms=[self._algorithm],
                issuer=self._name,
                audience=self._client_id,
                subject=subject,
                options={"require_iss": True, "require_aud": True, "require_sub": True},
            )
        except JWTError as e:
            logger.warning(
                "Credential response rejected",
                subject=subject,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise
