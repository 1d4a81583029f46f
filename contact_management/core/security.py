"""
Token issuance and verification.

Tokens are HS256 JWTs carrying the username as their only custom claim,
plus issuer, audience and expiry.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt

from contact_management.core.config import Settings
from contact_management.domain.exceptions import AuthenticationError

USERNAME_CLAIM = "name"


class TokenIssuer:
    """Signs and verifies bearer tokens with the configured shared secret."""

    def __init__(self, settings: Settings):
        self._secret = settings.jwt_secret
        self._algorithm = settings.jwt_algorithm
        self._issuer = settings.jwt_issuer
        self._audience = settings.jwt_audience
        self._ttl = timedelta(minutes=settings.jwt_ttl_minutes)

    def issue(self, username: str) -> str:
        """
        Mint a token for a username.

        Args:
            username: Authenticated user name

        Returns:
            Encoded JWT
        """
        expires_at = datetime.now(timezone.utc) + self._ttl
        payload = {
            USERNAME_CLAIM: username,
            "iss": self._issuer,
            "aud": self._audience,
            "exp": expires_at,
        }
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> Dict[str, Any]:
        """
        Validate signature, issuer, audience and expiry of a token.

        Args:
            token: Encoded JWT

        Returns:
            Decoded claims

        Raises:
            AuthenticationError: If the token is rejected for any reason
        """
        try:
            return jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": ["exp", "iss", "aud"]},
            )
        except jwt.PyJWTError as exc:
            raise AuthenticationError("Invalid or expired token") from exc
