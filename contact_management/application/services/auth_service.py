"""
Auth Service
============

Checks the static login credentials and issues bearer tokens.
"""
import hmac
import logging
from typing import Optional

from contact_management.core.security import TokenIssuer
from contact_management.domain.exceptions import AuthenticationError


class AuthService:
    """Application service for login and token verification."""

    def __init__(self, token_issuer: TokenIssuer, username: str, password: str, logger: logging.Logger):
        """
        Initialize service with the configured credentials.

        Args:
            token_issuer: Signs and verifies tokens
            username: Accepted user name
            password: Accepted password
            logger: Logger for login attempts
        """
        self._token_issuer = token_issuer
        self._username = username
        self._password = password
        self._logger = logger

    def _matches(self, username: Optional[str], password: Optional[str]) -> bool:
        if not username or not password:
            return False
        # Evaluate both comparisons so timing does not reveal which one failed
        username_ok = hmac.compare_digest(username.encode(), self._username.encode())
        password_ok = hmac.compare_digest(password.encode(), self._password.encode())
        return username_ok and password_ok

    def login(self, username: Optional[str], password: Optional[str]) -> str:
        """
        Exchange credentials for a token.

        Returns:
            Encoded bearer token

        Raises:
            AuthenticationError: If the credentials do not match
        """
        if not self._matches(username, password):
            self._logger.warning("Rejected login attempt")
            raise AuthenticationError("Invalid credentials")

        self._logger.info(f"Issued token for '{username}'")
        return self._token_issuer.issue(username)

    def verify_token(self, token: str) -> dict:
        """Return the claims of a valid token or raise AuthenticationError."""
        return self._token_issuer.verify(token)
