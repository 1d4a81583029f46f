import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...core.security import TokenIssuer
from ...application.services.auth_service import AuthService

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AuthProvider:
    """Auth provider - registers token issuance and the login service"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)
        token_issuer = TokenIssuer(settings)

        container.register_singleton(TokenIssuer, token_issuer)
        container.register_singleton(
            AuthService,
            AuthService(
                token_issuer=token_issuer,
                username=settings.auth_username,
                password=settings.auth_password,
                logger=container.get(logging.Logger).getChild("auth"),
            )
        )
