import logging

# Local application imports
from ..core.config import Settings
from .base_container import BaseContainer
from .providers import (
    AuthProvider,
    DatabaseProvider,
    RepositoryProvider,
    ServiceProvider,
    ValidatorProvider,
)


class DIContainer(BaseContainer):
    """
    Main dependency injection container.
    Composes all providers in the correct order.

    Registration order is important:
    1. Database connection (DatabaseProvider)
    2. Repositories and repository factory (RepositoryProvider) - depend on database
    3. Validators (ValidatorProvider)
    4. Entity services (ServiceProvider) - depend on the repository factory
    5. Token issuance and login (AuthProvider)
    """

    def __init__(self, settings: Settings, logger: logging.Logger) -> None:
        super().__init__()
        self.settings = settings
        self.logger = logger
        self.setup()

    def setup(self) -> None:
        """
        Setup dependency registrations by composing all providers.
        Order matters: database → repositories → validators → services → auth
        """
        self.register_singleton(Settings, self.settings)
        self.register_singleton(logging.Logger, self.logger)

        DatabaseProvider.register(self)
        RepositoryProvider.register(self)
        ValidatorProvider.register(self)
        ServiceProvider.register(self)
        AuthProvider.register(self)
