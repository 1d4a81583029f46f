import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...infrastructure.db.database import Database

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for the DB connection"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the relational database in the container.
        This is the ONLY place where the database is created.
        Change DATABASE_URL, and all repositories automatically use the new store.
        """
        settings = container.get(Settings)
        logger = container.get(logging.Logger)

        container.register_singleton(
            Database,
            Database(
                url=settings.database_url,
                logger=logger.getChild("database"),
                echo=settings.database_echo,
            )
        )
