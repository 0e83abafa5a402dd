"""Dependency Injection container - initialized at app startup."""

from app.services.catalog import CatalogService


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self, catalog: CatalogService | None = None) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        # One catalog per process: its category cache lives as long as we do
        self.catalog = catalog or CatalogService()

        self._initialized = True


# Global container instance
container = Container()
