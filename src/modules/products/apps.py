from django.apps import AppConfig
from django.conf import settings


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Build a fresh store and the handler that serves it."""
        from modules.products.handlers import ProductRequestHandler
        from modules.products.repositories.memory_repository import ProductStore

        self.store = ProductStore(seed=settings.CATALOG_SEED_DATA)
        self.handler = ProductRequestHandler(store=self.store)
