import pytest
from django.apps import apps
from django.core.cache import cache

from modules.products.handlers import ProductRequestHandler
from modules.products.repositories.memory_repository import ProductStore


@pytest.fixture()
def store():
    """A freshly seeded store (Notebook, Mouse, Teclado)."""
    return ProductStore()


@pytest.fixture()
def empty_store():
    """A store without seed rows."""
    return ProductStore(seed=False)


@pytest.fixture()
def handler(store):
    return ProductRequestHandler(store=store)


@pytest.fixture()
def catalog():
    """Reset the app-wide store served by the Django views and return it."""
    config = apps.get_app_config("products")
    config.reset()
    cache.clear()
    return config.store
