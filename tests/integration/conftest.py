import pytest


@pytest.fixture(autouse=True)
def _fresh_catalog(catalog):
    """Every page test starts from the three seed rows and no session."""
