from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from storefront.cart import CartEngine, PricingPolicy
from storefront.core.config import Settings
from storefront.main import create_app


@pytest.fixture()
def policy():
    return PricingPolicy(
        tax_rate=Decimal("0.10"),
        free_shipping_threshold=Decimal("100.00"),
        shipping_flat_fee=Decimal("10.00"),
    )


@pytest.fixture()
def engine(policy):
    return CartEngine(policy=policy)


@pytest.fixture()
def settings():
    return Settings(_env_file=None, log_level="WARNING")


@pytest.fixture()
def app(settings):
    return create_app(settings)


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client
