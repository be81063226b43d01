# apps/ecommerce/tests/conftest.py
import pytest
from decimal import Decimal
from django.core.cache import cache
from rest_framework.test import APIClient

from .factories import *


@pytest.fixture(autouse=True)
def clear_cache():
    """Cached store settings must not leak between tests."""
    cache.clear()
    yield
    cache.clear()


@pytest.fixture
def user():
    """Create a customer account."""
    return UserFactory()


@pytest.fixture
def staff_user():
    """Create staff user without model permissions."""
    return StaffUserFactory()


@pytest.fixture
def admin_user():
    """Create admin user."""
    return StaffUserFactory(is_superuser=True)


@pytest.fixture
def api_client():
    """Create API client."""
    return APIClient()


@pytest.fixture
def authenticated_client(api_client, admin_user):
    """Create API client logged in as a store admin."""
    api_client.force_authenticate(user=admin_user)
    return api_client


@pytest.fixture
def staff_client(api_client, staff_user):
    """Create API client logged in as read-only staff."""
    api_client.force_authenticate(user=staff_user)
    return api_client


@pytest.fixture
def store_settings():
    """Create the store settings row."""
    return StoreSettingsFactory()


@pytest.fixture
def cod_order():
    """A COD order with two lines totalling 1000, charged 20 COD fee and free shipping."""
    order = OrderFactory(total_amount=Decimal('1020.00'))
    OrderItemFactory(order=order, quantity=2, price_at_purchase=Decimal('250.00'))
    OrderItemFactory(order=order, quantity=1, price_at_purchase=Decimal('500.00'))
    return order
