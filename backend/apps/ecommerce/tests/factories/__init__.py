# apps/ecommerce/tests/factories/__init__.py
from .core import *
from .store import *

__all__ = [
    # Core factories
    'UserFactory', 'StaffUserFactory',
    
    # Store factories
    'StoreSettingsFactory', 'ProductFactory', 'OrderFactory', 'OrderItemFactory',
]
