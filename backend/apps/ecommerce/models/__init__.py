# apps/ecommerce/models/__init__.py

"""
Store admin models
"""

from .base import EcommerceBaseModel
from .managers import OrderManager, OrderQuerySet, ProductManager, ProductQuerySet
from .settings import StoreSettings
from .products import Product
from .orders import Order, OrderItem, OrderHistory

__all__ = [
    'EcommerceBaseModel',
    
    # Settings
    'StoreSettings',
    
    # Catalogue
    'Product',
    
    # Orders
    'Order', 'OrderItem', 'OrderHistory',
    
    # Managers & Querysets
    'OrderManager', 'OrderQuerySet', 'ProductManager', 'ProductQuerySet',
]
