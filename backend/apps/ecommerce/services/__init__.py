"""
Services for the e-commerce module.
Business logic layer for orders, store settings and the admin dashboard.
"""

# Base service classes
from .base import *  # noqa: F401,F403

# Core business logic services
from .order import OrderService  # noqa: F401
from .settings import StoreSettingsService  # noqa: F401
from .dashboard import DashboardService  # noqa: F401
