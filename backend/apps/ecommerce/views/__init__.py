"""
Views for the e-commerce module.
Organized by functionality: store settings, orders and the dashboard.
"""

from .settings import FeePreviewView, StoreSettingsView  # noqa: F401
from .orders import OrderViewSet  # noqa: F401
from .dashboard import DashboardStatsView, LowStockView, RecentOrdersView  # noqa: F401
