"""
Dashboard service
Headline numbers for the admin home page
"""
from typing import Dict, Optional

from django.conf import settings

from ..constants import LOW_STOCK_LIMIT, RECENT_ORDERS_LIMIT
from ..models import Order, Product
from .base import BaseEcommerceService


class DashboardService(BaseEcommerceService):
    """Read-only aggregates over orders and products"""

    def __init__(self, low_stock_threshold: Optional[int] = None):
        super().__init__()
        if low_stock_threshold is None:
            low_stock_threshold = settings.LOW_STOCK_THRESHOLD
        self.low_stock_threshold = low_stock_threshold

    def get_stats(self) -> Dict:
        orders = Order.objects.all()
        stats = {
            'total_orders': orders.count(),
            'total_revenue': orders.total_revenue(),
            'pending_orders': orders.pending().count(),
            'low_stock_products': Product.objects.low_stock(self.low_stock_threshold).count(),
        }
        stats['total_revenue_display'] = self.format_currency(stats['total_revenue'])
        return stats

    def recent_orders(self, limit: int = RECENT_ORDERS_LIMIT):
        return Order.objects.recent(limit)

    def low_stock_products(self, limit: int = LOW_STOCK_LIMIT):
        return Product.objects.low_stock(self.low_stock_threshold).order_by('inventory_count', 'name')[:limit]
