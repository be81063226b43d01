"""
Serializers for the e-commerce module.
API serialization for store settings, orders and the dashboard.
"""

from .base import AmountField, CommaSeparatedListField
from .settings import FeePreviewSerializer, StoreSettingsSerializer
from .orders import (
    OrderDetailSerializer,
    OrderHistorySerializer,
    OrderItemSerializer,
    OrderListSerializer,
    OrderStatusUpdateSerializer,
    PaymentStatusUpdateSerializer,
)
from .dashboard import DashboardStatsSerializer, LowStockProductSerializer

__all__ = [
    'AmountField', 'CommaSeparatedListField',
    'FeePreviewSerializer', 'StoreSettingsSerializer',
    'OrderDetailSerializer', 'OrderHistorySerializer', 'OrderItemSerializer',
    'OrderListSerializer', 'OrderStatusUpdateSerializer', 'PaymentStatusUpdateSerializer',
    'DashboardStatsSerializer', 'LowStockProductSerializer',
]
