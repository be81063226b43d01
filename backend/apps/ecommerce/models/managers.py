# apps/ecommerce/models/managers.py

"""
Custom managers and querysets for e-commerce models
"""

from decimal import Decimal

from django.conf import settings
from django.db import models
from django.db.models import Sum

from ..domain.services.order_workflow import OrderStatus


class ProductQuerySet(models.QuerySet):
    """QuerySet for products"""
    
    def active(self):
        return self.filter(is_active=True)
    
    def low_stock(self, threshold=None):
        """Products whose inventory is below the threshold"""
        if threshold is None:
            threshold = settings.LOW_STOCK_THRESHOLD
        return self.filter(inventory_count__lt=threshold)


class OrderQuerySet(models.QuerySet):
    """QuerySet for orders"""
    
    def with_items(self):
        return self.prefetch_related('items', 'items__product')
    
    def by_status(self, status):
        return self.filter(status=str(status))
    
    def pending(self):
        return self.by_status(OrderStatus.PENDING)
    
    def recent(self, limit=None):
        queryset = self.order_by('-created_at', '-pk')
        if limit:
            queryset = queryset[:limit]
        return queryset
    
    def total_revenue(self) -> Decimal:
        """Sum of persisted order totals"""
        return self.aggregate(total=Sum('total_amount'))['total'] or Decimal('0')


OrderManager = models.Manager.from_queryset(OrderQuerySet)
ProductManager = models.Manager.from_queryset(ProductQuerySet)
