# apps/ecommerce/models/products.py

"""
Product catalogue entries referenced by orders and stock alerts
"""

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from .base import EcommerceBaseModel
from .managers import ProductManager


class Product(EcommerceBaseModel):
    """Sellable product"""
    
    name = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    price = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    inventory_count = models.IntegerField(default=0)
    images = models.JSONField(default=list, blank=True)
    is_active = models.BooleanField(default=True)
    
    objects = ProductManager()
    
    class Meta:
        db_table = 'products'
        ordering = ['name']
        indexes = [
            models.Index(fields=['inventory_count']),
        ]
    
    def __str__(self):
        return self.name
    
    @property
    def primary_image(self):
        return self.images[0] if self.images else None
