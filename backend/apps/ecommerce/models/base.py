# apps/ecommerce/models/base.py

"""
Base model for the store admin tables
"""
from apps.core.models import TimeStampedModel


class EcommerceBaseModel(TimeStampedModel):
    """Abstract base for every e-commerce table"""
    
    class Meta:
        abstract = True
