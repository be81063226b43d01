# apps/core/models.py

from django.db import models


class TimeStampedModel(models.Model):
    """Base model for all store models"""
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)
    
    class Meta:
        abstract = True
