# apps/ecommerce/models/settings.py

"""
Store settings model
"""

from decimal import Decimal
from typing import Optional

from django.core.exceptions import ValidationError
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models

from ..constants import COD_FEE_TYPE_CHOICES, STORE_SETTINGS_ROW_ID
from ..domain.exceptions import ConfigurationError
from ..domain.value_objects.store_settings import COD_FEE_PERCENTAGE, StoreSettingsSnapshot
from .base import EcommerceBaseModel


class StoreSettings(EcommerceBaseModel):
    """Store-wide configuration, kept in a single row"""
    
    # Store Information
    store_name = models.CharField(max_length=255, default='My Store')
    store_description = models.TextField(blank=True)
    support_email = models.EmailField(blank=True)
    support_phone = models.CharField(max_length=20, blank=True)
    
    # Shipping Settings
    pincodes = models.JSONField(default=list, blank=True, help_text="Serviceable pincodes; empty means all")
    shipping_charge = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('100.00'),
        validators=[MinValueValidator(0)]
    )
    free_shipping_threshold = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('999.00'),
        null=True, blank=True,
        validators=[MinValueValidator(0)],
        help_text="Orders at or above this subtotal ship free; empty disables free shipping"
    )
    
    # Payment Settings
    is_cod_enabled = models.BooleanField(default=True)
    is_stripe_enabled = models.BooleanField(default=False)
    razorpay_key = models.CharField(max_length=255, blank=True)
    
    # COD Convenience Fee
    enable_cod_fee = models.BooleanField(default=False)
    cod_fee_type = models.CharField(
        max_length=20, choices=COD_FEE_TYPE_CHOICES, default=COD_FEE_PERCENTAGE
    )
    cod_fee_percentage = models.DecimalField(
        max_digits=5, decimal_places=2, default=Decimal('2.00'),
        validators=[MinValueValidator(0), MaxValueValidator(100)]
    )
    cod_fee_fixed = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    cod_fee_min_order = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(0)],
        help_text="COD fee is waived for subtotals below this amount"
    )
    
    # Additional
    gift_wrap_fee = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal('50.00'),
        validators=[MinValueValidator(0)]
    )
    loyalty_rate = models.DecimalField(
        max_digits=6, decimal_places=2, default=Decimal('1.00'),
        validators=[MinValueValidator(0)]
    )
    
    # Notifications
    email_alerts = models.BooleanField(default=True)
    sms_alerts = models.BooleanField(default=False)
    
    class Meta:
        db_table = 'settings'
        verbose_name = 'Store Settings'
        verbose_name_plural = 'Store Settings'
    
    def __str__(self):
        return f'Store Settings - {self.store_name}'
    
    def save(self, *args, **kwargs):
        self.pk = STORE_SETTINGS_ROW_ID
        super().save(*args, **kwargs)
    
    def clean(self):
        """Reject settings the fee engine cannot work with"""
        super().clean()
        try:
            self.to_snapshot().validate()
        except ConfigurationError as exc:
            raise ValidationError({exc.field: exc.reason})
    
    @classmethod
    def load(cls) -> Optional['StoreSettings']:
        """The settings row, or None when the store has not been configured"""
        return cls.objects.filter(pk=STORE_SETTINGS_ROW_ID).first()
    
    def to_snapshot(self) -> StoreSettingsSnapshot:
        return StoreSettingsSnapshot(
            shipping_charge=self.shipping_charge,
            free_shipping_threshold=self.free_shipping_threshold,
            is_cod_enabled=self.is_cod_enabled,
            enable_cod_fee=self.enable_cod_fee,
            cod_fee_type=self.cod_fee_type,
            cod_fee_percentage=self.cod_fee_percentage,
            cod_fee_fixed=self.cod_fee_fixed,
            cod_fee_min_order=self.cod_fee_min_order,
            gift_wrap_fee=self.gift_wrap_fee,
            loyalty_rate=self.loyalty_rate,
        )
    
    def is_pincode_serviceable(self, pincode: str) -> bool:
        if not self.pincodes:
            return True
        return str(pincode).strip() in {str(p).strip() for p in self.pincodes}
