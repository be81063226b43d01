"""
Store settings serializers
"""

from rest_framework import serializers

from ..constants import FEE_PREVIEW_SAMPLE_SUBTOTAL
from ..models import StoreSettings
from .base import CommaSeparatedListField


class StoreSettingsSerializer(serializers.ModelSerializer):
    """Full settings row as edited on the settings page"""
    
    pincodes = CommaSeparatedListField(required=False)
    
    class Meta:
        model = StoreSettings
        fields = [
            # General
            'store_name', 'support_email', 'support_phone', 'store_description',
            # Shipping
            'pincodes', 'free_shipping_threshold', 'shipping_charge',
            # Payment methods
            'is_cod_enabled', 'is_stripe_enabled', 'razorpay_key',
            # COD convenience fee
            'enable_cod_fee', 'cod_fee_type', 'cod_fee_percentage',
            'cod_fee_fixed', 'cod_fee_min_order',
            # Additional
            'gift_wrap_fee', 'loyalty_rate', 'email_alerts', 'sms_alerts',
            'updated_at',
        ]
        read_only_fields = ['updated_at']


class FeePreviewSerializer(serializers.Serializer):
    """
    Unsaved fee settings plus a sample order. Settings values are passed
    through to the fee engine unchecked so that misconfiguration is reported
    the same way it would be at checkout.
    """
    
    subtotal = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=0, default=FEE_PREVIEW_SAMPLE_SUBTOTAL
    )
    gift_wrap = serializers.BooleanField(default=False)
    discount = serializers.DecimalField(max_digits=12, decimal_places=2, min_value=0, default=0)
    
    shipping_charge = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    free_shipping_threshold = serializers.DecimalField(
        max_digits=12, decimal_places=2, required=False, allow_null=True
    )
    is_cod_enabled = serializers.BooleanField(required=False)
    enable_cod_fee = serializers.BooleanField(required=False)
    cod_fee_type = serializers.CharField(required=False)
    cod_fee_percentage = serializers.DecimalField(max_digits=7, decimal_places=2, required=False)
    cod_fee_fixed = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    cod_fee_min_order = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    gift_wrap_fee = serializers.DecimalField(max_digits=12, decimal_places=2, required=False)
    
    ORDER_FIELDS = ('subtotal', 'gift_wrap', 'discount')
    
    def settings_data(self):
        return {
            key: value for key, value in self.validated_data.items()
            if key not in self.ORDER_FIELDS
        }
