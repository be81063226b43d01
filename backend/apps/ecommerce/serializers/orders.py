"""
Order serializers
"""

from rest_framework import serializers

from ..models import Order, OrderHistory, OrderItem
from .base import AmountField


class OrderItemSerializer(serializers.ModelSerializer):
    line_total = AmountField()
    variant = serializers.CharField(source='variant_display', read_only=True)
    image = serializers.SerializerMethodField()
    
    class Meta:
        model = OrderItem
        fields = [
            'id', 'product', 'product_name', 'quantity', 'price_at_purchase',
            'variant_color', 'variant_size', 'variant', 'line_total', 'image',
        ]
    
    def get_image(self, obj):
        return obj.product.primary_image if obj.product else None


class OrderListSerializer(serializers.ModelSerializer):
    """Row in the orders table and the recent orders widget"""
    
    class Meta:
        model = Order
        fields = [
            'id', 'customer_name', 'created_at', 'total_amount',
            'status', 'payment_status', 'payment_method',
        ]


class OrderDetailSerializer(serializers.ModelSerializer):
    items = OrderItemSerializer(many=True, read_only=True)
    subtotal_amount = AmountField()
    timeline = serializers.SerializerMethodField()
    
    class Meta:
        model = Order
        fields = [
            'id', 'created_at', 'updated_at',
            'customer_name', 'customer_email', 'customer_phone', 'shipping_address',
            'status', 'payment_status', 'payment_method',
            'items', 'subtotal_amount', 'gift_wrap', 'discount_amount', 'total_amount',
            'timeline', 'is_terminal', 'is_invoice_eligible', 'is_refund_eligible',
        ]
        read_only_fields = fields
    
    def get_timeline(self, obj):
        return [
            {'stage': stage.value, 'reached': reached}
            for stage, reached in obj.timeline
        ]


class OrderStatusUpdateSerializer(serializers.Serializer):
    status = serializers.CharField()
    note = serializers.CharField(required=False, allow_blank=True, default='')


class PaymentStatusUpdateSerializer(serializers.Serializer):
    payment_status = serializers.CharField()
    note = serializers.CharField(required=False, allow_blank=True, default='')


class OrderHistorySerializer(serializers.ModelSerializer):
    actor = serializers.StringRelatedField()
    
    class Meta:
        model = OrderHistory
        fields = [
            'id', 'timestamp', 'field', 'previous_value', 'new_value',
            'transition', 'actor', 'note',
        ]
