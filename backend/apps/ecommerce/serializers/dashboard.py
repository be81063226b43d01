"""
Dashboard serializers
"""

from rest_framework import serializers

from ..models import Product


class DashboardStatsSerializer(serializers.Serializer):
    total_orders = serializers.IntegerField()
    total_revenue = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_revenue_display = serializers.CharField()
    pending_orders = serializers.IntegerField()
    low_stock_products = serializers.IntegerField()


class LowStockProductSerializer(serializers.ModelSerializer):
    stock = serializers.IntegerField(source='inventory_count')
    image = serializers.CharField(source='primary_image', allow_null=True)
    
    class Meta:
        model = Product
        fields = ['id', 'name', 'stock', 'image']
