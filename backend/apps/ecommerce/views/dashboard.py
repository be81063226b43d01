"""
Dashboard API views
"""

from drf_spectacular.utils import extend_schema
from rest_framework.response import Response
from rest_framework.views import APIView

from ..permissions import StoreAdminPermission
from ..serializers import DashboardStatsSerializer, LowStockProductSerializer, OrderListSerializer
from ..services import DashboardService


class DashboardStatsView(APIView):
    permission_classes = [StoreAdminPermission]
    
    @extend_schema(responses=DashboardStatsSerializer)
    def get(self, request):
        stats = DashboardService().get_stats()
        return Response(DashboardStatsSerializer(stats).data)


class RecentOrdersView(APIView):
    permission_classes = [StoreAdminPermission]
    
    @extend_schema(responses=OrderListSerializer(many=True))
    def get(self, request):
        orders = DashboardService().recent_orders()
        return Response(OrderListSerializer(orders, many=True).data)


class LowStockView(APIView):
    permission_classes = [StoreAdminPermission]
    
    @extend_schema(responses=LowStockProductSerializer(many=True))
    def get(self, request):
        products = DashboardService().low_stock_products()
        return Response(LowStockProductSerializer(products, many=True).data)
