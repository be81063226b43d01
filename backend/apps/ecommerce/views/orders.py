"""
Order API views
"""

from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from ..filters import OrderFilter
from ..models import Order
from ..permissions import CanManageOrders
from ..serializers import (
    OrderDetailSerializer,
    OrderHistorySerializer,
    OrderListSerializer,
    OrderStatusUpdateSerializer,
    PaymentStatusUpdateSerializer,
)
from ..services import OrderService, ServiceError, StoreSettingsService
from .mixins import OrderErrorMixin


class OrderViewSet(OrderErrorMixin, viewsets.ReadOnlyModelViewSet):
    """
    Orders for the admin dashboard.
    
    Orders are created at checkout, outside this API; admins can only
    change their status and payment status.
    """
    
    permission_classes = [CanManageOrders]
    filterset_class = OrderFilter
    search_fields = ['customer_name', 'customer_email', 'customer_phone']
    ordering_fields = ['created_at', 'total_amount', 'status']
    ordering = ['-created_at']
    
    def get_queryset(self):
        queryset = Order.objects.all()
        if self.action != 'list':
            queryset = queryset.with_items()
        return queryset
    
    def get_serializer_class(self):
        if self.action == 'list':
            return OrderListSerializer
        return OrderDetailSerializer
    
    @extend_schema(request=OrderStatusUpdateSerializer, responses=OrderDetailSerializer)
    @action(detail=True, methods=['post', 'patch'], url_path='status')
    def update_status(self, request, pk=None):
        """Change the order status"""
        order = self.get_object()
        serializer = OrderStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        try:
            OrderService().update_status(
                order,
                serializer.validated_data['status'],
                actor=request.user,
                note=serializer.validated_data['note'],
            )
        except ServiceError as e:
            self.raise_api_error(e)
        
        return Response(OrderDetailSerializer(order, context=self.get_serializer_context()).data)
    
    @extend_schema(request=PaymentStatusUpdateSerializer, responses=OrderDetailSerializer)
    @action(detail=True, methods=['post', 'patch'], url_path='payment-status')
    def update_payment_status(self, request, pk=None):
        """Change the order payment status"""
        order = self.get_object()
        serializer = PaymentStatusUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        
        try:
            OrderService().update_payment_status(
                order,
                serializer.validated_data['payment_status'],
                actor=request.user,
                note=serializer.validated_data['note'],
            )
        except ServiceError as e:
            self.raise_api_error(e)
        
        return Response(OrderDetailSerializer(order, context=self.get_serializer_context()).data)
    
    @extend_schema(responses=OrderHistorySerializer(many=True))
    @action(detail=True, methods=['get'])
    def history(self, request, pk=None):
        """Audit trail of status changes"""
        order = self.get_object()
        history = OrderService().get_history(order, field=request.query_params.get('field'))
        return Response(OrderHistorySerializer(history, many=True).data)
    
    @action(detail=True, methods=['get'])
    def summary(self, request, pk=None):
        """Order financials recomputed with the current store settings"""
        order = self.get_object()
        try:
            summary = OrderService().get_order_summary(order, StoreSettingsService().get_snapshot())
        except ServiceError as e:
            self.raise_api_error(e)
        
        return Response({
            'order_id': summary['order_id'],
            'subtotal': str(summary['subtotal']),
            'total_amount': str(summary['total_amount']),
            'recomputed': summary['recomputed'].as_display(),
            'timeline': [
                {'stage': stage.value, 'reached': reached}
                for stage, reached in summary['timeline']
            ],
            'is_invoice_eligible': summary['is_invoice_eligible'],
            'is_refund_eligible': summary['is_refund_eligible'],
        })
