"""
Store settings API views
"""

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import APIView

from ..permissions import CanManageSettings, StoreAdminPermission
from ..serializers import FeePreviewSerializer, StoreSettingsSerializer
from ..services import ServiceError, StoreSettingsService
from .mixins import SettingsErrorMixin


class StoreSettingsView(SettingsErrorMixin, APIView):
    """Read and update the store settings row"""
    
    permission_classes = [CanManageSettings]
    
    @extend_schema(responses=StoreSettingsSerializer)
    def get(self, request):
        instance = StoreSettingsService().get_settings()
        return Response(StoreSettingsSerializer(instance).data)
    
    @extend_schema(request=StoreSettingsSerializer, responses=StoreSettingsSerializer)
    def put(self, request):
        service = StoreSettingsService()
        serializer = StoreSettingsSerializer(
            service.get_settings(), data=request.data, partial=True
        )
        serializer.is_valid(raise_exception=True)
        
        try:
            instance = service.save_settings(serializer.validated_data)
        except ServiceError as e:
            self.raise_api_error(e)
        
        return Response(StoreSettingsSerializer(instance).data)
    
    patch = put


class FeePreviewView(SettingsErrorMixin, APIView):
    """Fee breakdown for a sample order under unsaved settings"""
    
    permission_classes = [StoreAdminPermission]
    
    @extend_schema(request=FeePreviewSerializer)
    def post(self, request):
        serializer = FeePreviewSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        
        try:
            breakdown = StoreSettingsService().preview_fees(
                serializer.settings_data(),
                subtotal=data['subtotal'],
                gift_wrap=data['gift_wrap'],
                discount=data['discount'],
            )
        except ServiceError as e:
            self.raise_api_error(e)
        
        payload = breakdown.as_display()
        payload['qualifies_for_free_shipping'] = breakdown.qualifies_for_free_shipping
        return Response(payload, status=status.HTTP_200_OK)
