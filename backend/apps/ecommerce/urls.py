# apps/ecommerce/urls.py

"""
URL configuration for e-commerce module
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from . import views

app_name = 'ecommerce'

# API Router for DRF ViewSets
router = DefaultRouter()
router.register('orders', views.OrderViewSet, basename='order')

urlpatterns = [
    # Store settings
    path('settings/', views.StoreSettingsView.as_view(), name='settings'),
    path('settings/fee-preview/', views.FeePreviewView.as_view(), name='fee-preview'),
    
    # Dashboard
    path('dashboard/stats/', views.DashboardStatsView.as_view(), name='dashboard-stats'),
    path('dashboard/recent-orders/', views.RecentOrdersView.as_view(), name='dashboard-recent-orders'),
    path('dashboard/low-stock/', views.LowStockView.as_view(), name='dashboard-low-stock'),
    
    path('', include(router.urls)),
]
