import django_filters

from .constants import ORDER_STATUS_CHOICES, PAYMENT_STATUS_CHOICES
from .models import Order


class OrderFilter(django_filters.FilterSet):
    """Filter for the admin order list"""
    
    status = django_filters.MultipleChoiceFilter(
        field_name='status',
        choices=ORDER_STATUS_CHOICES,
        label='Order Status'
    )
    
    payment_status = django_filters.MultipleChoiceFilter(
        field_name='payment_status',
        choices=PAYMENT_STATUS_CHOICES,
        label='Payment Status'
    )
    
    payment_method = django_filters.CharFilter(
        field_name='payment_method',
        lookup_expr='iexact',
        label='Payment Method'
    )
    
    created_after = django_filters.DateTimeFilter(
        field_name='created_at',
        lookup_expr='gte',
        label='Placed After'
    )
    
    created_before = django_filters.DateTimeFilter(
        field_name='created_at',
        lookup_expr='lte',
        label='Placed Before'
    )
    
    min_total = django_filters.NumberFilter(
        field_name='total_amount',
        lookup_expr='gte',
        label='Min Total'
    )
    
    max_total = django_filters.NumberFilter(
        field_name='total_amount',
        lookup_expr='lte',
        label='Max Total'
    )
    
    class Meta:
        model = Order
        fields = ['status', 'payment_status', 'payment_method']
