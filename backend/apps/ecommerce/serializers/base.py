"""
Base serializer classes for e-commerce functionality
"""

from rest_framework import serializers

from ..domain.services.fee_engine import round_for_display


class AmountField(serializers.DecimalField):
    """Read-only currency amount, rounded for display"""
    
    def __init__(self, **kwargs):
        kwargs.setdefault('max_digits', 14)
        kwargs.setdefault('decimal_places', 2)
        kwargs.setdefault('read_only', True)
        super().__init__(**kwargs)
    
    def to_representation(self, value):
        return super().to_representation(round_for_display(value))


class CommaSeparatedListField(serializers.ListField):
    """Accepts either a list or a comma separated string"""
    
    child = serializers.CharField(allow_blank=True, trim_whitespace=True)
    
    def to_internal_value(self, data):
        if isinstance(data, str):
            data = data.split(',')
        values = super().to_internal_value(data)
        return [value for value in values if value]
