# apps/ecommerce/constants.py

"""
Constants for the e-commerce module
"""

from decimal import Decimal

from .domain.services.order_workflow import OrderStatus, PaymentStatus, TransitionKind
from .domain.value_objects.store_settings import COD_FEE_FIXED, COD_FEE_PERCENTAGE

# Order status choices
ORDER_STATUS_CHOICES = [(status.value, status.value) for status in OrderStatus]

# Payment status choices
PAYMENT_STATUS_CHOICES = [(status.value, status.value) for status in PaymentStatus]

# Transition labels recorded in the order history
TRANSITION_KIND_CHOICES = [
    (TransitionKind.FORWARD.value, 'Forward'),
    (TransitionKind.BACKWARD.value, 'Backward'),
    (TransitionKind.CANCELLATION.value, 'Cancellation'),
    (TransitionKind.REOPEN.value, 'Reopened'),
]

# COD fee type choices
COD_FEE_TYPE_CHOICES = [
    (COD_FEE_PERCENTAGE, 'Percentage'),
    (COD_FEE_FIXED, 'Fixed Amount'),
]

# Payment methods
PAYMENT_METHOD_COD = 'COD'
PAYMENT_METHOD_CARD = 'Card'

# The store keeps exactly one settings row
STORE_SETTINGS_ROW_ID = 1
STORE_SETTINGS_CACHE_KEY = 'ecommerce:store_settings_snapshot'

# Sample order value used by the settings page fee preview
FEE_PREVIEW_SAMPLE_SUBTOTAL = Decimal('1000')

# Display currency
CURRENCY_CODE = 'INR'
CURRENCY_SYMBOL = '₹'

# Dashboard defaults
RECENT_ORDERS_LIMIT = 5
LOW_STOCK_LIMIT = 10
