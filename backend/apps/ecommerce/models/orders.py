# apps/ecommerce/models/orders.py

"""
Order, order line and order history models
"""

from decimal import Decimal

from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models

from ..constants import (
    ORDER_STATUS_CHOICES, PAYMENT_METHOD_COD, PAYMENT_STATUS_CHOICES, TRANSITION_KIND_CHOICES,
)
from ..domain.services import order_workflow
from ..domain.services.order_workflow import OrderStatus, PaymentStatus
from .base import EcommerceBaseModel
from .managers import OrderManager


class Order(EcommerceBaseModel):
    """
    Customer order as recorded at checkout.

    total_amount is persisted at checkout time and never recomputed here;
    the subtotal is always derived from the line items.
    """

    # Customer Information
    customer = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        related_name='orders',
        null=True, blank=True
    )
    customer_name = models.CharField(max_length=255)
    customer_email = models.EmailField(blank=True)
    customer_phone = models.CharField(max_length=20, blank=True)
    shipping_address = models.JSONField(default=dict, blank=True)

    # Status
    status = models.CharField(
        max_length=20, choices=ORDER_STATUS_CHOICES, default=OrderStatus.PENDING.value
    )
    payment_status = models.CharField(
        max_length=20, choices=PAYMENT_STATUS_CHOICES, default=PaymentStatus.UNPAID.value
    )
    payment_method = models.CharField(max_length=50, blank=True)

    # Financial
    total_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )
    gift_wrap = models.BooleanField(default=False)
    discount_amount = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal('0.00'),
        validators=[MinValueValidator(0)]
    )

    objects = OrderManager()

    class Meta:
        db_table = 'orders'
        ordering = ['-created_at']
        indexes = [
            models.Index(fields=['status', '-created_at']),
            models.Index(fields=['payment_status']),
        ]

    def __str__(self):
        return f"Order #{self.pk} - {self.customer_name}"

    @property
    def order_status(self) -> OrderStatus:
        return order_workflow.parse_status(self.status)

    @property
    def order_payment_status(self) -> PaymentStatus:
        return order_workflow.parse_payment_status(self.payment_status)

    @property
    def is_cash_on_delivery(self) -> bool:
        return (self.payment_method or '').strip().upper() == PAYMENT_METHOD_COD

    @property
    def subtotal_amount(self) -> Decimal:
        """Sum of line totals"""
        return sum((item.line_total for item in self.items.all()), Decimal('0'))

    @property
    def timeline(self):
        return order_workflow.build_timeline(self.status)

    @property
    def is_terminal(self) -> bool:
        return order_workflow.is_terminal(self.status)

    @property
    def is_invoice_eligible(self) -> bool:
        return order_workflow.is_invoice_eligible(self.status)

    @property
    def is_refund_eligible(self) -> bool:
        return order_workflow.is_refund_eligible(self.status, self.payment_status)


class OrderItem(EcommerceBaseModel):
    """Order line; exists only as part of its order"""

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='items')
    product = models.ForeignKey(
        'Product', on_delete=models.SET_NULL, null=True, blank=True, related_name='order_items'
    )

    # Snapshot of the product at purchase time
    product_name = models.CharField(max_length=255)
    quantity = models.PositiveIntegerField(default=1, validators=[MinValueValidator(1)])
    price_at_purchase = models.DecimalField(
        max_digits=12, decimal_places=2,
        validators=[MinValueValidator(0)]
    )
    variant_color = models.CharField(max_length=50, blank=True)
    variant_size = models.CharField(max_length=50, blank=True)

    class Meta:
        db_table = 'order_items'
        ordering = ['order', 'pk']

    def __str__(self):
        return f"{self.product_name} x{self.quantity} - Order #{self.order_id}"

    def save(self, *args, **kwargs):
        if self.product and not self.product_name:
            self.product_name = self.product.name
        super().save(*args, **kwargs)

    @property
    def line_total(self) -> Decimal:
        return self.price_at_purchase * self.quantity

    @property
    def variant_display(self) -> str:
        return ' / '.join(part for part in (self.variant_color, self.variant_size) if part)


class OrderHistory(EcommerceBaseModel):
    """Audit trail of status and payment status changes"""

    class Field(models.TextChoices):
        STATUS = 'status', 'Order Status'
        PAYMENT_STATUS = 'payment_status', 'Payment Status'

    order = models.ForeignKey(Order, on_delete=models.CASCADE, related_name='history')
    field = models.CharField(max_length=20, choices=Field.choices)
    previous_value = models.CharField(max_length=20)
    new_value = models.CharField(max_length=20)
    transition = models.CharField(max_length=20, choices=TRANSITION_KIND_CHOICES)
    timestamp = models.DateTimeField(auto_now_add=True)

    # Actor information
    actor = models.ForeignKey(
        settings.AUTH_USER_MODEL, on_delete=models.SET_NULL, null=True, blank=True,
        related_name='order_changes'
    )
    note = models.TextField(blank=True)

    class Meta:
        db_table = 'order_history'
        ordering = ['-timestamp', '-pk']
        verbose_name_plural = 'Order history'
        indexes = [
            models.Index(fields=['order', '-timestamp']),
        ]

    def __str__(self):
        return f"Order #{self.order_id} {self.field}: {self.previous_value} -> {self.new_value}"

    @classmethod
    def log_change(cls, order, field, previous_value, new_value, transition,
                   actor=None, note=''):
        """Record one persisted change"""
        return cls.objects.create(
            order=order,
            field=field,
            previous_value=str(previous_value),
            new_value=str(new_value),
            transition=str(transition),
            actor=actor,
            note=note or '',
        )
