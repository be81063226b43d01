"""
E-Commerce Order Service
Handles order lookup, status and payment status changes, and order summaries
"""
from typing import Dict, Optional

from django.db import DatabaseError, transaction

from ..domain.exceptions import ConfigurationError, InvalidStatusError
from ..domain.services import order_workflow
from ..domain.services.fee_engine import build_fee_breakdown
from ..domain.services.order_workflow import TransitionKind
from ..domain.value_objects.store_settings import StoreSettingsSnapshot
from ..models import Order, OrderHistory
from .base import BaseEcommerceService, NotFoundError

# Transitions that move an order away from where it was heading
_SUSPICIOUS_TRANSITIONS = {TransitionKind.BACKWARD, TransitionKind.REOPEN}


class OrderService(BaseEcommerceService):
    """Service for managing order operations"""

    def get_order(self, order_id) -> Order:
        """Fetch an order with its items"""
        try:
            return Order.objects.with_items().get(pk=order_id)
        except (Order.DoesNotExist, ValueError, TypeError):
            raise NotFoundError(f"Order {order_id} not found", details={'order_id': order_id})

    def update_status(self, order: Order, new_status, actor=None, note: str = '') -> Order:
        """
        Move an order to a new status.

        Any status may follow any other. Setting the status the order already
        has is a no-op: nothing is written and no history is recorded.

        Raises:
            ValidationError: new_status is not a known order status.
            PersistenceError: the database rejected the write. The order
                instance keeps its previous status.
        """
        try:
            target = order_workflow.parse_status(new_status)
        except InvalidStatusError as e:
            raise self.handle_service_error(e, 'update_status')

        return self._apply_change(
            order,
            field=OrderHistory.Field.STATUS,
            new_value=target,
            transition=order_workflow.classify_transition(order.status, target),
            actor=actor,
            note=note,
        )

    def update_payment_status(self, order: Order, new_payment_status, actor=None, note: str = '') -> Order:
        """
        Set an order's payment status. Same contract as update_status();
        Paid -> Unpaid and leaving Refunded are allowed but logged as warnings.
        """
        try:
            target = order_workflow.parse_payment_status(new_payment_status)
        except InvalidStatusError as e:
            raise self.handle_service_error(e, 'update_payment_status')

        return self._apply_change(
            order,
            field=OrderHistory.Field.PAYMENT_STATUS,
            new_value=target,
            transition=order_workflow.classify_payment_transition(order.payment_status, target),
            actor=actor,
            note=note,
        )

    def _apply_change(self, order: Order, field: str, new_value, transition: TransitionKind,
                      actor=None, note: str = '') -> Order:
        field = str(field)
        previous_value = getattr(order, field)
        context = {
            'order_id': order.pk,
            'field': field,
            'from': previous_value,
            'to': new_value.value,
            'transition': transition.value,
            'actor_id': getattr(actor, 'pk', None),
        }

        if transition == TransitionKind.NOOP:
            self.log_info(f"Order {order.pk} {field} already {new_value.value}", context)
            return order

        try:
            with transaction.atomic():
                updated = Order.objects.filter(pk=order.pk).update(**{field: new_value.value})
                if not updated:
                    raise NotFoundError(f"Order {order.pk} not found", details={'order_id': order.pk})
                OrderHistory.log_change(
                    order,
                    field=field,
                    previous_value=previous_value,
                    new_value=new_value.value,
                    transition=transition,
                    actor=actor,
                    note=note,
                )
        except DatabaseError as e:
            raise self.handle_service_error(e, f'update {field} of order {order.pk}')

        # The in-memory order only changes once the write has gone through
        setattr(order, field, new_value.value)

        message = f"Order {order.pk} {field} changed {previous_value} -> {new_value.value} ({transition.value})"
        if transition in _SUSPICIOUS_TRANSITIONS:
            self.log_warning(message, context)
        else:
            self.log_info(message, context)
        return order

    def get_order_summary(self, order: Order, settings: StoreSettingsSnapshot) -> Dict:
        """
        Financial and workflow view of an order.

        The persisted total is reported as-is; the fee breakdown is recomputed
        from the given settings and shows what the order would cost today.

        Raises:
            ValidationError: the store settings cannot produce a fee.
        """
        subtotal = order.subtotal_amount
        try:
            breakdown = build_fee_breakdown(
                subtotal,
                settings,
                gift_wrap=order.gift_wrap,
                discount=order.discount_amount,
                include_cod_fee=order.is_cash_on_delivery,
            )
        except ConfigurationError as e:
            raise self.handle_service_error(e, f'summary of order {order.pk}')
        return {
            'order_id': order.pk,
            'subtotal': subtotal,
            'total_amount': order.total_amount,
            'recomputed': breakdown,
            'timeline': order.timeline,
            'is_invoice_eligible': order.is_invoice_eligible,
            'is_refund_eligible': order.is_refund_eligible,
        }

    def get_history(self, order: Order, field: Optional[str] = None):
        history = order.history.select_related('actor')
        if field:
            history = history.filter(field=field)
        return history
