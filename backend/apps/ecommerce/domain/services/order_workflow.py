# apps/ecommerce/domain/services/order_workflow.py
"""
Order Status Workflow

Order lifecycle:  Pending -> Processing -> Shipped -> Delivered,
with Cancelled reachable from anywhere. Payment lifecycle:
Unpaid <-> Paid <-> Refunded.

Admins may move an order to any status, including backwards. Nothing here
blocks a transition; classify_transition() only labels it so the service
layer can audit it.
"""

from enum import Enum
from typing import FrozenSet, List, Tuple, Union

from ..exceptions import InvalidStatusError


class OrderStatus(str, Enum):
    PENDING = 'Pending'
    PROCESSING = 'Processing'
    SHIPPED = 'Shipped'
    DELIVERED = 'Delivered'
    CANCELLED = 'Cancelled'

    def __str__(self):
        return self.value


class PaymentStatus(str, Enum):
    UNPAID = 'Unpaid'
    PAID = 'Paid'
    REFUNDED = 'Refunded'

    def __str__(self):
        return self.value


class TimelineStage(str, Enum):
    PLACED = 'Placed'
    PROCESSING = 'Processing'
    SHIPPED = 'Shipped'
    DELIVERED = 'Delivered'

    def __str__(self):
        return self.value


class TransitionKind(str, Enum):
    NOOP = 'noop'
    FORWARD = 'forward'
    BACKWARD = 'backward'
    CANCELLATION = 'cancellation'
    REOPEN = 'reopen'

    def __str__(self):
        return self.value


FORWARD_SEQUENCE: Tuple[OrderStatus, ...] = (
    OrderStatus.PENDING,
    OrderStatus.PROCESSING,
    OrderStatus.SHIPPED,
    OrderStatus.DELIVERED,
)

TERMINAL_STATUSES: FrozenSet[OrderStatus] = frozenset({
    OrderStatus.DELIVERED,
    OrderStatus.CANCELLED,
})

TERMINAL_PAYMENT_STATUSES: FrozenSet[PaymentStatus] = frozenset({
    PaymentStatus.REFUNDED,
})

PAYMENT_SEQUENCE: Tuple[PaymentStatus, ...] = (
    PaymentStatus.UNPAID,
    PaymentStatus.PAID,
    PaymentStatus.REFUNDED,
)

TIMELINE_ORDER: Tuple[TimelineStage, ...] = (
    TimelineStage.PLACED,
    TimelineStage.PROCESSING,
    TimelineStage.SHIPPED,
    TimelineStage.DELIVERED,
)

# Statuses at which each timeline stage counts as reached
_STAGE_REACHED_BY = {
    TimelineStage.PROCESSING: frozenset({
        OrderStatus.PROCESSING, OrderStatus.SHIPPED, OrderStatus.DELIVERED,
    }),
    TimelineStage.SHIPPED: frozenset({OrderStatus.SHIPPED, OrderStatus.DELIVERED}),
    TimelineStage.DELIVERED: frozenset({OrderStatus.DELIVERED}),
}


def parse_status(value: Union[str, OrderStatus]) -> OrderStatus:
    if isinstance(value, OrderStatus):
        return value
    try:
        return OrderStatus(value)
    except ValueError:
        raise InvalidStatusError('order status', value, [s.value for s in OrderStatus])


def parse_payment_status(value: Union[str, PaymentStatus]) -> PaymentStatus:
    if isinstance(value, PaymentStatus):
        return value
    try:
        return PaymentStatus(value)
    except ValueError:
        raise InvalidStatusError('payment status', value, [s.value for s in PaymentStatus])


def derive_timeline_stage(status: Union[str, OrderStatus]) -> FrozenSet[TimelineStage]:
    """
    Timeline stages reached for an order status.

    Placed is always reached. A cancelled order is outside the forward
    timeline, so only Placed is reported for it, whatever it had reached
    before cancellation.
    """
    current = parse_status(status)
    reached = {TimelineStage.PLACED}
    for stage, statuses in _STAGE_REACHED_BY.items():
        if current in statuses:
            reached.add(stage)
    return frozenset(reached)


def build_timeline(status: Union[str, OrderStatus]) -> List[Tuple[TimelineStage, bool]]:
    """Timeline stages in display order, each paired with whether it is reached"""
    reached = derive_timeline_stage(status)
    return [(stage, stage in reached) for stage in TIMELINE_ORDER]


def is_terminal(status: Union[str, OrderStatus]) -> bool:
    return parse_status(status) in TERMINAL_STATUSES


def classify_transition(current: Union[str, OrderStatus],
                        new: Union[str, OrderStatus]) -> TransitionKind:
    """Label an order status change for audit purposes"""
    current = parse_status(current)
    new = parse_status(new)

    if current == new:
        return TransitionKind.NOOP
    if new == OrderStatus.CANCELLED:
        return TransitionKind.CANCELLATION
    if current in TERMINAL_STATUSES:
        return TransitionKind.REOPEN
    if FORWARD_SEQUENCE.index(new) > FORWARD_SEQUENCE.index(current):
        return TransitionKind.FORWARD
    return TransitionKind.BACKWARD


def classify_payment_transition(current: Union[str, PaymentStatus],
                                new: Union[str, PaymentStatus]) -> TransitionKind:
    """Label a payment status change for audit purposes"""
    current = parse_payment_status(current)
    new = parse_payment_status(new)

    if current == new:
        return TransitionKind.NOOP
    if current in TERMINAL_PAYMENT_STATUSES:
        return TransitionKind.REOPEN
    if PAYMENT_SEQUENCE.index(new) > PAYMENT_SEQUENCE.index(current):
        return TransitionKind.FORWARD
    return TransitionKind.BACKWARD


def is_invoice_eligible(status: Union[str, OrderStatus]) -> bool:
    """Invoices can be issued for any order that has not been cancelled"""
    return parse_status(status) != OrderStatus.CANCELLED


def is_refund_eligible(status: Union[str, OrderStatus],
                       payment_status: Union[str, PaymentStatus]) -> bool:
    """Only money that was collected can be refunded"""
    parse_status(status)
    return parse_payment_status(payment_status) == PaymentStatus.PAID
