"""E-commerce domain layer"""

from .exceptions import DomainError, ConfigurationError, InvalidStatusError
from .value_objects import StoreSettingsSnapshot, COD_FEE_PERCENTAGE, COD_FEE_FIXED
from .services.fee_engine import (
    FeeBreakdown,
    build_fee_breakdown,
    compute_cod_fee,
    compute_order_total,
    compute_shipping_fee,
    round_for_display,
)
from .services.order_workflow import (
    OrderStatus,
    PaymentStatus,
    TimelineStage,
    TransitionKind,
    build_timeline,
    classify_payment_transition,
    classify_transition,
    derive_timeline_stage,
    is_invoice_eligible,
    is_refund_eligible,
    is_terminal,
    parse_payment_status,
    parse_status,
)

__all__ = [
    # Errors
    'DomainError',
    'ConfigurationError',
    'InvalidStatusError',
    
    # Value objects
    'StoreSettingsSnapshot',
    'COD_FEE_PERCENTAGE',
    'COD_FEE_FIXED',
    
    # Fee engine
    'FeeBreakdown',
    'build_fee_breakdown',
    'compute_cod_fee',
    'compute_order_total',
    'compute_shipping_fee',
    'round_for_display',
    
    # Order workflow
    'OrderStatus',
    'PaymentStatus',
    'TimelineStage',
    'TransitionKind',
    'build_timeline',
    'classify_payment_transition',
    'classify_transition',
    'derive_timeline_stage',
    'is_invoice_eligible',
    'is_refund_eligible',
    'is_terminal',
    'parse_payment_status',
    'parse_status',
]
