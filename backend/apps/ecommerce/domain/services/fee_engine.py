# apps/ecommerce/domain/services/fee_engine.py
"""
Fee Engine

Pure functions that turn an order subtotal and a StoreSettingsSnapshot into
shipping fee, COD convenience fee and payable total. Amounts are returned
unrounded; use round_for_display() at the presentation edge.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Union

from ..exceptions import ConfigurationError
from ..value_objects.store_settings import (
    COD_FEE_PERCENTAGE, StoreSettingsSnapshot, parse_decimal,
)

Number = Union[int, float, str, Decimal]

ZERO = Decimal('0')
CENT = Decimal('0.01')


def _subtotal(value: Number) -> Decimal:
    amount = parse_decimal(value)
    if amount < 0:
        raise ValueError("Subtotal cannot be negative")
    return amount


def round_for_display(amount: Number) -> Decimal:
    """Round an amount to 2 decimal places for display"""
    return parse_decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


def compute_cod_fee(subtotal: Number, settings: StoreSettingsSnapshot) -> Decimal:
    """
    COD convenience fee for an order subtotal.
    
    The fee is waived when the feature is off or when the subtotal is
    strictly below cod_fee_min_order.
    
    Raises:
        ValueError: negative, NaN or infinite subtotal.
        TypeError: subtotal is not a number.
        ConfigurationError: COD fee is enabled but its settings are invalid.
    """
    amount = _subtotal(subtotal)
    
    if not settings.enable_cod_fee:
        return ZERO
    
    settings.validate_cod_fee()
    
    if amount < settings.cod_fee_min_order:
        return ZERO
    
    if settings.cod_fee_type == COD_FEE_PERCENTAGE:
        return amount * settings.cod_fee_percentage / 100
    
    return settings.cod_fee_fixed


def compute_shipping_fee(subtotal: Number, settings: StoreSettingsSnapshot) -> Decimal:
    """
    Shipping fee for an order subtotal.
    
    Orders at or above free_shipping_threshold ship free. A threshold of
    None means free shipping is off.
    """
    amount = _subtotal(subtotal)
    settings.validate_shipping()
    
    threshold = settings.free_shipping_threshold
    if threshold is not None and amount >= threshold:
        return ZERO
    return settings.shipping_charge


def compute_order_total(subtotal: Number, settings: StoreSettingsSnapshot) -> Decimal:
    """Subtotal plus shipping fee plus COD fee"""
    amount = _subtotal(subtotal)
    return (
        amount
        + compute_shipping_fee(amount, settings)
        + compute_cod_fee(amount, settings)
    )


@dataclass(frozen=True)
class FeeBreakdown:
    """Every additive term of an order total"""
    subtotal: Decimal
    shipping_fee: Decimal
    cod_fee: Decimal
    gift_wrap_fee: Decimal
    discount: Decimal
    total: Decimal
    
    @property
    def qualifies_for_free_shipping(self) -> bool:
        return self.shipping_fee == 0
    
    def as_display(self) -> Dict[str, str]:
        return {
            'subtotal': str(round_for_display(self.subtotal)),
            'shipping_fee': str(round_for_display(self.shipping_fee)),
            'cod_fee': str(round_for_display(self.cod_fee)),
            'gift_wrap_fee': str(round_for_display(self.gift_wrap_fee)),
            'discount': str(round_for_display(self.discount)),
            'total': str(round_for_display(self.total)),
        }


def build_fee_breakdown(
    subtotal: Number,
    settings: StoreSettingsSnapshot,
    gift_wrap: bool = False,
    discount: Number = ZERO,
    include_cod_fee: bool = True,
) -> FeeBreakdown:
    """
    Compose the full order total: subtotal + shipping + COD fee + gift wrap
    - discount. The total never drops below zero.
    """
    amount = _subtotal(subtotal)
    discount_amount = parse_decimal(discount)
    if discount_amount < 0:
        raise ValueError("Discount cannot be negative")
    
    shipping_fee = compute_shipping_fee(amount, settings)
    cod_fee = compute_cod_fee(amount, settings) if include_cod_fee else ZERO
    
    gift_wrap_fee = ZERO
    if gift_wrap:
        if settings.gift_wrap_fee < 0:
            raise ConfigurationError('gift_wrap_fee', settings.gift_wrap_fee, "cannot be negative")
        gift_wrap_fee = settings.gift_wrap_fee
    
    gross = amount + shipping_fee + cod_fee + gift_wrap_fee
    total = max(gross - discount_amount, ZERO)
    
    return FeeBreakdown(
        subtotal=amount,
        shipping_fee=shipping_fee,
        cod_fee=cod_fee,
        gift_wrap_fee=gift_wrap_fee,
        discount=discount_amount,
        total=total,
    )
