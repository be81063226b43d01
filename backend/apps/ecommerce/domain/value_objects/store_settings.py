# apps/ecommerce/domain/value_objects/store_settings.py
"""
Store settings value object

An immutable view of the settings row, holding only what the fee engine
reads. It is passed explicitly into every fee calculation.
"""

from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Mapping, Optional, Union

from ..exceptions import ConfigurationError

Number = Union[int, float, str, Decimal]

COD_FEE_PERCENTAGE = 'percentage'
COD_FEE_FIXED = 'fixed'
COD_FEE_TYPES = (COD_FEE_PERCENTAGE, COD_FEE_FIXED)

_DECIMAL_FIELDS = (
    'shipping_charge', 'free_shipping_threshold', 'cod_fee_percentage',
    'cod_fee_fixed', 'cod_fee_min_order', 'gift_wrap_fee', 'loyalty_rate',
)


def parse_decimal(value: Number) -> Decimal:
    """
    Coerce a number to a finite Decimal without losing what the caller typed.

    Raises:
        TypeError: value is not a number or numeric string.
        ValueError: value is not numeric, NaN or infinite.
    """
    if isinstance(value, bool) or not isinstance(value, (Decimal, int, float, str)):
        raise TypeError(f"Expected a number, got {value!r}")
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except InvalidOperation:
            raise ValueError(f"Expected a number, got {value!r}")
    if not result.is_finite():
        raise ValueError(f"Expected a finite number, got {value!r}")
    return result


def to_decimal(value: Number, field: str) -> Decimal:
    """parse_decimal() for a settings field; failures are ConfigurationErrors"""
    try:
        return parse_decimal(value)
    except TypeError:
        raise ConfigurationError(field, value, "expected a number")
    except ValueError:
        raise ConfigurationError(field, value, "expected a finite number")


@dataclass(frozen=True)
class StoreSettingsSnapshot:
    """Fee-relevant store settings"""
    shipping_charge: Decimal = Decimal('0')
    free_shipping_threshold: Optional[Decimal] = None
    is_cod_enabled: bool = False
    enable_cod_fee: bool = False
    cod_fee_type: str = COD_FEE_PERCENTAGE
    cod_fee_percentage: Decimal = Decimal('0')
    cod_fee_fixed: Decimal = Decimal('0')
    cod_fee_min_order: Decimal = Decimal('0')
    gift_wrap_fee: Decimal = Decimal('0')
    loyalty_rate: Decimal = Decimal('0')
    
    def __post_init__(self):
        for name in _DECIMAL_FIELDS:
            value = getattr(self, name)
            if value is None and name == 'free_shipping_threshold':
                continue
            object.__setattr__(self, name, to_decimal(value, name))
    
    @classmethod
    def disabled(cls) -> 'StoreSettingsSnapshot':
        """Settings used when the store has no settings row: every fee off"""
        return cls()
    
    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'StoreSettingsSnapshot':
        """Build from a plain dict, ignoring keys the fee engine does not use"""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        if values.get('free_shipping_threshold') == '':
            values['free_shipping_threshold'] = None
        return cls(**values)
    
    def with_changes(self, **changes) -> 'StoreSettingsSnapshot':
        return replace(self, **changes)
    
    def validate_cod_fee(self) -> None:
        """Check the COD convenience fee fields"""
        if self.cod_fee_type not in COD_FEE_TYPES:
            raise ConfigurationError(
                'cod_fee_type', self.cod_fee_type,
                f"must be one of {', '.join(COD_FEE_TYPES)}"
            )
        if not 0 <= self.cod_fee_percentage <= 100:
            raise ConfigurationError(
                'cod_fee_percentage', self.cod_fee_percentage, "must be between 0 and 100"
            )
        if self.cod_fee_fixed < 0:
            raise ConfigurationError('cod_fee_fixed', self.cod_fee_fixed, "cannot be negative")
        if self.cod_fee_min_order < 0:
            raise ConfigurationError('cod_fee_min_order', self.cod_fee_min_order, "cannot be negative")
    
    def validate_shipping(self) -> None:
        """Check the shipping fields"""
        if self.shipping_charge < 0:
            raise ConfigurationError('shipping_charge', self.shipping_charge, "cannot be negative")
        if self.free_shipping_threshold is not None and self.free_shipping_threshold < 0:
            raise ConfigurationError(
                'free_shipping_threshold', self.free_shipping_threshold, "cannot be negative"
            )
    
    def validate(self) -> None:
        """Check every field, regardless of which features are switched on"""
        self.validate_shipping()
        self.validate_cod_fee()
        if self.gift_wrap_fee < 0:
            raise ConfigurationError('gift_wrap_fee', self.gift_wrap_fee, "cannot be negative")
        if self.loyalty_rate < 0:
            raise ConfigurationError('loyalty_rate', self.loyalty_rate, "cannot be negative")
    
    def to_dict(self) -> dict:
        return {f.name: getattr(self, f.name) for f in fields(self)}
