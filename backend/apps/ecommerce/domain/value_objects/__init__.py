from .store_settings import (
    StoreSettingsSnapshot, COD_FEE_PERCENTAGE, COD_FEE_FIXED, COD_FEE_TYPES, parse_decimal, to_decimal,
)

__all__ = [
    'StoreSettingsSnapshot', 'COD_FEE_PERCENTAGE', 'COD_FEE_FIXED', 'COD_FEE_TYPES', 'parse_decimal', 'to_decimal',
]
