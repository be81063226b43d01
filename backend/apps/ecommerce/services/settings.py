"""
Store settings service
Loads the settings row for fee calculations and handles admin edits
"""
from decimal import Decimal
from typing import Any, Mapping, Optional

from django.conf import settings as django_settings
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError, transaction

from ..constants import FEE_PREVIEW_SAMPLE_SUBTOTAL, STORE_SETTINGS_CACHE_KEY
from ..domain.exceptions import ConfigurationError
from ..domain.services.fee_engine import FeeBreakdown, build_fee_breakdown
from ..domain.value_objects.store_settings import StoreSettingsSnapshot
from ..models import StoreSettings
from .base import CacheableService


class StoreSettingsService(CacheableService):
    """Service for reading and updating store settings"""

    def __init__(self, cache_ttl: Optional[int] = None):
        if cache_ttl is None:
            cache_ttl = django_settings.STORE_SETTINGS_CACHE_TIMEOUT
        super().__init__(cache_ttl)

    def get_settings(self) -> StoreSettings:
        """The settings row, or an unsaved row holding the form defaults"""
        return StoreSettings.load() or StoreSettings()

    def get_snapshot(self) -> StoreSettingsSnapshot:
        """
        Fee settings for the store.

        A store without a settings row gets every fee feature switched off
        rather than an error.
        """
        return self.get_cached_or_fetch(STORE_SETTINGS_CACHE_KEY, self._load_snapshot)

    def _load_snapshot(self) -> StoreSettingsSnapshot:
        row = StoreSettings.load()
        if row is None:
            self.log_warning("Store settings row missing, fee features disabled")
            return StoreSettingsSnapshot.disabled()
        try:
            return row.to_snapshot()
        except ConfigurationError as e:
            raise self.handle_service_error(e, 'get_snapshot')

    def save_settings(self, data: Mapping[str, Any]) -> StoreSettings:
        """Create or update the settings row"""
        instance = self.get_settings()
        for field, value in data.items():
            setattr(instance, field, value)

        try:
            instance.full_clean()
            with transaction.atomic():
                instance.save()
        except (DjangoValidationError, DatabaseError) as e:
            raise self.handle_service_error(e, 'save_settings')

        self.invalidate(STORE_SETTINGS_CACHE_KEY)
        self.log_info("Store settings saved", {'fields': sorted(data.keys())})
        return instance

    def preview_fees(
        self,
        data: Mapping[str, Any],
        subtotal: Optional[Decimal] = None,
        gift_wrap: bool = False,
        discount: Decimal = Decimal('0'),
    ) -> FeeBreakdown:
        """
        Fee breakdown for unsaved settings, as shown next to the settings form.
        """
        if subtotal is None:
            subtotal = FEE_PREVIEW_SAMPLE_SUBTOTAL

        try:
            snapshot = StoreSettingsSnapshot.from_mapping(data)
            snapshot.validate()
            return build_fee_breakdown(subtotal, snapshot, gift_wrap=gift_wrap, discount=discount)
        except ConfigurationError as e:
            raise self.handle_service_error(e, 'preview_fees')

