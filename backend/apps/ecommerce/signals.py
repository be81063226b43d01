from django.core.cache import cache
from django.db.models.signals import post_delete, post_save
from django.dispatch import receiver
import logging

from .constants import STORE_SETTINGS_CACHE_KEY
from .models import StoreSettings

logger = logging.getLogger(__name__)


@receiver(post_save, sender=StoreSettings)
@receiver(post_delete, sender=StoreSettings)
def store_settings_changed(sender, instance, **kwargs):
    """Drop the cached fee settings whenever the settings row changes"""
    cache.delete(STORE_SETTINGS_CACHE_KEY)
    logger.debug("Store settings cache cleared")
