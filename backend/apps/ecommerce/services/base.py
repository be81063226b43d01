"""
Base service classes for e-commerce functionality
"""

import logging
from decimal import Decimal
from typing import Any, Callable, Dict, Optional

from django.core.cache import cache
from django.core.exceptions import ValidationError as DjangoValidationError
from django.db import DatabaseError

from ..constants import CURRENCY_CODE, CURRENCY_SYMBOL
from ..domain.exceptions import ConfigurationError, InvalidStatusError
from ..domain.services.fee_engine import round_for_display


class ServiceError(Exception):
    """Base exception for service layer errors"""

    def __init__(self, message: str, details: Optional[Dict] = None, original_error: Optional[Exception] = None):
        self.message = message
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Exception for validation errors in services"""
    pass


class NotFoundError(ServiceError):
    """Exception for when requested resource is not found"""
    pass


class PersistenceError(ServiceError):
    """Exception for writes the database did not accept"""
    pass


class BaseEcommerceService:
    """Base service class for all e-commerce services"""

    def __init__(self):
        self.logger = logging.getLogger(f"{__name__.rsplit('.', 1)[0]}.{self.__class__.__name__}")

    def log_info(self, message: str, context: Optional[Dict] = None):
        """Log informational message with context"""
        self.logger.info(message, extra={'context': context or {}})

    def log_warning(self, message: str, context: Optional[Dict] = None):
        """Log warning message with context"""
        self.logger.warning(message, extra={'context': context or {}})

    def log_error(self, message: str, error: Optional[Exception] = None, context: Optional[Dict] = None):
        """Log error message with context"""
        self.logger.error(
            message,
            extra={
                'context': context or {},
                'error': str(error) if error else None
            },
            exc_info=bool(error)
        )

    def format_currency(self, amount: Decimal, currency: str = CURRENCY_CODE) -> str:
        """Format currency amount for display"""
        amount = round_for_display(amount)
        if currency == CURRENCY_CODE:
            return f"{CURRENCY_SYMBOL}{amount:,.2f}"
        return f"{amount:,.2f} {currency}"

    def handle_service_error(self, error: Exception, context: str) -> ServiceError:
        """Handle and transform various exceptions to ServiceError"""
        if isinstance(error, ServiceError):
            return error
        elif isinstance(error, ConfigurationError):
            return ValidationError(
                str(error), details={'field_errors': {error.field: [error.reason]}}, original_error=error
            )
        elif isinstance(error, InvalidStatusError):
            return ValidationError(
                str(error), details={'allowed': error.allowed}, original_error=error
            )
        elif isinstance(error, DjangoValidationError):
            field_errors = error.message_dict if hasattr(error, 'error_dict') else {'__all__': error.messages}
            return ValidationError(str(error), details={'field_errors': field_errors}, original_error=error)
        elif isinstance(error, DatabaseError):
            self.log_error(f"Database error in {context}", error)
            return PersistenceError(f"Could not save changes ({context})", original_error=error)
        else:
            self.log_error(f"Unexpected error in {context}", error)
            return ServiceError(f"An unexpected error occurred: {str(error)}", original_error=error)


class CacheableService(BaseEcommerceService):
    """Service with Django cache helpers"""

    def __init__(self, cache_ttl: int = 300):
        super().__init__()
        self.cache_ttl = cache_ttl

    def get_cached_or_fetch(self, key: str, fetch_func: Callable[[], Any]) -> Any:
        """Get cached value or fetch using provided function"""
        cached = cache.get(key)
        if cached is not None:
            return cached

        result = fetch_func()
        cache.set(key, result, self.cache_ttl)
        return result

    def invalidate(self, key: str):
        cache.delete(key)
