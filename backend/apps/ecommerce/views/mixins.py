"""
View mixins for e-commerce functionality
"""

from ..domain.exceptions import ConfigurationError
from ..exceptions import (
    EcommerceBaseException,
    InvalidOrderStatusException,
    InvalidSettingsException,
    OrderNotFoundException,
    OrderUpdateFailedException,
)
from ..services.base import NotFoundError, PersistenceError, ServiceError, ValidationError


class ServiceErrorMixin:
    """Turns service layer errors into API errors"""
    
    validation_exception_class = EcommerceBaseException
    
    def raise_api_error(self, error: ServiceError):
        if isinstance(error, NotFoundError):
            raise OrderNotFoundException(error.message)
        if isinstance(error, PersistenceError):
            raise OrderUpdateFailedException()
        if isinstance(error, ValidationError):
            detail = {'detail': error.message}
            detail.update(error.details)
            if isinstance(error.original_error, ConfigurationError):
                raise InvalidSettingsException(detail)
            raise self.validation_exception_class(detail)
        raise EcommerceBaseException(error.message)


class OrderErrorMixin(ServiceErrorMixin):
    validation_exception_class = InvalidOrderStatusException


class SettingsErrorMixin(ServiceErrorMixin):
    validation_exception_class = InvalidSettingsException
