from rest_framework import status
from rest_framework.exceptions import APIException


class EcommerceBaseException(APIException):
    """Base exception for e-commerce module"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'An error occurred in the e-commerce system'
    default_code = 'ecommerce_error'


class OrderNotFoundException(EcommerceBaseException):
    """Exception raised when order is not found"""
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Order not found'
    default_code = 'order_not_found'


class InvalidOrderStatusException(EcommerceBaseException):
    """Exception raised for an unknown order or payment status"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid order status'
    default_code = 'invalid_status'


class InvalidSettingsException(EcommerceBaseException):
    """Exception raised when store settings are misconfigured"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Store settings are invalid'
    default_code = 'invalid_settings'


class OrderUpdateFailedException(EcommerceBaseException):
    """Exception raised when an order change could not be saved"""
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = 'Failed to update order, please retry'
    default_code = 'order_update_failed'
