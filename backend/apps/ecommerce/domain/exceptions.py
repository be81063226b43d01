# apps/ecommerce/domain/exceptions.py

"""
Domain-level errors. These carry no HTTP semantics; the service and API
layers translate them.
"""


class DomainError(Exception):
    """Base class for all domain errors"""
    pass


class ConfigurationError(DomainError):
    """Raised when store settings cannot produce a meaningful fee"""
    
    def __init__(self, field: str, value, reason: str):
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid store setting {field}={value!r}: {reason}")


class InvalidStatusError(DomainError):
    """Raised when a value is not a known order or payment status"""
    
    def __init__(self, kind: str, value, allowed):
        self.kind = kind
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unknown {kind} {value!r}. Expected one of: {', '.join(self.allowed)}"
        )
