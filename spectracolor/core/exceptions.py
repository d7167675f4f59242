from http import HTTPStatus

HTTP_400_BAD_REQUEST = HTTPStatus.BAD_REQUEST.value
HTTP_413_REQUEST_ENTITY_TOO_LARGE = HTTPStatus.REQUEST_ENTITY_TOO_LARGE.value
HTTP_422_UNPROCESSABLE_ENTITY = HTTPStatus.UNPROCESSABLE_ENTITY.value
HTTP_500_INTERNAL_SERVER_ERROR = HTTPStatus.INTERNAL_SERVER_ERROR.value

class AppException(Exception):
    """Base exception for the application."""
    def __init__(self, message: str, status_code: int = HTTP_400_BAD_REQUEST):
        self.message = message
        self.status_code = status_code
        super().__init__(message)

# Validation exceptions
class ValidationException(AppException):
    """Raised for validation errors."""
    def __init__(self, message: str = "Validation failed."):
        super().__init__(message, status_code=HTTP_422_UNPROCESSABLE_ENTITY)

class SpectrumValidationException(ValidationException):
    """Raised when spectral input does not hold enough usable data."""
    def __init__(self, message: str = "Spectrum validation failed."):
        super().__init__(message)

class GroupNotFoundException(SpectrumValidationException):
    """Raised when a requested group has no samples."""
    def __init__(self, group: int, available: list = None):
        message = f"Group {group} not found in spectral data."
        if available:
            message += f" Available groups: {', '.join(str(g) for g in available)}"
        super().__init__(message)

class RequestTooLargeException(AppException):
    """Raised when a request body exceeds the configured limit."""
    def __init__(self, size: int, limit: int):
        super().__init__(
            f"Request body of {size} bytes exceeds the limit of {limit} bytes.",
            status_code=HTTP_413_REQUEST_ENTITY_TOO_LARGE
        )

# Processing exceptions
class ConversionException(AppException):
    """Raised when no colour could be derived from valid spectral data."""
    def __init__(self, message: str = "Unable to convert spectrum to color"):
        super().__init__(message, status_code=HTTP_422_UNPROCESSABLE_ENTITY)

# Configuration exceptions
class ConfigurationException(AppException):
    """Raised for configuration errors."""
    def __init__(self, message: str = "Configuration error."):
        super().__init__(message, status_code=HTTP_500_INTERNAL_SERVER_ERROR)

class UnknownIlluminantException(ConfigurationException):
    """Raised when an illuminant key has no reference table."""
    def __init__(self, illuminant: str, supported: list = None):
        message = f"Unknown illuminant: '{illuminant}'"
        if supported:
            message += f". Supported illuminants: {', '.join(supported)}"
        super().__init__(message)

class UnknownObserverException(ConfigurationException):
    """Raised when an observer key has no colour-matching functions."""
    def __init__(self, observer: str, supported: list = None):
        message = f"Unknown observer: '{observer}'"
        if supported:
            message += f". Supported observers: {', '.join(supported)}"
        super().__init__(message)

class ReferenceTableException(ConfigurationException):
    """Raised when a reference table breaks its invariants."""
    def __init__(self, name: str, reason: str):
        super().__init__(f"Invalid reference table '{name}': {reason}")

class WhitePointException(ConfigurationException):
    """Raised when an illuminant integrates to a non-positive white point."""
    def __init__(self, illuminant: str, observer: str):
        super().__init__(
            f"White point of illuminant '{illuminant}' for the {observer} degree observer is not positive."
        )
