"""Custom exception hierarchy for spd-payment."""


class SpdPaymentError(Exception):
    """Base exception for all spd-payment errors."""


class ValidationError(SpdPaymentError):
    """Raised when a payment field or account value is invalid."""


class ForbiddenCharacterError(ValidationError):
    """Raised when a field contains the ``*`` field separator."""

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(
            f"Properties cannot contain asterisk (*). Property {field_name} contains it."
        )


class InvalidIbanError(ValidationError):
    """Raised when an IBAN is malformed or reports itself invalid."""


class InvalidCountryCodeError(ValidationError):
    """Raised when a country code is not two ASCII letters."""


class InvalidAccountFormatError(ValidationError):
    """Raised when a bank code, prefix or account number is malformed."""


class InvalidAmountError(ValidationError):
    """Raised when an amount is negative, non-finite or not a number."""


class InvalidCurrencyError(ValidationError):
    """Raised when a currency is not a three-letter code."""


class FieldTooLongError(ValidationError):
    """Raised when a field exceeds its maximum length."""

    def __init__(self, field_name: str, max_length: int) -> None:
        self.field_name = field_name
        self.max_length = max_length
        super().__init__(f"Property {field_name} is longer than {max_length} characters.")


class UnparseableDueDateError(ValidationError):
    """Raised when a due date cannot be interpreted as a calendar date."""


class ConfigurationError(SpdPaymentError):
    """Raised when configuration is invalid or missing."""


class UnknownOptionError(ConfigurationError):
    """Raised when an option map contains an unrecognized key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The property '{key}' is not valid")


class MissingLibraryError(SpdPaymentError):
    """Raised when an optional third-party library is not installed."""
