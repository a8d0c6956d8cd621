"""Czech/Slovak QR payment (SPD) strings and IBAN computation."""

from spd_payment.calculator import IbanCalculator
from spd_payment.exceptions import (
    ConfigurationError,
    FieldTooLongError,
    ForbiddenCharacterError,
    InvalidAccountFormatError,
    InvalidAmountError,
    InvalidCountryCodeError,
    InvalidCurrencyError,
    InvalidIbanError,
    MissingLibraryError,
    SpdPaymentError,
    UnknownOptionError,
    UnparseableDueDateError,
    ValidationError,
)
from spd_payment.models import BankAccountIdentifier, Iban, IbanLike, LiteralIban, PaymentOption
from spd_payment.payment import PaymentRecord
from spd_payment.serializers import PaymentSerializer

__version__ = "1.0.0"

__all__ = [
    "BankAccountIdentifier",
    "ConfigurationError",
    "FieldTooLongError",
    "ForbiddenCharacterError",
    "Iban",
    "IbanCalculator",
    "IbanLike",
    "InvalidAccountFormatError",
    "InvalidAmountError",
    "InvalidCountryCodeError",
    "InvalidCurrencyError",
    "InvalidIbanError",
    "LiteralIban",
    "MissingLibraryError",
    "PaymentOption",
    "PaymentRecord",
    "PaymentSerializer",
    "SpdPaymentError",
    "UnknownOptionError",
    "UnparseableDueDateError",
    "ValidationError",
    "__version__",
]
