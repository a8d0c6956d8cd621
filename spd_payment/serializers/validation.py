"""Field checks and normalization shared by the serializer and option parsing.

Every ``normalize_*`` function takes the raw value of a payment field and
returns the value in the form the SPD string needs, or raises a
``ValidationError`` subclass.
"""

import logging
import re
import unicodedata
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from spd_payment.exceptions import (
    FieldTooLongError,
    ForbiddenCharacterError,
    InvalidAmountError,
    InvalidCurrencyError,
    UnparseableDueDateError,
    ValidationError,
)

logger = logging.getLogger(__name__)

SEPARATOR = "*"
SYMBOL_MAX_LENGTH = 10
CENT = Decimal("0.01")

DUE_DATE_FORMATS = ("%Y%m%d", "%d.%m.%Y", "%d. %m. %Y", "%Y/%m/%d")

_CURRENCY = re.compile(r"^[A-Z]{3}$")
_SYMBOL = re.compile(r"^[0-9A-Za-z]+$")
_PRINTABLE_ASCII = re.compile(r"^[\x20-\x7e]*$")


def ensure_no_separator(field_name: str, value: str) -> None:
    """Raise ForbiddenCharacterError if ``value`` contains ``*``."""
    if SEPARATOR in value:
        raise ForbiddenCharacterError(field_name)


def normalize_text(field_name: str, value: Any) -> str | None:
    """Validate a free-text field (comment, internal id, payee name)."""
    if value is None:
        return None
    text = str(value)
    ensure_no_separator(field_name, text)
    if any(unicodedata.category(ch) == "Cc" for ch in text):
        raise ValidationError(f"Property {field_name} must be a single line of text.")
    return text


def to_ascii(field_name: str, text: str) -> str:
    """Strip diacritics so the output stays 7-bit clean.

    Characters without an ASCII base letter are rejected.
    """
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    if not _PRINTABLE_ASCII.match(stripped):
        raise ValidationError(
            f"Property {field_name} contains characters that cannot be written as ASCII."
        )
    if stripped != text:
        logger.debug("Transliterated %s to ASCII", field_name, extra={"field": field_name})
    return stripped


def truncate(field_name: str, text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, logging when data is lost."""
    if len(text) <= max_length:
        return text
    logger.warning(
        "Property %s is %d characters long, truncating to %d",
        field_name,
        len(text),
        max_length,
        extra={"field": field_name},
    )
    return text[:max_length]


def normalize_amount(value: Any) -> Decimal:
    """Convert an amount to a Decimal rounded half-up to whole cents.

    Floats go through ``str()`` so that ``5.355`` rounds to ``5.36``.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        amount = Decimal(value)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise InvalidAmountError(f"Amount must be a number, got {value!r}") from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite, got {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount cannot be negative, got {value!r}")
    try:
        amount = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise InvalidAmountError(f"Amount is too large, got {value!r}") from exc
    # -0 would be written as "-0.00"
    if amount.is_zero():
        amount = amount.copy_abs()
    return amount


def normalize_currency(value: Any) -> str:
    """Uppercase a currency and require an ISO 4217 style three-letter code."""
    if not isinstance(value, str):
        raise InvalidCurrencyError(f"Currency must be a string, got {value!r}")
    ensure_no_separator("currency", value)
    currency = value.strip().upper()
    if not _CURRENCY.match(currency):
        raise InvalidCurrencyError(f"Currency must be a three-letter code, got '{value}'")
    return currency


def normalize_symbol(field_name: str, value: Any) -> str | None:
    """Validate a variable, specific or constant symbol.

    Integers must be non-negative; strings must be alphanumeric. Either way
    the symbol is at most 10 characters long.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValidationError(f"Property {field_name} must be a number or a string.")
    if isinstance(value, int):
        if value < 0:
            raise ValidationError(f"Property {field_name} cannot be negative.")
        symbol = str(value)
    elif isinstance(value, str):
        ensure_no_separator(field_name, value)
        symbol = value.strip()
        if not _SYMBOL.match(symbol):
            raise ValidationError(f"Property {field_name} must be alphanumeric, got '{value}'")
    else:
        raise ValidationError(f"Property {field_name} must be a number or a string.")
    if len(symbol) > SYMBOL_MAX_LENGTH:
        raise FieldTooLongError(field_name, SYMBOL_MAX_LENGTH)
    return symbol


def normalize_repeat(value: Any) -> int | None:
    """Validate the number of days a failed payment is retried."""
    if value is None:
        return None
    if isinstance(value, str) and value.strip().isdigit():
        value = int(value)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValidationError(f"Property repeat must be a positive integer, got {value!r}")
    return value


def normalize_due_date(value: Any) -> date | None:
    """Interpret a due date given as a date, datetime or string."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise UnparseableDueDateError(f"Due date value ({value!r}) is not a date")

    text = value.strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    for fmt in DUE_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    raise UnparseableDueDateError(f"Due date value ({value}) cannot be interpreted as a date")


def normalize_flag(field_name: str, value: Any) -> bool:
    """Require a boolean flag; ``None`` means unset."""
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValidationError(f"Property {field_name} must be true or false, got {value!r}")
    return value
