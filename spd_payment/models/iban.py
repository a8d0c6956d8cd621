"""IBAN value types."""

import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from spd_payment.checksums import DOMESTIC_CHECKSUM_COUNTRIES, is_valid_domestic_account, verify_iban

# Two letters, two check digits, then 1-30 alphanumerics (max 34 in total).
LITERAL_IBAN_PATTERN = re.compile(r"^[A-Z]{2}[0-9]{2}[0-9A-Z]{1,30}$")
IBAN_MAX_LENGTH = 34


@runtime_checkable
class IbanLike(Protocol):
    """Anything that renders to an IBAN string and knows whether it is valid."""

    def as_string(self) -> str:
        ...

    def is_valid(self) -> bool:
        ...


@dataclass(frozen=True)
class Iban:
    """IBAN computed from a domestic bank account.

    Always 24 characters: country (2), check digits (2), bank code (4),
    account prefix (6) and account number (10), zero-padded.
    """

    country: str
    check_digits: str
    bank_code: str
    account_prefix: str
    account_number: str

    def as_string(self) -> str:
        return (
            f"{self.country}{self.check_digits}"
            f"{self.bank_code}{self.account_prefix}{self.account_number}"
        )

    def is_valid(self) -> bool:
        """Verify the mod-97 check digits and, for CZ/SK, the account checksum."""
        if not verify_iban(self.as_string()):
            return False
        if self.country in DOMESTIC_CHECKSUM_COUNTRIES:
            return is_valid_domestic_account(self.account_prefix, self.account_number)
        return True

    def grouped(self) -> str:
        """Return the printed form in groups of four, e.g. ``CZ55 3030 ...``."""
        text = self.as_string()
        return " ".join(text[i : i + 4] for i in range(0, len(text), 4))

    def __str__(self) -> str:
        return self.as_string()


@dataclass(frozen=True)
class LiteralIban:
    """IBAN supplied by the caller as a ready-made string.

    Only the structure is checked; the embedded check digits are trusted.
    """

    value: str

    @property
    def country(self) -> str:
        return self.value[:2]

    @property
    def check_digits(self) -> str:
        return self.value[2:4]

    def as_string(self) -> str:
        return self.value

    def is_valid(self) -> bool:
        return LITERAL_IBAN_PATTERN.fullmatch(self.value) is not None

    def __str__(self) -> str:
        return self.value
