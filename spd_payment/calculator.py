"""IBAN calculation for numeric national bank identifiers."""

import logging
import re

from spd_payment.checksums import check_digits, verify_iban
from spd_payment.exceptions import (
    FieldTooLongError,
    ForbiddenCharacterError,
    InvalidAccountFormatError,
    InvalidCountryCodeError,
    InvalidIbanError,
)
from spd_payment.models.account import BankAccountIdentifier
from spd_payment.models.iban import IBAN_MAX_LENGTH, LITERAL_IBAN_PATTERN, Iban, LiteralIban

logger = logging.getLogger(__name__)

_COUNTRY = re.compile(r"^[A-Z]{2}$")


class IbanCalculator:
    """Compute IBANs per ISO 13616 for the CZ/SK account scheme.

    The BBAN is the bank code (4 digits), account prefix (6 digits) and
    account number (10 digits), each zero-padded. Any country whose national
    part follows the same purely numeric layout is supported.
    """

    BANK_CODE_WIDTH = 4
    PREFIX_WIDTH = 6
    NUMBER_WIDTH = 10

    def compute(self, identifier: BankAccountIdentifier) -> Iban:
        """Compute the IBAN of a bank account.

        Parameters
        ----------
        identifier : BankAccountIdentifier
            Domestic account to convert.

        Returns
        -------
        Iban
            IBAN with freshly computed check digits.

        Raises
        ------
        InvalidCountryCodeError
            If the country code is not two letters.
        InvalidAccountFormatError
            If a numeric part contains non-digits or exceeds its width.
        """
        country = self.normalize_country(identifier.country_code)
        bank_code = self._digits("bank_code", identifier.bank_code, self.BANK_CODE_WIDTH)
        prefix = self._digits(
            "account_prefix", identifier.account_prefix, self.PREFIX_WIDTH, required=False
        )
        number = self._digits("account_number", identifier.account_number, self.NUMBER_WIDTH)

        check = check_digits(bank_code + prefix + number, country)
        iban = Iban(
            country=country,
            check_digits=check,
            bank_code=bank_code,
            account_prefix=prefix,
            account_number=number,
        )
        logger.debug(
            "Computed IBAN %s for account %s", iban, identifier, extra={"iban": iban.as_string()}
        )
        return iban

    @staticmethod
    def from_literal_iban(value: str) -> LiteralIban:
        """Wrap a ready-made IBAN string without recomputing it.

        Spaces are removed and letters uppercased. The structure is checked
        but the check digits are not verified.
        """
        if "*" in value:
            raise ForbiddenCharacterError("iban")
        text = value.replace(" ", "").upper()
        if len(text) > IBAN_MAX_LENGTH:
            raise FieldTooLongError("iban", IBAN_MAX_LENGTH)
        if LITERAL_IBAN_PATTERN.fullmatch(text) is None:
            raise InvalidIbanError(f"'{value}' is not a structurally valid IBAN")
        return LiteralIban(text)

    @staticmethod
    def verify(value: str) -> bool:
        """Return True if an IBAN string passes the generic mod-97 check."""
        return verify_iban(value.replace(" ", "").upper())

    @staticmethod
    def normalize_country(country_code: str) -> str:
        country = str(country_code).strip().upper()
        if not _COUNTRY.match(country):
            raise InvalidCountryCodeError(
                f"Country code must be two letters, got '{country_code}'"
            )
        return country

    @staticmethod
    def _digits(name: str, value: str, width: int, required: bool = True) -> str:
        if value == "" and not required:
            return "0" * width
        if not value.isascii() or not value.isdigit():
            raise InvalidAccountFormatError(f"{name} must contain digits only, got '{value}'")
        if len(value) > width:
            raise InvalidAccountFormatError(
                f"{name} must have at most {width} digits, got '{value}'"
            )
        return value.zfill(width)
