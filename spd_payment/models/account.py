"""Bank account identifier model."""

import re
from dataclasses import dataclass

from spd_payment.config import DEFAULT_COUNTRY
from spd_payment.exceptions import InvalidAccountFormatError

# Domestic written form: [prefix-]number/bank, e.g. 19-2000145399/0800
WRITTEN_FORM = re.compile(r"^(?:(?P<prefix>\d{1,6})-)?(?P<number>\d{1,10})/(?P<bank>\d{1,4})$")


@dataclass(frozen=True)
class BankAccountIdentifier:
    """Domestic bank account as used by Czech and Slovak banks.

    - account_number: up to 10 digits
    - bank_code: up to 4 digits (e.g. 0800, 3030)
    - account_prefix: up to 6 digits, empty when the account has none
    - country_code: ISO 3166-1 alpha-2 code (default: ``"CZ"``)

    Integer values are accepted and stored as strings. Width and charset are
    checked by ``IbanCalculator.compute``.
    """

    account_number: str
    bank_code: str
    account_prefix: str = ""
    country_code: str = DEFAULT_COUNTRY

    def __post_init__(self) -> None:
        for name in ("account_number", "bank_code", "account_prefix", "country_code"):
            value = getattr(self, name)
            if value is None:
                value = ""
            object.__setattr__(self, name, str(value).strip())

    @classmethod
    def parse(cls, text: str, country_code: str = DEFAULT_COUNTRY) -> "BankAccountIdentifier":
        """Parse the domestic ``[prefix-]number/bank`` notation.

        Parameters
        ----------
        text : str
            Account in written form, e.g. ``"19-2000145399/0800"``.
        country_code : str
            Country of the account.

        Returns
        -------
        BankAccountIdentifier
            Parsed identifier.
        """
        match = WRITTEN_FORM.match(text.replace(" ", ""))
        if match is None:
            raise InvalidAccountFormatError(f"Cannot parse bank account '{text}'")
        return cls(
            account_number=match.group("number"),
            bank_code=match.group("bank"),
            account_prefix=match.group("prefix") or "",
            country_code=country_code,
        )

    def __str__(self) -> str:
        if self.account_prefix.strip("0"):
            return f"{self.account_prefix}-{self.account_number}/{self.bank_code}"
        return f"{self.account_number}/{self.bank_code}"
