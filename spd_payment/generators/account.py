"""Bank account generator producing checksum-valid CZ/SK accounts."""

import random
from typing import Iterator

from spd_payment.checksums import DOMESTIC_MODULUS, NUMBER_WEIGHTS, PREFIX_WEIGHTS
from spd_payment.generators.base import BaseGenerator
from spd_payment.models.account import BankAccountIdentifier


class BankAccountGenerator(BaseGenerator):
    """Generate synthetic domestic bank accounts.

    Prefix and number satisfy the weighted mod-11 checksum, so IBANs
    computed from them pass ``Iban.is_valid()``. About a quarter of the
    accounts carry a prefix.
    """

    BANK_CODES = {
        "CZ": {
            "0100": "Komerční banka",
            "0300": "ČSOB",
            "0600": "MONETA Money Bank",
            "0800": "Česká spořitelna",
            "2010": "Fio banka",
            "2700": "UniCredit Bank",
            "3030": "Air Bank",
            "5500": "Raiffeisenbank",
            "6210": "mBank",
        },
        "SK": {
            "0200": "Všeobecná úverová banka",
            "0900": "Slovenská sporiteľňa",
            "1100": "Tatra banka",
            "7500": "ČSOB SK",
            "8330": "Fio banka SK",
        },
    }

    PREFIX_RATE = 0.25

    def generate(self, country: str = "CZ") -> BankAccountIdentifier:
        """Generate a single account.

        Parameters
        ----------
        country : str
            ``"CZ"`` or ``"SK"``.

        Returns
        -------
        BankAccountIdentifier
            Generated account.
        """
        bank_code = random.choice(list(self.BANK_CODES[country]))
        prefix = ""
        if random.random() < self.PREFIX_RATE:
            prefix = self._checksum_digits(PREFIX_WEIGHTS, min_nonzero=1)
        return BankAccountIdentifier(
            account_number=self._checksum_digits(NUMBER_WEIGHTS, min_nonzero=2),
            bank_code=bank_code,
            account_prefix=prefix,
            country_code=country,
        )

    def generate_batch(self, count: int, country: str = "CZ") -> Iterator[BankAccountIdentifier]:
        """Generate ``count`` accounts."""
        for _ in range(count):
            yield self.generate(country)

    @staticmethod
    def _checksum_digits(weights: tuple[int, ...], min_nonzero: int) -> str:
        # The last weight is 1, so the final digit can always absorb the
        # remainder unless it would have to be 10.
        while True:
            head = [random.randint(0, 9) for _ in weights[:-1]]
            total = sum(d * w for d, w in zip(head, weights))
            last = -total % DOMESTIC_MODULUS
            if last == 10:
                continue
            digits = "".join(map(str, head + [last])).lstrip("0")
            if sum(1 for d in digits if d != "0") >= min_nonzero:
                return digits
