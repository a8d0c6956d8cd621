"""Payment generator for sample SPD payments."""

import random
from datetime import timedelta
from decimal import Decimal
from typing import Iterator

from spd_payment.generators.account import BankAccountGenerator
from spd_payment.generators.base import BaseGenerator
from spd_payment.payment import PaymentRecord
from spd_payment.serializers.spd import COMMENT_MAX_LENGTH


class PaymentGenerator(BaseGenerator):
    """Generate synthetic payment records.

    Every generated record serializes successfully: accounts pass their
    checksums and text fields never contain the field separator.
    """

    CURRENCIES = {"CZ": "CZK", "SK": "EUR"}

    def __init__(self, seed: int | None = None, locale: str = "cs_CZ") -> None:
        super().__init__(seed, locale)
        self.accounts = BankAccountGenerator(seed=seed, locale=locale)

    def generate(self, country: str = "CZ") -> PaymentRecord:
        """Generate a single payment record.

        Parameters
        ----------
        country : str
            Country of the payee account.

        Returns
        -------
        PaymentRecord
            Generated payment.
        """
        record = PaymentRecord(
            account=self.accounts.generate(country),
            amount=Decimal(random.randint(100, 2_500_000)) / 100,
            currency=self.CURRENCIES[country],
        )
        record.variable_symbol = self.fake.numerify("##########").lstrip("0") or "1"
        if random.random() < 0.3:
            record.constant_symbol = random.choice(["0308", "0558", "1148"])
        if random.random() < 0.5:
            record.comment = self._clean(self.fake.sentence(nb_words=5))[:COMMENT_MAX_LENGTH]
        if random.random() < 0.3:
            record.internal_id = self.fake.bothify("INV-####-??").upper()
        if random.random() < 0.7:
            record.payee_name = self._clean(self.fake.company())
        if random.random() < 0.5:
            record.due_date = self.fake.date_between(
                start_date="today", end_date=timedelta(days=30)
            )
        record.instant_payment = random.random() < 0.2
        return record

    def generate_batch(self, count: int, country: str = "CZ") -> Iterator[PaymentRecord]:
        """Generate ``count`` payment records."""
        for _ in range(count):
            yield self.generate(country)

    @staticmethod
    def _clean(text: str) -> str:
        return text.replace("*", "").strip()
