"""Payment record model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Any, Mapping

from spd_payment.calculator import IbanCalculator
from spd_payment.config import DEFAULT_CURRENCY, DEFAULT_REPEAT, PaymentDefaults
from spd_payment.exceptions import ConfigurationError
from spd_payment.models.account import BankAccountIdentifier
from spd_payment.models.iban import Iban, IbanLike, LiteralIban
from spd_payment.options import apply_options
from spd_payment.serializers.spd import PaymentSerializer


@dataclass
class PaymentRecord:
    """Payment instruction rendered into an SPD string.

    A record carries either a ready-made ``iban`` or a domestic ``account``
    from which the IBAN is computed on first use and cached. Other fields can
    be assigned one by one or in bulk with ``configure()``.

    Symbols accept integers or short alphanumeric strings; ``due_date``
    accepts a date, datetime or date string; ``repeat`` is the number of days
    a failed payment is retried (``None`` omits it from the output).
    """

    iban: IbanLike | str | None = None
    account: BankAccountIdentifier | None = None
    amount: Decimal | float | int | str = Decimal("0")
    currency: str = DEFAULT_CURRENCY
    variable_symbol: int | str | None = None
    specific_symbol: int | str | None = None
    constant_symbol: int | str | None = None
    comment: str | None = None
    repeat: int | None = DEFAULT_REPEAT
    internal_id: str | None = None
    due_date: date | str | None = None
    payee_name: str | None = None
    instant_payment: bool = False
    _derived: tuple[BankAccountIdentifier, Iban] | None = field(
        default=None, init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        if self.iban is None and self.account is None:
            raise ConfigurationError("A payment needs either an IBAN or a bank account")
        if self.iban is not None and self.account is not None:
            raise ConfigurationError("A payment takes an IBAN or a bank account, not both")

    @classmethod
    def from_account(
        cls,
        account_number: str | int,
        bank_code: str | int,
        account_prefix: str | int = "",
        country: str | None = None,
        options: Mapping[str, Any] | None = None,
        defaults: PaymentDefaults | None = None,
    ) -> PaymentRecord:
        """Create a payment to a domestic bank account.

        Parameters
        ----------
        account_number : str | int
            Account number, up to 10 digits.
        bank_code : str | int
            Bank code, up to 4 digits.
        account_prefix : str | int
            Optional account prefix, up to 6 digits.
        country : str | None
            Country code; falls back to ``defaults.country``.
        options : Mapping[str, Any] | None
            Option map applied with ``configure()``.
        defaults : PaymentDefaults | None
            Default currency, repeat and country.

        Returns
        -------
        PaymentRecord
            New payment record.
        """
        defaults = defaults or PaymentDefaults()
        account = BankAccountIdentifier(
            account_number=account_number,
            bank_code=bank_code,
            account_prefix=account_prefix,
            country_code=country or defaults.country,
        )
        record = cls(account=account, currency=defaults.currency, repeat=defaults.repeat)
        if options:
            record.configure(options)
        return record

    @classmethod
    def from_iban(
        cls,
        iban: IbanLike | str,
        options: Mapping[str, Any] | None = None,
        defaults: PaymentDefaults | None = None,
    ) -> PaymentRecord:
        """Create a payment to an IBAN given as a string or IBAN object."""
        defaults = defaults or PaymentDefaults()
        if isinstance(iban, str):
            iban = IbanCalculator.from_literal_iban(iban)
        record = cls(iban=iban, currency=defaults.currency, repeat=defaults.repeat)
        if options:
            record.configure(options)
        return record

    def configure(self, options: Mapping[str, Any]) -> PaymentRecord:
        """Apply an option map atomically and return the record."""
        apply_options(self, options)
        return self

    def resolve_iban(self) -> IbanLike:
        """Return the IBAN, computing and caching it for account payments."""
        if self.iban is not None:
            if isinstance(self.iban, str):
                return LiteralIban(self.iban.replace(" ", "").upper())
            return self.iban
        if self.account is None:
            raise ConfigurationError("A payment needs either an IBAN or a bank account")
        if self._derived is None or self._derived[0] != self.account:
            self._derived = (self.account, IbanCalculator().compute(self.account))
        return self._derived[1]

    def to_spd(self) -> str:
        """Serialize the record into an SPD string."""
        return PaymentSerializer().serialize(self)
