"""Value models for payment accounts and IBANs."""

from spd_payment.models.account import BankAccountIdentifier
from spd_payment.models.enums import PaymentOption
from spd_payment.models.iban import Iban, IbanLike, LiteralIban

__all__ = ["BankAccountIdentifier", "Iban", "IbanLike", "LiteralIban", "PaymentOption"]
