"""Sample data generators."""

from spd_payment.generators.account import BankAccountGenerator
from spd_payment.generators.base import BaseGenerator
from spd_payment.generators.payment import PaymentGenerator

__all__ = ["BankAccountGenerator", "BaseGenerator", "PaymentGenerator"]
