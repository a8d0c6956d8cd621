"""Pytest configuration and fixtures."""

import pytest

from spd_payment.calculator import IbanCalculator
from spd_payment.payment import PaymentRecord
from spd_payment.serializers import PaymentSerializer


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_iban() -> str:
    """IBAN of account 1325090010/3030."""
    return "CZ5530300000001325090010"


@pytest.fixture
def default_spd(sample_iban: str) -> str:
    """SPD string of a payment with no optional fields set."""
    return f"SPD*1.0*ACC:{sample_iban}*AM:0.00*CC:CZK*X-PER:7"


@pytest.fixture
def payment(sample_iban: str) -> PaymentRecord:
    """Payment to the sample IBAN with default values."""
    return PaymentRecord.from_iban(sample_iban)


@pytest.fixture
def calculator() -> IbanCalculator:
    return IbanCalculator()


@pytest.fixture
def serializer() -> PaymentSerializer:
    return PaymentSerializer()
