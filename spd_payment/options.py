"""Bulk configuration of payment records from option maps."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from functools import partial
from typing import TYPE_CHECKING, Any, Callable, Mapping

from spd_payment.calculator import IbanCalculator
from spd_payment.exceptions import ConfigurationError, UnknownOptionError
from spd_payment.models.enums import PaymentOption
from spd_payment.serializers.validation import (
    normalize_amount,
    normalize_currency,
    normalize_due_date,
    normalize_flag,
    normalize_repeat,
    normalize_symbol,
    normalize_text,
)

if TYPE_CHECKING:
    from spd_payment.payment import PaymentRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OptionSpec:
    """How one option key maps onto a payment record attribute."""

    attribute: str
    coerce: Callable[[Any], Any]
    requires_account: bool = False


OPTION_TABLE: dict[PaymentOption, OptionSpec] = {
    PaymentOption.VARIABLE_SYMBOL: OptionSpec(
        "variable_symbol", partial(normalize_symbol, "variable_symbol")
    ),
    PaymentOption.SPECIFIC_SYMBOL: OptionSpec(
        "specific_symbol", partial(normalize_symbol, "specific_symbol")
    ),
    PaymentOption.CONSTANT_SYMBOL: OptionSpec(
        "constant_symbol", partial(normalize_symbol, "constant_symbol")
    ),
    PaymentOption.CURRENCY: OptionSpec("currency", normalize_currency),
    PaymentOption.COMMENT: OptionSpec("comment", partial(normalize_text, "comment")),
    PaymentOption.REPEAT: OptionSpec("repeat", normalize_repeat),
    PaymentOption.INTERNAL_ID: OptionSpec("internal_id", partial(normalize_text, "internal_id")),
    PaymentOption.DUE_DATE: OptionSpec("due_date", normalize_due_date),
    PaymentOption.AMOUNT: OptionSpec("amount", normalize_amount),
    PaymentOption.PAYEE_NAME: OptionSpec("payee_name", partial(normalize_text, "payee_name")),
    PaymentOption.INSTANT_PAYMENT: OptionSpec(
        "instant_payment", partial(normalize_flag, "instant_payment")
    ),
    PaymentOption.COUNTRY: OptionSpec(
        "account", IbanCalculator.normalize_country, requires_account=True
    ),
}

_unmapped = set(PaymentOption) - set(OPTION_TABLE)
if _unmapped:
    raise ConfigurationError(f"Options without a setter: {sorted(o.value for o in _unmapped)}")


def resolve_option(key: str | PaymentOption) -> PaymentOption:
    """Return the PaymentOption for ``key`` or raise UnknownOptionError."""
    try:
        return PaymentOption(key)
    except ValueError:
        raise UnknownOptionError(str(key)) from None


def apply_options(record: PaymentRecord, options: Mapping[str, Any]) -> None:
    """Apply an option map to a payment record as a single batch.

    All keys are resolved and all values validated before any attribute is
    assigned, so a failing batch leaves ``record`` unchanged.

    Parameters
    ----------
    record : PaymentRecord
        Record to update in place.
    options : Mapping[str, Any]
        Option names (see ``PaymentOption``) mapped to values.

    Raises
    ------
    UnknownOptionError
        If a key is not a recognized option.
    ValidationError
        If a value is invalid for its option.
    ConfigurationError
        If ``country`` is given for a record without a bank account.
    """
    resolved = [(resolve_option(key), value) for key, value in options.items()]

    updates: dict[str, Any] = {}
    for option, value in resolved:
        spec = OPTION_TABLE[option]
        coerced = spec.coerce(value)
        if spec.requires_account:
            if record.account is None:
                raise ConfigurationError(
                    f"Option '{option.value}' needs a payment built from a bank account"
                )
            coerced = replace(record.account, country_code=coerced)
        updates[spec.attribute] = coerced

    for attribute, value in updates.items():
        setattr(record, attribute, value)
    applied = sorted(updates)
    logger.debug("Applied payment options: %s", ", ".join(applied), extra={"options": applied})
