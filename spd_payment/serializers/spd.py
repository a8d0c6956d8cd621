"""Serializer for the Short Payment Descriptor (SPD) format."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import TYPE_CHECKING

from spd_payment.exceptions import InvalidIbanError
from spd_payment.serializers.validation import (
    SEPARATOR,
    ensure_no_separator,
    normalize_amount,
    normalize_currency,
    normalize_due_date,
    normalize_flag,
    normalize_repeat,
    normalize_symbol,
    normalize_text,
    to_ascii,
    truncate,
)

if TYPE_CHECKING:
    from spd_payment.payment import PaymentRecord

logger = logging.getLogger(__name__)

HEADER = "SPD*1.0"
COMMENT_MAX_LENGTH = 60


@dataclass(frozen=True)
class SpdFields:
    """Validated, fully formatted snapshot of a payment record."""

    iban: str
    amount: Decimal
    currency: str
    repeat: int | None
    comment: str | None
    internal_id: str | None
    variable_symbol: str | None
    specific_symbol: str | None
    constant_symbol: str | None
    payee_name: str | None
    due_date: date | None
    instant_payment: bool


class PaymentSerializer:
    """Render payment records as SPD strings.

    Fields are written in a fixed order::

        SPD*1.0*ACC:<iban>*AM:<amount>*CC:<currency>*X-PER:<n>
        [*MSG:][*X-ID:][*X-VS:][*X-SS:][*X-KS:][*RN:][*DT:][*PT:IP]

    The whole record is validated before any output is built, so a failure
    never yields a partial string.
    """

    def serialize(self, record: PaymentRecord) -> str:
        """Serialize a payment record.

        Parameters
        ----------
        record : PaymentRecord
            Payment to render. It is not modified.

        Returns
        -------
        str
            SPD string without a trailing separator.

        Raises
        ------
        ValidationError
            If any field is invalid; see ``spd_payment.exceptions``.
        """
        fields = self.snapshot(record)
        result = SEPARATOR.join(self._tokens(fields))
        logger.debug("Serialized SPD payment for %s", fields.iban, extra={"iban": fields.iban})
        return result

    def snapshot(self, record: PaymentRecord) -> SpdFields:
        """Validate a record and capture its formatted field values."""
        iban = record.resolve_iban()
        iban_text = iban.as_string().replace(" ", "").upper()
        ensure_no_separator("iban", iban_text)

        comment = normalize_text("comment", record.comment)
        internal_id = normalize_text("internal_id", record.internal_id)
        payee_name = normalize_text("payee_name", record.payee_name)

        fields = SpdFields(
            iban=iban_text,
            amount=normalize_amount(record.amount),
            currency=normalize_currency(record.currency),
            repeat=normalize_repeat(record.repeat),
            comment=self._comment(comment),
            internal_id=self._ascii("internal_id", internal_id),
            variable_symbol=normalize_symbol("variable_symbol", record.variable_symbol),
            specific_symbol=normalize_symbol("specific_symbol", record.specific_symbol),
            constant_symbol=normalize_symbol("constant_symbol", record.constant_symbol),
            payee_name=self._ascii("payee_name", payee_name),
            due_date=normalize_due_date(record.due_date),
            instant_payment=normalize_flag("instant_payment", record.instant_payment),
        )

        is_valid = getattr(iban, "is_valid", None)
        if callable(is_valid) and not is_valid():
            raise InvalidIbanError(f"The IBAN {iban_text} is not a valid IBAN")
        return fields

    @staticmethod
    def _comment(text: str | None) -> str | None:
        if text is None:
            return None
        return truncate("comment", to_ascii("comment", text), COMMENT_MAX_LENGTH)

    @staticmethod
    def _ascii(field_name: str, text: str | None) -> str | None:
        return None if text is None else to_ascii(field_name, text)

    @staticmethod
    def _tokens(fields: SpdFields) -> list[str]:
        tokens = [
            HEADER,
            f"ACC:{fields.iban}",
            f"AM:{fields.amount:.2f}",
            f"CC:{fields.currency}",
        ]
        if fields.repeat is not None:
            tokens.append(f"X-PER:{fields.repeat}")
        if fields.comment is not None:
            tokens.append(f"MSG:{fields.comment}")
        if fields.internal_id is not None:
            tokens.append(f"X-ID:{fields.internal_id}")
        if fields.variable_symbol is not None:
            tokens.append(f"X-VS:{fields.variable_symbol}")
        if fields.specific_symbol is not None:
            tokens.append(f"X-SS:{fields.specific_symbol}")
        if fields.constant_symbol is not None:
            tokens.append(f"X-KS:{fields.constant_symbol}")
        if fields.payee_name is not None:
            tokens.append(f"RN:{fields.payee_name}")
        if fields.due_date is not None:
            tokens.append(f"DT:{fields.due_date:%Y%m%d}")
        if fields.instant_payment:
            tokens.append("PT:IP")
        return tokens
