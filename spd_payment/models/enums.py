"""Enumeration types for payment options."""

from enum import Enum


class PaymentOption(str, Enum):
    """Recognized keys of a payment option map."""

    VARIABLE_SYMBOL = "variableSymbol"
    SPECIFIC_SYMBOL = "specificSymbol"
    CONSTANT_SYMBOL = "constantSymbol"
    CURRENCY = "currency"
    COMMENT = "comment"
    REPEAT = "repeat"
    INTERNAL_ID = "internalId"
    DUE_DATE = "dueDate"
    AMOUNT = "amount"
    PAYEE_NAME = "payeeName"
    INSTANT_PAYMENT = "instantPayment"
    COUNTRY = "country"
