"""Serializers that turn payment records into payment strings."""

from spd_payment.serializers.spd import PaymentSerializer, SpdFields

__all__ = ["PaymentSerializer", "SpdFields"]
