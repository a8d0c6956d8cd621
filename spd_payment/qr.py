"""QR image rendering for SPD strings.

Image encoding is delegated to a provider that receives the exact SPD string.
The default provider uses the optional ``qrcode`` library
(``pip install spd-payment[qr]``).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Protocol

from spd_payment.config import QrImageConfig
from spd_payment.exceptions import MissingLibraryError
from spd_payment.serializers.spd import PaymentSerializer

if TYPE_CHECKING:
    from spd_payment.payment import PaymentRecord

logger = logging.getLogger(__name__)


class QrImageProvider(Protocol):
    """Encodes a text payload into a renderable image object."""

    def encode(self, text: str) -> Any:
        ...


class QrcodeImageProvider:
    """QR image provider backed by the ``qrcode`` library."""

    def __init__(self, config: QrImageConfig | None = None) -> None:
        """Initialize the provider.

        Parameters
        ----------
        config : QrImageConfig | None
            Error correction, module size, border and colors.
        """
        self.config = config or QrImageConfig()

    def encode(self, text: str) -> Any:
        """Encode ``text`` and return a ``qrcode`` image (PIL backed)."""
        try:
            import qrcode
        except ImportError as exc:
            raise MissingLibraryError(
                "Library qrcode is not installed, install spd-payment[qr] to render images"
            ) from exc

        qr = qrcode.QRCode(
            version=1,
            error_correction=getattr(
                qrcode.constants, f"ERROR_CORRECT_{self.config.error_correction}"
            ),
            box_size=self.config.box_size,
            border=self.config.border,
        )
        qr.add_data(text)
        qr.make(fit=True)
        logger.debug("Encoded QR code version %s for %d characters", qr.version, len(text))
        return qr.make_image(
            fill_color=self.config.fill_color, back_color=self.config.back_color
        )


def render_qr(
    record: PaymentRecord,
    provider: QrImageProvider | None = None,
    serializer: PaymentSerializer | None = None,
) -> Any:
    """Serialize a payment record and encode the SPD string as a QR image.

    Parameters
    ----------
    record : PaymentRecord
        Payment to render.
    provider : QrImageProvider | None
        Image provider; defaults to ``QrcodeImageProvider``.
    serializer : PaymentSerializer | None
        Serializer to use; defaults to ``PaymentSerializer``.

    Returns
    -------
    Any
        Image object returned by the provider.
    """
    text = (serializer or PaymentSerializer()).serialize(record)
    return (provider or QrcodeImageProvider()).encode(text)
