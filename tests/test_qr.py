"""Tests for QR image rendering."""

import sys
from unittest.mock import patch

import pytest

from spd_payment.config import QrImageConfig
from spd_payment.exceptions import ForbiddenCharacterError, MissingLibraryError
from spd_payment.payment import PaymentRecord
from spd_payment.qr import QrcodeImageProvider, render_qr


class _RecordingProvider:
    """Image provider that returns the payload it received."""

    def __init__(self) -> None:
        self.payloads: list[str] = []

    def encode(self, text: str) -> str:
        self.payloads.append(text)
        return f"image:{text}"


class TestRenderQr:
    """Tests for render_qr."""

    def test_passes_exact_spd_string(self, payment: PaymentRecord, default_spd: str) -> None:
        provider = _RecordingProvider()

        image = render_qr(payment, provider=provider)

        assert provider.payloads == [default_spd]
        assert image == f"image:{default_spd}"

    def test_validation_happens_before_encoding(self, payment: PaymentRecord) -> None:
        provider = _RecordingProvider()
        payment.comment = "a*b"

        with pytest.raises(ForbiddenCharacterError):
            render_qr(payment, provider=provider)
        assert provider.payloads == []


class TestQrcodeImageProvider:
    """Tests for the qrcode-backed provider."""

    def test_default_config(self) -> None:
        assert QrcodeImageProvider().config == QrImageConfig()

    def test_missing_library(self) -> None:
        with patch.dict(sys.modules, {"qrcode": None}):
            with pytest.raises(MissingLibraryError):
                QrcodeImageProvider().encode("SPD*1.0")

    def test_encode(self, payment: PaymentRecord) -> None:
        pytest.importorskip("qrcode")
        provider = QrcodeImageProvider(QrImageConfig(box_size=4, border=2))

        image = render_qr(payment, provider=provider)

        assert image.box_size == 4
        assert image.border == 2
        assert image.pixel_size > 0
