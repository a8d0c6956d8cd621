"""Configuration management for spd-payment."""

from dataclasses import dataclass, field

from spd_payment.exceptions import ConfigurationError

DEFAULT_CURRENCY = "CZK"
DEFAULT_REPEAT = 7
DEFAULT_COUNTRY = "CZ"

ERROR_CORRECTION_LEVELS = ("L", "M", "Q", "H")


@dataclass
class PaymentDefaults:
    """Values applied to new payment records."""

    currency: str = DEFAULT_CURRENCY
    repeat: int = DEFAULT_REPEAT
    country: str = DEFAULT_COUNTRY


@dataclass
class QrImageConfig:
    """QR image rendering configuration."""

    error_correction: str = "M"
    box_size: int = 10
    border: int = 4
    fill_color: str = "black"
    back_color: str = "white"

    def __post_init__(self) -> None:
        self.error_correction = self.error_correction.upper()
        if self.error_correction not in ERROR_CORRECTION_LEVELS:
            raise ConfigurationError(
                f"Unknown QR error correction level: {self.error_correction}"
            )


@dataclass
class SpdPaymentConfig:
    """Main configuration for spd-payment."""

    defaults: PaymentDefaults = field(default_factory=PaymentDefaults)
    qr: QrImageConfig = field(default_factory=QrImageConfig)
    log_level: str = "INFO"
    log_format: str = "standard"

    @classmethod
    def from_env(cls) -> "SpdPaymentConfig":
        """Create config from environment variables."""
        import os

        try:
            defaults = PaymentDefaults(
                currency=os.getenv("SPD_CURRENCY", DEFAULT_CURRENCY),
                repeat=int(os.getenv("SPD_REPEAT", str(DEFAULT_REPEAT))),
                country=os.getenv("SPD_COUNTRY", DEFAULT_COUNTRY),
            )

            qr = QrImageConfig(
                error_correction=os.getenv("SPD_QR_ERROR_CORRECTION", "M"),
                box_size=int(os.getenv("SPD_QR_BOX_SIZE", "10")),
                border=int(os.getenv("SPD_QR_BORDER", "4")),
            )
        except ValueError as exc:
            raise ConfigurationError(f"Invalid numeric setting: {exc}") from exc

        return cls(
            defaults=defaults,
            qr=qr,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "standard"),
        )
