#!/usr/bin/env python3
"""Build an SPD payment string and optionally save it as a QR image.

Examples::

    python scripts/spd_string.py --account 1325090010/3030 --amount 500 --vs 123
    python scripts/spd_string.py --iban CZ5530300000001325090010 --qr-output pay.png
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from spd_payment.config import SpdPaymentConfig
from spd_payment.exceptions import SpdPaymentError
from spd_payment.logging import setup_logging
from spd_payment.models import BankAccountIdentifier, PaymentOption
from spd_payment.payment import PaymentRecord
from spd_payment.qr import QrcodeImageProvider, render_qr

logger = logging.getLogger("spd_payment.scripts.spd_string")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a Czech/Slovak QR payment string")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--iban", type=str, help="Payee IBAN")
    target.add_argument(
        "--account",
        type=str,
        help="Payee account number, or the full '[prefix-]number/bank' form",
    )
    parser.add_argument("--bank", type=str, help="Bank code (when --account has no /bank)")
    parser.add_argument("--prefix", type=str, default="", help="Account prefix")
    parser.add_argument("--country", type=str, default=None, help="Account country (default: CZ)")
    parser.add_argument("--amount", type=str, default=None, help="Amount, e.g. 500 or 12.50")
    parser.add_argument("--currency", type=str, default=None, help="Currency code")
    parser.add_argument("--vs", type=str, default=None, help="Variable symbol")
    parser.add_argument("--ss", type=str, default=None, help="Specific symbol")
    parser.add_argument("--ks", type=str, default=None, help="Constant symbol")
    parser.add_argument("--message", type=str, default=None, help="Message for the payee")
    parser.add_argument("--internal-id", type=str, default=None, help="Payer internal id")
    parser.add_argument("--payee-name", type=str, default=None, help="Payee name")
    parser.add_argument("--due-date", type=str, default=None, help="Due date, e.g. 2025-01-31")
    parser.add_argument("--repeat", type=int, default=None, help="Days to retry a failed payment")
    parser.add_argument("--instant", action="store_true", help="Request an instant payment")
    parser.add_argument("--qr-output", type=Path, default=None, help="Write a PNG QR code here")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: INFO)")
    return parser


def collect_options(args: argparse.Namespace) -> dict:
    """Map CLI arguments onto payment option names."""
    values = {
        PaymentOption.AMOUNT: args.amount,
        PaymentOption.CURRENCY: args.currency,
        PaymentOption.VARIABLE_SYMBOL: args.vs,
        PaymentOption.SPECIFIC_SYMBOL: args.ss,
        PaymentOption.CONSTANT_SYMBOL: args.ks,
        PaymentOption.COMMENT: args.message,
        PaymentOption.INTERNAL_ID: args.internal_id,
        PaymentOption.PAYEE_NAME: args.payee_name,
        PaymentOption.DUE_DATE: args.due_date,
        PaymentOption.REPEAT: args.repeat,
        PaymentOption.INSTANT_PAYMENT: args.instant or None,
    }
    return {option.value: value for option, value in values.items() if value is not None}


def build_record(args: argparse.Namespace, config: SpdPaymentConfig) -> PaymentRecord:
    options = collect_options(args)
    if args.iban:
        return PaymentRecord.from_iban(args.iban, options=options, defaults=config.defaults)

    country = args.country or config.defaults.country
    if "/" in args.account:
        account = BankAccountIdentifier.parse(args.account, country_code=country)
    else:
        if not args.bank:
            raise SpdPaymentError("--bank is required when --account has no bank code")
        account = BankAccountIdentifier(
            account_number=args.account,
            bank_code=args.bank,
            account_prefix=args.prefix,
            country_code=country,
        )
    return PaymentRecord.from_account(
        account.account_number,
        account.bank_code,
        account.account_prefix,
        country=account.country_code,
        options=options,
        defaults=config.defaults,
    )


def main() -> int:
    args = build_parser().parse_args()
    config = SpdPaymentConfig.from_env()
    setup_logging(level=args.log_level or config.log_level, format_type=config.log_format)

    try:
        record = build_record(args, config)
        print(record.to_spd())
        if args.qr_output:
            image = render_qr(record, provider=QrcodeImageProvider(config.qr))
            image.save(str(args.qr_output))
            logger.info("Saved QR code to %s", args.qr_output)
    except SpdPaymentError as exc:
        logger.error("%s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
