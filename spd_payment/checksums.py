"""Check-digit arithmetic for IBANs and Czech/Slovak domestic accounts.

All functions work on decimal strings so that numerals of any length can be
reduced with machine-word arithmetic only.
"""

import re

IBAN_MODULUS = 97
DOMESTIC_MODULUS = 11

# Weights of the domestic account checksum, applied to zero-padded digits.
PREFIX_WEIGHTS = (10, 5, 8, 4, 2, 1)
NUMBER_WEIGHTS = (6, 3, 7, 9, 10, 5, 8, 4, 2, 1)

# Countries that share the CZ/SK domestic account scheme.
DOMESTIC_CHECKSUM_COUNTRIES = frozenset({"CZ", "SK"})

_ALNUM = re.compile(r"[0-9A-Z]+")


def letter_numeral(letter: str) -> str:
    """Return the IBAN numeral of an uppercase letter (A=10 ... Z=35)."""
    return str(ord(letter) - ord("A") + 10)


def to_numeral(text: str) -> str:
    """Replace every letter in ``text`` with its IBAN numeral."""
    return "".join(letter_numeral(ch) if ch.isalpha() else ch for ch in text)


def mod97(numeral: str) -> int:
    """Reduce a decimal numeral of arbitrary length modulo 97.

    Parameters
    ----------
    numeral : str
        String of ASCII digits.

    Returns
    -------
    int
        ``int(numeral) % 97`` computed one digit at a time.
    """
    running = 0
    for digit in numeral:
        running = (running * 10 + int(digit)) % IBAN_MODULUS
    return running


def check_digits(bban: str, country: str) -> str:
    """Compute the two IBAN check digits for a BBAN and country code."""
    remainder = mod97(to_numeral(bban + country) + "00")
    return f"{98 - remainder:02d}"


def verify_iban(iban: str) -> bool:
    """Verify the ISO 13616 mod-97 checksum of a normalized IBAN string."""
    if len(iban) < 5 or not _ALNUM.fullmatch(iban):
        return False
    rearranged = iban[4:] + iban[:4]
    return mod97(to_numeral(rearranged)) == 1


def weighted_mod11(digits: str, weights: tuple[int, ...]) -> bool:
    """Check a zero-padded digit string against a weighted mod-11 checksum."""
    padded = digits.zfill(len(weights))
    if len(padded) != len(weights) or not padded.isdigit():
        return False
    total = sum(int(d) * w for d, w in zip(padded, weights))
    return total % DOMESTIC_MODULUS == 0


def is_valid_domestic_account(prefix: str, number: str) -> bool:
    """Validate a Czech/Slovak account prefix and number.

    The number must contain at least two non-zero digits.
    """
    if sum(1 for d in number if d != "0") < 2:
        return False
    return weighted_mod11(prefix, PREFIX_WEIGHTS) and weighted_mod11(number, NUMBER_WEIGHTS)
