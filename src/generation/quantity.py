import math
import re
from decimal import ROUND_HALF_UP, Decimal

# Checked from the largest multiplier down; the empty suffix is the plain-integer fallback.
QUANTIFIERS = (
    ("G", 1000 ** 3),
    ("M", 1000 ** 2),
    ("k", 1000 ** 1),
    ("", 1000 ** 0),
)

# No whitespace, no digit-group underscores
_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

_CENTS = Decimal("0.01")


class InvalidQuantity(ValueError):
    """Raised when a quantity string such as '10k' cannot be parsed."""


def format_quantity(number: int) -> str:
    """
    Render a non-negative integer as a compact human string.

    Examples: 999 -> '999', 1000 -> '1.00k', 1005 -> '1.01k', 1_500_000 -> '1.50M'.
    Two fractional digits, rounded half up on the shortest decimal form of the quotient.

    :param number: The value to render (e.g. a record count or a file size in bytes).
    :return: The value with two fractional digits and a suffix, or the plain integer below 1000.
    """
    for suffix, multiplier in QUANTIFIERS:
        if not suffix:
            break
        value = number / multiplier
        if math.floor(value) > 0:
            rounded = Decimal(repr(value)).quantize(_CENTS, rounding=ROUND_HALF_UP)
            return f"{rounded}{suffix}"

    return str(number)


def parse_quantity(text: str) -> int:
    """
    Parse a quantity like '42', '10k' or '2.5M' into an integer.

    A trailing suffix letter multiplies the (possibly fractional) prefix; the
    product is truncated toward zero. Anything else must be a plain integer.

    :param text: The quantity string.
    :return: The parsed integer.
    :raises InvalidQuantity: On an empty string, a malformed number or an unknown suffix.
    """
    if not text:
        raise InvalidQuantity("empty quantity")

    last = text[-1]
    if last.isalpha():
        for suffix, multiplier in QUANTIFIERS:
            if suffix and suffix == last:
                prefix = text[:-1]
                if not _DECIMAL.fullmatch(prefix):
                    raise InvalidQuantity(f"invalid quantity: {text!r}")
                try:
                    return int(float(prefix) * multiplier)
                except OverflowError as exc:
                    raise InvalidQuantity(f"invalid quantity: {text!r}") from exc

    if not _INTEGER.fullmatch(text):
        raise InvalidQuantity(f"invalid quantity: {text!r}")
    return int(text)
