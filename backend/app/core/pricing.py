import math
import re

NUMBER_PATTERN = re.compile(r"\d(?:[\d,. ]*\d)?", re.ASCII)
FRACTION_PATTERN = re.compile(r"\.\d{1,2}$")


def parse_price_amount(raw: str | None) -> int | None:
    """
    Whole-unit amount from a formatted price string.

    Only ASCII digits matter, so "₹75,999", "Rs. 75,999" and a mangled
    "â‚¹75,999" all give 75999. A trailing ".dd" fraction is dropped.
    """
    if not raw:
        return None

    text = raw.replace("\u00a0", " ").strip()

    tokens = NUMBER_PATTERN.findall(text)
    if not tokens:
        return None

    # longest run wins, first one on ties
    num = max(tokens, key=len)
    num = FRACTION_PATTERN.sub("", num)

    digits = re.sub(r"\D", "", num, flags=re.ASCII)
    if not digits:
        return None

    return int(digits)


def savings_percentage(reference_price: int, amount: int | None) -> int:
    if amount is None or not reference_price:
        return 0

    ratio = 100 * (reference_price - amount) / reference_price
    # half-up like the mobile client, not banker's rounding
    return math.floor(ratio + 0.5)
