from decimal import Decimal
from typing import Union

CENTS_PER_DOLLAR = 100
MAX_PRICE_CENTS = 2**31 - 1
MAX_PRICE_DOLLARS = Decimal(MAX_PRICE_CENTS) / CENTS_PER_DOLLAR


def dollars_to_cents(amount: Union[Decimal, int, str]) -> int:
    # int() on a Decimal truncates toward zero: $10.999 -> 1099
    return int(Decimal(str(amount)) * CENTS_PER_DOLLAR)


def cents_to_dollars(cents: int) -> Union[int, float]:
    dollars, remainder = divmod(cents, CENTS_PER_DOLLAR)
    if remainder == 0:
        return dollars
    return float(Decimal(cents) / CENTS_PER_DOLLAR)
