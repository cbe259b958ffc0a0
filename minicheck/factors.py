
from math import prod
from typing import Dict, List

from .arbitrary import integer, nat
from .properties import Property, property


def decompose(n: int) -> List[int]:
    """Prime factors of ``n`` in ascending order, by trial division."""
    # 0 and 1 have no prime factors; keep them as their own single factor so
    # the product still reconstructs n.
    if n < 2:
        return [n]
    factors = []
    divisor = 2
    while divisor * divisor <= n:
        while n % divisor == 0:
            factors.append(divisor)
            n //= divisor
        divisor += 1
    if n > 1:
        factors.append(n)
    return factors


def _product_reconstructs(n: int) -> bool:
    return prod(decompose(n)) == n


def _product_has_two_factors(a: int, b: int) -> bool:
    return len(decompose(a * b)) >= 2


def _below_five(n: int) -> bool:
    return n < 5


SAMPLE_PROPERTIES: Dict[str, Property] = {
    "product_reconstructs": property(integer(0, 1000), _product_reconstructs),
    "product_has_two_factors": property(
        integer(2, 65536), integer(2, 65536), _product_has_two_factors
    ),
    # Falsifiable on purpose: nat(10) draws 5..10 about half the time.
    "small_naturals": property(nat(10), _below_five),
}
