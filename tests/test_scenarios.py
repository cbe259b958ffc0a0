"""End-to-end scenarios over the bundled factorisation properties."""

from math import prod

import pytest

from minicheck import PropertyFailure, assert_property, integer, nat, property
from minicheck.factors import SAMPLE_PROPERTIES, decompose


def test_decompose_small_values():
    assert decompose(0) == [0]
    assert decompose(1) == [1]
    assert decompose(2) == [2]
    assert decompose(12) == [2, 2, 3]
    assert decompose(97) == [97]
    assert decompose(65536) == [2] * 16


def test_decompose_reconstructs_every_value_up_to_1000():
    for n in range(1001):
        assert prod(decompose(n)) == n


def test_product_reconstructs_never_fails():
    assert_property(
        property(integer(0, 1000), lambda n: prod(decompose(n)) == n),
        {"runCount": 50},
    )


def test_product_of_two_integers_has_two_factors():
    assert_property(
        property(integer(2, 65536), integer(2, 65536), lambda a, b: len(decompose(a * b)) >= 2),
        {"runCount": 20},
    )


def test_forced_failure_raises_with_known_seed():
    with pytest.raises(PropertyFailure, match="Property failed"):
        assert_property(property(nat(10), lambda n: n < 5), {"runCount": 100, "seed": 42})


def test_forced_failure_raises_with_fresh_seed():
    # (5/11) ** 100 chance of every draw landing below 5.
    with pytest.raises(PropertyFailure):
        assert_property(property(nat(10), lambda n: n < 5), {"runCount": 100})


def test_sample_property_registry():
    assert set(SAMPLE_PROPERTIES) == {
        "product_reconstructs",
        "product_has_two_factors",
        "small_naturals",
    }
    assert_property(SAMPLE_PROPERTIES["product_reconstructs"], {"runCount": 50})
    assert_property(SAMPLE_PROPERTIES["product_has_two_factors"], {"runCount": 20})
    with pytest.raises(PropertyFailure):
        assert_property(SAMPLE_PROPERTIES["small_naturals"], {"runCount": 100, "seed": 7})
