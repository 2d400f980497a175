import math

import pytest

from keyscore.entropy import get_time_to_crack, pool_entropy_bits, pool_size, shannon_entropy_bits


def test_empty_password_has_zero_entropy():
    assert pool_entropy_bits("") == 0.0
    assert shannon_entropy_bits("") == 0.0
    assert pool_size("") == 1


def test_pool_size_sums_class_alphabets():
    assert pool_size("abc") == 26
    assert pool_size("aB") == 52
    assert pool_size("aB1") == 62
    assert pool_size("aB1!") == 94
    assert pool_size("!") == 32


def test_pool_entropy_lowercase_only():
    assert pool_entropy_bits("hello") == pytest.approx(5 * math.log2(26))
    assert pool_entropy_bits("hello") == pytest.approx(23.50, abs=0.01)


def test_pool_entropy_credits_full_class_for_one_symbol():
    # One "!" still adds the whole 32-symbol alphabet
    assert pool_entropy_bits("abcdefg!") == pytest.approx(8 * math.log2(58))


def test_pool_entropy_counts_utf8_bytes():
    assert pool_entropy_bits("é") == pytest.approx(2 * math.log2(32))


def test_shannon_single_symbol_is_zero():
    assert shannon_entropy_bits("aaaa") == 0.0


def test_shannon_scales_by_length():
    assert shannon_entropy_bits("ab") == pytest.approx(2.0)
    assert shannon_entropy_bits("abcd") == pytest.approx(8.0)
    assert shannon_entropy_bits("aabb") == pytest.approx(4.0)


def test_time_to_crack_bands():
    assert get_time_to_crack(0) == "instantly"
    assert get_time_to_crack(45) == "18 seconds"
    assert get_time_to_crack(10000) == "centuries"
