from itertools import islice

from probetable.mersenne import MT19937


def test_default_seed_first_output():
    assert MT19937()() == 3499211612


def test_default_seed_ten_thousandth_output():
    gen = MT19937(5489)
    value = None
    for _ in range(10000):
        value = gen()
    assert value == 4123659995


def test_same_seed_same_stream():
    a = MT19937(42)
    b = MT19937(42)
    assert [a() for _ in range(1000)] == [b() for _ in range(1000)]


def test_different_seeds_differ():
    a = list(islice(MT19937(1), 20))
    b = list(islice(MT19937(2), 20))
    assert a != b
    assert len(set(a)) == 20


def test_outputs_are_32_bit():
    assert all(0 <= v < 2**32 for v in islice(MT19937(7), 2000))


def test_iter_matches_calls():
    gen = MT19937(123)
    expected = [gen() for _ in range(700)]
    assert list(islice(MT19937(123), 700)) == expected


def test_negative_seed_wraps_to_unsigned():
    a = MT19937(-1)
    b = MT19937(2**32 - 1)
    assert [a() for _ in range(10)] == [b() for _ in range(10)]


def test_seed_reduced_modulo_two_pow_32():
    a = MT19937(0)
    b = MT19937(2**32)
    assert [a() for _ in range(10)] == [b() for _ in range(10)]