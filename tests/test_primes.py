import pytest

from algosuite.primes import is_prime, prime_sieve


def test_primes_below_thirty():
    flags = prime_sieve(30)
    assert [i for i, flag in enumerate(flags) if flag] == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_sieve_length_matches_limit():
    assert len(prime_sieve(57)) == 57
    assert prime_sieve(0) == []


def test_zero_and_one_are_not_prime():
    flags = prime_sieve(2)
    assert flags == [False, False]


def test_multiples_of_primes_are_composite():
    limit = 500
    flags = prime_sieve(limit)
    for p, flag in enumerate(flags):
        if flag:
            assert not any(flags[m] for m in range(2 * p, limit, p))


def test_primes_have_no_small_divisor():
    flags = prime_sieve(300)
    primes = [p for p, flag in enumerate(flags) if flag]
    assert len(primes) == 62
    with_divisor = [p for p in primes if any(p % d == 0 for d in range(2, p))]
    assert with_divisor == []


def test_is_prime_agrees_with_sieve():
    flags = prime_sieve(200)
    assert [is_prime(n, 200) for n in range(200)] == flags


def test_is_prime_default_limit():
    assert is_prime(7919) is True
    assert is_prime(7917) is False


@pytest.mark.parametrize("n", [-1, 100, 150])
def test_is_prime_out_of_range(n):
    with pytest.raises(ValueError):
        is_prime(n, 100)


def test_negative_limit():
    with pytest.raises(ValueError):
        prime_sieve(-5)