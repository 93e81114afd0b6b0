import math

import pytest

from algobox.number_theory import (
    factorial_iterative,
    factorial_recursive,
    gcd,
    is_armstrong,
    is_harshad,
    is_palindrome_number,
    is_perfect,
    is_prime,
    main,
    reverse_number,
    sieve,
    swap,
)


def test_armstrong_examples():
    assert is_armstrong(153) is True
    assert is_armstrong(123) is False


def test_single_digits_are_armstrong():
    assert all(is_armstrong(n) for n in range(10))


@pytest.mark.parametrize("n", [1, 12, 987, 43210, 700001])
def test_reverse_round_trip(n):
    if n % 10:
        assert reverse_number(reverse_number(n)) == n
    assert reverse_number(-n) == -reverse_number(n)


def test_reverse_drops_trailing_zeros():
    assert reverse_number(reverse_number(43210)) == 4321


@pytest.mark.parametrize("half", ["1", "12", "907", "5555"])
def test_mirrored_numbers_are_palindromes(half):
    assert is_palindrome_number(int(half + half[::-1]))
    assert is_palindrome_number(int(half + "3" + half[::-1]))


def test_non_palindrome():
    assert not is_palindrome_number(12)


def test_factorial_example():
    assert factorial_iterative(7) == 5040
    assert factorial_recursive(7) == 5040


@pytest.mark.parametrize("n", range(0, 25))
def test_factorials_agree(n):
    assert factorial_iterative(n) == factorial_recursive(n) == math.factorial(n)


def test_factorial_negative_rejected():
    with pytest.raises(ValueError):
        factorial_iterative(-1)
    with pytest.raises(ValueError):
        factorial_recursive(-3)


def test_gcd_example():
    assert gcd(12, 18) == 6


@pytest.mark.parametrize("a,b", [(48, 180), (17, 5), (0, 9), (100, 100), (1, 999)])
def test_gcd_matches_math(a, b):
    assert gcd(a, b) == math.gcd(a, b)
    assert gcd(b, a) == math.gcd(a, b)


def test_gcd_with_zero():
    assert gcd(42, 0) == 42


def test_harshad_single_digits_and_errors():
    assert all(is_harshad(n) for n in range(1, 10))
    with pytest.raises(ValueError):
        is_harshad(0)
    with pytest.raises(ValueError):
        is_harshad(-18)


def test_perfect_examples():
    assert is_perfect(6) is True
    assert is_perfect(12) is False
    assert not is_perfect(0)
    assert not is_perfect(1)


def test_swap():
    assert swap(5, 10) == (10, 5)


def test_prime_example():
    assert is_prime(29)
    assert not is_prime(1)
    assert not is_prime(-7)


def test_sieve_agrees_with_trial_division():
    assert sieve(300) == [n for n in range(301) if is_prime(n)]


def test_sieve_below_two_is_empty():
    assert sieve(1) == []
    assert sieve(-5) == []


def test_main_prime(capsys):
    assert main(["prime", "29"]) == 0
    assert capsys.readouterr().out == "29 is a prime number.\n"


def test_main_sieve(capsys):
    assert main(["sieve", "1"]) == 0
    assert capsys.readouterr().out == "No primes <= 1\n"
    main(["sieve", "50"])
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Primes <= 50:"
    assert [int(x) for x in lines[1].split()] == sieve(50)


def test_main_gcd_and_swap(capsys):
    main(["gcd", "12", "18"])
    assert capsys.readouterr().out == "GCD of 12 and 18 is 6\n"
    main(["swap"])
    assert capsys.readouterr().out == "a = 10, b = 5\n"


def test_main_factorial(capsys):
    assert main(["factorial", "7"]) == 0
    assert capsys.readouterr().out == "Iterative is: 5040\nRecursive is: 5040\n"
    assert main(["factorial", "-2"]) == 1


def test_main_requires_command():
    with pytest.raises(SystemExit):
        main([])