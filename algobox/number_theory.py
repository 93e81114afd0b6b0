"""Small number-theory checks: primes, Armstrong, Harshad, perfect numbers and more."""

from __future__ import annotations

import argparse
import sys
from math import isqrt
from typing import Optional


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its digits each raised to the digit count.

    Digits of a negative number carry its sign.
    """
    digits = _digits(n)
    sign = -1 if n < 0 else 1
    power = len(digits)
    return sum((sign * digit) ** power for digit in digits) == n


def reverse_number(n: int) -> int:
    """Return ``n`` with its decimal digits reversed, keeping the sign."""
    sign = -1 if n < 0 else 1
    return sign * int(str(abs(n))[::-1])


def is_palindrome_number(n: int) -> bool:
    """Tell whether ``n`` reads the same with its digits reversed."""
    return reverse_number(n) == n


def _check_non_negative(n: int) -> None:
    if n < 0:
        raise ValueError(f"factorial is undefined for negative numbers, got {n}")


def factorial_iterative(n: int) -> int:
    """Return ``n!`` computed with a loop."""
    _check_non_negative(n)
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """Return ``n!`` computed recursively."""
    _check_non_negative(n)
    if n <= 1:
        return 1
    return n * factorial_recursive(n - 1)


def _truncated_mod(a: int, b: int) -> int:
    remainder = abs(a) % abs(b)
    return -remainder if a < 0 else remainder


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of ``a`` and ``b`` by Euclid's algorithm.

    Remainders take the sign of the dividend, so the result may be negative
    when the inputs are.
    """
    while b:
        a, b = b, _truncated_mod(a, b)
    return a


def is_harshad(n: int) -> bool:
    """Tell whether the positive integer ``n`` is divisible by its digit sum."""
    if n <= 0:
        raise ValueError(f"Harshad check needs a positive integer, got {n}")
    return n % sum(_digits(n)) == 0


def is_perfect(n: int) -> bool:
    """Tell whether ``n`` equals the sum of its proper divisors."""
    if n < 2:
        return False
    total = 1
    for divisor in range(2, isqrt(n) + 1):
        if n % divisor == 0:
            total += divisor
            partner = n // divisor
            if partner != divisor:
                total += partner
    return total == n


def swap(a, b):
    """Return the two values in exchanged order."""
    return b, a


def is_prime(n: int) -> bool:
    """Tell whether ``n`` is prime, by trial division."""
    if n <= 1:
        return False
    return all(n % divisor for divisor in range(2, isqrt(n) + 1))


def sieve(n: int) -> list[int]:
    """Return all primes up to and including ``n`` by the sieve of Eratosthenes."""
    if n < 2:
        return []
    flags = [True] * (n + 1)
    flags[0] = flags[1] = False
    for p in range(2, isqrt(n) + 1):
        if flags[p]:
            flags[p * p :: p] = [False] * len(range(p * p, n + 1, p))
    return [number for number, prime in enumerate(flags) if prime]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="number_theory", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name in ("prime", "sieve", "armstrong", "palindrome", "reverse",
                 "factorial", "harshad", "perfect"):
        commands.add_parser(name).add_argument("n", type=int)
    gcd_parser = commands.add_parser("gcd")
    gcd_parser.add_argument("a", type=int)
    gcd_parser.add_argument("b", type=int)
    swap_parser = commands.add_parser("swap")
    swap_parser.add_argument("a", type=int, nargs="?", default=5)
    swap_parser.add_argument("b", type=int, nargs="?", default=10)
    return parser


def _verdict(n: int, holds: bool, positive: str, negative: str) -> str:
    return f"{n} {positive if holds else negative}"


def main(argv: Optional[list[str]] = None) -> int:
    """Run one number check named on the command line and print the answer."""
    args = _build_parser().parse_args(argv)
    command = args.command
    if command == "prime":
        print(_verdict(args.n, is_prime(args.n),
                       "is a prime number.", "is not a prime number."))
    elif command == "sieve":
        primes = sieve(args.n)
        if not primes:
            print(f"No primes <= {args.n}")
        else:
            print(f"Primes <= {args.n}:")
            print(" ".join(str(p) for p in primes))
    elif command == "armstrong":
        print(_verdict(args.n, is_armstrong(args.n),
                       "is an Armstrong number.", "is not an Armstrong number."))
    elif command == "palindrome":
        print(_verdict(args.n, is_palindrome_number(args.n),
                       "is a Palindromic Number.", "is NOT a Palindromic Number."))
    elif command == "reverse":
        print(f"Reversed number: {reverse_number(args.n)}")
    elif command == "factorial":
        try:
            iterative, recursive = factorial_iterative(args.n), factorial_recursive(args.n)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(f"Iterative is: {iterative}")
        print(f"Recursive is: {recursive}")
    elif command == "harshad":
        try:
            holds = is_harshad(args.n)
        except ValueError as exc:
            print(exc, file=sys.stderr)
            return 1
        print(_verdict(args.n, holds, "is a Harshad Number.", "is not a Harshad Number."))
    elif command == "perfect":
        print(_verdict(args.n, is_perfect(args.n),
                       "is a Perfect Number.", "is not a Perfect Number."))
    elif command == "gcd":
        print(f"GCD of {args.a} and {args.b} is {gcd(args.a, args.b)}")
    elif command == "swap":
        a, b = swap(args.a, args.b)
        print(f"a = {a}, b = {b}")
    return 0


if __name__ == "__main__":
    sys.exit(main())