"""A number guessing game between 1 and 100."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum
from typing import Optional

LOWEST = 1
HIGHEST = 100


class Feedback(Enum):
    """How a guess compares with the secret number."""

    TOO_LOW = "low"
    TOO_HIGH = "high"
    CORRECT = "correct"


class GuessingGame:
    """One round of guessing a secret number in ``1 .. 100``."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        rng = rng or random.Random()
        self.number = rng.randint(LOWEST, HIGHEST)
        self.attempts = 0

    def guess(self, value: int) -> Feedback:
        """Count one attempt and say how ``value`` compares with the secret."""
        self.attempts += 1
        if value > self.number:
            return Feedback.TOO_HIGH
        if value < self.number:
            return Feedback.TOO_LOW
        return Feedback.CORRECT


def _play(rng: random.Random) -> None:
    game = GuessingGame(rng)
    print("Welcome to the Number Guessing Game!")
    print(f"I have chosen a number between {LOWEST} and {HIGHEST}.")
    while True:
        raw = input("Enter your guess: ")
        try:
            value = int(raw.strip())
        except ValueError:
            print("Please enter a whole number.")
            continue
        feedback = game.guess(value)
        if feedback is Feedback.TOO_LOW:
            print("Too low! Try again.")
        elif feedback is Feedback.TOO_HIGH:
            print("Too high! Try again.")
        else:
            print(
                f"Congratulations! You guessed the number {game.number} "
                f"in {game.attempts} attempts."
            )
            return


def main(argv: Optional[list[str]] = None) -> int:
    """Play guessing rounds until the player declines another."""
    parser = argparse.ArgumentParser(prog="guessing", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the secret")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)
    try:
        while True:
            _play(rng)
            answer = input("Do you want to play again? (y/n): ").strip()
            if answer[:1] not in ("y", "Y"):
                break
    except EOFError:
        print()
    print("Thanks for playing! Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())