"""Rock, paper, scissors against the computer."""

from __future__ import annotations

import argparse
import random
import sys
from enum import Enum, IntEnum
from typing import Optional


class Choice(IntEnum):
    """A hand, numbered as the player enters it."""

    ROCK = 1
    PAPER = 2
    SCISSORS = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


class Outcome(Enum):
    """The result of one round, from the player's side."""

    TIE = "tie"
    USER_WINS = "user"
    COMPUTER_WINS = "computer"


_BEATS = {
    Choice.ROCK: Choice.SCISSORS,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSORS: Choice.PAPER,
}

_MESSAGES = {
    Outcome.TIE: "🤝 It's a tie!",
    Outcome.USER_WINS: "🎉 You win!",
    Outcome.COMPUTER_WINS: "💻 Computer wins!",
}


def decide(user: int, computer: int) -> Outcome:
    """Return who wins when ``user`` meets ``computer``; invalid hands raise ValueError."""
    user_hand, computer_hand = Choice(user), Choice(computer)
    if user_hand is computer_hand:
        return Outcome.TIE
    if _BEATS[user_hand] is computer_hand:
        return Outcome.USER_WINS
    return Outcome.COMPUTER_WINS


def main(argv: Optional[list[str]] = None) -> int:
    """Play one round against a random computer hand."""
    parser = argparse.ArgumentParser(prog="rps", description=__doc__)
    parser.add_argument("--seed", type=int, default=None, help="seed for the computer")
    args = parser.parse_args(argv)
    rng = random.Random(args.seed)

    print("✊🤚✌️ Welcome to Rock-Paper-Scissors!")
    print("1: Rock, 2: Paper, 3: Scissors")
    try:
        raw = input("Enter your choice: ")
    except EOFError:
        print()
        return 0
    try:
        user = Choice(int(raw.strip()))
    except ValueError:
        print("Invalid choice!")
        return 0
    computer = Choice(rng.randint(1, 3))
    print(f"You chose: {user.label}")
    print(f"Computer chose: {computer.label}")
    print(_MESSAGES[decide(user, computer)])
    return 0


if __name__ == "__main__":
    sys.exit(main())