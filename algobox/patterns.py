"""Text patterns drawn with asterisks."""

from __future__ import annotations


def hexagon(n: int) -> str:
    """Return a hexagon of ``*`` whose top and bottom edges are ``n`` wide.

    Lines are joined with newlines; a size below 1 gives an empty string.
    """
    if n < 1:
        return ""
    upper = [" " * (n - i - 1) + "*" * (n + 2 * i) for i in range(n)]
    return "\n".join(upper + upper[-2::-1])