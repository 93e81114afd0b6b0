"""Spell checking by exact, case-insensitive and vowel-insensitive matching."""

from __future__ import annotations

from typing import Iterable

_VOWELS = frozenset("aeiou")


def devowel(word: str) -> str:
    """Lower-case ``word`` and replace each vowel with ``*``."""
    return "".join("*" if ch in _VOWELS else ch for ch in word.lower())


def spellcheck(wordlist: Iterable[str], queries: Iterable[str]) -> list[str]:
    """Correct each query against the word list.

    An exact match wins; otherwise the first word matching case-insensitively;
    otherwise the first word matching when vowels are ignored; otherwise "".
    """
    exact: set[str] = set()
    by_lower: dict[str, str] = {}
    by_vowels: dict[str, str] = {}
    for word in wordlist:
        exact.add(word)
        by_lower.setdefault(word.lower(), word)
        by_vowels.setdefault(devowel(word), word)

    def correct(query: str) -> str:
        if query in exact:
            return query
        lowered = query.lower()
        if lowered in by_lower:
            return by_lower[lowered]
        return by_vowels.get(devowel(query), "")

    return [correct(query) for query in queries]