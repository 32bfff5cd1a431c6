"""Natural ("human") ordering of file names.

Runs of digits compare by numeric value, everything else compares as
case-insensitive strings, so ``file2.txt`` sorts before ``file10.txt``.
Relative paths sort as whole strings, which keeps files from the same folder
together.
"""

from __future__ import annotations

import re
from typing import Callable, Iterable, Tuple, TypeVar

T = TypeVar("T")

_TOKEN_RE = re.compile(r"[0-9]+|[^0-9]+")

# (kind, numeric value, text); digits (kind 0) sort before text (kind 1).
Token = Tuple[int, int, str]
NaturalKey = Tuple[Tuple[Token, ...], str]


def _tokenize(value: str) -> Tuple[Token, ...]:
    tokens = []
    for run in _TOKEN_RE.findall(value):
        if "0" <= run[0] <= "9":
            tokens.append((0, int(run), ""))
        else:
            tokens.append((1, 0, run))
    return tuple(tokens)


def natural_key(value: str) -> NaturalKey:
    """Return a sort key implementing natural ordering for *value*.

    Text runs compare case-insensitively first, so ``alpha.txt`` sorts before
    ``Zeta.txt``. The raw string is the final tie-breaker, so distinct strings
    such as ``a01`` and ``a1`` or ``A.txt`` and ``a.txt`` never compare equal.
    """

    return _tokenize(value.casefold()), value


def natural_compare(a: str, b: str) -> int:
    """Compare *a* and *b* in natural order, returning -1, 0 or 1."""

    key_a = natural_key(a)
    key_b = natural_key(b)
    return (key_a > key_b) - (key_a < key_b)


def natural_sorted(items: Iterable[T], key: Callable[[T], str] | None = None) -> list[T]:
    """Return *items* sorted naturally, by ``key(item)`` when given."""

    if key is None:
        return sorted(items, key=natural_key)  # type: ignore[arg-type]
    return sorted(items, key=lambda item: natural_key(key(item)))


__all__ = ["natural_key", "natural_compare", "natural_sorted"]
