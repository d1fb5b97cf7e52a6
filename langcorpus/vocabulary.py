"""Vocabulary helpers: frequency counting, vocabulary building and the unknown-word filter."""

from __future__ import annotations

from collections import Counter
from typing import AbstractSet, Container, Hashable, Iterable, Iterator, TypeVar

from langcorpus.language import Language
from langcorpus.token import Token


L = TypeVar("L", bound=Language)
H = TypeVar("H", bound=Hashable)


def frequency(items: Iterable[H]) -> Counter[H]:
    """Map each distinct item of ``items`` to the number of times it occurs."""

    return Counter(items)


def build_vocabulary(tokens: Iterable[Token[L]], min_count: int = 1) -> AbstractSet[Token[L]]:
    """Return the set of tokens occurring at least ``min_count`` times.

    Parameters
    ----------
    tokens:
        Token stream to count, e.g. ``corpus.words()``.
    min_count:
        Frequency threshold; tokens seen fewer times are left out.
    """

    if min_count < 1:
        raise ValueError("min_count must be >= 1")
    counts = frequency(tokens)
    return frozenset(token for token, count in counts.items() if count >= min_count)


def unk(
    tokens: Iterable[Token[L]],
    vocabulary: Container[Token[L]],
    *,
    keep_markers: bool = False,
) -> Iterator[Token[L]]:
    """Yield ``tokens`` with every token outside ``vocabulary`` replaced by `Token.unknown`.

    Membership uses structural token equality. By default every token is
    checked, markers included, so a ``Null`` boundary is rewritten to
    ``Unknown`` unless the vocabulary contains it. Pass ``keep_markers=True``
    to let ``Null`` and ``Unknown`` through untouched.
    """

    unknown: Token[L] = Token.unknown()
    for token in tokens:
        if token in vocabulary or (keep_markers and not token.is_word):
            yield token
        else:
            yield unknown
