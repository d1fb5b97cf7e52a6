"""N-gram helpers over token streams.

All functions are lazy: they return generators that consume their input on
demand. Calling a function again on a re-iterable input (a list, a
`TokenView`) restarts the sequence.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TypeVar, Union

from nltk.util import bigrams as _nltk_bigrams
from nltk.util import ngrams as _nltk_ngrams

from langcorpus.corpus import Corpus
from langcorpus.language import Language
from langcorpus.token import Token


L = TypeVar("L", bound=Language)

# A unigram is a single token; a bigram is a pair of adjacent tokens.
Unigram = Token
Bigram = tuple[Token[L], Token[L]]


def unigrams(tokens: Iterable[Token[L]]) -> Iterator[Token[L]]:
    """Yield the tokens of ``tokens`` unchanged."""

    yield from tokens


def bigrams(tokens: Iterable[Token[L]]) -> Iterator[Bigram[L]]:
    """Yield every pair of adjacent tokens.

    A stream of ``n`` tokens produces ``max(0, n - 1)`` pairs, and the second
    element of each pair is the first element of the next one.
    """

    return _nltk_bigrams(tokens)


def ngrams(tokens: Iterable[Token[L]], n: int) -> Iterator[tuple[Token[L], ...]]:
    """Yield every window of ``n`` adjacent tokens (``max(0, len - n + 1)`` windows)."""

    if n < 1:
        raise ValueError(f"n-gram order must be >= 1, got {n}")
    return _nltk_ngrams(tokens, n)


def padded(sentences: Union["Corpus[L]", Iterable[Iterable[Token[L]]]]) -> Iterator[Token[L]]:
    """Yield the tokens of every sentence with `Token.null` at each boundary.

    The stream starts with one Null and every sentence is followed by one
    Null, so ``k`` sentences holding ``t`` tokens in total produce
    ``1 + t + k`` tokens. A `Corpus` is accepted in place of its sentences.
    """

    if isinstance(sentences, Corpus):
        sentences = sentences.sentences()
    null: Token[Any] = Token.null()
    yield null
    for sentence in sentences:
        yield from sentence
        yield null
