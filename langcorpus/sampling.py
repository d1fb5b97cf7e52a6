"""Unigram text generation from corpus frequency counts.

Sentences are generated in two steps: a sentence length is drawn from the
empirical distribution of sentence lengths, then that many words are drawn
independently from the empirical word distribution.
"""

from __future__ import annotations

from typing import Generic, Iterator, Mapping, Optional, Sequence, TypeVar

import numpy as np

from langcorpus.config import RANDOM_SEED
from langcorpus.corpus import Corpus
from langcorpus.language import Language
from langcorpus.token import Token
from langcorpus.vocabulary import frequency


L = TypeVar("L", bound=Language)


def _normalize(counts: Sequence[int]) -> np.ndarray:
    weights = np.asarray(counts, dtype=np.float64)
    total = weights.sum()
    if total <= 0:
        raise ValueError("Frequencies must contain at least one positive count")
    return weights / total


class UnigramSampler(Generic[L]):
    """Draws random sentences from word and sentence-length frequencies.

    Parameters
    ----------
    word_frequency:
        Mapping from word token to its count.
    length_frequency:
        Mapping from sentence length to the number of sentences of that length.
    seed:
        Seed for the underlying NumPy generator; None draws fresh entropy.
    """

    def __init__(
        self,
        word_frequency: Mapping[Token[L], int],
        length_frequency: Mapping[int, int],
        *,
        seed: Optional[int] = RANDOM_SEED,
    ) -> None:
        if not word_frequency:
            raise ValueError("Cannot sample from an empty vocabulary")
        if not length_frequency:
            raise ValueError("Cannot sample without sentence lengths")
        if any(length < 0 for length in length_frequency):
            raise ValueError("Sentence lengths must be >= 0")
        self._words: list[Token[L]] = list(word_frequency.keys())
        self._word_p: np.ndarray = _normalize(list(word_frequency.values()))
        self._lengths: np.ndarray = np.asarray(list(length_frequency.keys()), dtype=np.int64)
        self._length_p: np.ndarray = _normalize(list(length_frequency.values()))
        self._rng: np.random.Generator = np.random.default_rng(seed)

    @classmethod
    def from_corpus(cls, corpus: Corpus[L], *, seed: Optional[int] = RANDOM_SEED) -> "UnigramSampler[L]":
        """Count words and sentence lengths of ``corpus`` and build a sampler.

        Raises `ValueError` if the corpus contains no words.
        """

        word_frequency = frequency(corpus.words())
        length_frequency = frequency(len(sentence) for sentence in corpus.sentences())
        return cls(word_frequency, length_frequency, seed=seed)

    @property
    def vocabulary_size(self) -> int:
        return len(self._words)

    def sample_length(self) -> int:
        return int(self._rng.choice(self._lengths, p=self._length_p))

    def sample_sentence(self) -> list[Token[L]]:
        """Draw a length, then draw that many words."""

        length = self.sample_length()
        if length == 0:
            return []
        indices = self._rng.choice(len(self._words), size=length, p=self._word_p)
        return [self._words[int(i)] for i in indices]

    def sample(self, n: int) -> Iterator[list[Token[L]]]:
        """Return an iterator over ``n`` independently sampled sentences."""

        if n < 0:
            raise ValueError("n must be >= 0")
        return (self.sample_sentence() for _ in range(n))


def render(sentence: Sequence[Token[L]]) -> str:
    """Join the display form of ``sentence``'s tokens with single spaces."""

    return " ".join(str(token) for token in sentence)
