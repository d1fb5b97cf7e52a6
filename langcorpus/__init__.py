"""
langcorpus: Language-tagged, immutable tokenized corpora.

Tokenizes raw bytes into newline-delimited sentences of space-delimited
words, and provides n-gram, padding and vocabulary helpers over the
resulting token streams.
"""

__all__ = [
    "Language",
    "DefaultLanguage",
    "English",
    "French",
    "language",
    "Token",
    "TokenKind",
    "NULL",
    "UNKNOWN",
    "Corpus",
    "TokenView",
    "tokenize",
    "Config",
    "__version__",
    # Vocabulary
    "frequency",
    "build_vocabulary",
    "unk",
    # N-grams (lazy-imported via __getattr__)
    "unigrams",
    "bigrams",
    "ngrams",
    "padded",
    # Sampling (lazy-imported via __getattr__)
    "UnigramSampler",
]

__version__ = "0.1.0"

from typing import Any

from langcorpus.config import Config
from langcorpus.language import DefaultLanguage, English, French, Language, language
from langcorpus.token import NULL, UNKNOWN, Token, TokenKind
from langcorpus.tokenizer import tokenize
from langcorpus.corpus import Corpus, TokenView
from langcorpus.vocabulary import build_vocabulary, frequency, unk


def __getattr__(name: str) -> Any:  # lazy attribute access to avoid heavy deps at import time
    if name in {"unigrams", "bigrams", "ngrams", "padded"}:
        # Requires nltk; import only on demand
        from langcorpus import ngram as _ng

        return getattr(_ng, name)
    if name == "UnigramSampler":
        from langcorpus.sampling import UnigramSampler as _US

        return _US
    raise AttributeError(f"module 'langcorpus' has no attribute {name!r}")
