"""Byte-oriented tokenizer: newline-delimited sentences of space-delimited words.

The tokenizer makes a single pass over the buffer. Every newline (0x0A)
delimited segment is a sentence, including empty leading, trailing and
consecutive segments. Inside a segment words are delimited by spaces (0x20)
and empty substrings are dropped. No other byte is treated specially: a
carriage return (0x0D) stays attached to the word it terminates and no
encoding validation takes place.
"""

from __future__ import annotations

from typing import Any, Iterator

from langcorpus.config import get_config
from langcorpus.token import Token


SentenceSpan = tuple[int, int]

_SENTENCE_DELIMITER = bytes([get_config().SENTENCE_DELIMITER])
_WORD_DELIMITER = bytes([get_config().WORD_DELIMITER])


def iter_segments(buffer: bytes) -> Iterator[tuple[int, int]]:
    """Yield ``(start, stop)`` byte ranges of the newline-delimited segments.

    An empty buffer yields a single empty segment.
    """

    size = len(buffer)
    start = 0
    while True:
        stop = buffer.find(_SENTENCE_DELIMITER, start)
        if stop == -1:
            yield (start, size)
            return
        yield (start, stop)
        start = stop + 1


def iter_words(buffer: bytes, start: int = 0, stop: int | None = None) -> Iterator[tuple[int, int]]:
    """Yield ``(start, stop)`` byte ranges of the non-empty words in ``buffer[start:stop]``."""

    end = len(buffer) if stop is None else stop
    pos = start
    while pos < end:
        word_stop = buffer.find(_WORD_DELIMITER, pos, end)
        if word_stop == -1:
            word_stop = end
        if word_stop > pos:
            yield (pos, word_stop)
        pos = word_stop + 1


def tokenize(buffer: bytes) -> tuple[tuple[Token[Any], ...], tuple[SentenceSpan, ...]]:
    """Split ``buffer`` into Word tokens and sentence ranges over them.

    Parameters
    ----------
    buffer:
        The full source text. Tokens reference it directly, so it must be an
        immutable ``bytes`` object.

    Returns
    -------
    tuple
        ``(words, sentences)`` where ``words`` lists the Word tokens in order
        of appearance and each entry of ``sentences`` is the ``[start, stop)``
        range of word indices contributed by one segment. The ranges partition
        ``range(len(words))``.
    """

    if not isinstance(buffer, bytes):
        raise TypeError(f"tokenize() expects bytes, got {type(buffer).__name__}")

    words: list[Token[Any]] = []
    sentences: list[SentenceSpan] = []
    for seg_start, seg_stop in iter_segments(buffer):
        first = len(words)
        words.extend(Token.word(buffer, s, e) for s, e in iter_words(buffer, seg_start, seg_stop))
        sentences.append((first, len(words)))
    return tuple(words), tuple(sentences)
