"""The `Corpus` container: one immutable buffer plus its word and sentence index.

A corpus owns the raw bytes of a text together with the indices derived from
them by the tokenizer. Word tokens reference the buffer by offset and
sentences are stored as ranges of word indices, so the container never holds
a view into itself. Accessors build lightweight `TokenView` objects on demand;
they stay valid for as long as they are referenced because the buffer and the
index are never modified after construction.

Example
-------
```python
from langcorpus import Corpus, English

corpus: Corpus[English] = Corpus.from_bytes(b"The soup pleased the dog.\nThe cat caught the rat.")
len(corpus.words())        # 10
[len(s) for s in corpus.sentences()]  # [5, 5]
```
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any, BinaryIO, Generic, Iterator, NoReturn, Self, TypeVar, overload
import logging

from langcorpus.config import get_config
from langcorpus.language import Language
from langcorpus.token import Token
from langcorpus.tokenizer import SentenceSpan, tokenize


L = TypeVar("L", bound=Language)

_LOGGER = logging.getLogger(__name__)


class TokenView(Sequence, Generic[L]):
    """Read-only window ``[start, stop)`` over a corpus word index.

    Slicing with a unit step returns a narrower view over the same index;
    no tokens are copied.
    """

    __slots__ = ("_words", "_start", "_stop")

    def __init__(self, words: tuple[Token[L], ...], start: int = 0, stop: int | None = None) -> None:
        end = len(words) if stop is None else stop
        if not 0 <= start <= end <= len(words):
            raise ValueError(f"Invalid view range [{start}, {end}) over {len(words)} tokens")
        self._words = words
        self._start = start
        self._stop = end

    def __len__(self) -> int:
        return self._stop - self._start

    @overload
    def __getitem__(self, index: int) -> Token[L]: ...

    @overload
    def __getitem__(self, index: slice) -> "TokenView[L] | tuple[Token[L], ...]": ...

    def __getitem__(self, index: int | slice) -> "Token[L] | TokenView[L] | tuple[Token[L], ...]":
        if isinstance(index, slice):
            start, stop, step = index.indices(len(self))
            if step == 1:
                return TokenView(self._words, self._start + start, self._start + max(start, stop))
            return tuple(self._words[self._start + i] for i in range(start, stop, step))
        size = len(self)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("token view index out of range")
        return self._words[self._start + index]

    def __iter__(self) -> Iterator[Token[L]]:
        words = self._words
        for i in range(self._start, self._stop):
            yield words[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Sequence) or isinstance(other, (str, bytes, bytearray)):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    @property
    def range(self) -> SentenceSpan:
        """``(start, stop)`` word-index range covered by this view."""

        return (self._start, self._stop)

    def __str__(self) -> str:
        return " ".join(str(token) for token in self)

    def __repr__(self) -> str:
        return f"TokenView([{self._start}:{self._stop}], {list(self)!r})"


class Corpus(Generic[L]):
    """Tokenized text tagged (statically) with a language ``L``.

    Parameters
    ----------
    data:
        The complete source text. ``bytes`` is stored as is; other buffers are
        copied into an immutable ``bytes`` object and ``str`` is encoded with
        `Config.TEXT_ENCODING`.
    """

    __slots__ = ("_bytes", "_words", "_sentences")

    def __init__(self, data: bytes | bytearray | memoryview | str) -> None:
        buffer = _as_bytes(data)
        words, sentences = tokenize(buffer)
        object.__setattr__(self, "_bytes", buffer)
        object.__setattr__(self, "_words", words)
        object.__setattr__(self, "_sentences", sentences)
        _LOGGER.debug(
            "Built corpus: %d bytes, %d words, %d sentences",
            len(buffer),
            len(words),
            len(sentences),
        )

    # Construction -------------------------------------------------------------
    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview | str) -> Self:
        """Build a corpus from an in-memory buffer. Never fails for bytes input."""

        return cls(data)

    @classmethod
    def from_reader(cls, stream: BinaryIO) -> Self:
        """Read ``stream`` to the end and build a corpus from its bytes.

        Raises
        ------
        OSError
            Propagated from the stream; no corpus is produced.
        TypeError
            If the stream yields ``str`` (opened in text mode).
        """

        data = stream.read()
        if isinstance(data, str):
            raise TypeError("Corpus.from_reader() requires a stream opened in binary mode")
        if data is None:
            raise BlockingIOError("Stream returned no data (non-blocking stream not ready)")
        return cls(data)

    @classmethod
    def from_path(cls, path: Path | str) -> Self:
        """Open ``path`` in binary mode and build a corpus from its contents."""

        path = Path(path)
        _LOGGER.debug("Reading corpus from %s", path)
        with path.open("rb") as f:
            return cls.from_reader(f)

    # Accessors ----------------------------------------------------------------
    @property
    def text(self) -> bytes:
        """The original buffer."""

        return self._bytes

    def words(self) -> TokenView[L]:
        """Return all Word tokens in order of appearance."""

        return TokenView(self._words)

    tokens = words

    def sentences(self) -> tuple[TokenView[L], ...]:
        """Return one view per sentence; together they partition `words`."""

        words = self._words
        return tuple(TokenView(words, start, stop) for start, stop in self._sentences)

    lines = sentences

    def sentence_spans(self) -> tuple[SentenceSpan, ...]:
        """Return the ``[start, stop)`` word-index range of every sentence."""

        return self._sentences

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[Token[L]]:
        return iter(self._words)

    # Immutability -------------------------------------------------------------
    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Corpus is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError("Corpus is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (type(self), (self._bytes,))

    def __repr__(self) -> str:
        return (
            f"Corpus(bytes={len(self._bytes)}, words={len(self._words)}, "
            f"sentences={len(self._sentences)})"
        )


def _as_bytes(data: Any) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode(get_config().TEXT_ENCODING)
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"Cannot build a corpus from {type(data).__name__}")
