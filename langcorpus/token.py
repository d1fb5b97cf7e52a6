"""Tokens: word spans over a corpus buffer and synthetic boundary markers.

A `Token` is one of three variants:

- ``Word``: a non-empty byte range inside the buffer of the corpus that
  produced it. The token keeps a reference to the buffer and the range
  offsets; the bytes themselves are never copied.
- ``Null``: a sentence boundary marker that does not occur in the text.
- ``Unknown``: an out-of-vocabulary marker that does not occur in the text.

Tokens compare structurally. Variants are ordered ``Null < Unknown < Word``
and words compare by their byte content, never by position or language tag.

Examples
--------
>>> from langcorpus.token import Token
>>> the = Token.from_bytes(b"the")
>>> str(the), str(Token.null()), str(Token.unknown())
('the', 'ε', '�')
>>> Token.null() < Token.unknown() < the
True
"""

from __future__ import annotations

from enum import IntEnum
from functools import total_ordering
from typing import Any, Generic, NoReturn, Optional, TypeVar

from langcorpus.config import NULL_GLYPH, UNKNOWN_GLYPH, get_config
from langcorpus.language import Language


L = TypeVar("L", bound=Language)
M = TypeVar("M", bound=Language)


class TokenKind(IntEnum):
    """Token variants; the integer values define the cross-variant order."""

    NULL = 0
    UNKNOWN = 1
    WORD = 2


@total_ordering
class Token(Generic[L]):
    """An immutable token tagged (statically) with a language ``L``.

    Use the `word`, `from_bytes`, `null` and `unknown` constructors rather
    than calling the class directly.
    """

    __slots__ = ("_kind", "_buffer", "_start", "_stop", "_hash")

    def __init__(self, kind: TokenKind, buffer: bytes = b"", start: int = 0, stop: int = 0) -> None:
        kind = TokenKind(kind)
        if kind is TokenKind.WORD:
            if not isinstance(buffer, bytes):
                raise TypeError(
                    f"Word tokens require an immutable bytes buffer, got {type(buffer).__name__}"
                )
            if not 0 <= start < stop <= len(buffer):
                raise ValueError(
                    f"Invalid word span [{start}, {stop}) for a buffer of {len(buffer)} bytes"
                )
        elif buffer or start or stop:
            raise ValueError(f"{kind.name} markers carry no span")
        object.__setattr__(self, "_kind", kind)
        object.__setattr__(self, "_buffer", buffer)
        object.__setattr__(self, "_start", start)
        object.__setattr__(self, "_stop", stop)
        object.__setattr__(self, "_hash", None)

    # Constructors -------------------------------------------------------------
    @classmethod
    def word(cls, buffer: bytes, start: int, stop: int) -> "Token[L]":
        """Return a Word token for ``buffer[start:stop]`` without copying.

        Raises
        ------
        TypeError
            If ``buffer`` is not an immutable ``bytes`` object.
        ValueError
            If the span is empty or falls outside the buffer.
        """

        return cls(TokenKind.WORD, buffer, start, stop)

    @classmethod
    def from_bytes(cls, chars: bytes | bytearray | memoryview | str) -> "Token[L]":
        """Return a Word token owning its own copy of ``chars``.

        Handy for building vocabularies by hand; ``str`` input is encoded with
        `Config.TEXT_ENCODING`.
        """

        if isinstance(chars, str):
            data = chars.encode(get_config().TEXT_ENCODING)
        else:
            data = bytes(chars)
        return cls.word(data, 0, len(data))

    @classmethod
    def null(cls) -> "Token[L]":
        """Return the shared sentence boundary marker."""

        return NULL

    @classmethod
    def unknown(cls) -> "Token[L]":
        """Return the shared out-of-vocabulary marker."""

        return UNKNOWN

    # Accessors ----------------------------------------------------------------
    @property
    def kind(self) -> TokenKind:
        return self._kind

    @property
    def is_word(self) -> bool:
        return self._kind is TokenKind.WORD

    @property
    def span(self) -> Optional[tuple[int, int]]:
        """``(start, stop)`` offsets into the owning buffer, or None for markers."""

        if self._kind is not TokenKind.WORD:
            return None
        return (self._start, self._stop)

    @property
    def chars(self) -> memoryview:
        """Read-only view of the word's bytes (empty for markers)."""

        return memoryview(self._buffer)[self._start : self._stop]

    @property
    def content(self) -> bytes:
        """Copy of the word's bytes (empty for markers)."""

        return self._buffer[self._start : self._stop]

    # Relabeling ---------------------------------------------------------------
    def loan(self, language: type[M]) -> "Token[M]":
        """Return this token relabeled as belonging to ``language``.

        This is an unchecked conversion: nothing verifies that the token makes
        sense in the target language. The variant and byte content are kept
        exactly, so equality, ordering and hashing are unaffected; only the
        static type changes. Use it deliberately, e.g. to look up a word of one
        corpus in the vocabulary of another.
        """

        if not (isinstance(language, type) and issubclass(language, Language)):
            raise TypeError(f"loan() expects a Language subclass, got {language!r}")
        if self._kind is not TokenKind.WORD:
            return self  # type: ignore[return-value]
        return Token(TokenKind.WORD, self._buffer, self._start, self._stop)

    # Structural comparison ----------------------------------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        if self._kind is not other._kind:
            return False
        if self._buffer is other._buffer and self._start == other._start and self._stop == other._stop:
            return True
        return self.chars == other.chars

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        if self._kind is not other._kind:
            return self._kind < other._kind
        return self.content < other.content

    def __hash__(self) -> int:
        cached = self._hash
        if cached is None:
            cached = hash((int(self._kind), self.content))
            object.__setattr__(self, "_hash", cached)
        return cached

    # Immutability -------------------------------------------------------------
    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        if self._kind is TokenKind.NULL:
            return (Token.null, ())
        if self._kind is TokenKind.UNKNOWN:
            return (Token.unknown, ())
        return (Token.from_bytes, (self.content,))

    # Display ------------------------------------------------------------------
    def __str__(self) -> str:
        if self._kind is TokenKind.NULL:
            return NULL_GLYPH
        if self._kind is TokenKind.UNKNOWN:
            return UNKNOWN_GLYPH
        # One character per byte; lossy for multi-byte text.
        return self.content.decode(get_config().DISPLAY_ENCODING)

    def __repr__(self) -> str:
        if self._kind is TokenKind.NULL:
            return "Null"
        if self._kind is TokenKind.UNKNOWN:
            return "Unknown"
        return f"Word({self.content!r})"


NULL: Token[Any] = Token(TokenKind.NULL)
UNKNOWN: Token[Any] = Token(TokenKind.UNKNOWN)
