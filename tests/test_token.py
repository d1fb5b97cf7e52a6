import copy
import pickle

import pytest

from langcorpus.config import NULL_GLYPH, UNKNOWN_GLYPH
from langcorpus.language import English, French
from langcorpus.token import NULL, UNKNOWN, Token, TokenKind


def test_word_span_is_not_copied():
    """A word token should view its buffer instead of copying it."""

    buffer = b"the dog"
    dog = Token.word(buffer, 4, 7)
    assert dog.span == (4, 7)
    assert dog.content == b"dog"
    assert dog.chars.obj is buffer
    assert dog.chars.readonly


@pytest.mark.parametrize("start,stop", [(0, 0), (3, 2), (-1, 2), (0, 8)])
def test_word_rejects_invalid_spans(start, stop):
    with pytest.raises(ValueError):
        Token.word(b"the dog", start, stop)


def test_word_requires_immutable_buffer():
    with pytest.raises(TypeError):
        Token.word(bytearray(b"dog"), 0, 3)


def test_markers_are_singletons():
    assert Token.null() is NULL
    assert Token.unknown() is UNKNOWN
    assert NULL.kind is TokenKind.NULL
    assert UNKNOWN.kind is TokenKind.UNKNOWN
    assert NULL.span is None
    assert NULL.content == b""
    assert not NULL.is_word


def test_equality_by_content_not_position():
    buffer = b"the cat the"
    first = Token.word(buffer, 0, 3)
    last = Token.word(buffer, 8, 11)
    assert first == last
    assert hash(first) == hash(last)
    assert first == Token.from_bytes(b"the")
    assert first != Token.from_bytes(b"The")


def test_markers_never_equal_words():
    assert NULL != UNKNOWN
    assert NULL != Token.from_bytes(b"x")
    assert UNKNOWN != Token.from_bytes("�")


def test_total_order_across_variants():
    a = Token.from_bytes(b"a")
    b = Token.from_bytes(b"b")
    assert NULL < UNKNOWN < a < b
    assert sorted([b, UNKNOWN, a, NULL]) == [NULL, UNKNOWN, a, b]
    assert b >= a


def test_loan_preserves_variant_and_content():
    buffer = b"chat noir"
    chat = Token.word(buffer, 0, 4)
    loaned = chat.loan(English)
    assert loaned == chat
    assert loaned.kind is chat.kind
    assert loaned.content == chat.content
    assert loaned.span == chat.span
    assert hash(loaned) == hash(chat)
    assert NULL.loan(French) is NULL
    assert UNKNOWN.loan(French) is UNKNOWN


def test_loan_requires_language_marker():
    with pytest.raises(TypeError):
        Token.from_bytes(b"x").loan(str)


def test_display():
    assert str(NULL) == "ε"
    assert str(UNKNOWN) == "�"
    assert str(Token.from_bytes(b"dog.")) == "dog."


def test_display_is_byte_per_character():
    """Multi-byte UTF-8 renders one character per byte instead of failing."""

    word = Token.from_bytes("é")
    assert word.content == b"\xc3\xa9"
    assert str(word) == "\xc3\xa9"
    assert len(str(word)) == 2


def test_repr():
    assert repr(NULL) == "Null"
    assert repr(UNKNOWN) == "Unknown"
    assert repr(Token.from_bytes(b"dog")) == "Word(b'dog')"


def test_tokens_are_immutable():
    word = Token.from_bytes(b"dog")
    with pytest.raises(AttributeError):
        word._start = 1
    with pytest.raises(AttributeError):
        del word._buffer


def test_pickle_and_copy():
    word = Token.word(b"the dog", 4, 7)
    assert pickle.loads(pickle.dumps(word)) == word
    assert pickle.loads(pickle.dumps(NULL)) is NULL
    assert copy.deepcopy(word) == word


def test_constructor_validates_word_spans():
    with pytest.raises(ValueError):
        Token(TokenKind.WORD)
    with pytest.raises(ValueError):
        Token(TokenKind.WORD, b"dog", 2, 2)
    with pytest.raises(TypeError):
        Token(TokenKind.WORD, bytearray(b"dog"), 0, 3)
    assert Token(TokenKind.WORD, b"dog", 0, 3) == Token.from_bytes(b"dog")


def test_constructor_rejects_marker_spans():
    with pytest.raises(ValueError):
        Token(TokenKind.NULL, b"dog", 0, 3)
    assert Token(TokenKind.UNKNOWN) == UNKNOWN


def test_display_uses_configured_glyphs():
    assert str(NULL) == NULL_GLYPH
    assert str(UNKNOWN) == UNKNOWN_GLYPH
