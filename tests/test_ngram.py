import pytest

from langcorpus.corpus import Corpus
from langcorpus.ngram import bigrams, ngrams, padded, unigrams
from langcorpus.token import NULL, Token


@pytest.fixture
def corpus(sample_text):
    return Corpus.from_bytes(sample_text)


def _words(*items):
    return [Token.from_bytes(item) for item in items]


def test_unigrams_identity(corpus):
    assert list(unigrams(corpus.words())) == list(corpus.words())


def test_unigrams_restart(corpus):
    words = corpus.words()
    assert list(unigrams(words)) == list(unigrams(words))


def test_unigrams_lazy():
    consumed = []

    def source():
        for token in _words(b"a", b"b"):
            consumed.append(token)
            yield token

    stream = unigrams(source())
    assert consumed == []
    next(stream)
    assert len(consumed) == 1


@pytest.mark.parametrize("n", [0, 1, 2, 5])
def test_bigram_count_and_overlap(n):
    tokens = _words(*[bytes([97 + i]) for i in range(n)])
    pairs = list(bigrams(tokens))
    assert len(pairs) == max(0, n - 1)
    for (_, second), (first, _) in zip(pairs, pairs[1:]):
        assert second == first


def test_bigrams_over_iterator(corpus):
    pairs = list(bigrams(iter(corpus.sentences()[0])))
    assert [(str(a), str(b)) for a, b in pairs][:2] == [("The", "soup"), ("soup", "pleased")]


def test_ngrams_windows():
    tokens = _words(b"a", b"b", b"c", b"d")
    assert len(list(ngrams(tokens, 3))) == 2
    assert list(ngrams(tokens, 1)) == [(t,) for t in tokens]
    assert list(ngrams(tokens, 5)) == []


def test_ngrams_rejects_order_below_one():
    with pytest.raises(ValueError):
        ngrams([], 0)


def test_padded_length(corpus):
    sentences = corpus.sentences()
    stream = list(padded(sentences))
    total = sum(len(s) for s in sentences)
    assert len(stream) == 1 + total + len(sentences)
    assert len(stream) == 13


def test_padded_rendering(corpus):
    rendered = " ".join(str(token) for token in padded(corpus.sentences()))
    assert rendered == "ε The soup pleased the dog. ε The cat caught the rat. ε"


def test_padded_accepts_corpus(corpus):
    assert list(padded(corpus)) == list(padded(corpus.sentences()))


def test_padded_empty_corpus():
    assert list(padded(Corpus.from_bytes(b""))) == [NULL, NULL]


def test_padded_no_sentences():
    assert list(padded([])) == [NULL]


def test_padded_bigrams_cross_boundaries(corpus):
    pairs = list(bigrams(padded(corpus)))
    assert pairs[0] == (NULL, Token.from_bytes(b"The"))
    assert pairs[5] == (Token.from_bytes(b"dog."), NULL)
    assert len(pairs) == 12
