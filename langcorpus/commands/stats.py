from __future__ import annotations

from pathlib import Path

import click

from langcorpus.commands._common import load_corpus
from langcorpus.vocabulary import frequency


@click.command(name="stats")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def stats(path: Path) -> None:
    """Print word, sentence and vocabulary counts for a text file.

    Examples:
      langcorpus stats corpus.txt
    """

    corpus = load_corpus(path)
    words = corpus.words()
    sentences = corpus.sentences()
    click.echo(f"bytes: {len(corpus.text)}")
    click.echo(f"words: {len(words)}")
    click.echo(f"sentences: {len(sentences)}")
    click.echo(f"distinct words: {len(frequency(words))}")
