from __future__ import annotations

from pathlib import Path

import click

from langcorpus.commands._common import load_corpus
from langcorpus.ngram import padded as padded_tokens


@click.command(name="padded")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
def padded(path: Path) -> None:
    """Print the sentence-padded token stream of a text file on one line.

    Examples:
      langcorpus padded corpus.txt
    """

    corpus = load_corpus(path)
    click.echo(" ".join(str(token) for token in padded_tokens(corpus)))
