from __future__ import annotations

from pathlib import Path

import click

from langcorpus.commands._common import load_corpus
from langcorpus.config import Config
from langcorpus.sampling import UnigramSampler, render


@click.command(name="sample")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.option(
    "--count",
    type=click.IntRange(min=0),
    default=Config.DEFAULT_SAMPLE_COUNT,
    show_default=True,
    help="Number of sentences to generate",
)
@click.option(
    "--seed",
    type=int,
    default=Config.RANDOM_SEED,
    show_default=True,
    help="Random seed for reproducible output",
)
def sample(path: Path, count: int, seed: int) -> None:
    """Generate random sentences from the unigram statistics of a text file.

    Sentence lengths and words are drawn independently from their observed
    frequencies; each generated sentence is printed on its own line.

    Examples:
      langcorpus sample corpus.txt
      langcorpus sample corpus.txt --count 3 --seed 7
    """

    corpus = load_corpus(path)
    try:
        sampler = UnigramSampler.from_corpus(corpus, seed=seed)
    except ValueError as e:
        click.secho(f"ERROR: {path}: {e}", fg="red", err=True)
        raise SystemExit(1)
    for sentence in sampler.sample(count):
        click.echo(render(sentence))
