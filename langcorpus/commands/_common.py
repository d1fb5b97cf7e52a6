from __future__ import annotations

from pathlib import Path
from typing import Any
import logging

import click

from langcorpus.corpus import Corpus


_LOGGER = logging.getLogger(__name__)


def load_corpus(path: Path) -> Corpus[Any]:
    """Build a corpus from ``path`` or exit with status 1 on I/O failure."""

    try:
        return Corpus.from_path(path)
    except OSError as e:
        _LOGGER.error("Failed to read corpus %s: %s", path, e)
        click.secho(f"ERROR reading {path}: {e}", fg="red", err=True)
        raise SystemExit(1)
