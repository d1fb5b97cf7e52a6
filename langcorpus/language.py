"""Language marker types used to tag tokens and corpora.

A language is a class with no fields that is only ever used as a type
parameter, e.g. ``Corpus[English]`` or ``Token[French]``. The tag carries no
runtime data: two tokens with the same content compare equal regardless of
the language they are tagged with. Keeping corpora of different languages
apart is the job of a static type checker, which treats ``Token[English]``
and ``Token[French]`` as incompatible types.

Examples
--------
>>> from langcorpus.language import Language, get_language_by_name
>>> class Fthishr(Language):
...     pass
>>> get_language_by_name("Fthishr") is Fthishr
True
"""

from __future__ import annotations

from typing import NoReturn


_REGISTRY: dict[str, type["Language"]] = {}


class Language:
    """Base class for zero-size language marker types.

    Markers are never instantiated; use the class itself as the type
    parameter of `Token` and `Corpus`. Every subclass is registered by its
    class name; names must be unique, use `language` to look up or declare
    a marker by name.
    """

    __slots__ = ()

    def __new__(cls, *args: object, **kwargs: object) -> NoReturn:
        raise TypeError(
            f"{cls.__name__} is a language marker type and cannot be instantiated"
        )

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        existing = _REGISTRY.get(cls.__name__)
        if existing is not None:
            raise ValueError(
                f"A language marker named {cls.__name__!r} is already declared: {existing!r}"
            )
        _REGISTRY[cls.__name__] = cls


class DefaultLanguage(Language):
    """Marker used when a corpus is not tagged with a specific language."""

    __slots__ = ()


class English(Language):
    __slots__ = ()


class French(Language):
    __slots__ = ()


def language(name: str) -> type[Language]:
    """Declare (or return the already declared) marker type called ``name``.

    Runtime counterpart of writing ``class Name(Language): ...``. Declaring
    the same name twice returns the same class.
    """

    if not name.isidentifier():
        raise ValueError(f"Language name must be a valid identifier: {name!r}")
    existing = _REGISTRY.get(name)
    if existing is not None:
        return existing
    return type(name, (Language,), {"__slots__": (), "__doc__": f"Language marker for {name}."})


def get_language_by_name(name: str) -> type[Language]:
    """Return a declared marker type by its ``name``.

    Raises a `ValueError` with available options if the name is unknown.
    """

    try:
        return _REGISTRY[name]
    except KeyError as exc:
        options = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown language name: {name!r}. Available: {options}") from exc
