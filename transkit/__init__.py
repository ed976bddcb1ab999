"""Immutable keyed collections of translatable text grouped by context."""

from .collection import TranslationCollection, assign, deep_merge
from .errors import ContextNotFoundError, InvalidArgumentError, TranslationCollectionError
from .models import TranslationData
from .version import __version__

__all__ = [
    "__version__",
    "TranslationCollection",
    "TranslationData",
    "TranslationCollectionError",
    "InvalidArgumentError",
    "ContextNotFoundError",
    "assign",
    "deep_merge",
]
