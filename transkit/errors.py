"""Exceptions raised by :mod:`transkit`."""


class TranslationCollectionError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(TranslationCollectionError, ValueError):
    """A caller passed arguments that break an operation's contract."""


class ContextNotFoundError(TranslationCollectionError, KeyError):
    """A context bucket was accessed strictly but does not exist."""

    def __init__(self, context: str) -> None:
        super().__init__(context)
        self.context = context

    def __str__(self) -> str:
        return f"context {self.context!r} not found"
