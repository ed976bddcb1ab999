"""Immutable two-level collection of translation entries.

Entries are stored as ``context -> key -> TranslationData``. Every
transforming method builds a fresh working mapping with :func:`assign` and
wraps it in a new :class:`TranslationCollection`; the receiver is never
modified.
"""
from __future__ import annotations

import functools
import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterator, Mapping, Optional, Sequence, Tuple

from .errors import ContextNotFoundError, InvalidArgumentError
from .models import TranslationData
from .presets import DEFAULT_CONTEXT

logger = logging.getLogger(__name__)

TranslationValues = Dict[str, Dict[str, TranslationData]]


def assign(values: TranslationValues, key: str, data: TranslationData) -> TranslationValues:
    """Store ``data`` under ``key`` in the bucket named by ``data.context``.

    ``values`` is updated in place and returned. Only call this on a working
    mapping that no collection holds yet.
    """
    bucket = values.get(data.context)
    if bucket is not None:
        bucket[key] = data
    else:
        values[data.context] = {key: data}
    return values


def deep_merge(base: Mapping[str, Mapping[str, TranslationData]],
               other: Mapping[str, Mapping[str, TranslationData]]) -> TranslationValues:
    """Merge two mappings context by context and key by key.

    Entries from ``other`` win on collision. Neither input is modified and
    the result shares no bucket with either of them.
    """
    merged: TranslationValues = {context: dict(bucket) for context, bucket in base.items()}
    for context, bucket in other.items():
        if context in merged:
            merged[context].update(bucket)
        else:
            merged[context] = dict(bucket)
    return merged


class TranslationCollection:
    """Immutable set of translation entries grouped by context."""

    __slots__ = ("_values",)

    def __init__(self, values: Optional[TranslationValues] = None) -> None:
        # Wrapped as-is; callers must not keep a mutable alias around.
        self._values: TranslationValues = values if values is not None else {}

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping[str, Any]]) -> "TranslationCollection":
        """Build a collection from plain ``{context: {key: entry}}`` data.

        Inner entries may be dicts or :class:`TranslationData` instances. A
        dict without a ``context`` takes the outer key as its context.
        """
        values: TranslationValues = {}
        for context, bucket in data.items():
            if not isinstance(bucket, Mapping):
                raise InvalidArgumentError(
                    f"bucket for context {context!r} must be a mapping, got {type(bucket).__name__}"
                )
            for key, entry in bucket.items():
                if isinstance(entry, Mapping):
                    entry = TranslationData.from_dict({"context": context, **entry})
                elif not isinstance(entry, TranslationData):
                    raise InvalidArgumentError(
                        f"entry {key!r} in context {context!r} must be a mapping, got {type(entry).__name__}"
                    )
                assign(values, key, entry)
        return cls(values)

    def to_dict(self) -> Dict[str, Dict[str, Dict[str, Any]]]:
        return {
            context: {key: data.to_dict() for key, data in bucket.items()}
            for context, bucket in self._values.items()
        }

    @property
    def values(self) -> Mapping[str, Mapping[str, TranslationData]]:
        """Read-only view of the stored mapping."""
        return MappingProxyType(
            {context: MappingProxyType(bucket) for context, bucket in self._values.items()}
        )

    # -- building -------------------------------------------------------

    def add(self, key: str, data: TranslationData) -> "TranslationCollection":
        return TranslationCollection(deep_merge(self._values, assign({}, key, data)))

    def add_keys(self, keys: Sequence[str], data: Sequence[TranslationData]) -> "TranslationCollection":
        """Add ``keys[i] -> data[i]`` for every position.

        Later pairs overwrite earlier ones with the same key and context.
        """
        if len(keys) != len(data):
            logger.warning("Rejected batch of %d keys with %d entries", len(keys), len(data))
            raise InvalidArgumentError(
                f"keys and data must have the same length ({len(keys)} != {len(data)})"
            )
        batch: TranslationValues = {}
        for key, entry in zip(keys, data):
            assign(batch, key, entry)
        logger.debug("Adding batch of %d entries", len(keys))
        return TranslationCollection(deep_merge(self._values, batch))

    def remove(self, key: str) -> "TranslationCollection":
        """Drop ``key`` from every context it appears in."""
        return self.filter(lambda k, _: k != key)

    # -- traversal ------------------------------------------------------

    def items(self) -> Iterator[Tuple[str, TranslationData]]:
        for bucket in self._values.values():
            yield from bucket.items()

    def for_each(self, callback: Callable[[str, TranslationData], Any]) -> "TranslationCollection":
        """Call ``callback(key, data)`` for every entry and return ``self``."""
        for key, data in self.items():
            callback(key, data)
        return self

    # -- transforms -----------------------------------------------------

    def filter(self, predicate: Callable[[str, TranslationData], bool]) -> "TranslationCollection":
        values: TranslationValues = {}
        for key, data in self.items():
            if predicate(key, data):
                assign(values, key, data)
        return TranslationCollection(values)

    def map(self, fn: Callable[[str, TranslationData], TranslationData]) -> "TranslationCollection":
        """Replace every entry with ``fn(key, data)``.

        The returned entry's ``context`` decides its bucket, so changing it
        moves the entry.
        """
        values: TranslationValues = {}
        for key, data in self.items():
            assign(values, key, fn(key, data))
        return TranslationCollection(values)

    def union(self, other: "TranslationCollection") -> "TranslationCollection":
        """Merge ``other`` into a copy of this collection; ``other`` wins on collision."""
        result = TranslationCollection(deep_merge(self._values, other._values))
        logger.debug("Union of %d and %d entries has %d", len(self), len(other), len(result))
        return result

    def intersect(self, other: "TranslationCollection") -> "TranslationCollection":
        """Keep this collection's entries whose key and context exist in ``other``."""
        result = self.filter(lambda key, data: other.has(key, data.context))
        logger.debug("Intersection of %d and %d entries has %d", len(self), len(other), len(result))
        return result

    def sort(self,
             key: Optional[Callable[[str], Any]] = None,
             *,
             compare: Optional[Callable[[str, str], int]] = None,
             reverse: bool = False,
             sort_contexts: bool = False) -> "TranslationCollection":
        """Return a copy whose keys iterate in sorted order within each context.

        ``key`` works as for :func:`sorted`; ``compare`` takes an old-style
        two-argument comparison instead. Context order is kept unless
        ``sort_contexts`` is set.
        """
        if key is not None and compare is not None:
            raise InvalidArgumentError("pass either key or compare, not both")
        if compare is not None:
            key = functools.cmp_to_key(compare)

        contexts = sorted(self._values) if sort_contexts else list(self._values)
        values: TranslationValues = {}
        for context in contexts:
            bucket = self._values[context]
            for k in sorted(bucket, key=key, reverse=reverse):
                assign(values, k, bucket[k])
        return TranslationCollection(values)

    # -- queries --------------------------------------------------------

    def has(self, key: str, context: str = DEFAULT_CONTEXT) -> bool:
        bucket = self._values.get(context)
        return bucket is not None and key in bucket

    def get(self, key: str, context: str = DEFAULT_CONTEXT) -> Optional[TranslationData]:
        bucket = self._values.get(context)
        return bucket.get(key) if bucket is not None else None

    def bucket(self, context: str) -> Mapping[str, TranslationData]:
        """Return a read-only view of one context.

        Raises :class:`ContextNotFoundError` if the context is absent.
        """
        try:
            return MappingProxyType(self._values[context])
        except KeyError:
            raise ContextNotFoundError(context) from None

    def contexts(self) -> Tuple[str, ...]:
        return tuple(self._values)

    def keys(self, context: str) -> Tuple[str, ...]:
        """Keys of ``context`` in iteration order; empty if it is absent."""
        return tuple(self._values.get(context, ()))

    def count(self, context: str) -> int:
        return len(self._values.get(context, ()))

    def is_empty(self, context: str) -> bool:
        return self.count(context) == 0

    # -- protocols ------------------------------------------------------

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._values.values())

    def __bool__(self) -> bool:
        return len(self) > 0

    def __iter__(self) -> Iterator[Tuple[str, TranslationData]]:
        return self.items()

    def __contains__(self, item: Any) -> bool:
        if isinstance(item, tuple):
            if len(item) != 2:
                return False
            key, context = item
            return self.has(key, context)
        return self.has(item)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TranslationCollection):
            return NotImplemented
        return self._non_empty() == other._non_empty()

    def __hash__(self) -> int:
        return hash(frozenset(
            (context, key, data)
            for context, bucket in self._values.items()
            for key, data in bucket.items()
        ))

    def _non_empty(self) -> TranslationValues:
        return {context: bucket for context, bucket in self._values.items() if bucket}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._values!r})"
