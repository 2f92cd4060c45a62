"""
Immutable flag metadata.

Providers attach metadata to an evaluation result to describe how the value
was produced (which rule matched, provider diagnostics, ...). Values are built
once through FlagMetadataBuilder and then only read back through typed
accessors.

Usage:
    metadata = (
        FlagMetadata.builder()
        .add_boolean("active", True)
        .add_integer("ruleIndex", 3)
        .build()
    )
    metadata.get_integer("ruleIndex")  # 3
    metadata.get_string("active")      # raises MetadataTypeMismatchError
"""

import logging
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, KeysView, Mapping, Optional

from .exceptions import MetadataNotFoundError, MetadataTypeMismatchError

logger = logging.getLogger(__name__)


class MetadataValueKind(Enum):
    """Kinds of values a flag metadata entry can hold."""

    STRING = "String"
    INTEGER = "Integer"
    FLOAT = "Float"
    DOUBLE = "Double"
    BOOLEAN = "Boolean"


@dataclass(frozen=True)
class MetadataValue:
    """A metadata value tagged with the kind it was added as."""

    kind: MetadataValueKind
    value: Any


class FlagMetadata:
    """
    Read-only, typed key-value metadata attached to a flag evaluation.

    Each accessor checks the kind tag recorded by the builder. There is no
    coercion between kinds: an entry added with add_integer is never returned
    by get_float, and FLOAT and DOUBLE entries are distinct even though both
    hold a Python float.
    """

    __slots__ = ("_entries",)

    def __init__(self, entries: Optional[Mapping[str, MetadataValue]] = None):
        snapshot = dict(entries or {})
        for key, entry in snapshot.items():
            if not isinstance(entry, MetadataValue):
                raise TypeError(
                    f"metadata entry {key!r} must be a MetadataValue, "
                    f"got {type(entry).__name__}; use FlagMetadata.builder()"
                )
        object.__setattr__(self, "_entries", MappingProxyType(snapshot))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # Immutable, so copies can share the instance.
    def __copy__(self) -> "FlagMetadata":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "FlagMetadata":
        return self

    def __reduce__(self):
        return (FlagMetadata, (dict(self._entries),))

    @staticmethod
    def builder() -> "FlagMetadataBuilder":
        """Obtain a fresh builder."""
        return FlagMetadataBuilder()

    @classmethod
    def empty(cls) -> "FlagMetadata":
        """Metadata with no entries."""
        return cls()

    def get_string(self, key: str) -> str:
        """Retrieve a string value for the given key.

        Raises:
            MetadataNotFoundError: If the key does not exist.
            MetadataTypeMismatchError: If the entry is not a string.
        """
        return self._get_value(key, MetadataValueKind.STRING)

    def get_integer(self, key: str) -> int:
        """Retrieve an integer value for the given key.

        Raises:
            MetadataNotFoundError: If the key does not exist.
            MetadataTypeMismatchError: If the entry is not an integer.
        """
        return self._get_value(key, MetadataValueKind.INTEGER)

    def get_float(self, key: str) -> float:
        """Retrieve a float value for the given key.

        Raises:
            MetadataNotFoundError: If the key does not exist.
            MetadataTypeMismatchError: If the entry is not a float.
        """
        return self._get_value(key, MetadataValueKind.FLOAT)

    def get_double(self, key: str) -> float:
        """Retrieve a double value for the given key.

        Raises:
            MetadataNotFoundError: If the key does not exist.
            MetadataTypeMismatchError: If the entry is not a double.
        """
        return self._get_value(key, MetadataValueKind.DOUBLE)

    def get_boolean(self, key: str) -> bool:
        """Retrieve a boolean value for the given key.

        Raises:
            MetadataNotFoundError: If the key does not exist.
            MetadataTypeMismatchError: If the entry is not a boolean.
        """
        return self._get_value(key, MetadataValueKind.BOOLEAN)

    def _get_value(self, key: str, expected: MetadataValueKind) -> Any:
        entry = self._entries.get(key)
        if entry is None:
            raise MetadataNotFoundError(key)

        if entry.kind is not expected:
            raise MetadataTypeMismatchError(key, expected.value, entry.kind.value)

        return entry.value

    def get_kind(self, key: str) -> Optional[MetadataValueKind]:
        """Kind of the entry stored under key, or None if absent."""
        entry = self._entries.get(key)
        return entry.kind if entry is not None else None

    @property
    def entries(self) -> Mapping[str, MetadataValue]:
        """Read-only view of the tagged entries."""
        return self._entries

    def keys(self) -> KeysView[str]:
        return self._entries.keys()

    def is_empty(self) -> bool:
        return not self._entries

    def to_dict(self) -> Dict[str, Any]:
        """Plain copy of key -> value, without kind tags."""
        return {key: entry.value for key, entry in self._entries.items()}

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FlagMetadata):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    def __hash__(self) -> int:
        return hash(frozenset(self._entries.items()))

    def __repr__(self) -> str:
        items = ", ".join(
            f"{key!r}: {entry.kind.value}({entry.value!r})"
            for key, entry in self._entries.items()
        )
        return f"FlagMetadata({{{items}}})"


class FlagMetadataBuilder:
    """
    Accumulates metadata entries for a single FlagMetadata.

    Adding a key that already exists replaces the previous entry, whatever kind
    it had. Not safe for concurrent use; confine a builder to one construction
    flow and publish only the built FlagMetadata.
    """

    def __init__(self):
        self._entries: Dict[str, MetadataValue] = {}

    def add_string(self, key: str, value: str) -> "FlagMetadataBuilder":
        """Add a string value to the metadata."""
        return self._add(key, MetadataValueKind.STRING, value)

    def add_integer(self, key: str, value: int) -> "FlagMetadataBuilder":
        """Add an integer value to the metadata."""
        return self._add(key, MetadataValueKind.INTEGER, value)

    def add_float(self, key: str, value: float) -> "FlagMetadataBuilder":
        """Add a float value to the metadata."""
        return self._add(key, MetadataValueKind.FLOAT, value)

    def add_double(self, key: str, value: float) -> "FlagMetadataBuilder":
        """Add a double value to the metadata."""
        return self._add(key, MetadataValueKind.DOUBLE, value)

    def add_boolean(self, key: str, value: bool) -> "FlagMetadataBuilder":
        """Add a boolean value to the metadata."""
        return self._add(key, MetadataValueKind.BOOLEAN, value)

    def _add(self, key: str, kind: MetadataValueKind, value: Any) -> "FlagMetadataBuilder":
        previous = self._entries.get(key)
        if previous is not None and previous.kind is not kind:
            logger.debug(
                f"Metadata key {key!r} overwritten: {previous.kind.value} -> {kind.value}"
            )
        self._entries[key] = MetadataValue(kind, value)
        return self

    def build(self) -> FlagMetadata:
        """Snapshot the added entries into an immutable FlagMetadata."""
        return FlagMetadata(self._entries)


def builder() -> FlagMetadataBuilder:
    """Module-level shortcut for FlagMetadata.builder()."""
    return FlagMetadataBuilder()
