from __future__ import annotations

from typing import Any, Protocol, TypeVar

T = TypeVar("T")


class KeyValueStore(Protocol):
    """
    The contract the scheduler builds on: typed values stored under string keys.
    """

    def set(self, key: str, value: Any) -> None:
        """Encode and persist `value` under `key`, replacing any previous value."""
        ...

    def get(self, key: str, type_: type[T]) -> T:
        """Decode the value under `key` as `type_`; raise KeyNotFoundError if absent."""
        ...

    def remove(self, key: str) -> None:
        """Delete `key` if present. Absence is not an error."""
        ...

    def keys(self) -> list[str]:
        ...
