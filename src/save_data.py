"""Per-key value stacks used by grammar actions."""

import logging
from contextlib import contextmanager
from typing import Iterable, Iterator

logger = logging.getLogger(__name__)


class SaveDataStore:
    """
    Mapping from key to a stack of saved values.

    A key present in the store always holds at least one value; popping the
    last value removes the key.
    """

    def __init__(self):
        self._data: dict[str, list[str]] = {}

    def push(self, key: str, value: str) -> None:
        """Push a value on top of the key's stack."""
        self._data.setdefault(key, []).append(value)

    def pop(self, key: str) -> None:
        """Remove the most recent value for a key. Absent keys are ignored."""
        values = self._data.get(key)
        if values is None:
            logger.debug(f"Pop of absent save key {key!r} ignored")
            return
        values.pop()
        if not values:
            del self._data[key]

    def peek(self, key: str) -> str | None:
        """Return the most recent value for a key, or None if absent."""
        values = self._data.get(key)
        return values[-1] if values else None

    @contextmanager
    def scoped(self, pairs: Iterable[tuple[str, str]]) -> Iterator[None]:
        """
        Push key/value pairs for the duration of a block.

        Every pushed key is popped again when the block exits, in reverse
        order, whether it returns normally or raises.

        Args:
            pairs: (key, value) pairs to push, in order
        """
        pushed = []
        try:
            for key, value in pairs:
                self.push(key, value)
                pushed.append(key)
            yield
        finally:
            for key in reversed(pushed):
                self.pop(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
