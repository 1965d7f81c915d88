"""JSON grammar source: parsing and the lookup interface the engine reads through."""

import json
from pathlib import Path
from typing import Any


class GrammarLoadError(Exception):
    """Raised when a grammar source cannot be loaded."""
    pass


class JsonGrammarSource:
    """
    A parsed grammar definition.

    The top-level value must be a JSON object whose keys are symbol names and
    whose values are strings or arrays of strings.
    """

    def __init__(self, raw: str | dict):
        """
        Parse a grammar source.

        Args:
            raw: JSON text, or an already-parsed dictionary

        Raises:
            GrammarLoadError: If the source is empty, not object-rooted,
                or not valid JSON
        """
        if isinstance(raw, dict):
            self._root = raw
            return
        if not isinstance(raw, str):
            raise GrammarLoadError(f"Unsupported grammar source type: {type(raw).__name__}")

        text = raw.strip()
        if not text:
            raise GrammarLoadError("Grammar source is empty")
        if not text.startswith("{"):
            raise GrammarLoadError("Grammar source must be a JSON object")
        try:
            root = json.loads(text)
        except json.JSONDecodeError as e:
            raise GrammarLoadError(f"Invalid JSON grammar: {e}") from e
        if not isinstance(root, dict):
            raise GrammarLoadError("Grammar source must be a JSON object")
        self._root = root

    def is_object(self) -> bool:
        return isinstance(self._root, dict)

    def keys(self) -> list[str]:
        return list(self._root)

    def has_key(self, key: str) -> bool:
        return key in self._root

    def get(self, key: str) -> Any:
        return self._root.get(key)

    @staticmethod
    def is_array(value: Any) -> bool:
        return isinstance(value, list)

    @staticmethod
    def is_string(value: Any) -> bool:
        return isinstance(value, str)

    @staticmethod
    def array_length(value: list) -> int:
        return len(value)

    @staticmethod
    def array_item(value: list, index: int) -> str:
        item = value[index]
        if not isinstance(item, str):
            raise GrammarLoadError(f"Expected a string at index {index}, got {type(item).__name__}")
        return item

    @staticmethod
    def string_value(value: Any) -> str:
        if not isinstance(value, str):
            raise GrammarLoadError(f"Expected a string, got {type(value).__name__}")
        return value


def load_grammar_file(path: Path) -> JsonGrammarSource:
    """
    Read and parse a grammar file.

    Args:
        path: Path to a UTF-8 JSON grammar file

    Returns:
        The parsed grammar source

    Raises:
        GrammarLoadError: If the file cannot be read or parsed
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise GrammarLoadError(f"Cannot read grammar file {path}: {e}") from e
    return JsonGrammarSource(text)
