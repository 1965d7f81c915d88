"""Grammar engine that expands ``#tags#`` and ``[actions]`` against a rule set."""

import inspect
import logging
import re
from contextlib import ExitStack
from types import MappingProxyType
from typing import Callable, Mapping

from escaping import collapse_escapes, split_live, unescape
from grammar_source import GrammarLoadError, JsonGrammarSource
from modifiers import Modifier, default_modifiers
from random_source import RandomSource
from save_data import SaveDataStore
from spans import SpanKind, extract_span, find_opening

logger = logging.getLogger(__name__)

ORIGIN = "origin"
POP = "POP"

# "replace(beach,mall)" -> name "replace", params "beach,mall"
MODIFIER_CALL = re.compile(r"^(?P<name>[^()]+)\((?P<params>.*)\)$", re.DOTALL)

Rule = str | tuple[str, ...]


def load_rules(source: JsonGrammarSource) -> dict[str, Rule]:
    """
    Read symbol rules out of a grammar source.

    String values become single literal rules; arrays become alternatives.
    Empty arrays and values of other types are skipped with a warning.

    Args:
        source: Parsed grammar source

    Returns:
        Dictionary mapping symbol name to a string or a tuple of alternatives

    Raises:
        GrammarLoadError: If the source is not an object or an array holds
            something other than strings
    """
    if not source.is_object():
        raise GrammarLoadError("Grammar source must be a JSON object")

    rules: dict[str, Rule] = {}
    for key in source.keys():
        value = source.get(key)
        if source.is_string(value):
            rules[key] = source.string_value(value)
        elif source.is_array(value):
            count = source.array_length(value)
            if count == 0:
                logger.warning(f"Skipping rule {key!r}: no alternatives")
                continue
            try:
                rules[key] = tuple(source.array_item(value, i) for i in range(count))
            except GrammarLoadError as e:
                raise GrammarLoadError(f"Rule {key!r}: {e}") from e
        else:
            logger.warning(f"Skipping rule {key!r}: unsupported value type {type(value).__name__}")
    return rules


def parse_modifier(segment: str) -> tuple[str, tuple[str, ...]]:
    """
    Split a modifier segment into its name and call parameters.

    Parameters are separated by live commas and then unescaped, so
    ``replace(\\.,\\,)`` passes ``.`` and ``,``.
    """
    match = MODIFIER_CALL.match(segment)
    if not match:
        return segment, ()
    params = split_live(match.group("params"), ",")
    return match.group("name"), tuple(unescape(param) for param in params)


def accepts_params(func: Modifier, count: int) -> bool:
    """Check whether a modifier can be called with the text plus ``count`` parameters."""
    try:
        inspect.signature(func).bind("", *([""] * count))
    except TypeError:
        return False
    except ValueError:
        # No introspectable signature; call it with the text only
        return False
    return True


class Grammar:
    """
    A loaded rule set plus the state needed to expand text against it.

    Not safe for concurrent use: actions push and pop values on a store
    shared by every resolve call on the instance.
    """

    def __init__(
        self,
        source: str | dict | JsonGrammarSource,
        rng: RandomSource | None = None,
        modifiers: Mapping[str, Modifier] | None = None,
        origin: str = ORIGIN,
    ):
        """
        Load a grammar.

        Args:
            source: JSON text, a parsed dictionary, or a JsonGrammarSource
            rng: Random source for picking alternatives (default: a fresh, unseeded one)
            modifiers: Modifier table (default: the built-in modifiers)
            origin: Entry symbol used by generate()

        Raises:
            GrammarLoadError: If the source cannot be loaded
        """
        if not isinstance(source, JsonGrammarSource):
            source = JsonGrammarSource(source)
        self._rules = load_rules(source)
        self._modifiers: dict[str, Modifier] = (
            default_modifiers() if modifiers is None else dict(modifiers)
        )
        self.rng = rng if rng is not None else RandomSource()
        self.save_data = SaveDataStore()
        self.origin = origin
        logger.debug(f"Loaded grammar with {len(self._rules)} symbols")

    @property
    def rules(self) -> Mapping[str, tuple[str, ...]]:
        """Symbol rules, each normalized to a tuple of alternatives."""
        return MappingProxyType({
            key: (rule,) if isinstance(rule, str) else rule
            for key, rule in self._rules.items()
        })

    @property
    def symbols(self) -> list[str]:
        return list(self._rules)

    @property
    def modifiers(self) -> Mapping[str, Modifier]:
        return MappingProxyType(self._modifiers)

    def add_modifier(self, name: str, func: Modifier) -> None:
        """Register a modifier, replacing any existing one with the same name."""
        self._modifiers[name] = func

    def generate(self, seed: int | None = None) -> str:
        """Expand the origin symbol."""
        return self.generate_from_node(self.origin, seed)

    def generate_from_node(self, symbol: str, seed: int | None = None) -> str:
        """Expand a single symbol, given without surrounding ``#``."""
        return self.resolve(f"#{symbol}#", seed)

    def resolve(self, text: str, seed: int | None = None) -> str:
        """
        Expand every tag and action in a string.

        Args:
            text: Text containing ``#symbol.modifiers#`` tags and ``[key:value]`` actions
            seed: Re-seed the random source before expanding, for reproducible output

        Returns:
            The expanded text
        """
        if seed is not None:
            self.rng.seed(seed)
        return collapse_escapes(self._resolve(text))

    def _resolve(self, text: str, finish: Callable[[str], str] | None = None) -> str:
        """
        Expand ``text`` left to right.

        ``finish`` receives the fully expanded text while every action declared
        in ``text`` is still in scope; tags use it to look up their symbol
        under the actions written inside them.
        """
        parts = []
        pos = 0
        with ExitStack() as scopes:
            while True:
                start = find_opening(text, pos)
                if start is None:
                    parts.append(text[pos:])
                    break
                parts.append(text[pos:start])

                span = extract_span(text, start)
                if span is None:
                    logger.debug(f"Unbalanced {text[start]!r} at offset {start} kept as text")
                    parts.append(text[start])
                    pos = start + 1
                    continue

                if span.kind is SpanKind.ACTION:
                    # Saved until the rest of this text is expanded
                    scopes.enter_context(self.save_data.scoped(self._run_action(span.content)))
                else:
                    parts.append(self._resolve(span.content, finish=self._expand_tag))
                pos = span.end

            resolved = "".join(parts)
            return finish(resolved) if finish else resolved

    def _run_action(self, content: str) -> list[tuple[str, str]]:
        """
        Interpret the inside of ``[...]``.

        Returns:
            (key, value) pairs to save for the action's scope
        """
        resolved = self._resolve(content)
        parts = split_live(resolved, ":", maxsplit=1)

        if len(parts) == 1:
            # [symbol] is expanded for its side effects only
            if resolved:
                self._resolve(f"#{resolved}#")
            return []

        key, value = parts
        if not key:
            logger.debug(f"Action {content!r} has no key, ignored")
            return []
        if value == POP:
            self.save_data.pop(key)
            return []
        return [(key, self._resolve(option)) for option in split_live(value, ",")]

    def _expand_tag(self, inner: str) -> str:
        """Resolve ``symbol.mod1.mod2`` to its final text."""
        symbol, *modifier_segments = split_live(inner, ".")
        text = self._resolve(self._resolve_symbol(symbol))
        return self._apply_modifiers(text, modifier_segments)

    def _resolve_symbol(self, symbol: str) -> str:
        """Saved value first, then a grammar rule, else the symbol itself."""
        saved = self.save_data.peek(symbol)
        if saved is not None:
            return saved

        rule = self._rules.get(symbol)
        if rule is None:
            logger.debug(f"Unknown symbol {symbol!r} used as text")
            return symbol
        if isinstance(rule, str):
            return rule
        return self.rng.choice(rule)

    def _apply_modifiers(self, text: str, segments: list[str]) -> str:
        for segment in segments:
            name, params = parse_modifier(segment)
            func = self._modifiers.get(name)
            if func is None:
                logger.debug(f"Unknown modifier {name!r} skipped")
                continue
            if params and not accepts_params(func, len(params)):
                logger.debug(f"Modifier {name!r} takes no parameters, ignoring {params!r}")
                params = ()
            text = func(text, *params)
        return text
