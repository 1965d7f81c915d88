"""Batch generation of texts from grammars."""

from grammar import ORIGIN, Grammar
from grammar_source import JsonGrammarSource


def generate_one(grammar_dict: dict, origin: str = ORIGIN, seed: int | None = None) -> str:
    """
    Generate a single text from a grammar.

    Args:
        grammar_dict: Grammar as a dictionary
        origin: The starting rule (default: "origin")
        seed: Optional seed for reproducible output

    Returns:
        Generated text
    """
    grammar = Grammar(grammar_dict, origin=origin)
    return grammar.generate(seed)


def run_grammar(
    source: str | dict | JsonGrammarSource,
    count: int = 1,
    origin: str = ORIGIN,
    seed: int | None = None,
    text: str | None = None,
) -> list[str]:
    """
    Generate multiple texts from a grammar.

    The grammar is seeded once before the first text, so the whole batch
    is reproducible for a given seed.

    Args:
        source: JSON string, dictionary or parsed source for the grammar
        count: Number of variations to generate
        origin: The starting rule (default: "origin")
        seed: Optional seed for reproducible output
        text: Template to expand instead of the origin rule

    Returns:
        List of generated texts

    Raises:
        GrammarLoadError: If grammar is invalid
    """
    grammar = Grammar(source, origin=origin)
    if seed is not None:
        grammar.rng.seed(seed)

    results = []
    for _ in range(count):
        if text is None:
            results.append(grammar.generate())
        else:
            results.append(grammar.resolve(text))

    return results
