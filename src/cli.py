#!/usr/bin/env python3
"""CLI entry point for the storyloom grammar expander."""

import logging
import sys
from pathlib import Path

import click

from config import paths, settings
from grammar_source import GrammarLoadError, load_grammar_file
from runner import run_grammar


def find_grammar(grammar: str) -> Path:
    """
    Locate a grammar file given a path or a bare name.

    A bare name such as ``pets`` is looked up as ``grammars/pets.json``.

    Args:
        grammar: File path or grammar name

    Returns:
        Path to the grammar file (which may not exist)
    """
    path = Path(grammar)
    if path.exists() or path.suffix == ".json" or len(path.parts) > 1:
        return path
    return paths.grammars_dir / f"{grammar}.json"


@click.command()
@click.argument('grammar')
@click.option(
    '-n', '--count',
    default=settings.expansion.default_count,
    type=click.IntRange(min=1),
    help='Number of texts to generate (default: 1)'
)
@click.option(
    '--seed',
    type=int,
    default=None,
    help='Random seed for reproducible output (default: random)'
)
@click.option(
    '--origin',
    default=settings.expansion.origin,
    help='Symbol to expand (default: origin)'
)
@click.option(
    '-t', '--text',
    default=None,
    help='Template to expand instead of the origin symbol'
)
@click.option(
    '-v', '--verbose',
    is_flag=True,
    help='Log expansion details to stderr'
)
def main(
    grammar: str,
    count: int,
    seed: int | None,
    origin: str,
    text: str | None,
    verbose: bool,
):
    """
    Expand text from a JSON grammar.

    Example:
        python cli.py grammars/pets.json -n 5
        python cli.py pets --seed 42
        python cli.py pets -t "[pet:#animal#]I have #pet.a#."
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.logging.level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    grammar_path = find_grammar(grammar)
    try:
        source = load_grammar_file(grammar_path)
        outputs = run_grammar(source, count=count, origin=origin, seed=seed, text=text)
    except GrammarLoadError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    for output in outputs:
        click.echo(output)


if __name__ == '__main__':
    main()
