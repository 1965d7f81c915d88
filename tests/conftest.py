"""Shared test fixtures for all test modules."""

import json
import sys
import tempfile
from pathlib import Path

import pytest

# Add src directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_grammar():
    """Grammar exercising saved data, escapes and single-string rules."""
    return {
        "origin": ["#subject# in #setting#"],
        "subject": ["a cat", "a dog"],
        "setting": ["a garden", "a forest"],
        "one": "one",
        "two": "two",
        "animal": ["cat", "dog", "owl"],
        "mood": ["calm", "angry"],
        "deepHash": "\\#00FF00",
        "deeperHash": "\\#FF00FF",
        "nonrecursiveStory": "#pet.capitalize# went to the beach.",
    }


@pytest.fixture
def grammar_file(temp_dir, sample_grammar):
    """Write the sample grammar to a JSON file."""
    path = temp_dir / "sample.json"
    path.write_text(json.dumps(sample_grammar))
    return path
