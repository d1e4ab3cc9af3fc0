"""
Shared fixtures: deterministic generated corpora of model-like values.
"""

import random

import pytest

# Fragments chatty models emit around and inside their answers
TEXT_FRAGMENTS = [
    "word",
    " ",
    "\n",
    "  ",
    "**",
    "*",
    "__",
    "_",
    "- ",
    "* ",
    "•",
    ":",
    "```json",
    "```",
    "Here is the result:",
    "Sure, ",
    "below is",
    "snake_case",
    "{",
    "}",
    '"',
    "Café ✓",
]


def random_text(rng: random.Random) -> str:
    """Join a random run of fragments into one string."""
    return "".join(rng.choice(TEXT_FRAGMENTS) for _ in range(rng.randint(0, 30)))


def random_json(rng: random.Random, depth: int = 0):
    """Generate a random JSON value with markdown-noisy strings."""
    leaves = [
        None,
        True,
        False,
        rng.randint(-10**6, 10**6),
        rng.uniform(-1e6, 1e6),
        "",
        "**bold** - item",
        random_text(rng),
    ]
    if depth >= 4 or rng.random() < 0.3:
        return rng.choice(leaves)
    if rng.random() < 0.5:
        return [random_json(rng, depth + 1) for _ in range(rng.randint(0, 4))]
    keys = ["text", "value", "description", "name", "score", "items"]
    return {rng.choice(keys): random_json(rng, depth + 1) for _ in range(rng.randint(0, 4))}


@pytest.fixture
def json_corpus():
    """500 generated JSON values (same values on every run)."""
    rng = random.Random(1234)
    return [random_json(rng) for _ in range(500)]


@pytest.fixture
def text_corpus():
    """500 generated markdown-noisy strings (same values on every run)."""
    rng = random.Random(4321)
    return [random_text(rng) for _ in range(500)]
