"""Unit test fixtures.

Provides token generators for the property-style classifier tests.
"""

import random
import string

import pytest


@pytest.fixture
def random_tokens():
    """Factory fixture producing a reproducible mix of token kinds.

    Usage:
        def test_something(random_tokens):
            tokens = random_tokens(count=200, seed=7)
    """
    pools = [
        lambda rng: str(rng.randint(-10_000, 10_000)),
        lambda rng: f"{rng.randint(-99, 99)}.{rng.randint(0, 99)}",
        lambda rng: "".join(rng.choices(string.ascii_letters, k=rng.randint(1, 8))),
        lambda rng: "".join(rng.choices(string.punctuation, k=rng.randint(1, 3))),
        lambda rng: f"{rng.randint(0, 9)}{rng.choice(string.ascii_lowercase)}",
        lambda rng: rng.choice(["é", "ß", "日本", " ", "\t", "1e3", "0x1F", "NaN"]),
    ]

    def _create(count: int = 100, seed: int = 0) -> list[str]:
        rng = random.Random(seed)
        return [rng.choice(pools)(rng) for _ in range(count)]

    return _create
