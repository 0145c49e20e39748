"""Proper noun lookup used to decide whether a tag description keeps its capital."""

from functools import lru_cache
from pathlib import Path
from typing import FrozenSet

DATA_DIR = Path(__file__).parent / "data"
GIVEN_NAMES_FILE = DATA_DIR / "given_names.txt"

# Technical terms that are not in the given-name list
TECHNICAL_PROPER_NOUNS = frozenset({"Java"})


@lru_cache(maxsize=1)
def load_given_names() -> FrozenSet[str]:
    with open(GIVEN_NAMES_FILE, "r", encoding="utf-8") as f:
        return frozenset(
            line.strip() for line in f if line.strip() and not line.startswith("#")
        )


def is_proper_noun(word: str) -> bool:
    """True if ``word`` is a known proper noun (a technical term or a given name)."""
    word = word.rstrip(".,;:!?'\"")
    if word.endswith("'s"):
        word = word[:-2]
    return word in TECHNICAL_PROPER_NOUNS or word in load_given_names()
