from __future__ import annotations
import random
from typing import Iterable, List, Sequence

ALPHABET = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ'
# Y is not treated as a vowel
VOWELS = 'AEIOU'


def random_letter(rng=random) -> str:
    return rng.choice(ALPHABET)


def random_vowel(rng=random) -> str:
    return rng.choice(VOWELS)


def generate_letters(num_letters: int, rng=random) -> List[str]:
    """Deal the tiles for one game.

    The first tile is always a vowel so a game is rarely unplayable; the rest
    are drawn from the whole alphabet and may repeat.
    """
    if num_letters < 1:
        raise ValueError(f"num_letters must be at least 1, got {num_letters}")
    letters = [random_vowel(rng)]
    for _ in range(1, num_letters):
        letters.append(random_letter(rng))
    return letters


def normalize_word(word: str) -> str:
    """Upper-case one character at a time.

    Characters whose upper case expands (ß -> SS) are kept as typed, so the
    normalized word always has one character per submitted character.
    """
    out = []
    for ch in word:
        upper = ch.upper()
        out.append(upper if len(upper) == 1 else ch)
    return ''.join(out)


def uses_available_letters(word: str, letters: Sequence[str]) -> bool:
    # Each tile may be consumed once per word
    if not word:
        return False
    remaining = list(letters)
    for ch in normalize_word(word):
        if ch not in remaining:
            return False
        remaining.remove(ch)
    return True


def was_already_used(word: str, history: Iterable[str]) -> bool:
    return normalize_word(word) in history
