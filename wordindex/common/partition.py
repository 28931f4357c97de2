"""
Letter partitioning for reducers.
Each lowercase letter is owned by exactly one reducer: (letter - 'a') mod M.
"""

import string
from typing import List

ALPHABET = string.ascii_lowercase


def reducer_id(letter: str, num_reducers: int) -> int:
    """
    Map a lowercase letter to the reducer that owns it

    Args:
        letter: Single lowercase ASCII letter (usually a word's first character)
        num_reducers: Number of reducers M, must be >= 1

    Returns:
        Reducer index in [0, num_reducers)

    Raises:
        ValueError: If num_reducers < 1 or letter is not in a-z
    """
    if num_reducers < 1:
        raise ValueError(f"num_reducers must be >= 1, got {num_reducers}")
    if len(letter) != 1 or letter not in ALPHABET:
        raise ValueError(f"Not a lowercase letter: {letter!r}")
    return (ord(letter) - ord('a')) % num_reducers


def letters_for_reducer(reducer: int, num_reducers: int) -> List[str]:
    """Letters a reducer is responsible for, in alphabetical order"""
    return [letter for letter in ALPHABET if reducer_id(letter, num_reducers) == reducer]


def owns_word(word: str, reducer: int, num_reducers: int) -> bool:
    """True if the word's first letter belongs to the given reducer"""
    return reducer_id(word[0], num_reducers) == reducer
