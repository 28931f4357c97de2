"""
Word extraction from input files.
Tokens are delimited by ASCII whitespace only (space, \\t \\n \\v \\f \\r); only ASCII
letters survive normalization, lowercased.
"""

import re
import string
from typing import Iterator

_LETTERS = frozenset(string.ascii_letters)
_SEPARATORS = re.compile(r'[ \t\n\v\f\r]+')


def normalize(token: str) -> str:
    """Strip every non-letter character and lowercase the rest"""
    return ''.join(c for c in token if c in _LETTERS).lower()


def split_tokens(line: str):
    """Split on ASCII whitespace; other separators such as NBSP stay inside the token"""
    return [token for token in _SEPARATORS.split(line) if token]


def iter_words(path: str) -> Iterator[str]:
    """
    Lazily yield normalized words from a file

    Args:
        path: Input file path

    Yields:
        Non-empty normalized words, in file order

    Raises:
        OSError: If the file can't be opened or read (raised on first iteration)
    """
    with open(path, 'r', encoding='utf-8', errors='ignore') as f:
        for line in f:
            for token in split_tokens(line):
                word = normalize(token)
                if word:
                    yield word


class FileTokens:
    """Restartable word sequence: every iteration re-reads the file from the start"""

    def __init__(self, path: str):
        self.path = path

    def __iter__(self) -> Iterator[str]:
        return iter_words(self.path)

    def __repr__(self):
        return f"FileTokens({self.path!r})"
