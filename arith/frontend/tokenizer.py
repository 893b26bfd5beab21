from __future__ import annotations
from typing import List
from arith.frontend.utils import Token, InputTooLongError, token_map

# Raw input accepted by tokenize() unless told otherwise
MAX_INPUT_SIZE = 100

def tokenize(src: str, max_size: int|None = MAX_INPUT_SIZE) -> List[Token]:
    """Keeps the characters of @src that belong to the calculator alphabet.

    Anything else (whitespace included) is dropped without splitting the
    surrounding characters, so "2 3" gives the same digits as "23". Input
    longer than @max_size characters is rejected, not truncated.
    """
    if max_size is not None and len(src) > max_size:
        raise InputTooLongError(len(src), max_size)

    tokens = []
    for i, char in enumerate(src):
        if char in token_map:
            tokens.append(Token(token_map[char], char, i))
    return tokens
