"""
Tokenizer - split free-text preferences into lower-cased tokens.
"""
import re


_DELIMITERS = re.compile(r"[\s,;/&]+")


def tokenize(raw: str) -> list[str]:
    """
    Split preference text on whitespace, commas, semicolons, slashes and ampersands.

    Order and duplicates are kept; callers that need membership tests
    build a set from the result.

    >>> tokenize("Research, Ops/Automation")
    ['research', 'ops', 'automation']
    """
    tokens = (piece.strip() for piece in _DELIMITERS.split(raw.lower()))
    return [token for token in tokens if token]


def token_set(raw: str) -> set[str]:
    """Tokens of ``raw`` as a set for membership checks."""
    return set(tokenize(raw))
