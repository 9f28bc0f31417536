"""Matching engine: tokenize, score, rank, rotate."""

from .tokenizer import tokenize
from .scoring import ScoringEngine, score
from .ranking import rank, rank_all, rotate
from .shortlist import build_shortlist

__all__ = [
    "tokenize",
    "ScoringEngine",
    "score",
    "rank",
    "rank_all",
    "rotate",
    "build_shortlist",
]
