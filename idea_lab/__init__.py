"""Idea Lab - zero-capital business idea matcher."""

__version__ = "2.0.0"
