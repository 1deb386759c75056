"""Exceptions raised by the filter engine."""

from __future__ import annotations


class ProfanityFilterError(Exception):
    """Base class for every error raised by :mod:`profanity_filter`."""


class PatternError(ProfanityFilterError, ValueError):
    """A base word produced a pattern that does not compile."""

    def __init__(self, word: str, pattern: str, reason: str):
        super().__init__(f"cannot compile pattern for {word!r}: {reason} ({pattern})")
        self.word = word
        self.pattern = pattern


class WordListError(ProfanityFilterError):
    """A word-list file exists but could not be parsed."""
