"""Built-in substitution strategies.

A strategy maps ``(config, match)`` to the text that replaces the match.
Strategies that need replacement words or characters fall back to
:func:`empty` when the configured list is empty.
"""

from __future__ import annotations

import random
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Union

from loguru import logger as log

if TYPE_CHECKING:  # pragma: no cover
    from .config import FilterSettings
    from .scanner import Match

__all__ = [
    "Strategy",
    "StrategyFunc",
    "STRATEGIES",
    "resolve_strategy",
    "ignore",
    "empty",
    "random_symbols",
    "fixed_symbols",
    "fixed_random_symbols",
    "substitute_word",
    "random_word",
    "fixed_word",
]

StrategyFunc = Callable[["FilterSettings", "Match"], Optional[str]]


class Strategy(str, Enum):
    IGNORE = "ignore"
    EMPTY = "empty"
    RANDOM_SYMBOLS = "random-symbols"
    FIXED_SYMBOLS = "fixed-symbols"
    FIXED_RANDOM_SYMBOLS = "fixed-random-symbols"
    SUBSTITUTE_WORD = "substitute-word"
    RANDOM_WORD = "random-word"
    FIXED_WORD = "fixed-word"


def ignore(cfg: "FilterSettings", match: "Match") -> str:
    """Leave the word in place (detection only)."""
    return match.word


def empty(cfg: "FilterSettings", match: "Match") -> str:
    return ""


def random_symbols(cfg: "FilterSettings", match: "Match") -> str:
    """A random replacement character for each position of the word."""
    chars = cfg.replacement_characters
    if not chars:
        return empty(cfg, match)
    return "".join(random.choice(chars) for _ in match.word)


def fixed_symbols(cfg: "FilterSettings", match: "Match") -> str:
    if not cfg.replacement_characters:
        return empty(cfg, match)
    return cfg.replacement_characters[0] * len(match.word)


def fixed_random_symbols(cfg: "FilterSettings", match: "Match") -> str:
    """One randomly chosen character, repeated over the word's length."""
    if not cfg.replacement_characters:
        return empty(cfg, match)
    return random.choice(cfg.replacement_characters) * len(match.word)


def substitute_word(cfg: "FilterSettings", match: "Match") -> str:
    """The replacement word sharing the base word's index (wrapping around)."""
    words = cfg.replacement_words
    if not words:
        return empty(cfg, match)
    try:
        i = cfg.bad_words.index(match.base_word)
    except ValueError:
        i = 0
    return words[i % len(words)]


def random_word(cfg: "FilterSettings", match: "Match") -> str:
    if not cfg.replacement_words:
        return empty(cfg, match)
    return random.choice(cfg.replacement_words)


def fixed_word(cfg: "FilterSettings", match: "Match") -> str:
    if not cfg.replacement_words:
        return empty(cfg, match)
    return cfg.replacement_words[0]


STRATEGIES: Dict[Strategy, StrategyFunc] = {
    Strategy.IGNORE: ignore,
    Strategy.EMPTY: empty,
    Strategy.RANDOM_SYMBOLS: random_symbols,
    Strategy.FIXED_SYMBOLS: fixed_symbols,
    Strategy.FIXED_RANDOM_SYMBOLS: fixed_random_symbols,
    Strategy.SUBSTITUTE_WORD: substitute_word,
    Strategy.RANDOM_WORD: random_word,
    Strategy.FIXED_WORD: fixed_word,
}


def resolve_strategy(sub: Union[str, Strategy, StrategyFunc, Any]) -> StrategyFunc:
    """Return the callable for a strategy name, enum member or callable.

    Unknown names resolve to :func:`empty`.
    """
    if callable(sub):
        return sub
    try:
        return STRATEGIES[Strategy(sub)]
    except ValueError:
        log.warning("unknown substitution function {!r}, using 'empty'", sub)
        return empty
