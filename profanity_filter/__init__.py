"""Configurable bad-word detection and replacement.

The package logs through loguru but stays silent until
:func:`profanity_filter.logsetup.configure_logging` is called.
"""

from loguru import logger

from .config import FilterSettings
from .errors import PatternError, ProfanityFilterError, WordListError
from .filter import ProfanityFilter
from .patterns import build_pattern, build_patterns
from .sanitiser import SanitiseResult, SubstitutionResult, sanitise
from .scanner import Match, check
from .substitution import STRATEGIES, Strategy, resolve_strategy
from .wordlists import load_db, load_words, load_yaml_words

logger.disable(__name__)

__all__ = [
    "FilterSettings",
    "Match",
    "PatternError",
    "ProfanityFilter",
    "ProfanityFilterError",
    "STRATEGIES",
    "SanitiseResult",
    "Strategy",
    "SubstitutionResult",
    "WordListError",
    "build_pattern",
    "build_patterns",
    "check",
    "load_db",
    "load_words",
    "load_yaml_words",
    "resolve_strategy",
    "sanitise",
]
