"""Runtime configuration for a filter instance.

Every field can be overridden from the environment with a ``PROFANITY_``
prefix (``PROFANITY_CASE_SENSITIVE=true``). List and mapping fields are read
as JSON, the way pydantic-settings decodes complex values.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .substitution import Strategy

DEFAULT_REPLACEMENT_WORDS = ["fiddlesticks", "sugar", "crackers", "bleep", "wibble"]
DEFAULT_REPLACEMENT_CHARACTERS = "#!?$&*%@"
DEFAULT_ALTERNATIVE_CHARACTERS = {
    "a": ["4"],
    "e": ["3"],
    "i": ["1", "!", "l"],
    "l": ["1", "!", "i"],
    "o": ["0", "oo"],
    "s": ["5", "$"],
    "t": ["7"],
    "x": ["*", "ks"],
    "z": ["2"],
}
DEFAULT_POSTFIXES = ["e", "er", "ing", "y", "ty", "py", "head", "face"]

SubstitutionFunction = Union[str, Callable[..., Optional[str]]]


class FilterSettings(BaseSettings):
    """Pydantic settings for one :class:`~profanity_filter.filter.ProfanityFilter`."""

    model_config = SettingsConfigDict(env_prefix="PROFANITY_", validate_assignment=True)

    # --- Word lists ---
    bad_words: List[str] = Field(default_factory=list)
    replacement_words: List[str] = Field(default_factory=lambda: list(DEFAULT_REPLACEMENT_WORDS))
    replacement_characters: str = Field(default=DEFAULT_REPLACEMENT_CHARACTERS)

    # --- Variant expansion ---
    alternative_characters: Dict[str, List[str]] = Field(
        default_factory=lambda: {k: list(v) for k, v in DEFAULT_ALTERNATIVE_CHARACTERS.items()}
    )
    prefixes: List[str] = Field(default_factory=list)
    postfixes: List[str] = Field(default_factory=lambda: list(DEFAULT_POSTFIXES))

    # --- Toggles ---
    use_alternative_characters: bool = True
    use_prefixes: bool = True
    use_postfixes: bool = True
    use_word_boundaries: bool = True
    case_sensitive: bool = False
    collapse_double_spaces: bool = True

    # Built-in strategy name or a callable ``(config, match) -> str | None``
    substitution_function: SubstitutionFunction = Field(default=Strategy.EMPTY.value)

    @field_validator("bad_words")
    @classmethod
    def _no_empty_words(cls, v: List[str]) -> List[str]:
        if any(not w for w in v):
            raise ValueError("bad_words must not contain empty strings")
        return v

    @field_validator("replacement_characters", mode="before")
    @classmethod
    def _join_characters(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            if any(not isinstance(c, str) or len(c) != 1 for c in v):
                raise ValueError("replacement_characters must be single characters")
            return "".join(v)
        return v

    @field_validator("alternative_characters")
    @classmethod
    def _single_char_keys(cls, v: Dict[str, List[str]]) -> Dict[str, List[str]]:
        bad = [k for k in v if len(k) != 1]
        if bad:
            raise ValueError(f"alternative_characters keys must be one character: {bad}")
        return v

    def snapshot(self) -> "FilterSettings":
        """Return a copy whose containers are independent of this instance."""
        return self.model_copy(
            update={
                "bad_words": list(self.bad_words),
                "replacement_words": list(self.replacement_words),
                "alternative_characters": {k: list(v) for k, v in self.alternative_characters.items()},
                "prefixes": list(self.prefixes),
                "postfixes": list(self.postfixes),
            }
        )


__all__ = [
    "FilterSettings",
    "SubstitutionFunction",
    "DEFAULT_ALTERNATIVE_CHARACTERS",
    "DEFAULT_POSTFIXES",
    "DEFAULT_REPLACEMENT_CHARACTERS",
    "DEFAULT_REPLACEMENT_WORDS",
]
