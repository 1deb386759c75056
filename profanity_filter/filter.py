from __future__ import annotations

from typing import Any, Iterable, List, Optional

from loguru import logger as log

from .config import FilterSettings
from .sanitiser import SanitiseResult, sanitise
from .scanner import Match, check
from .wordlists import load_words


class ProfanityFilter:
    """Detects and replaces bad words according to :attr:`config`.

    ``config`` stays mutable between calls; each call works on a snapshot
    taken when it starts, so patterns always reflect the current settings.
    """

    def __init__(self, settings: Optional[FilterSettings] = None, **overrides: Any):
        self.config = settings.snapshot() if settings is not None else FilterSettings()
        for key, value in overrides.items():
            if key not in FilterSettings.model_fields:
                raise TypeError(f"unknown filter setting: {key}")
            setattr(self.config, key, value)

    @classmethod
    def from_wordlists(
        cls,
        db_path: Optional[str] = None,
        packs: Iterable[str] = (),
        yaml_path: Optional[str] = None,
        **overrides: Any,
    ) -> "ProfanityFilter":
        words = load_words(db_path=db_path, packs=packs, yaml_path=yaml_path)
        log.info("ProfanityFilter: {} bad words loaded", len(words))
        return cls(bad_words=words, **overrides)

    # ---- API ----
    def check(self, text: Optional[str]) -> List[Match]:
        """Matches ordered by offset; an empty list means ``text`` is clean."""
        return check(text, self.config.snapshot())

    def sanitise(self, text: Optional[str]) -> SanitiseResult:
        return sanitise(text, self.config.snapshot())

    # alias for US spelling
    sanitize = sanitise

    def is_clean(self, text: Optional[str]) -> bool:
        return not self.check(text)
