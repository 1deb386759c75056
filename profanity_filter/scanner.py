from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from loguru import logger as log

from .patterns import WORD_GROUP, build_patterns

if TYPE_CHECKING:  # pragma: no cover
    from .config import FilterSettings

__all__ = ["Match", "check"]


@dataclass(frozen=True)
class Match:
    base_word: str
    word: str  # exact text matched in the input
    offset: int

    @property
    def end(self) -> int:
        return self.offset + len(self.word)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def check(text: Optional[str], cfg: "FilterSettings") -> List[Match]:
    """Find every configured bad word in ``text``.

    Matches from all base words are merged and sorted by offset; equal
    offsets keep ``bad_words`` order. Overlapping matches are all kept. An
    empty list means the text is clean.
    """
    if not text:
        return []
    found: List[Match] = []
    for base, pat in build_patterns(cfg):
        for m in pat.finditer(text):
            found.append(Match(base_word=base, word=m.group(WORD_GROUP), offset=m.start(WORD_GROUP)))
    found.sort(key=lambda m: m.offset)
    if found:
        log.debug("check: {} match(es) across {} base word(s)", len(found), len(cfg.bad_words))
    return found
