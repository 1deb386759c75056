from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from loguru import logger as log

from .scanner import Match, check
from .substitution import resolve_strategy

if TYPE_CHECKING:  # pragma: no cover
    from .config import FilterSettings

__all__ = ["SubstitutionResult", "SanitiseResult", "resolve_overlaps", "sanitise"]


@dataclass(frozen=True)
class SubstitutionResult(Match):
    """A match with its replacement; ``offset`` points into the output."""

    replacement: str = ""


@dataclass
class SanitiseResult:
    clean: bool
    output: str
    total_length: int
    bad_length: int = 0
    bad_words: List[SubstitutionResult] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "clean": self.clean,
            "bad_words": [r.to_dict() for r in self.bad_words],
            "output": self.output,
            "total_length": self.total_length,
            "bad_length": self.bad_length,
        }


def resolve_overlaps(matches: List[Match]) -> List[Match]:
    """Reduce offset-sorted matches to non-overlapping edits.

    Leftmost wins, then longest; remaining ties keep scanner order.
    """
    ranked = sorted(matches, key=lambda m: (m.offset, -len(m.word)))
    edits: List[Match] = []
    cursor = 0
    for m in ranked:
        if m.offset < cursor:
            log.debug("dropping {!r}@{} overlapping an earlier match", m.word, m.offset)
            continue
        edits.append(m)
        cursor = m.end
    return edits


def _pop_trailing_space(pieces: List[str]) -> None:
    last = pieces.pop()[:-1]
    if last:
        pieces.append(last)


def sanitise(text: Optional[str], cfg: "FilterSettings") -> SanitiseResult:
    """Replace every bad word in ``text`` using the configured strategy.

    The output is rebuilt left to right from the edit list while ``drift``
    tracks how far each original offset has moved in the output.
    """
    text = text or ""
    matches = check(text, cfg)
    if not matches:
        return SanitiseResult(clean=True, output=text, total_length=len(text))

    sub = resolve_strategy(cfg.substitution_function)
    pieces: List[str] = []  # never holds empty strings
    results: List[SubstitutionResult] = []
    cursor = 0
    drift = 0
    for m in resolve_overlaps(matches):
        if m.offset > cursor:
            pieces.append(text[cursor : m.offset])
        replacement = sub(cfg, m) or ""
        offset = m.offset + drift
        removed = len(m.word)
        if (
            cfg.collapse_double_spaces
            and not replacement
            and pieces
            and pieces[-1].endswith(" ")
            and text[m.end : m.end + 1] == " "
        ):
            _pop_trailing_space(pieces)
            offset -= 1
            removed += 1
        if replacement:
            pieces.append(replacement)
        drift += len(replacement) - removed
        cursor = m.end
        results.append(
            SubstitutionResult(base_word=m.base_word, word=m.word, offset=offset, replacement=replacement)
        )
    if cursor < len(text):
        pieces.append(text[cursor:])

    return SanitiseResult(
        clean=False,
        output="".join(pieces),
        total_length=len(text),
        bad_length=sum(len(r.word) for r in results),
        bad_words=results,
    )
