from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, List, Mapping, Optional, Sequence, Tuple

import regex as re
from loguru import logger as log

from .errors import PatternError

if TYPE_CHECKING:  # pragma: no cover
    from .config import FilterSettings

__all__ = [
    "PatternParts",
    "build_parts",
    "build_pattern",
    "build_patterns",
    "WORD_GROUP",
]

WORD_GROUP = "word"
WORD_BOUNDARY = r"\b"


def _alt(options: Iterable[str]) -> Optional[str]:
    """Non-capturing alternation of escaped ``options`` in the given order.

    Empty strings are dropped; ``None`` when nothing is left.
    """
    toks: List[str] = []
    seen = set()
    for o in options:
        if not o or o in seen:
            continue
        seen.add(o)
        toks.append(o)
    if not toks:
        return None
    return "(?:%s)" % "|".join(re.escape(t) for t in toks)


def _char(c: str, subs: Mapping[str, Sequence[str]]) -> str:
    alts = subs.get(c)
    if not alts:
        return re.escape(c)
    return _alt([c, *alts]) or re.escape(c)


def _affix(enabled: bool, affixes: Sequence[str]) -> str:
    if not enabled:
        return ""
    group = _alt(affixes)
    return f"{group}?" if group else ""


@dataclass(frozen=True)
class PatternParts:
    """Typed fragments of one word pattern, joined by :meth:`source`."""

    boundary: str
    prefix: str
    body: str
    postfix: str

    def source(self) -> str:
        return (
            f"{self.boundary}(?P<{WORD_GROUP}>{self.prefix}{self.body}{self.postfix}){self.boundary}"
        )


def build_parts(word: str, cfg: "FilterSettings") -> PatternParts:
    if cfg.use_alternative_characters:
        body = "".join(_char(c, cfg.alternative_characters) for c in word)
    else:
        body = re.escape(word)
    return PatternParts(
        boundary=WORD_BOUNDARY if cfg.use_word_boundaries else "",
        prefix=_affix(cfg.use_prefixes, cfg.prefixes),
        body=body,
        postfix=_affix(cfg.use_postfixes, cfg.postfixes),
    )


def build_pattern(word: str, cfg: "FilterSettings") -> re.Pattern:
    """Compile the pattern matching every configured surface form of ``word``.

    The matched span is captured in the ``word`` group. Raises
    :class:`PatternError` when the assembled source does not compile; every
    fragment is escaped, so this only guards against a malformed fragment.
    """
    if not word:
        raise PatternError(word, "", "empty base word")
    source = build_parts(word, cfg).source()
    flags = re.UNICODE if cfg.case_sensitive else re.IGNORECASE | re.UNICODE
    try:
        pat = re.compile(source, flags)
    except re.error as e:
        raise PatternError(word, source, str(e)) from e
    log.debug("pattern for {!r}: {}", word, source)
    return pat


def build_patterns(cfg: "FilterSettings") -> List[Tuple[str, re.Pattern]]:
    """``(base_word, pattern)`` pairs in ``bad_words`` order."""
    return [(w, build_pattern(w, cfg)) for w in cfg.bad_words]
