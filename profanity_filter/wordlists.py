"""Word-list loaders: JSON word DB, plain-text packs and a YAML list."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Iterable, List, Optional

import yaml
from loguru import logger as log

from .errors import WordListError

DB_SECTIONS = ("stems", "phrases")


def _read_lines(p: Path) -> List[str]:
    if not p.exists():
        log.warning("WordLists: pack {} not found", p)
        return []
    lines = (ln.strip() for ln in p.read_text(encoding="utf-8").splitlines())
    return [ln for ln in lines if ln and not ln.startswith("#")]


def _dedupe(words: Iterable[str]) -> List[str]:
    out, seen = [], set()
    for w in words:
        lw = (w or "").strip().lower()
        if not lw or lw in seen:
            continue
        seen.add(lw)
        out.append(lw)
    return out


def load_db(db_path: Optional[str], packs: Iterable[str] = ()) -> List[str]:
    """Load the JSON word DB plus optional text packs and merge them.

    The DB maps a language code to ``{"stems": [...], "phrases": [...]}``.
    Missing files are skipped; words are lowercased and de-duplicated in
    first-seen order.
    """
    words: List[str] = []
    if db_path:
        p = Path(db_path)
        if p.exists():
            try:
                data = json.loads(p.read_text(encoding="utf-8"))
            except json.JSONDecodeError as e:
                raise WordListError(f"{db_path}: invalid JSON ({e})") from e
            if not isinstance(data, dict):
                raise WordListError(f"{db_path}: expected a mapping of languages")
            for section in data.values():
                if not isinstance(section, dict):
                    continue
                for key in DB_SECTIONS:
                    words += section.get(key, []) or []
            log.info("WordLists: loaded {} words from {}", len(words), db_path)
        else:
            log.info("WordLists: {} not found, using packs only", db_path)
    for raw in packs or []:
        if not raw.strip():
            continue
        add = _read_lines(Path(raw.strip()))
        if add:
            words += add
            log.info("WordLists: loaded {} words from pack {}", len(add), raw)
    out = _dedupe(words)
    log.debug("WordLists: merged total {} base entries", len(out))
    return out


def load_yaml_words(path: str) -> List[str]:
    """Read a YAML list, or a mapping with a ``words`` list."""
    p = Path(path)
    if not p.exists():
        return []
    try:
        data = yaml.safe_load(p.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise WordListError(f"{path}: invalid YAML ({e})") from e
    if isinstance(data, dict):
        data = data.get("words", [])
    if not isinstance(data, list):
        raise WordListError(f"{path}: expected a list of words")
    return _dedupe(str(w) for w in data if w is not None)


def load_words(
    db_path: Optional[str] = None,
    packs: Iterable[str] = (),
    yaml_path: Optional[str] = None,
) -> List[str]:
    """DB + packs first, then the YAML list, then ``PROFANITY_WORDS`` (CSV)."""
    words = load_db(db_path, packs)
    if words:
        return words
    if yaml_path:
        words = load_yaml_words(yaml_path)
        if words:
            return words
    env = os.getenv("PROFANITY_WORDS", "")
    return _dedupe(env.split(","))
