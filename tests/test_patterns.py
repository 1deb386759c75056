"""Tests for word pattern construction."""

from pathlib import Path
import sys

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest

from profanity_filter.config import FilterSettings
from profanity_filter.errors import PatternError
from profanity_filter import patterns
from profanity_filter.patterns import PatternParts, build_parts, build_pattern, build_patterns


def _cfg(**kwargs):
    return FilterSettings(**kwargs)


def test_word_group_captures_match():
    pat = build_pattern("shit", _cfg())
    m = pat.search("oh shitty day")
    assert m.group("word") == "shitty"
    assert m.start("word") == 3


def test_alternative_characters_expand_per_character():
    pat = build_pattern("shit", _cfg())
    for v in ["shit", "sh1t", "shi7", "sh17", "5hit", "sh!t"]:
        assert pat.search(v), v


def test_alternatives_disabled():
    pat = build_pattern("shit", _cfg(use_alternative_characters=False))
    assert pat.search("shit")
    assert not pat.search("sh1t")


def test_multi_character_alternative():
    pat = build_pattern("foo", _cfg(postfixes=[]))
    assert pat.fullmatch("f0oo")
    assert pat.fullmatch("foooo")


def test_case_insensitive_by_default():
    assert build_pattern("shit", _cfg()).search("SHIT")
    assert not build_pattern("shit", _cfg(case_sensitive=True)).search("SHIT")


def test_word_boundaries():
    cfg = _cfg(postfixes=[])
    assert not build_pattern("ass", cfg).search("class")
    cfg.use_word_boundaries = False
    m = build_pattern("ass", cfg).search("class")
    assert m and m.group("word") == "ass"


def test_prefixes_are_optional():
    pat = build_pattern("hole", _cfg(prefixes=["ass", "arse"], postfixes=[]))
    assert pat.fullmatch("asshole")
    assert pat.fullmatch("arsehole")
    assert pat.fullmatch("hole")


def test_prefixes_toggle():
    pat = build_pattern("hole", _cfg(prefixes=["ass"], use_prefixes=False))
    assert not pat.search("asshole")


def test_no_empty_alternation_when_affixes_missing():
    parts = build_parts("word", _cfg(prefixes=[], postfixes=["", ""]))
    assert parts.prefix == ""
    assert parts.postfix == ""
    assert "(?:)" not in parts.source()


def test_affixes_escaped():
    pat = build_pattern("bad", _cfg(postfixes=[".+"], use_word_boundaries=False))
    assert pat.fullmatch("bad.+")
    assert pat.search("badxx").group("word") == "bad"


def test_base_word_escaped():
    pat = build_pattern("a.b", _cfg(use_alternative_characters=False, postfixes=[]))
    assert pat.search("a.b")
    assert not pat.search("axb")


def test_postfixes_tried_in_configured_order_without_boundaries():
    pat = build_pattern("fuck", _cfg(use_word_boundaries=False))
    assert pat.search("fucker").group("word") == "fucke"
    pat = build_pattern("fuck", _cfg(use_word_boundaries=False, postfixes=["er", "e"]))
    assert pat.search("fucker").group("word") == "fucker"


def test_base_character_tried_before_alternatives():
    pat = build_pattern("foo", _cfg(use_word_boundaries=False, postfixes=[]))
    assert pat.search("fooo").group("word") == "foo"
    assert build_parts("o", _cfg()).body == "(?:o|0|oo)"


def test_uncompilable_fragment_raises(monkeypatch):
    monkeypatch.setattr(patterns, "build_parts", lambda word, cfg: PatternParts("", "(", word, ""))
    with pytest.raises(PatternError) as exc:
        build_pattern("shit", _cfg())
    assert exc.value.word == "shit"
    assert exc.value.pattern == "(?P<word>(shit)"


def test_empty_word_rejected():
    with pytest.raises(PatternError):
        build_pattern("", _cfg())


def test_build_patterns_keeps_order():
    pats = build_patterns(_cfg(bad_words=["shit", "fuck", "cunt"]))
    assert [w for w, _ in pats] == ["shit", "fuck", "cunt"]
