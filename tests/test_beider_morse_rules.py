"""
Beider-Morse rule loading: context matchers, phoneme expressions, rule
buckets, includes and language guessing.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetic.beider_morse.lang import Lang
from phonetic.beider_morse.languages import ANY_LANGUAGE, LanguageSet, Languages, NameType, PrivateRuleType
from phonetic.beider_morse.matchers import compile_context
from phonetic.beider_morse.rules import (
    Phoneme,
    Rule,
    Rules,
    parse_phoneme,
    parse_phoneme_expr,
    parse_rules,
    sort_buckets,
)
from phonetic.errors import BadContextRegexError, NotABooleanError, WrongFilenameError, WrongPhonemeError


def langs(*names):
    return LanguageSet.from_languages(names)


# --- matchers ---

def test_anchored_literal_contexts():
    assert compile_context("^$").is_match("")
    assert not compile_context("^$").is_match("a")
    assert compile_context("^ab$").is_match("ab")
    assert not compile_context("^ab$").is_match("abc")
    assert compile_context("^ab").is_match("abc")
    assert not compile_context("^ab").is_match("cab")
    assert compile_context("ab$").is_match("cab")
    assert compile_context("^").is_match("anything")
    assert compile_context("$").is_match("")


def test_character_class_contexts():
    assert compile_context("^[aeiou]").is_match("ab")
    assert not compile_context("^[aeiou]").is_match("ba")
    assert not compile_context("^[aeiou]").is_match("")
    assert compile_context("[aeiou]$").is_match("ba")
    assert compile_context("^[^aeiou]").is_match("ba")
    assert not compile_context("^[^aeiou]").is_match("ab")
    assert compile_context("^[ei]$").is_match("e")
    assert not compile_context("^[ei]$").is_match("ee")


def test_general_regex_context():
    matcher = compile_context("^[ab]c")
    assert matcher.is_match("bcd")
    assert not matcher.is_match("cb")


def test_bad_context_regex():
    with pytest.raises(BadContextRegexError):
        compile_context("[$")


# --- phonemes ---

def test_parse_phoneme():
    assert parse_phoneme("o") == Phoneme("o", ANY_LANGUAGE)
    assert parse_phoneme("o[french+english]") == Phoneme("o", langs("english", "french"))
    with pytest.raises(WrongPhonemeError):
        parse_phoneme("o[french")


def test_parse_phoneme_expr_keeps_order():
    texts = [ph.text for ph in parse_phoneme_expr("(u|o|a)").phonemes]
    assert texts == ["u", "o", "a"]


def test_parse_phoneme_expr_empty_alternative():
    texts = [ph.text for ph in parse_phoneme_expr("(a|)").phonemes]
    assert texts == ["a", ""]


def test_parse_phoneme_expr_requires_closing_paren():
    with pytest.raises(WrongPhonemeError):
        parse_phoneme_expr("(a|b")


# --- rules ---

def test_rule_pattern_and_contexts():
    rule = Rule.build("ch", "[aeiou]", "[^aeiou]", "x")
    assert rule.pattern_and_context_matches("achs", 1)
    assert not rule.pattern_and_context_matches("achs", 0)
    assert not rule.pattern_and_context_matches("ache", 1)
    assert not rule.pattern_and_context_matches("tchs", 1)
    assert not rule.pattern_and_context_matches("ac", 1)


def test_buckets_sorted_longest_first():
    text = '"s" "" "" "s"\n"sch" "" "" "S"\n"sh" "" "" "S"\n"t" "" "" "t"\n'
    buckets = sort_buckets(parse_rules(text, "test"))
    assert [r.pattern for r in buckets["s"]] == ["sch", "sh", "s"]
    assert [r.pattern for r in buckets["t"]] == ["t"]


def test_equal_lengths_keep_file_order():
    text = '"a" "x" "" "1"\n"a" "" "" "2"\n'
    buckets = sort_buckets(parse_rules(text, "test"))
    assert [r.phonemes.phonemes[0].text for r in buckets["a"]] == ["1", "2"]


def test_include():
    resources = {"shared": '"a" "" "" "o"\n'}
    text = '#include shared\n"x" "" "" "ks"\n'
    buckets = parse_rules(text, "main", resources.__getitem__)
    assert set(buckets) == {"a", "x"}


def test_include_without_resolver_or_self():
    with pytest.raises(WrongFilenameError):
        parse_rules("#include shared\n", "main")
    with pytest.raises(WrongFilenameError):
        parse_rules("#include main\n", "main", lambda name: "#include main\n")


def test_rules_repository_groups():
    languages = Languages({NameType.GENERIC: ["any", "english"]})
    texts = {
        "gen_rules_any": '"a" "" "" "a"\n',
        "gen_rules_english": '"a" "" "" "ei"\n',
        "gen_approx_any": "",
        "gen_approx_english": "",
        "gen_approx_common": '"ei" "" "" "e"\n',
        "gen_exact_any": "",
        "gen_exact_english": "",
        "gen_exact_common": "",
    }
    rules = Rules.from_texts(texts, languages)
    assert rules.rules(NameType.GENERIC, PrivateRuleType.RULES, "english")["a"][0].phonemes.phonemes[0].text == "ei"
    assert "e" in rules.rules(NameType.GENERIC, PrivateRuleType.APPROX, "common")
    assert rules.rules(NameType.GENERIC, PrivateRuleType.EXACT, "common") == {}
    assert rules.rules(NameType.SEPHARDIC, PrivateRuleType.RULES, "any") == {}


def test_rules_repository_missing_resource():
    languages = Languages({NameType.GENERIC: ["any"]})
    with pytest.raises(WrongFilenameError):
        Rules.from_texts({"gen_rules_any": ""}, languages)


# --- language guessing ---

LANG_RULES = """
// accept rules narrow, reject rules remove
eau french true
w english+german true
^x french+english false
"""


def _lang():
    return Lang.from_text(LANG_RULES, ["any", "english", "french", "german"])


def test_guess_single_language():
    lang = _lang()
    assert lang.guess_languages("Beau") == langs("french")
    assert lang.guess_language("beau") == "french"


def test_guess_narrows_to_several():
    assert _lang().guess_languages("wolf") == langs("english", "german")
    assert _lang().guess_language("wolf") == "any"


def test_guess_without_match_keeps_all():
    assert _lang().guess_languages("bob") == langs("any", "english", "french", "german")


def test_empty_guess_degrades_to_any():
    assert _lang().guess_languages("xeau") is ANY_LANGUAGE


def test_lang_rule_errors():
    with pytest.raises(NotABooleanError):
        Lang.from_text("eau french yes\n", ["french"])
    with pytest.raises(BadContextRegexError):
        Lang.from_text("( french true\n", ["french"])
