"""
Rule-text parsing shared by the Beider-Morse and Daitch-Mokotoff loaders.
- Comments (// and /* */) never change the parsed rules.
- Malformed lines fail with the offending line attached.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetic.errors import ConfigurationIOError, NotABooleanError, RuleParseError
from phonetic.rules_text import (
    LangLine,
    Quadruplet,
    iter_content_lines,
    match_folding,
    match_quadruplet,
    parse_lang_lines,
    parse_list,
    parse_quadruplets,
    read_resource,
)

PLAIN_RULES = '''"a" "" "" "o"
"sch" "" "[aeiou]" "S"
"tz" "^" "" "(ts|c)"
'''

COMMENTED_RULES = '''// leading comment
"a" "" "" "o"  // trailing comment

/*
"x" "" "" "never"
   "y" "" "" "never"
*/
"sch" "" "[aeiou]" "S"
   // indented comment
/* one-line block */
"tz" "^" "" "(ts|c)"
'''


def test_comments_do_not_change_rules():
    assert parse_quadruplets(COMMENTED_RULES) == parse_quadruplets(PLAIN_RULES)
    assert len(parse_quadruplets(PLAIN_RULES)) == 3


def test_content_lines_keep_line_numbers():
    lines = list(iter_content_lines("// c\n\nfirst\n/*\nx\n*/\nsecond\n"))
    assert [(line.number, line.text) for line in lines] == [(3, "first"), (7, "second")]


def test_block_end_is_checked_before_start():
    lines = [line.text for line in iter_content_lines("/*\n*/\nkept\n")]
    assert lines == ["kept"]


def test_match_quadruplet():
    assert match_quadruplet('"a" "b" "c" "d"') == Quadruplet("a", "b", "c", "d")
    assert match_quadruplet('"a"   "" ""  "(x|y)"   // note') == Quadruplet("a", "", "", "(x|y)")
    assert match_quadruplet('"a" "b" "c"') is None
    assert match_quadruplet("a b c d") is None


def test_malformed_quadruplet_carries_line():
    with pytest.raises(RuleParseError) as exc:
        parse_quadruplets('"a" "" "" "o"\n"b" "" ""\n', source="gen_rules_any")
    assert exc.value.line == '"b" "" ""'
    assert exc.value.source == "gen_rules_any"
    assert "line 2" in str(exc.value)


def test_match_folding():
    assert match_folding("ä=a") == ("ä", "a")
    assert match_folding("ß=s // sharp s") == ("ß", "s")
    assert match_folding("ab=c") is None


def test_parse_lang_lines():
    text = "// guessing\n^o' irish true\nsch german+polish false // trailing\n"
    assert parse_lang_lines(text) == [
        LangLine("^o'", ["irish"], True),
        LangLine("sch", ["german", "polish"], False),
    ]


def test_parse_lang_lines_rejects_bad_boolean():
    with pytest.raises(NotABooleanError) as exc:
        parse_lang_lines("sch german maybe\n")
    assert exc.value.token == "maybe"


def test_parse_lang_lines_rejects_wrong_field_count():
    with pytest.raises(RuleParseError):
        parse_lang_lines("sch german\n", source="gen_lang.txt")


def test_parse_list():
    assert parse_list("any\n// comment\narabic  // with note\n\n/*\ncyrillic\n*/\nenglish\n") == [
        "any",
        "arabic",
        "english",
    ]


def test_read_resource_wraps_io_errors(tmp_path):
    missing = tmp_path / "missing.txt"
    with pytest.raises(ConfigurationIOError) as exc:
        read_resource(missing)
    assert exc.value.path == str(missing)
    assert isinstance(exc.value.__cause__, OSError)


def test_read_resource_reads_utf8(tmp_path):
    path = tmp_path / "rules.txt"
    path.write_text('"ö" "" "" "o"\n', encoding="utf-8")
    assert read_resource(path) == '"ö" "" "" "o"\n'
