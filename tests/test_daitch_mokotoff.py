"""
Daitch-Mokotoff Soundex with a small rule file: branching, the m/n rule,
ASCII folding and rule-file errors.
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetic import config
from phonetic.daitch_mokotoff import DaitchMokotoffSoundex, parse_dm_rules
from phonetic.errors import ConfigurationIOError, RuleParseError, WrongFilenameError

RULES = """
// vowels
"a" "0" "" ""
"e" "0" "" ""
"i" "0" "" ""
"o" "0" "" ""
"u" "0" "" ""
"ai" "0" "1" ""

/* consonants */
"b" "7" "7" "7"
"ch" "5|4" "5|4" "5|4"
"c" "5|4" "5|4" "5|4"
"d" "3" "3" "3"
"k" "5" "5" "5"
"m" "6" "6" "6"
"n" "6" "6" "6"
"r" "9" "9" "9"
"s" "4" "4" "4"
"t" "3" "3" "3"

// folding
ä=a
ö=o
"""


def _dm(**kwargs):
    return DaitchMokotoffSoundex(RULES, **kwargs)


def test_parse_rules_longest_first():
    rules, folding = parse_dm_rules(RULES)
    assert [r.pattern for r in rules["c"]] == ["ch", "c"]
    assert [r.pattern for r in rules["a"]] == ["ai", "a"]
    assert folding == {"ä": "a", "ö": "o"}


def test_encode_simple():
    dm = _dm()
    assert dm.encode("Mann") == "660000"
    assert dm.encode("Rain") == "960000"
    assert dm.encode("Boris") == "794000"


def test_adjacent_m_and_n_are_both_coded():
    dm = _dm()
    assert dm.encode("mn") == "660000"
    assert dm.encode("nn") == "600000"


def test_branching():
    dm = _dm()
    assert dm.soundex("Chen") == "560000|460000"
    assert dm.encode("Chen") == "560000"


def test_branches_with_equal_codes_are_merged():
    assert _dm().soundex("chch") == "500000|540000|450000|400000"
    assert DaitchMokotoffSoundex('"x" "4|4" "4|4" "4|4"\n').soundex("x") == "400000"


def test_ascii_folding():
    assert _dm().encode("Männ") == _dm().encode("Mann")
    assert _dm().encode("Äb") == "070000"
    assert _dm(ascii_folding=False).encode("Äb") == "700000"


def test_whitespace_and_unknown_characters_are_skipped():
    assert _dm().encode(" Ma nn ") == "660000"
    assert _dm().encode("M-a-n-n") == "660000"


def test_empty_input():
    assert _dm().encode("") == "000000"


def test_malformed_rule_line():
    with pytest.raises(RuleParseError) as exc:
        DaitchMokotoffSoundex('"a" "0" ""\n', source="dmrules.txt")
    assert exc.value.source == "dmrules.txt"


def test_from_file(tmp_path):
    path = tmp_path / "dmrules.txt"
    path.write_text(RULES, encoding="utf-8")
    assert DaitchMokotoffSoundex.from_file(path).encode("Mann") == "660000"
    with pytest.raises(ConfigurationIOError):
        DaitchMokotoffSoundex.from_file(tmp_path / "missing.txt")


def test_from_env(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "DM_RULES_FILE", None)
    with pytest.raises(WrongFilenameError):
        DaitchMokotoffSoundex.from_env()

    path = tmp_path / "dmrules.txt"
    path.write_text(RULES, encoding="utf-8")
    monkeypatch.setattr(config, "DM_RULES_FILE", str(path))
    assert DaitchMokotoffSoundex.from_env().encode("Rain") == "960000"
