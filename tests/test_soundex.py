"""
Soundex family: American Soundex (with its simplified and genealogy
variants) and Refined Soundex, plus difference().
"""

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from phonetic import RefinedSoundex, Soundex
from phonetic.encoder import Encoder, difference


@pytest.mark.parametrize(
    "name,code",
    [
        ("Robert", "R163"),
        ("Rupert", "R163"),
        ("testing", "T235"),
        ("The", "T000"),
        ("jumped", "J513"),
        ("Lee", "L000"),
        ("Gutierrez", "G362"),
        ("Pfister", "P236"),
        ("Jackson", "J250"),
        ("Tymczak", "T522"),
        ("VanDeusen", "V532"),
        ("Washington", "W252"),
        ("Ashcraft", "A261"),
        ("Ashcroft", "A261"),
        ("yehudit", "Y330"),
        ("yhwdyt", "Y330"),
        ("SAINTJOHN", "S532"),
    ],
)
def test_soundex(name, code):
    assert Soundex().encode(name) == code


def test_soundex_ignores_non_letters():
    assert Soundex().encode("HOL>MES") == "H452"
    assert Soundex().encode(" \t\n\r Washington \t\n\r ") == "W252"
    assert Soundex().encode("") == ""
    assert Soundex().encode("123") == ""


def test_soundex_variants():
    assert Soundex.simplified().encode("Ashcraft") == "A226"
    assert Soundex.genealogy().encode("Tymczak") == "T520"


def test_soundex_rejects_unmapped_letters():
    with pytest.raises(ValueError):
        Soundex().encode("Müller")


def test_soundex_rejects_bad_mapping():
    with pytest.raises(ValueError):
        Soundex("0123")


def test_soundex_difference():
    soundex = Soundex()
    assert soundex.difference(" ", " ") == 0
    assert soundex.difference("Smith", "Smythe") == 4
    assert soundex.difference("Ann", "Andrew") == 2
    assert soundex.difference("Margaret", "Andrew") == 1
    assert soundex.difference("Janet", "Margaret") == 0
    assert soundex.difference("Anothers", "Brothers") == 2
    assert difference(soundex, "Green", "Greene") == 4


@pytest.mark.parametrize(
    "word,code",
    [
        ("testing", "T6036084"),
        ("TESTING", "T6036084"),
        ("The", "T60"),
        ("quick", "Q503"),
        ("brown", "B1908"),
        ("fox", "F205"),
        ("jumped", "J408106"),
        ("over", "O0209"),
        ("lazy", "L7050"),
        ("dogs", "D6043"),
    ],
)
def test_refined_soundex(word, code):
    assert RefinedSoundex().encode(word) == code


def test_refined_soundex_difference():
    refined = RefinedSoundex()
    assert refined.difference("", "") == 0
    assert refined.difference("Smith", "Smythe") == 6
    assert refined.difference("Ann", "Andrew") == 3
    assert refined.difference("Smithers", "Smythers") == 8
    assert refined.difference("Anothers", "Brothers") == 5


def test_encoders_are_callable():
    assert Soundex()("Robert") == "R163"
    assert Soundex().is_encoded_equals("Robert", "Rupert")


def test_encoder_requires_encode():
    with pytest.raises(TypeError):
        Encoder()

    class Upper(Encoder):
        def encode(self, value):
            return value.upper()

    assert Upper().is_encoded_equals("abc", "ABC")
