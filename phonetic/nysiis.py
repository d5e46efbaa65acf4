"""
NYSIIS (New York State Identification and Intelligence System), 1970.

Prefix and suffix rewrites, then a left-to-right transcoding in which each
letter may look at its neighbours and overwrite the letters it consumes.
"""

from .encoder import Encoder
from .soundex import soundex_clean

VOWELS = "AEIOU"
TRUE_LENGTH = 6

_PREFIXES = (("MAC", "MCC"), ("KN", "NN"), ("K", "C"), ("PH", "FF"), ("PF", "FF"), ("SCH", "SSS"))
# at most one rewrite per group
_SUFFIX_GROUPS = (
    (("EE", "IE"), "Y"),
    (("DT", "RT", "RD", "NT", "ND"), "D"),
)


def _is_vowel(ch: str) -> bool:
    return ch != "" and ch in VOWELS


def _transcode(prev: str, curr: str, next_: str, after_next: str) -> str:
    if curr == "E" and next_ == "V":
        return "AF"
    if _is_vowel(curr):
        return "A"
    if curr == "Q":
        return "G"
    if curr == "Z":
        return "S"
    if curr == "M":
        return "N"
    if curr == "K":
        return "NN" if next_ == "N" else "C"
    if curr == "S" and next_ == "C" and after_next == "H":
        return "SSS"
    if curr == "P" and next_ == "H":
        return "FF"
    if curr == "H" and (not _is_vowel(prev) or not _is_vowel(next_)):
        return prev
    if curr == "W" and _is_vowel(prev):
        return prev
    return curr


class Nysiis(Encoder):
    """``strict`` truncates codes to six characters, as the original algorithm does."""

    def __init__(self, strict: bool = True):
        self.strict = strict

    def encode(self, value: str) -> str:
        text = soundex_clean(value)
        if not text:
            return text

        for prefix, replacement in _PREFIXES:
            if text.startswith(prefix):
                text = replacement + text[len(prefix):]
        for suffixes, replacement in _SUFFIX_GROUPS:
            if text.endswith(suffixes):
                text = text[:-2] + replacement

        chars = list(text)
        key = [chars[0]]
        for index in range(1, len(chars)):
            next_ = chars[index + 1] if index + 1 < len(chars) else ""
            after_next = chars[index + 2] if index + 2 < len(chars) else ""
            transcoded = _transcode(chars[index - 1], chars[index], next_, after_next)
            chars[index:index + len(transcoded)] = list(transcoded)
            if chars[index] != chars[index - 1]:
                key.append(chars[index])

        code = "".join(key)
        if len(code) > 1:
            if code.endswith("S"):
                code = code[:-1]
            if len(code) > 2 and code.endswith("AY"):
                code = code[:-2] + "Y"
            if code.endswith("A"):
                code = code[:-1]

        if self.strict:
            return code[:TRUE_LENGTH]
        return code
