"""
Phonex (A. J. Lait and B. Randell, 1996).

A Soundex/Phonix hybrid: the leading letters are normalised first, then each
letter is transcoded to a digit and the code is zero-padded.
"""

from typing import Tuple

from .encoder import Encoder
from .soundex import soundex_clean

DEFAULT_MAX_CODE_LEN = 4

_LEADING_PAIRS = {"KN": "N", "PH": "F", "WR": "R"}
_LEADING_LETTER = {
    "E": "A", "I": "A", "O": "A", "U": "A", "Y": "A",
    "P": "B",
    "V": "F",
    "K": "C", "Q": "C",
    "J": "G",
    "Z": "S",
}


def _is_vowel(ch: str) -> bool:
    return ch != "" and ch in "AEIOUY"


class Phonex(Encoder):
    def __init__(self, max_code_len: int = DEFAULT_MAX_CODE_LEN):
        if max_code_len < 1:
            raise ValueError("max_code_len must be at least 1")
        self.max_code_len = max_code_len

    @staticmethod
    def preprocess(value: str) -> str:
        text = soundex_clean(value).rstrip("S")
        if text[:2] in _LEADING_PAIRS:
            text = _LEADING_PAIRS[text[:2]] + text[2:]
        if text.startswith("H"):
            text = text[1:]
        if text[:1] in _LEADING_LETTER:
            text = _LEADING_LETTER[text[0]] + text[1:]
        return text

    @staticmethod
    def _transcode(text: str, index: int) -> Tuple[str, bool]:
        """Digit for ``text[index]`` and whether the next letter is swallowed."""
        ch = text[index]
        next_ = text[index + 1] if index + 1 < len(text) else ""
        is_last = index == len(text) - 1
        if ch in "BPFV":
            return "1", False
        if ch in "CSKGJQXZ":
            return "2", False
        if ch in "DT":
            return ("0" if next_ == "C" else "3"), False
        if ch == "L":
            return ("4" if _is_vowel(next_) or is_last else "0"), False
        if ch in "MN":
            return "5", next_ in ("D", "G")
        if ch == "R":
            return ("6" if _is_vowel(next_) or is_last else "0"), False
        return "0", False

    def encode(self, value: str) -> str:
        text = self.preprocess(value)
        if not text:
            return ""

        first_code, skip = self._transcode(text, 0)
        result = [text[0]]
        last = first_code
        i = 2 if skip else 1
        while i < len(text) and len(result) < self.max_code_len:
            code, skip = self._transcode(text, i)
            if code != last and code != "0":
                result.append(code)
            last = result[-1]
            i += 2 if skip else 1

        return "".join(result).ljust(self.max_code_len, "0")
