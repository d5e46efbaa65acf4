"""
Metaphone (Lawrence Philips, 1990).

Letter-by-letter rewrite of an upper-cased word into a short consonant code.
Vowels are kept only in first position.
"""

from .encoder import Encoder

VOWELS = "AEIOU"
FRONTV = "EIY"
VARSON = "CSPTG"

DEFAULT_MAX_CODE_LEN = 4


def _is_vowel(text: str, index: int) -> bool:
    return 0 <= index < len(text) and text[index] in VOWELS


def _is_previous_char(text: str, index: int, ch: str) -> bool:
    return 0 < index <= len(text) and text[index - 1] == ch


def _is_next_char(text: str, index: int, ch: str) -> bool:
    return 0 <= index < len(text) - 1 and text[index + 1] == ch


def _region_match(text: str, index: int, test: str) -> bool:
    return index + len(test) - 1 < len(text) and text.startswith(test, index)


def _is_last_char(length: int, index: int) -> bool:
    return index + 1 == length


def _next_in(text: str, index: int, chars: str) -> bool:
    return index + 1 < len(text) and text[index + 1] in chars


class Metaphone(Encoder):
    def __init__(self, max_code_len: int = DEFAULT_MAX_CODE_LEN):
        if max_code_len < 1:
            raise ValueError("max_code_len must be at least 1")
        self.max_code_len = max_code_len

    def is_metaphone_equal(self, value1: str, value2: str) -> bool:
        return self.encode(value1) == self.encode(value2)

    def encode(self, value: str) -> str:
        if not value:
            return ""
        if len(value) == 1:
            return value.upper()

        word = value.upper()
        # initial exceptions
        if word[0] in "KGP" and word[1] == "N":
            local = word[1:]
        elif word[0] == "A" and word[1] == "E":
            local = word[1:]
        elif word[0] == "W" and word[1] == "R":
            local = word[1:]
        elif word[0] == "W" and word[1] == "H":
            local = "W" + word[2:]
        elif word[0] == "X":
            local = "S" + word[1:]
        else:
            local = word

        size = len(local)
        code = []
        n = 0
        while len(code) < self.max_code_len and n < size:
            symb = local[n]
            if symb != "C" and _is_previous_char(local, n, symb):
                n += 1
                continue

            if symb in VOWELS:
                if n == 0:
                    code.append(symb)
            elif symb == "B":
                if not (_is_previous_char(local, n, "M") and _is_last_char(size, n)):
                    code.append(symb)
            elif symb == "C":
                self._handle_c(local, n, code)
            elif symb == "D":
                if not _is_last_char(size, n + 1) and _is_next_char(local, n, "G") and local[n + 2] in FRONTV:
                    code.append("J")
                    n += 2
                else:
                    code.append("T")
            elif symb == "G":
                self._handle_g(local, n, code)
            elif symb == "H":
                if _is_last_char(size, n):
                    pass
                elif n > 0 and local[n - 1] in VARSON:
                    pass
                elif _is_vowel(local, n + 1):
                    code.append("H")
            elif symb in "FJLMNR":
                code.append(symb)
            elif symb == "K":
                if n == 0 or not _is_previous_char(local, n, "C"):
                    code.append(symb)
            elif symb == "P":
                code.append("F" if _is_next_char(local, n, "H") else symb)
            elif symb == "Q":
                code.append("K")
            elif symb == "S":
                if _region_match(local, n, "SH") or _region_match(local, n, "SIO") or _region_match(local, n, "SIA"):
                    code.append("X")
                else:
                    code.append("S")
            elif symb == "T":
                if _region_match(local, n, "TIA") or _region_match(local, n, "TIO"):
                    code.append("X")
                elif _region_match(local, n, "TCH"):
                    pass  # silent if in "tch"
                elif _region_match(local, n, "TH"):
                    code.append("0")
                else:
                    code.append("T")
            elif symb == "V":
                code.append("F")
            elif symb in "WY":
                if not _is_last_char(size, n) and _is_vowel(local, n + 1):
                    code.append(symb)
            elif symb == "X":
                code.append("K")
                code.append("S")
            elif symb == "Z":
                code.append("S")
            n += 1

        return "".join(code)[: self.max_code_len]

    @staticmethod
    def _handle_c(local: str, n: int, code: list) -> None:
        size = len(local)
        if _is_previous_char(local, n, "S") and not _is_last_char(size, n) and _next_in(local, n, FRONTV):
            return  # "sci", "sce", "scy" dropped
        if _region_match(local, n, "CIA"):
            code.append("X")
        elif not _is_last_char(size, n) and _next_in(local, n, FRONTV):
            code.append("S")
        elif _is_previous_char(local, n, "S") and _is_next_char(local, n, "H"):
            code.append("K")
        elif _is_next_char(local, n, "H"):
            if n == 0 and size >= 3 and _is_vowel(local, 2):
                code.append("K")
            else:
                code.append("X")
        else:
            code.append("K")

    @staticmethod
    def _handle_g(local: str, n: int, code: list) -> None:
        size = len(local)
        if _is_last_char(size, n + 1) and _is_next_char(local, n, "H"):
            return
        if not _is_last_char(size, n + 1) and _is_next_char(local, n, "H") and not _is_vowel(local, n + 2):
            return
        if n > 0 and (_region_match(local, n, "GN") or _region_match(local, n, "GNED")):
            return  # silent G
        hard = _is_previous_char(local, n, "G")
        if not _is_last_char(size, n) and _next_in(local, n, FRONTV) and not hard:
            code.append("J")
        else:
            code.append("K")
