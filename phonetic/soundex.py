"""
Soundex and Refined Soundex.

- Soundex: first letter + 3 digits from consonants; similar-sounding names
  share a code.
- Refined Soundex: first letter + one digit per letter, no length limit.
"""

from .encoder import Encoder, SoundexDifference

SILENT = "-"

# Digit mappings indexed A..Z
US_ENGLISH_MAPPING = "01230120022455012623010202"
US_ENGLISH_SIMPLIFIED_MAPPING = US_ENGLISH_MAPPING
US_ENGLISH_GENEALOGY_MAPPING = "-123-12--22455-12623-1-2-2"

REFINED_US_ENGLISH_MAPPING = "01360240043788015936020505"


def soundex_clean(value: str) -> str:
    """Letters only, upper-cased."""
    if not value:
        return ""
    return "".join(c for c in value if c.isalpha()).upper()


def _check_mapping(mapping: str) -> str:
    if len(mapping) != 26:
        raise ValueError(f"a Soundex mapping needs 26 codes, got {len(mapping)}")
    return mapping


def _mapping_code(mapping: str, ch: str) -> str:
    index = ord(ch) - ord("A")
    if index < 0 or index >= len(mapping):
        raise ValueError(f"The character is not mapped: {ch} (index={index})")
    return mapping[index]


class Soundex(SoundexDifference, Encoder):
    """
    American Soundex.

    ``special_case_h_w`` makes H and W transparent: the letters around them
    are coded as if adjacent. It defaults to True, unless the mapping has
    silent letters (``-``), which already behave that way.
    """

    def __init__(self, mapping: str = US_ENGLISH_MAPPING, special_case_h_w=None):
        self.mapping = _check_mapping(mapping)
        if special_case_h_w is None:
            special_case_h_w = SILENT not in mapping
        self.special_case_h_w = special_case_h_w

    @classmethod
    def simplified(cls) -> "Soundex":
        """Soundex without the H/W rule (the "simplified" variant)."""
        return cls(US_ENGLISH_SIMPLIFIED_MAPPING, special_case_h_w=False)

    @classmethod
    def genealogy(cls) -> "Soundex":
        """Genealogy variant: vowels, H, W and Y are silent."""
        return cls(US_ENGLISH_GENEALOGY_MAPPING)

    def encode(self, value: str) -> str:
        value = soundex_clean(value)
        if not value:
            return value

        code = [value[0], "0", "0", "0"]
        count = 1
        previous = _mapping_code(self.mapping, value[0])
        for ch in value[1:]:
            if count >= len(code):
                break
            if self.special_case_h_w and ch in ("H", "W"):
                continue
            digit = _mapping_code(self.mapping, ch)
            if digit == SILENT:
                continue
            if digit != "0" and digit != previous:
                code[count] = digit
                count += 1
            previous = digit
        return "".join(code)


class RefinedSoundex(SoundexDifference, Encoder):
    """Refined Soundex: the first letter, then a code for every letter change."""

    def __init__(self, mapping: str = REFINED_US_ENGLISH_MAPPING):
        self.mapping = _check_mapping(mapping)

    def encode(self, value: str) -> str:
        value = soundex_clean(value)
        if not value:
            return value

        code = [value[0]]
        previous = None
        for ch in value:
            digit = _mapping_code(self.mapping, ch)
            if digit != previous:
                code.append(digit)
            previous = digit
        return "".join(code)
