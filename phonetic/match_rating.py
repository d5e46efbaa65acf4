"""
Match Rating Approach (Western Airlines, 1977).

encode() builds the MRA "codex": cleaned, vowels dropped (except a leading
one), doubled consonants collapsed, and at most the first three and last
three letters kept. is_encoded_equals() applies the MRA comparison rules,
which are not plain code equality.
"""

import re

from .encoder import Encoder

PLAIN_ASCII = "AaEeIiOoUuAaEeIiOoUuYyAaEeIiOoUuYyAaOoNnAaEeIiOoUuYyAaCcOoUu"
UNICODE = (
    "ÀàÈèÌìÒòÙù"
    "ÁáÉéÍíÓóÚúÝý"
    "ÂâÊêÎîÔôÛûŶŷ"
    "ÃãÕõÑñ"
    "ÄäËëÏïÖöÜüŸÿ"
    "ÅåÇçŐőŰű"
)

_ACCENTS = str.maketrans(UNICODE, PLAIN_ASCII)

DOUBLE_CONSONANT = (
    "BB", "CC", "DD", "FF", "GG", "HH", "JJ", "KK", "LL", "MM", "NN",
    "PP", "QQ", "RR", "SS", "TT", "VV", "WW", "XX", "YY", "ZZ",
)

_TRIMMED = re.compile(r"[-&'.,]")
_WHITESPACE = re.compile(r"\s+")
_VOWELS = re.compile("[AEIOU]")


def _is_blank_or_single(value: str) -> bool:
    return value is None or len(value.strip()) <= 1


def clean_name(name: str) -> str:
    upper = name.upper()
    upper = _TRIMMED.sub("", upper)
    upper = _WHITESPACE.sub("", upper)
    return upper.translate(_ACCENTS)


def remove_vowels(name: str) -> str:
    if not name:
        return name
    first = name[0]
    rest = _VOWELS.sub("", name)
    if first in "AEIOU":
        return first + rest
    return rest


def remove_double_consonants(name: str) -> str:
    for double in DOUBLE_CONSONANT:
        name = name.replace(double, double[0])
    return name


def first3_last3(name: str) -> str:
    if len(name) > 6:
        return name[:3] + name[-3:]
    return name


def minimum_rating(sum_length: int) -> int:
    """Similarity threshold for the combined length of two codexes."""
    if sum_length <= 4:
        return 5
    if sum_length <= 7:
        return 4
    if sum_length <= 11:
        return 3
    if sum_length == 12:
        return 2
    return 1


def unmatched_similarity(name1: str, name2: str) -> int:
    """
    Strike out letters that agree at the same position, scanning from the
    left and from the right; 6 minus the longer leftover is the similarity.
    """
    chars1 = list(name1)
    chars2 = list(name2)
    last1 = len(name1) - 1
    last2 = len(name2) - 1
    for i in range(len(name1)):
        if i > last2:
            break
        if name1[i] == name2[i]:
            chars1[i] = " "
            chars2[i] = " "
        if name1[last1 - i] == name2[last2 - i]:
            chars1[last1 - i] = " "
            chars2[last2 - i] = " "

    left1 = "".join(chars1).replace(" ", "")
    left2 = "".join(chars2).replace(" ", "")
    return abs(6 - max(len(left1), len(left2)))


class MatchRatingApproach(Encoder):
    def encode(self, value: str) -> str:
        if _is_blank_or_single(value):
            return ""
        name = clean_name(value)
        name = remove_vowels(name)
        name = remove_double_consonants(name)
        return first3_last3(name)

    def is_encoded_equals(self, value1: str, value2: str) -> bool:
        if _is_blank_or_single(value1) or _is_blank_or_single(value2):
            return False
        if value1.lower() == value2.lower():
            return True

        name1 = self.encode(value1)
        name2 = self.encode(value2)
        if abs(len(name1) - len(name2)) >= 3:
            return False
        if not name1 or not name2:
            return False

        return unmatched_similarity(name1, name2) >= minimum_rating(len(name1) + len(name2))
