"""Phonetic encoders for fuzzy name matching."""

from .encoder import Encoder, SoundexDifference
from .errors import (
    PhoneticError,
    RuleParseError,
    UnknownNameTypeError,
    NotABooleanError,
    BadContextRegexError,
    WrongPhonemeError,
    WrongFilenameError,
    ConfigurationIOError,
)
from .soundex import Soundex, RefinedSoundex
from .metaphone import Metaphone
from .double_metaphone import DoubleMetaphone, DoubleMetaphoneResult
from .caverphone import Caverphone1, Caverphone2
from .cologne import ColognePhonetic
from .nysiis import Nysiis
from .phonex import Phonex
from .match_rating import MatchRatingApproach
from .daitch_mokotoff import DaitchMokotoffSoundex

__all__ = [
    "Encoder",
    "SoundexDifference",
    "PhoneticError",
    "RuleParseError",
    "UnknownNameTypeError",
    "NotABooleanError",
    "BadContextRegexError",
    "WrongPhonemeError",
    "WrongFilenameError",
    "ConfigurationIOError",
    "Soundex",
    "RefinedSoundex",
    "Metaphone",
    "DoubleMetaphone",
    "DoubleMetaphoneResult",
    "Caverphone1",
    "Caverphone2",
    "ColognePhonetic",
    "Nysiis",
    "Phonex",
    "MatchRatingApproach",
    "DaitchMokotoffSoundex",
]
