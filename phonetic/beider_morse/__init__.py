"""Beider-Morse phonetic matching: language-aware, branching name encoding."""

from .config import ConfigFiles
from .encoder import BeiderMorseEncoder, EngineSettings
from .engine import PhonemeBuilder, PhoneticEngine
from .lang import Lang, LangRule, Langs
from .languages import (
    ANY_LANGUAGE,
    NO_LANGUAGES,
    LanguageSet,
    Languages,
    NameType,
    RuleType,
    SomeLanguages,
)
from .rules import Phoneme, PhonemeList, Rule, Rules

__all__ = [
    "ConfigFiles",
    "BeiderMorseEncoder",
    "EngineSettings",
    "PhonemeBuilder",
    "PhoneticEngine",
    "Lang",
    "LangRule",
    "Langs",
    "ANY_LANGUAGE",
    "NO_LANGUAGES",
    "LanguageSet",
    "Languages",
    "NameType",
    "RuleType",
    "SomeLanguages",
    "Phoneme",
    "PhonemeList",
    "Rule",
    "Rules",
]
