"""
Language sets, name types and rule types for Beider-Morse encoding.

- LanguageSet is a three-valued lattice: ANY_LANGUAGE (no constraint),
  NO_LANGUAGES (empty) and SomeLanguages (a concrete, non-empty set).
- Languages holds the valid language list of each name type, read from
  ``{ash,gen,sep}_languages.txt``.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, Mapping, Optional, Union

from ..errors import UnknownNameTypeError, WrongFilenameError
from ..rules_text import parse_list, read_resource

logger = logging.getLogger(__name__)

ANY = "any"


class NameType(str, Enum):
    ASHKENAZI = "ash"
    GENERIC = "gen"
    SEPHARDIC = "sep"

    @classmethod
    def parse(cls, token: str) -> "NameType":
        for name_type in cls:
            if name_type.value == token:
                return name_type
        raise UnknownNameTypeError(token)

    @classmethod
    def from_language_filename(cls, filename: str) -> "NameType":
        suffix = "_languages.txt"
        if not filename.endswith(suffix):
            raise WrongFilenameError(filename)
        return cls.parse(filename[: -len(suffix)])

    @property
    def language_filename(self) -> str:
        return f"{self.value}_languages.txt"

    @property
    def lang_filename(self) -> str:
        return f"{self.value}_lang.txt"


class RuleType(str, Enum):
    """Public rule types: which final rules are applied after the main pass."""
    APPROX = "approx"
    EXACT = "exact"


class PrivateRuleType(str, Enum):
    """Rule groups as stored on disk; RULES is the main transformation pass."""
    APPROX = "approx"
    EXACT = "exact"
    RULES = "rules"

    @classmethod
    def of(cls, rule_type: RuleType) -> "PrivateRuleType":
        if rule_type is RuleType.APPROX:
            return cls.APPROX
        if rule_type is RuleType.EXACT:
            return cls.EXACT
        raise ValueError(f"not a public rule type: {rule_type!r}")


class LanguageSet:
    """Base of the language-set lattice. Instances are immutable and hashable."""

    __slots__ = ()

    @staticmethod
    def from_languages(languages: Iterable[str]) -> "LanguageSet":
        langs = frozenset(languages)
        if not langs:
            return NO_LANGUAGES
        return SomeLanguages(langs)

    def restrict_to(self, other: "LanguageSet") -> "LanguageSet":
        raise NotImplementedError

    def merge(self, other: "LanguageSet") -> "LanguageSet":
        raise NotImplementedError

    def is_empty(self) -> bool:
        raise NotImplementedError

    def is_singleton(self) -> bool:
        raise NotImplementedError

    def any(self) -> Optional[str]:
        """First language in sorted order, or None when there is no concrete member."""
        raise NotImplementedError

    def contains(self, language: str) -> bool:
        raise NotImplementedError


class _AnyLanguage(LanguageSet):
    __slots__ = ()

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        return other

    def merge(self, other: LanguageSet) -> LanguageSet:
        return self

    def is_empty(self) -> bool:
        return False

    def is_singleton(self) -> bool:
        return False

    def any(self) -> Optional[str]:
        return None

    def contains(self, language: str) -> bool:
        return True

    def __repr__(self) -> str:
        return "ANY_LANGUAGE"

    __str__ = __repr__


class _NoLanguages(LanguageSet):
    __slots__ = ()

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        return self

    def merge(self, other: LanguageSet) -> LanguageSet:
        return other

    def is_empty(self) -> bool:
        return True

    def is_singleton(self) -> bool:
        return False

    def any(self) -> Optional[str]:
        return None

    def contains(self, language: str) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_LANGUAGES"

    __str__ = __repr__


ANY_LANGUAGE: LanguageSet = _AnyLanguage()
NO_LANGUAGES: LanguageSet = _NoLanguages()


class SomeLanguages(LanguageSet):
    """A concrete, non-empty set of language names. Build via LanguageSet.from_languages."""

    __slots__ = ("languages",)

    def __init__(self, languages: FrozenSet[str]):
        if not languages:
            raise ValueError("SomeLanguages requires at least one language; use NO_LANGUAGES")
        self.languages = frozenset(languages)

    def restrict_to(self, other: LanguageSet) -> LanguageSet:
        if other is ANY_LANGUAGE:
            return self
        if isinstance(other, SomeLanguages):
            return LanguageSet.from_languages(self.languages & other.languages)
        return NO_LANGUAGES

    def merge(self, other: LanguageSet) -> LanguageSet:
        if other is ANY_LANGUAGE:
            return other
        if isinstance(other, SomeLanguages):
            return SomeLanguages(self.languages | other.languages)
        return self

    def is_empty(self) -> bool:
        return False

    def is_singleton(self) -> bool:
        return len(self.languages) == 1

    def any(self) -> Optional[str]:
        return min(self.languages)

    def contains(self, language: str) -> bool:
        return language in self.languages

    def __eq__(self, other: object) -> bool:
        return isinstance(other, SomeLanguages) and self.languages == other.languages

    def __hash__(self) -> int:
        return hash(self.languages)

    def __repr__(self) -> str:
        return f"SomeLanguages({sorted(self.languages)!r})"

    def __str__(self) -> str:
        return ",".join(sorted(self.languages))


class Languages:
    """Valid languages per name type."""

    def __init__(self, languages: Mapping[NameType, Iterable[str]]):
        self._languages: Dict[NameType, FrozenSet[str]] = {
            nt: frozenset(langs) for nt, langs in languages.items()
        }

    def get(self, name_type: NameType) -> FrozenSet[str]:
        try:
            return self._languages[name_type]
        except KeyError:
            raise UnknownNameTypeError(name_type.value) from None

    def name_types(self):
        return list(self._languages)

    def __contains__(self, name_type: NameType) -> bool:
        return name_type in self._languages

    @classmethod
    def from_texts(cls, texts: Mapping[NameType, str]) -> "Languages":
        return cls({nt: parse_list(text) for nt, text in texts.items()})

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "Languages":
        """Read every ``{ash,gen,sep}_languages.txt`` found in the directory."""
        directory = Path(directory)
        texts: Dict[NameType, str] = {}
        for path in sorted(directory.glob("*_languages.txt")):
            try:
                name_type = NameType.from_language_filename(path.name)
            except UnknownNameTypeError:
                logger.debug("Ignoring language list %s", path.name)
                continue
            texts[name_type] = read_resource(path)
        result = cls.from_texts(texts)
        for name_type in result.name_types():
            logger.debug("%s: %d languages", name_type.value, len(result.get(name_type)))
        return result
