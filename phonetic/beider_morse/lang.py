"""
Language guessing.

Each name type has an ordered list of rules ``<regex> <lang>+<lang> <true|false>``.
Starting from every valid language, a matching accept rule keeps only its
languages and a matching reject rule removes them. An empty outcome means
"unknown" and becomes ANY_LANGUAGE.
"""

import logging
import re
from pathlib import Path
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Pattern, Union

from ..errors import BadContextRegexError, UnknownNameTypeError
from ..rules_text import parse_lang_lines, read_resource
from .languages import ANY_LANGUAGE, LanguageSet, Languages, NameType

logger = logging.getLogger(__name__)


class LangRule:
    __slots__ = ("pattern", "languages", "accept_on_match")

    def __init__(self, pattern: Pattern, languages: Iterable[str], accept_on_match: bool):
        self.pattern = pattern
        self.languages: FrozenSet[str] = frozenset(languages)
        self.accept_on_match = accept_on_match

    def matches(self, text: str) -> bool:
        return self.pattern.search(text) is not None

    def __repr__(self) -> str:
        return f"LangRule({self.pattern.pattern!r}, {sorted(self.languages)!r}, {self.accept_on_match})"


class Lang:
    """Guessing rules for one name type."""

    def __init__(self, rules: List[LangRule], languages: Iterable[str]):
        self.rules = rules
        self.languages: FrozenSet[str] = frozenset(languages)

    @classmethod
    def from_text(cls, text: str, languages: Iterable[str], source: Optional[str] = None) -> "Lang":
        rules: List[LangRule] = []
        for line in parse_lang_lines(text, source):
            try:
                pattern = re.compile(line.pattern)
            except re.error as e:
                raise BadContextRegexError(line.pattern, e) from e
            rules.append(LangRule(pattern, line.languages, line.accept_on_match))
        return cls(rules, languages)

    def guess_language(self, text: str) -> str:
        """The single guessed language, or ``any`` when the guess is ambiguous."""
        langs = self.guess_languages(text)
        return langs.any() if langs.is_singleton() else "any"

    def guess_languages(self, text: str) -> LanguageSet:
        text = text.lower()
        remaining = set(self.languages)
        for rule in self.rules:
            if rule.matches(text):
                if rule.accept_on_match:
                    remaining &= rule.languages
                else:
                    remaining -= rule.languages
        if not remaining:
            return ANY_LANGUAGE
        return LanguageSet.from_languages(remaining)


class Langs:
    """Guessing rules of every name type."""

    def __init__(self, langs: Mapping[NameType, Lang]):
        self._langs: Dict[NameType, Lang] = dict(langs)

    def get(self, name_type: NameType) -> Lang:
        try:
            return self._langs[name_type]
        except KeyError:
            raise UnknownNameTypeError(name_type.value) from None

    def __contains__(self, name_type: NameType) -> bool:
        return name_type in self._langs

    @classmethod
    def from_directory(cls, directory: Union[str, Path], languages: Languages) -> "Langs":
        directory = Path(directory)
        langs: Dict[NameType, Lang] = {}
        for name_type in languages.name_types():
            path = directory / name_type.lang_filename
            langs[name_type] = Lang.from_text(read_resource(path), languages.get(name_type), path.name)
            logger.debug("%s: %d language rules", path.name, len(langs[name_type].rules))
        return cls(langs)
