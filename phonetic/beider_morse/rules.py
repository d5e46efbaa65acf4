"""
Beider-Morse transformation rules.

A rule line is ``"pattern" "left context" "right context" "phonemes"``.
The phoneme field is either a single phoneme (``text`` or ``text[lang+lang]``)
or a list ``(alt1|alt2|...)``. A line ``#include name`` pulls in the rules of
``name.txt``.

Rules are grouped by (name type, rule type, language) and, inside a group,
bucketed by the first character of their pattern, longest pattern first.
"""

import logging
import re
from pathlib import Path
from typing import Callable, Dict, List, Mapping, NamedTuple, Optional, Tuple, Union

from ..errors import RuleParseError, WrongFilenameError, WrongPhonemeError
from ..rules_text import iter_content_lines, match_quadruplet, read_resource
from .languages import (
    ANY_LANGUAGE,
    LanguageSet,
    Languages,
    NameType,
    PrivateRuleType,
)
from .matchers import ContextMatcher, compile_context

logger = logging.getLogger(__name__)

COMMON = "common"

_INCLUDE = re.compile(r"^#include\s+(\S+)\s*$")

RuleBuckets = Dict[str, List["Rule"]]
RuleKey = Tuple[NameType, PrivateRuleType, str]


class Phoneme(NamedTuple):
    """A phonetic spelling and the languages it is still valid for."""
    text: str
    languages: LanguageSet

    def append(self, value: str) -> "Phoneme":
        return Phoneme(self.text + value, self.languages)

    def join(self, right: "Phoneme", languages: LanguageSet) -> "Phoneme":
        return Phoneme(self.text + right.text, languages)

    def merge_with_language(self, languages: LanguageSet) -> "Phoneme":
        return Phoneme(self.text, self.languages.merge(languages))


class PhonemeList(NamedTuple):
    phonemes: Tuple[Phoneme, ...]


def parse_phoneme(expression: str) -> Phoneme:
    open_idx = expression.find("[")
    if open_idx < 0:
        return Phoneme(expression, ANY_LANGUAGE)
    if not expression.endswith("]"):
        raise WrongPhonemeError(expression, "phoneme has a '[' but does not end with ']'")
    languages = expression[open_idx + 1 : -1].split("+")
    return Phoneme(expression[:open_idx], LanguageSet.from_languages(languages))


def parse_phoneme_expr(expression: str) -> PhonemeList:
    """Parse the phoneme field of a rule into its ordered alternatives."""
    if not expression.startswith("("):
        return PhonemeList((parse_phoneme(expression),))
    if not expression.endswith(")"):
        raise WrongPhonemeError(expression, "phoneme list has a '(' but does not end with ')'")
    body = expression[1:-1]
    parts = body.split("|")
    if len(parts) > 1:
        while parts and not parts[-1]:
            parts.pop()
    phonemes = [parse_phoneme(part) for part in parts]
    # a leading or trailing "|" stands for an empty alternative
    if body.startswith("|") or body.endswith("|"):
        phonemes.append(Phoneme("", ANY_LANGUAGE))
    return PhonemeList(tuple(phonemes))


class Rule:
    """One pattern with its contexts and replacement phonemes."""

    __slots__ = ("pattern", "left_context", "right_context", "phonemes", "location")

    def __init__(
        self,
        pattern: str,
        left_context: ContextMatcher,
        right_context: ContextMatcher,
        phonemes: PhonemeList,
        location: str = "",
    ):
        self.pattern = pattern
        self.left_context = left_context
        self.right_context = right_context
        self.phonemes = phonemes
        self.location = location

    @classmethod
    def build(cls, pattern: str, lcontext: str, rcontext: str, phonemes: str, location: str = "") -> "Rule":
        return cls(
            pattern,
            compile_context(lcontext + "$"),
            compile_context("^" + rcontext),
            parse_phoneme_expr(phonemes),
            location,
        )

    def pattern_and_context_matches(self, text: str, index: int) -> bool:
        """True if the pattern occurs at ``index`` and both contexts accept their side."""
        end = index + len(self.pattern)
        if end > len(text) or text[index:end] != self.pattern:
            return False
        if not self.right_context.is_match(text[end:]):
            return False
        return self.left_context.is_match(text[:index])

    def __repr__(self) -> str:
        return (
            f"Rule(pattern={self.pattern!r}, left={self.left_context.pattern!r}, "
            f"right={self.right_context.pattern!r}, at={self.location!r})"
        )


def sort_buckets(buckets: RuleBuckets) -> RuleBuckets:
    """Order every bucket longest pattern first; equal lengths keep file order."""
    return {ch: sorted(rules, key=lambda r: len(r.pattern), reverse=True) for ch, rules in buckets.items()}


def parse_rules(
    text: str,
    source: str,
    resolve: Optional[Callable[[str], str]] = None,
    _seen: Tuple[str, ...] = (),
) -> RuleBuckets:
    """
    Parse one rule resource into first-character buckets (unsorted).
    ``resolve`` maps an included resource name to its text.
    """
    buckets: RuleBuckets = {}
    for line in iter_content_lines(text):
        include = _INCLUDE.match(line.text)
        if include:
            name = include.group(1)
            if resolve is None or name in _seen or name == source:
                raise WrongFilenameError(name)
            # an include replaces whole buckets
            buckets.update(parse_rules(resolve(name), name, resolve, _seen + (source,)))
            continue
        quad = match_quadruplet(line.text)
        if quad is None:
            raise RuleParseError(line.text, source, f"malformed rule at line {line.number}")
        pattern, lcontext, rcontext, phonemes = quad
        if not pattern:
            raise RuleParseError(line.text, source, f"empty pattern at line {line.number}")
        rule = Rule.build(pattern, lcontext, rcontext, phonemes, f"{source}:{line.number}")
        buckets.setdefault(pattern[0], []).append(rule)
    return buckets


def rule_resource_name(name_type: NameType, rule_type: PrivateRuleType, language: str) -> str:
    return f"{name_type.value}_{rule_type.value}_{language}"


class Rules:
    """Immutable repository of rule buckets keyed by (name type, rule type, language)."""

    def __init__(self, groups: Mapping[RuleKey, RuleBuckets]):
        self._groups: Dict[RuleKey, RuleBuckets] = {key: sort_buckets(b) for key, b in groups.items()}

    def rules(self, name_type: NameType, rule_type: PrivateRuleType, language: str) -> RuleBuckets:
        """Buckets for one group; an unknown group is empty."""
        return self._groups.get((name_type, rule_type, language), {})

    def __len__(self) -> int:
        return len(self._groups)

    @classmethod
    def from_resolver(cls, resolve: Callable[[str], str], languages: Languages) -> "Rules":
        """Load every group the language lists call for, plus the common final rules."""
        groups: Dict[RuleKey, RuleBuckets] = {}
        for name_type in languages.name_types():
            for rule_type in PrivateRuleType:
                for language in sorted(languages.get(name_type)):
                    name = rule_resource_name(name_type, rule_type, language)
                    groups[(name_type, rule_type, language)] = parse_rules(resolve(name), name, resolve)
                if rule_type is not PrivateRuleType.RULES:
                    name = rule_resource_name(name_type, rule_type, COMMON)
                    groups[(name_type, rule_type, COMMON)] = parse_rules(resolve(name), name, resolve)
        logger.debug("Loaded %d rule groups", len(groups))
        return cls(groups)

    @classmethod
    def from_directory(cls, directory: Union[str, Path], languages: Languages) -> "Rules":
        return cls.from_resolver(directory_resolver(directory), languages)

    @classmethod
    def from_texts(cls, texts: Mapping[str, str], languages: Languages) -> "Rules":
        return cls.from_resolver(mapping_resolver(texts), languages)


def directory_resolver(directory: Union[str, Path]) -> Callable[[str], str]:
    directory = Path(directory)

    def resolve(name: str) -> str:
        path = directory / f"{name}.txt"
        if not path.is_file():
            raise WrongFilenameError(str(path))
        return read_resource(path)

    return resolve


def mapping_resolver(texts: Mapping[str, str]) -> Callable[[str], str]:
    def resolve(name: str) -> str:
        try:
            return texts[name]
        except KeyError:
            raise WrongFilenameError(name) from None

    return resolve
