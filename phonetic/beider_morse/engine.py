"""
Beider-Morse phonetic engine.

- PhonemeBuilder: the set of in-progress spellings, each tagged with the
  languages still compatible with it. Rule application is a capped cross
  product; finalization merges equal spellings by unioning their languages.
- PhoneticEngine: guesses the language, splits articles and words, runs the
  main rules, then the common and language-specific final rules.
"""

import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from .languages import ANY, LanguageSet, NameType, PrivateRuleType, RuleType
from .rules import COMMON, Phoneme, PhonemeList, RuleBuckets

logger = logging.getLogger(__name__)

DEFAULT_MAX_PHONEMES = 20

# Nobiliary particles and articles dropped or fused per name type.
NAME_PREFIXES: Mapping[NameType, Tuple[str, ...]] = MappingProxyType({
    NameType.ASHKENAZI: ("bar", "ben", "da", "de", "van", "von"),
    NameType.SEPHARDIC: (
        "al", "el", "da", "dal", "de", "del", "dela", "de la", "della",
        "des", "di", "do", "dos", "du", "van", "von",
    ),
    NameType.GENERIC: (
        "da", "dal", "de", "del", "dela", "de la", "della", "des", "di",
        "do", "dos", "du", "van", "von",
    ),
})

_WHITESPACE = re.compile(r"\s+")


class PhonemeBuilder:
    """Phoneme branches keyed by text, always walked in text order."""

    def __init__(self, phonemes: Iterable[Phoneme]):
        self._phonemes: Dict[str, Phoneme] = {}
        for ph in phonemes:
            self._phonemes.setdefault(ph.text, ph)

    @classmethod
    def empty(cls, languages: LanguageSet) -> "PhonemeBuilder":
        return cls([Phoneme("", languages)])

    @property
    def phonemes(self) -> List[Phoneme]:
        return [self._phonemes[text] for text in sorted(self._phonemes)]

    def __len__(self) -> int:
        return len(self._phonemes)

    def append(self, text: str) -> None:
        self._phonemes = {ph.text + text: ph.append(text) for ph in self._phonemes.values()}

    def apply(self, expression: PhonemeList, max_phonemes: int) -> None:
        """
        Cross every branch with every alternative of a matched rule.

        Outer loop over existing branches in text order, inner loop over
        alternatives in rule order. A join survives when the two language sets
        intersect. Once ``max_phonemes`` distinct spellings exist, the
        remaining combinations are abandoned, so the walk order decides which
        branches survive.
        """
        result: Dict[str, Phoneme] = {}
        for left in self.phonemes:
            for right in expression.phonemes:
                languages = left.languages.restrict_to(right.languages)
                if languages.is_empty():
                    continue
                joined = left.join(right, languages)
                if len(result) < max_phonemes:
                    result.setdefault(joined.text, joined)
                    if len(result) >= max_phonemes:
                        self._phonemes = result
                        return
        self._phonemes = result

    def make_string(self) -> str:
        return "|".join(sorted(self._phonemes))


def apply_rules(
    text: str,
    rules: RuleBuckets,
    builder: PhonemeBuilder,
    max_phonemes: int,
    append_unmatched: bool,
) -> PhonemeBuilder:
    """
    Scan ``text`` left to right, applying the first (longest) matching rule at
    each position. Unmatched characters advance by one and are copied to every
    branch only when ``append_unmatched`` is set.
    """
    i = 0
    while i < len(text):
        found = False
        for rule in rules.get(text[i], ()):
            if rule.pattern_and_context_matches(text, i):
                builder.apply(rule.phonemes, max_phonemes)
                i += len(rule.pattern)
                found = True
                break
        if not found:
            if append_unmatched:
                builder.append(text[i])
            i += 1
    return builder


def apply_final_rules(builder: PhonemeBuilder, final_rules: RuleBuckets, max_phonemes: int) -> PhonemeBuilder:
    """
    Run a final-rule pass on each branch separately, in text order, unioning
    languages of equal spellings. New spellings stop being admitted at
    ``max_phonemes``.
    """
    if not final_rules:
        return builder
    merged: Dict[str, Phoneme] = {}
    for phoneme in builder.phonemes:
        sub = PhonemeBuilder.empty(phoneme.languages)
        apply_rules(phoneme.text, final_rules, sub, max_phonemes, append_unmatched=True)
        for new_phoneme in sub.phonemes:
            existing = merged.get(new_phoneme.text)
            if existing is None:
                if len(merged) >= max_phonemes:
                    continue
                merged[new_phoneme.text] = new_phoneme
            else:
                merged[new_phoneme.text] = existing.merge_with_language(new_phoneme.languages)
    return PhonemeBuilder(merged[text] for text in sorted(merged))


class PhoneticEngine:
    """
    Encodes names with the Beider-Morse rules of one name type and rule type.

    ``config`` is a ConfigFiles bundle; it is only read, so one bundle can back
    any number of engines and threads.
    """

    def __init__(
        self,
        config,
        name_type: NameType,
        rule_type: RuleType,
        concat: bool = True,
        max_phonemes: int = DEFAULT_MAX_PHONEMES,
        name_prefixes: Mapping[NameType, Tuple[str, ...]] = NAME_PREFIXES,
    ):
        if max_phonemes < 1:
            raise ValueError("max_phonemes must be at least 1")
        self.name_type = name_type
        self.rule_type = rule_type
        self.concat = concat
        self.max_phonemes = max_phonemes
        self.prefixes: Tuple[str, ...] = tuple(name_prefixes.get(name_type, ()))
        self._rules = config.rules
        self._lang = config.langs.get(name_type)
        self._final_rule_type = PrivateRuleType.of(rule_type)

    def encode(self, text: str, languages: Optional[LanguageSet] = None) -> str:
        """Encode a name; languages are guessed from the text unless given."""
        if languages is None:
            languages = self._lang.guess_languages(text)
        token = languages.any() if languages.is_singleton() else ANY

        rules = self._rules.rules(self.name_type, PrivateRuleType.RULES, token)
        final_common = self._rules.rules(self.name_type, self._final_rule_type, COMMON)
        final_lang = self._rules.rules(self.name_type, self._final_rule_type, token)

        text = text.lower().replace("-", " ").strip()

        if self.name_type is NameType.GENERIC:
            split = self._split_prefix(text)
            if split is not None:
                remainder, combined = split
                return f"({self.encode(remainder)})-({self.encode(combined)})"

        words = [w for w in _WHITESPACE.split(text) if w]
        if self.name_type is NameType.SEPHARDIC:
            words2 = [w.rsplit("'", 1)[-1] for w in words]
            words2 = [w for w in words2 if w not in self.prefixes]
        elif self.name_type is NameType.ASHKENAZI:
            words2 = [w for w in words if w not in self.prefixes]
        else:
            words2 = list(words)

        if self.concat:
            text = " ".join(words2)
        elif len(words2) == 1:
            text = words2[0]
        else:
            return "-".join(self.encode(word) for word in words2)

        logger.debug("encoding %r with language %s", text, token)
        builder = PhonemeBuilder.empty(languages)
        apply_rules(text, rules, builder, self.max_phonemes, append_unmatched=False)
        builder = apply_final_rules(builder, final_common, self.max_phonemes)
        builder = apply_final_rules(builder, final_lang, self.max_phonemes)
        return builder.make_string()

    def encode_with_language_set(self, text: str, languages: LanguageSet) -> str:
        return self.encode(text, languages)

    def _split_prefix(self, text: str) -> Optional[Tuple[str, str]]:
        """(remainder, fused form) when the name starts with d' or a particle and a space."""
        if text.startswith("d'"):
            remainder = text[2:]
            return remainder, "d" + remainder
        for prefix in self.prefixes:
            if text.startswith(prefix + " "):
                remainder = text[len(prefix) + 1:]
                return remainder, prefix + remainder
        return None
