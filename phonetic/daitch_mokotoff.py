"""
Daitch-Mokotoff Soundex.

Rules are read from text: quadruplet lines
``"pattern" "at-start" "before-vowel" "default"`` (each replacement may hold
``|``-separated branches) and ``c=c`` ASCII-folding lines. At each position
the longest matching pattern wins; every branch grows a six-digit code.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional, Tuple, Union

from . import config
from .encoder import Encoder
from .errors import RuleParseError, WrongFilenameError
from .rules_text import iter_content_lines, match_folding, match_quadruplet, read_resource

logger = logging.getLogger(__name__)

MAX_LENGTH = 6
VOWELS = "aeiou"


class Rule:
    __slots__ = ("pattern", "replacement_at_start", "replacement_before_vowel", "replacement_default")

    def __init__(self, pattern: str, at_start: str, before_vowel: str, default: str):
        self.pattern = pattern
        self.replacement_at_start: Tuple[str, ...] = tuple(at_start.split("|"))
        self.replacement_before_vowel: Tuple[str, ...] = tuple(before_vowel.split("|"))
        self.replacement_default: Tuple[str, ...] = tuple(default.split("|"))

    def matches(self, context: str) -> bool:
        return context.startswith(self.pattern)

    def replacements(self, context: str, at_start: bool) -> Tuple[str, ...]:
        if at_start:
            return self.replacement_at_start
        next_index = len(self.pattern)
        if next_index < len(context) and context[next_index] in VOWELS:
            return self.replacement_before_vowel
        return self.replacement_default

    def __repr__(self) -> str:
        return (
            f"{self.pattern}=({'|'.join(self.replacement_at_start)},"
            f"{'|'.join(self.replacement_before_vowel)},{'|'.join(self.replacement_default)})"
        )


class _Branch:
    """One candidate code and the replacement that produced its last digits."""

    __slots__ = ("code", "last_replacement")

    def __init__(self, code: str = "", last_replacement: Optional[str] = None):
        self.code = code
        self.last_replacement = last_replacement

    def copy(self) -> "_Branch":
        return _Branch(self.code, self.last_replacement)

    def process_next_replacement(self, replacement: str, force_append: bool) -> None:
        append = self.last_replacement is None or not self.last_replacement.endswith(replacement) or force_append
        if append and len(self.code) < MAX_LENGTH:
            self.code = (self.code + replacement)[:MAX_LENGTH]
        self.last_replacement = replacement

    def finish(self) -> str:
        return self.code.ljust(MAX_LENGTH, "0")


def parse_dm_rules(text: str, source: Optional[str] = None) -> Tuple[Dict[str, List[Rule]], Dict[str, str]]:
    """Rules bucketed by first character (longest pattern first) and folding pairs."""
    rules: Dict[str, List[Rule]] = {}
    folding: Dict[str, str] = {}
    for line in iter_content_lines(text):
        quad = match_quadruplet(line.text)
        if quad is not None:
            if not quad.first:
                raise RuleParseError(line.text, source, f"empty pattern at line {line.number}")
            rule = Rule(*quad)
            rules.setdefault(rule.pattern[0], []).append(rule)
            continue
        pair = match_folding(line.text)
        if pair is not None:
            folding[pair[0]] = pair[1]
            continue
        raise RuleParseError(line.text, source, f"malformed rule at line {line.number}")

    for bucket in rules.values():
        bucket.sort(key=lambda r: len(r.pattern), reverse=True)
    return rules, folding


class DaitchMokotoffSoundex(Encoder):
    """
    encode() gives the first branch only; soundex() gives every branch,
    ``|``-separated, as genealogy search tools expect.
    """

    def __init__(self, rules_text: str, ascii_folding: bool = True, source: Optional[str] = None):
        self.rules, self.folding = parse_dm_rules(rules_text, source)
        self.ascii_folding = ascii_folding
        logger.debug(
            "Daitch-Mokotoff: %d rules, %d folding pairs",
            sum(len(bucket) for bucket in self.rules.values()), len(self.folding),
        )

    @classmethod
    def from_file(cls, path: Union[str, Path], ascii_folding: bool = True) -> "DaitchMokotoffSoundex":
        return cls(read_resource(path), ascii_folding, Path(path).name)

    @classmethod
    def from_env(cls, ascii_folding: bool = True) -> "DaitchMokotoffSoundex":
        """Load the rule file named by PHONETIC_DM_RULES_FILE."""
        if not config.DM_RULES_FILE:
            raise WrongFilenameError("PHONETIC_DM_RULES_FILE is not set")
        return cls.from_file(config.DM_RULES_FILE, ascii_folding)

    def encode(self, value: str) -> str:
        branches = self._soundex(value, branching=False)
        return branches[0] if branches else ""

    def soundex(self, value: str) -> str:
        return "|".join(self._soundex(value, branching=True))

    def _cleanup(self, value: str) -> str:
        chars = []
        for ch in value:
            if ch.isspace():
                continue
            ch = ch.lower()
            if self.ascii_folding:
                ch = self.folding.get(ch, ch)
            chars.append(ch)
        return "".join(chars)

    def _soundex(self, value: str, branching: bool) -> List[str]:
        if value is None:
            return []
        text = self._cleanup(value)

        branches: List[_Branch] = [_Branch()]
        last_char = ""
        index = 0
        while index < len(text):
            ch = text[index]
            bucket = self.rules.get(ch)
            if bucket is None:
                index += 1
                continue

            context = text[index:]
            step = 1
            for rule in bucket:
                if not rule.matches(context):
                    continue
                replacements = rule.replacements(context, last_char == "")
                force = (last_char == "m" and ch == "n") or (last_char == "n" and ch == "m")
                if branching:
                    next_branches: Dict[str, _Branch] = {}
                    for branch in branches:
                        for replacement in replacements:
                            next_branch = branch.copy()
                            next_branch.process_next_replacement(replacement, force)
                            next_branches.setdefault(next_branch.code, next_branch)
                    branches = list(next_branches.values())
                else:
                    branches[0].process_next_replacement(replacements[0], force)
                step = len(rule.pattern)
                break
            last_char = ch
            index += step

        return [branch.finish() for branch in branches]
