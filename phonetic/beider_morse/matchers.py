"""
Context matchers for Beider-Morse rules.

Most rule contexts are trivial regexes (``^``, ``$``, a literal prefix or
suffix, a single character class). compile_context() recognises those shapes
and returns a plain string test; anything else is compiled with ``re`` and
matched with ``search``.
"""

import re
from typing import Callable

from ..errors import BadContextRegexError


class ContextMatcher:
    """Matches a text fragment; ``pattern`` keeps the source regex for display."""

    __slots__ = ("pattern", "_test")

    def __init__(self, pattern: str, test: Callable[[str], bool]):
        self.pattern = pattern
        self._test = test

    def is_match(self, text: str) -> bool:
        return self._test(text)

    def __repr__(self) -> str:
        return f"ContextMatcher({self.pattern!r})"


def _all_strings(_text: str) -> bool:
    return True


def _char_class_test(chars: str, should_match: bool, where: str) -> Callable[[str], bool]:
    if where == "equals":
        return lambda text: len(text) == 1 and (text in chars) == should_match
    if where == "start":
        return lambda text: len(text) > 0 and (text[0] in chars) == should_match
    return lambda text: len(text) > 0 and (text[-1] in chars) == should_match


def _regex_test(regex: str) -> Callable[[str], bool]:
    try:
        compiled = re.compile(regex)
    except re.error as e:
        raise BadContextRegexError(regex, e) from e
    return lambda text: compiled.search(text) is not None


def compile_context(regex: str) -> ContextMatcher:
    """Build a matcher for an anchored context expression."""
    starts_with = regex.startswith("^")
    ends_with = regex.endswith("$")
    content = regex[1 if starts_with else 0:]
    if ends_with:
        content = content[:-1]

    if "[" not in regex:
        if starts_with and ends_with:
            if not content:
                return ContextMatcher(regex, lambda text: text == "")
            return ContextMatcher(regex, lambda text: text == content)
        if (starts_with or ends_with) and not content:
            return ContextMatcher(regex, _all_strings)
        if starts_with:
            return ContextMatcher(regex, lambda text: text.startswith(content))
        if ends_with:
            return ContextMatcher(regex, lambda text: text.endswith(content))
    elif content.startswith("[") and content.endswith("]"):
        chars = content[1:-1]
        if "[" not in chars:
            negate = chars.startswith("^")
            if negate:
                chars = chars[1:]
            if starts_with and ends_with:
                return ContextMatcher(regex, _char_class_test(chars, not negate, "equals"))
            if starts_with:
                return ContextMatcher(regex, _char_class_test(chars, not negate, "start"))
            if ends_with:
                return ContextMatcher(regex, _char_class_test(chars, not negate, "end"))

    return ContextMatcher(regex, _regex_test(regex))
