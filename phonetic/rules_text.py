"""
Parsing of rule-definition text resources.

Four line grammars share one comment convention:

- quadruplet lines: four double-quoted fields, optionally followed by a
  ``//`` comment (Beider-Morse rules, Daitch-Mokotoff rules);
- language-guess lines: ``<regex> <lang1>+<lang2> <true|false>``;
- folding lines: ``<char>=<char>`` (Daitch-Mokotoff ASCII folding);
- list lines: one bare token per line (language lists).

Comments: a trimmed line that is empty or starts with ``//`` is skipped, as is
every line inside a ``/* ... */`` block. The end of a block is checked before
its start, so a line ending in ``*/`` always closes the block.
"""

import re
from pathlib import Path
from typing import Iterator, List, NamedTuple, Optional, Tuple, Union

from .errors import ConfigurationIOError, NotABooleanError, RuleParseError

LINE_COMMENT = "//"
BLOCK_START = "/*"
BLOCK_END = "*/"

_QUADRUPLET = re.compile(r'\s*"([^"]*)"\s+"([^"]*)"\s+"([^"]*)"\s+"([^"]*)"\s*(//.*)?$')
_FOLDING = re.compile(r"^(.)=(.)\s*(//.*)?$")


class Quadruplet(NamedTuple):
    first: str
    second: str
    third: str
    fourth: str


class RuleLine(NamedTuple):
    """A content line with its 1-based position in the resource."""
    number: int
    text: str


class LangLine(NamedTuple):
    pattern: str
    languages: List[str]
    accept_on_match: bool


def read_resource(path: Union[str, Path]) -> str:
    """Read a rule resource as UTF-8 text; I/O failures become ConfigurationIOError."""
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationIOError(str(path), e) from e


def iter_content_lines(text: str) -> Iterator[RuleLine]:
    """Yield trimmed lines that are neither blank nor comments."""
    in_block = False
    for number, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if line.endswith(BLOCK_END):
            in_block = False
            continue
        if not line or line.startswith(LINE_COMMENT) or in_block:
            continue
        if line.startswith(BLOCK_START):
            in_block = True
            continue
        yield RuleLine(number, line)


def strip_trailing_comment(line: str) -> str:
    idx = line.find(LINE_COMMENT)
    if idx >= 0:
        line = line[:idx]
    return line.strip()


def match_quadruplet(line: str) -> Optional[Quadruplet]:
    m = _QUADRUPLET.match(line)
    if m is None:
        return None
    return Quadruplet(m.group(1), m.group(2), m.group(3), m.group(4))


def match_folding(line: str) -> Optional[Tuple[str, str]]:
    m = _FOLDING.match(line)
    if m is None:
        return None
    return m.group(1), m.group(2)


def parse_quadruplets(text: str, source: Optional[str] = None) -> List[Quadruplet]:
    """Parse a resource made only of quadruplet lines."""
    out: List[Quadruplet] = []
    for line in iter_content_lines(text):
        quad = match_quadruplet(line.text)
        if quad is None:
            raise RuleParseError(line.text, source, f"malformed rule at line {line.number}")
        out.append(quad)
    return out


def parse_bool(token: str, line: str = "") -> bool:
    if token == "true":
        return True
    if token == "false":
        return False
    raise NotABooleanError(token, line)


def parse_lang_lines(text: str, source: Optional[str] = None) -> List[LangLine]:
    """Parse language-guessing lines: ``<regex> <lang>+<lang> <true|false>``."""
    out: List[LangLine] = []
    for line in iter_content_lines(text):
        content = strip_trailing_comment(line.text)
        if not content:
            continue
        parts = content.split()
        if len(parts) != 3:
            raise RuleParseError(line.text, source, f"malformed language rule at line {line.number}")
        pattern, langs, flag = parts
        out.append(LangLine(pattern, langs.split("+"), parse_bool(flag, line.text)))
    return out


def parse_list(text: str) -> List[str]:
    """One token per content line; trailing comments are dropped."""
    out: List[str] = []
    for line in iter_content_lines(text):
        token = strip_trailing_comment(line.text)
        if token:
            out.append(token)
    return out
