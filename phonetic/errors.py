"""
Error types raised while building encoders from rule text.

All of them are configuration-time errors: once an encoder or a
``ConfigFiles`` bundle has been built, encoding never raises.
"""

from typing import Optional


class PhoneticError(Exception):
    """Base class for every error raised by this package."""


class RuleParseError(PhoneticError):
    """A non-comment line did not match the grammar of its resource."""

    def __init__(self, line: str, source: Optional[str] = None, reason: str = "unparseable line"):
        self.line = line
        self.source = source
        self.reason = reason
        where = f" in {source}" if source else ""
        super().__init__(f"{reason}{where}: {line!r}")


class UnknownNameTypeError(PhoneticError):
    def __init__(self, token: str):
        self.token = token
        super().__init__(f"unknown name type: {token!r}")


class NotABooleanError(PhoneticError):
    def __init__(self, token: str, line: str = ""):
        self.token = token
        self.line = line
        super().__init__(f"expected 'true' or 'false', got {token!r} in line {line!r}")


class BadContextRegexError(PhoneticError):
    def __init__(self, expression: str, cause: Exception):
        self.expression = expression
        super().__init__(f"invalid regular expression {expression!r}: {cause}")


class WrongPhonemeError(PhoneticError):
    def __init__(self, expression: str, reason: str):
        self.expression = expression
        super().__init__(f"{reason}: {expression!r}")


class WrongFilenameError(PhoneticError):
    def __init__(self, filename: str):
        self.filename = filename
        super().__init__(f"cannot derive a rule key from file name {filename!r}")


class ConfigurationIOError(PhoneticError):
    """A rule resource could not be read. The original ``OSError`` is chained."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        super().__init__(f"cannot read rule resource {path}: {cause}")
