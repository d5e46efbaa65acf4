"""Beider-Morse as an Encoder, configured by EngineSettings."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .. import config
from ..encoder import Encoder
from .config import ConfigFiles
from .engine import PhoneticEngine
from .languages import LanguageSet, NameType, RuleType


class EngineSettings(BaseModel):
    """Validated options for building a Beider-Morse engine."""

    model_config = ConfigDict(frozen=True)

    name_type: NameType = NameType.GENERIC
    rule_type: RuleType = RuleType.APPROX
    concat: bool = True
    max_phonemes: int = Field(default=config.MAX_PHONEMES, ge=1)


class BeiderMorseEncoder(Encoder):
    """
    Encodes a name into ``|``-separated alternative spellings.

    Two names are considered equal when their encodings are identical strings;
    use ``matches`` for the looser "share at least one alternative" test.
    """

    def __init__(self, config_files: ConfigFiles, settings: Optional[EngineSettings] = None, **options):
        if settings is None:
            settings = EngineSettings(**options)
        elif options:
            settings = EngineSettings(**{**settings.model_dump(), **options})
        self.settings = settings
        self.engine = PhoneticEngine(
            config_files,
            settings.name_type,
            settings.rule_type,
            concat=settings.concat,
            max_phonemes=settings.max_phonemes,
        )

    def encode(self, value: str) -> str:
        return self.engine.encode(value)

    def encode_with_languages(self, value: str, languages: LanguageSet) -> str:
        return self.engine.encode(value, languages)

    def matches(self, value1: str, value2: str) -> bool:
        alternatives1 = set(_alternatives(self.encode(value1)))
        return any(alt in alternatives1 for alt in _alternatives(self.encode(value2)))


def _alternatives(code: str):
    for part in code.replace("(", "").replace(")", "").split("-"):
        for alt in part.split("|"):
            if alt:
                yield alt
