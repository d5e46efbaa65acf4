"""
Loading of the Beider-Morse resources into one read-only bundle.

A rules directory holds, per name type ``nt`` in {ash, gen, sep}:
``nt_languages.txt`` (valid languages), ``nt_lang.txt`` (guessing rules) and
``nt_{rules,approx,exact}_{language}.txt`` plus ``nt_{approx,exact}_common.txt``.
Every parse error surfaces here, never while encoding.
"""

import logging
from pathlib import Path
from typing import Mapping, NamedTuple, Optional, Union

from .. import config as settings
from ..errors import WrongFilenameError
from .lang import Lang, Langs
from .languages import Languages, NameType
from .rules import Rules

logger = logging.getLogger(__name__)


class ConfigFiles(NamedTuple):
    languages: Languages
    langs: Langs
    rules: Rules

    @classmethod
    def from_directory(cls, directory: Union[str, Path]) -> "ConfigFiles":
        directory = Path(directory)
        if not directory.is_dir():
            raise WrongFilenameError(str(directory))
        languages = Languages.from_directory(directory)
        langs = Langs.from_directory(directory, languages)
        rules = Rules.from_directory(directory, languages)
        logger.info(
            "Loaded Beider-Morse rules from %s: %d name types, %d rule groups",
            directory, len(languages.name_types()), len(rules),
        )
        return cls(languages, langs, rules)

    @classmethod
    def from_texts(
        cls,
        languages: Mapping[NameType, str],
        langs: Mapping[NameType, str],
        rules: Mapping[str, str],
    ) -> "ConfigFiles":
        """
        Build from in-memory resources. ``rules`` maps resource names without
        the ``.txt`` suffix (e.g. ``gen_rules_any``) to their text.
        """
        parsed_languages = Languages.from_texts(languages)
        parsed_langs = Langs({
            nt: Lang.from_text(langs[nt], parsed_languages.get(nt), nt.lang_filename)
            for nt in parsed_languages.name_types()
        })
        return cls(parsed_languages, parsed_langs, Rules.from_texts(rules, parsed_languages))

    @classmethod
    def from_env(cls, directory: Optional[str] = None) -> "ConfigFiles":
        """Load from ``directory`` or, when omitted, PHONETIC_BM_RULES_DIR."""
        directory = directory or settings.BM_RULES_DIR
        if not directory:
            raise WrongFilenameError("PHONETIC_BM_RULES_DIR is not set")
        return cls.from_directory(directory)
