"""Package configuration from environment (``PHONETIC_*``), with optional .env file."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parent.parent

load_dotenv(str(ROOT_DIR / ".env"))

# Beider-Morse resources: {ash,gen,sep}_languages.txt, *_lang.txt and rule files
BM_RULES_DIR: Optional[str] = os.environ.get("PHONETIC_BM_RULES_DIR") or None

# Daitch-Mokotoff rules (quadruplets and folding lines)
DM_RULES_FILE: Optional[str] = os.environ.get("PHONETIC_DM_RULES_FILE") or None

MAX_PHONEMES = int(os.environ.get("PHONETIC_MAX_PHONEMES", 20))
LOG_LEVEL = os.environ.get("PHONETIC_LOG_LEVEL", "INFO").upper()
