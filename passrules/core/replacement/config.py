from __future__ import annotations
from enum import Enum
from pathlib import Path


class Replacement(str, Enum):
    NONE = "none"
    WORD_PREFIXES = "word-prefixes"


MAP_RESOURCE_NAME = "word-prefix-map.txt"
MAP_MAPPING_SYMBOL = "<-"

# Most prefixes follow the "ASCII pronunciation rules for programmers" list:
# http://web.archive.org/web/20140817200254/http://blog.codinghorror.com/ascii-pronunciation-rules-for-programmers/
DEFAULT_MAP_PATH = Path(__file__).resolve().parent / "resources" / MAP_RESOURCE_NAME
