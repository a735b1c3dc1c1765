from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict


class Charset(str, Enum):
    ASCII = "ascii"
    LOWERCASE_LETTERS = "lowercase-letters"


def default_ascii_map() -> Dict[str, str]:
    # Latin-1 supplement symbols that NFKC/NFD leave alone, plus the euro sign
    return {
        "¢": "Cent",
        "£": "Pound",
        "¥": "Yen",
        "¦": "|",
        "©": "C",
        "«": '"',
        "®": "R",
        "±": "+-",
        "µ": "mu",
        "»": '"',
        "¼": "1/4",
        "½": "1/2",
        "¾": "3/4",
        "Æ": "AE",
        "Ð": "D",
        "×": "x",
        "Ø": "O",
        "Þ": "Th",  # capital thorn
        "ß": "ss",
        "æ": "ae",
        "ð": "d",
        "÷": "/",
        "ø": "o",
        "þ": "th",  # small thorn
        "€": "Euro",
    }


@dataclass(frozen=True)
class CharsetConfig:
    charset: Charset = Charset.ASCII
    ascii_map: Dict[str, str] = field(default_factory=default_ascii_map)
