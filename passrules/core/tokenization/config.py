from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

# punctuation that keeps two letters in the same word ("don't", "e.g")
DEFAULT_MID_LETTER = "'."
# punctuation that keeps two digits in the same number ("3.14", "1,000")
DEFAULT_MID_NUMBER = ".,;'"

# locale tailorings of the word-boundary rules
MID_LETTER_BY_LANGUAGE: Dict[str, str] = {
    "sv": "':.",  # "k:a" stays one word in Swedish
    "fi": "':.",
}


@dataclass(frozen=True)
class TokenizationConfig:
    locale: str = "en"  # "en", "en_US", "sv-SE", ...

    @property
    def language(self) -> str:
        return self.locale.replace("-", "_").split("_")[0].lower()

    @property
    def mid_letter(self) -> str:
        return MID_LETTER_BY_LANGUAGE.get(self.language, DEFAULT_MID_LETTER)

    @property
    def mid_number(self) -> str:
        return DEFAULT_MID_NUMBER
