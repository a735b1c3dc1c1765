from __future__ import annotations
import re
from typing import List

from nltk.tokenize import RegexpTokenizer

from passrules.core.tokenization.base import Tokenizer
from passrules.core.tokenization.config import TokenizationConfig
from passrules.utils.exceptions import MissingInputError

_LETTER = r"[^\W\d_]"
_DIGIT = r"\d"


def word_boundary_pattern(cfg: TokenizationConfig) -> str:
    """
    Regex approximating unicode word-boundary segmentation: word characters
    form one token, letters stay joined across mid-letter punctuation and
    digits across mid-number punctuation, anything else is a single token.
    """
    mid_letter = "[" + re.escape(cfg.mid_letter) + "]"
    mid_number = "[" + re.escape(cfg.mid_number) + "]"
    joined = (
        rf"(?:(?<={_LETTER}){mid_letter}(?={_LETTER})"
        rf"|(?<={_DIGIT}){mid_number}(?={_DIGIT}))"
    )
    return rf"\w+(?:{joined}\w+)*|\S"


class DefaultTokenizer(Tokenizer):
    """Adapter: locale-aware word segmentation on top of nltk's RegexpTokenizer."""

    def __init__(self, config: TokenizationConfig | None = None):
        self.cfg = config or TokenizationConfig()
        self._tokenizer = RegexpTokenizer(word_boundary_pattern(self.cfg))

    def tokenize(self, text: str) -> List[str]:
        if text is None:
            raise MissingInputError("Text to tokenize must not be None")
        out: List[str] = []
        for fragment in self._tokenizer.tokenize(text):
            token = fragment.strip()
            if token:
                out.append(token)
        return out
