from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List

from passrules.core.charsets.base import CharsetNormalizer
from passrules.core.replacement.base import TokenReplacer
from passrules.core.selectors.base import CharacterFilter, TokenFilter
from passrules.core.tokenization.base import Tokenizer


class Stage(ABC):
    """One step of a password rule; every stage ends with a token list."""

    name: str = "stage"

    @abstractmethod
    def apply(self, value: Any) -> List[str]: ...


class NormalizeTokenizeStage(Stage):
    name = "tokenize"

    def __init__(self, normalizer: CharsetNormalizer, tokenizer: Tokenizer):
        self.normalizer = normalizer
        self.tokenizer = tokenizer

    def apply(self, value: str) -> List[str]:
        return self.tokenizer.tokenize(self.normalizer.normalize(value))


class ReplacementStage(Stage):
    name = "replace"

    def __init__(self, replacer: TokenReplacer):
        self.replacer = replacer

    def apply(self, value: List[str]) -> List[str]:
        return self.replacer.replace(value)


class TokenSelectionStage(Stage):
    name = "select-tokens"

    def __init__(self, token_filter: TokenFilter):
        self.token_filter = token_filter

    def apply(self, value: List[str]) -> List[str]:
        return self.token_filter.filter(value)


class CharacterSelectionStage(Stage):
    name = "select-characters"

    def __init__(self, character_filter: CharacterFilter):
        self.character_filter = character_filter

    def apply(self, value: List[str]) -> List[str]:
        return [self.character_filter.select(token) for token in value]
