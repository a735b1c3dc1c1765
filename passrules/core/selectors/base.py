from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class TokenFilter(ABC):
    """Port: choose a sub-sequence of a token list."""

    @abstractmethod
    def filter(self, tokens: List[str]) -> List[str]: ...


class CharacterFilter(ABC):
    """Port: build a new string from selected characters of a single token."""

    @abstractmethod
    def select(self, token: str) -> str: ...
