from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


class TokenReplacer(ABC):
    """Port: rewrite every token of a token list."""

    @abstractmethod
    def replace(self, tokens: List[str]) -> List[str]: ...
