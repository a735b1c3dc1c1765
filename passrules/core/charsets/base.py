from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Optional


class CharsetNormalizer(ABC):
    """Port: cast text to a restricted target alphabet (None stays None)."""

    @abstractmethod
    def normalize(self, text: Optional[str]) -> Optional[str]: ...
