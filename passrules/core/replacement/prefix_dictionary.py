from __future__ import annotations
import logging
import threading
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Iterable, Optional, Tuple

from passrules.core.config import settings
from passrules.core.replacement.config import DEFAULT_MAP_PATH, MAP_MAPPING_SYMBOL
from passrules.utils.exceptions import MissingInputError, ResourceLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PrefixMapping:
    """One dictionary line: a symbol and the (lowercased) prefixes it replaces."""

    symbol: str
    prefixes: Tuple[str, ...]

    def __post_init__(self):
        if self.symbol is None:
            raise ResourceLoadError("Prefix mapping without symbol")
        if not self.prefixes:
            raise ResourceLoadError(f"No prefixes for symbol {self.symbol!r}")
        object.__setattr__(self, "prefixes", tuple(p.lower() for p in self.prefixes))

    def match_prefix(self, lowercase_token: str) -> Optional[str]:
        for prefix in self.prefixes:
            if lowercase_token.startswith(prefix):
                return prefix
        return None


def parse_mapping_line(line: str, line_number: int = 0) -> PrefixMapping:
    """Parse ``<symbol>\\t<-\\t<prefix1>\\t<prefix2>...``."""
    parts = line.split()
    if len(parts) < 3 or parts[1] != MAP_MAPPING_SYMBOL:
        raise ResourceLoadError(
            f"Malformed prefix mapping in line {line_number}: {line!r}"
        )
    return PrefixMapping(symbol=parts[0], prefixes=tuple(parts[2:]))


class PrefixDictionary:
    """
    Case-insensitive, ordered word-prefix dictionary.

    Mappings are tried in file order and the first one with a matching prefix
    wins, even if a later mapping has a longer match. Instances are immutable
    and can be shared between threads.
    """

    _shared: ClassVar[Optional["PrefixDictionary"]] = None
    _shared_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, mappings: Iterable[PrefixMapping]):
        self._mappings: Tuple[PrefixMapping, ...] = tuple(mappings)

    @property
    def mappings(self) -> Tuple[PrefixMapping, ...]:
        return self._mappings

    def __len__(self) -> int:
        return len(self._mappings)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "PrefixDictionary":
        mappings = []
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            mappings.append(parse_mapping_line(line, number))
        return cls(mappings)

    @classmethod
    def load(cls, path: str | Path | None = None) -> "PrefixDictionary":
        """Read a dictionary file; defaults to the bundled word-prefix map."""
        source = Path(path) if path else DEFAULT_MAP_PATH
        try:
            with open(source, "r", encoding="utf-8") as f:
                dictionary = cls.from_lines(f)
        except OSError as e:
            raise ResourceLoadError(
                f"Cannot read prefix dictionary {source}: {e}"
            ) from e
        logger.info(f"Loaded {len(dictionary)} prefix mappings from {source}")
        return dictionary

    @classmethod
    def shared(cls) -> "PrefixDictionary":
        """Process-wide default dictionary, loaded once on first use."""
        if cls._shared is None:
            with cls._shared_lock:
                if cls._shared is None:
                    cls._shared = cls.load(settings.PREFIX_MAP_PATH)
        return cls._shared

    def substitute(self, token: str) -> str:
        """Replace the first known prefix of ``token`` by its symbol."""
        if token is None:
            raise MissingInputError("Token must not be None")
        lowercase_token = token.lower()
        for mapping in self._mappings:
            prefix = mapping.match_prefix(lowercase_token)
            if prefix is not None:
                return mapping.symbol + token[len(prefix) :]
        return token
