from __future__ import annotations
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from passrules.core.charsets.config import Charset
from passrules.core.charsets.normalizer import parse_charset
from passrules.core.replacement.config import Replacement
from passrules.core.replacement.replacers import parse_replacement
from passrules.core.selectors.grammar import (
    format_character_indices,
    format_selection_count,
    parse_character_indices,
    parse_selection_count,
)
from passrules.utils.exceptions import ValidationError

MIN_ARGS = 4
MAX_ARGS = 5
LABEL_SEPARATOR = "_"


def parse_bool(value: str | bool) -> bool:
    """``"true"`` in any case is True, everything else False."""
    if isinstance(value, bool):
        return value
    return value is not None and str(value).strip().lower() == "true"


@dataclass(frozen=True)
class RuleConfig:
    """A complete, validated password generation rule."""

    charset: Charset
    replacement: Replacement
    token_selector: int  # every nth token
    character_selector: Tuple[int, ...]  # signed character positions
    add_spaces: bool = False

    def __post_init__(self):
        object.__setattr__(self, "charset", parse_charset(self.charset))
        object.__setattr__(self, "replacement", parse_replacement(self.replacement))
        if not isinstance(self.token_selector, int) or self.token_selector < 1:
            raise ValidationError(f"Non-positive word count: {self.token_selector}")
        indices = tuple(self.character_selector or ())
        if not indices:
            raise ValidationError("At least one character position is required")
        object.__setattr__(self, "character_selector", indices)

    @classmethod
    def parse(
        cls,
        charset: str,
        replacement: str,
        word: str,
        positions: str,
        add_spaces: str | bool = False,
    ) -> "RuleConfig":
        """Build from the human-readable field strings, e.g.
        ``("ascii", "none", "every2nd", "1st+last")``."""
        return cls(
            charset=parse_charset(charset),
            replacement=parse_replacement(replacement),
            token_selector=parse_selection_count(word),
            character_selector=parse_character_indices(positions),
            add_spaces=parse_bool(add_spaces),
        )

    @classmethod
    def from_args(cls, args: Sequence[str], start: int = 0) -> "RuleConfig":
        """Build from a flat argument list, reading 4 or 5 fields from ``start``."""
        num_args = len(args) - start
        if num_args < MIN_ARGS or num_args > MAX_ARGS:
            raise ValidationError(f"Invalid number of arguments: {num_args}")
        return cls.parse(*args[start:])

    def to_args(self) -> List[str]:
        return [
            self.charset.value,
            self.replacement.value,
            format_selection_count(self.token_selector),
            format_character_indices(self.character_selector),
            "true" if self.add_spaces else "false",
        ]

    def label(self) -> str:
        return LABEL_SEPARATOR.join(self.to_args())
