from __future__ import annotations
from typing import List, Sequence

from passrules.core.selectors.base import TokenFilter
from passrules.core.selectors.grammar import parse_selection_count
from passrules.utils.exceptions import MissingInputError, ValidationError


def select_every_nth(tokens: Sequence[str], n: int) -> List[str]:
    """Keep the tokens at positions 0, n, 2n, ... in their original order."""
    if n < 1:
        raise ValidationError(f"Non-positive word count: {n}")
    if tokens is None:
        raise MissingInputError("Token list must not be None")
    return list(tokens[::n])


class EveryNthTokenFilter(TokenFilter):
    """Adapter: every nth token, starting with the first."""

    def __init__(self, n: int):
        if n < 1:
            raise ValidationError(f"Non-positive word count: {n}")
        self.n = n

    def filter(self, tokens: List[str]) -> List[str]:
        return select_every_nth(tokens, self.n)

    @classmethod
    def create(cls, selection: str) -> "EveryNthTokenFilter":
        return cls(parse_selection_count(selection))


def token_filter_for(selection: str) -> TokenFilter:
    """Get the token filter for a selection string ("every", "every2nd", ...)."""
    return EveryNthTokenFilter.create(selection)
