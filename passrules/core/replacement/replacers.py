from __future__ import annotations
from typing import List

from passrules.core.replacement.base import TokenReplacer
from passrules.core.replacement.config import Replacement
from passrules.core.replacement.prefix_dictionary import PrefixDictionary
from passrules.utils.exceptions import ValidationError


def parse_replacement(value: str | Replacement) -> Replacement:
    try:
        return Replacement(value)
    except ValueError:
        raise ValidationError(f"No valid replacement configuration: {value}") from None


class IdentityReplacer(TokenReplacer):
    def replace(self, tokens: List[str]) -> List[str]:
        return tokens


class WordPrefixReplacer(TokenReplacer):
    """Adapter: applies a prefix dictionary to every token."""

    def __init__(self, dictionary: PrefixDictionary):
        self.dictionary = dictionary

    def replace(self, tokens: List[str]) -> List[str]:
        return [self.dictionary.substitute(t) for t in tokens]


def replacer_for(
    replacement: str | Replacement, prefixes: PrefixDictionary | None = None
) -> TokenReplacer:
    """
    Get the token replacer for a replacement key ("none" or "word-prefixes").
    The shared dictionary is only loaded when prefixes are needed and none
    were passed in.
    """
    key = parse_replacement(replacement)
    if key is Replacement.NONE:
        return IdentityReplacer()
    if prefixes is None:
        prefixes = PrefixDictionary.shared()
    return WordPrefixReplacer(prefixes)
