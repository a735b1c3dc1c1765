"""
Composition of the rule stages into a single password generation function.

    normalize -> tokenize -> replace prefixes -> every nth token
              -> characters per token -> join

:class:`PasswordRule` holds the ordered stage list; applying it and tracing it
step by step walk the very same list.
"""

from __future__ import annotations
import logging
from typing import List, Sequence, Tuple

from passrules.core.charsets.normalizer import normalizer_for
from passrules.core.config import settings
from passrules.core.replacement.prefix_dictionary import PrefixDictionary
from passrules.core.replacement.replacers import replacer_for
from passrules.core.rules.config import RuleConfig
from passrules.core.rules.stages import (
    CharacterSelectionStage,
    NormalizeTokenizeStage,
    ReplacementStage,
    Stage,
    TokenSelectionStage,
)
from passrules.core.selectors.characters import CharacterIndicesFilter
from passrules.core.selectors.tokens import EveryNthTokenFilter
from passrules.core.tokenization.config import TokenizationConfig
from passrules.core.tokenization.tokenizer import DefaultTokenizer

logger = logging.getLogger(__name__)


def join_password(tokens: Sequence[str], add_spaces: bool = False) -> str:
    """Concatenate the tokens; optionally put a space between all characters."""
    password = "".join(tokens)
    if add_spaces:
        return " ".join(password).strip()
    return password


def join_tokens(tokens: Sequence[str]) -> str:
    return " ".join(tokens)


class PasswordRule:
    """Callable ``str -> str``; immutable and safe to share between threads."""

    def __init__(self, config: RuleConfig, stages: Sequence[Stage]):
        self.config = config
        self.stages: Tuple[Stage, ...] = tuple(stages)

    def __call__(self, text: str) -> str:
        value = text
        for stage in self.stages:
            value = stage.apply(value)
        return join_password(value, self.config.add_spaces)

    def steps(self, text: str) -> List[str]:
        """The text after each stage; the last entry equals ``self(text)``."""
        snapshots = []
        last = len(self.stages) - 1
        value = text
        for i, stage in enumerate(self.stages):
            value = stage.apply(value)
            if i == last:
                snapshot = join_password(value, self.config.add_spaces)
            else:
                snapshot = join_tokens(value)
            logger.debug(f"{stage.name}: {snapshot!r}")
            snapshots.append(snapshot)
        return snapshots

    def __repr__(self) -> str:
        return f"PasswordRule({self.config.label()})"


def build_rule(
    config: RuleConfig,
    prefixes: PrefixDictionary | None = None,
    tokenization: TokenizationConfig | None = None,
) -> PasswordRule:
    """
    Compose the rule for ``config``. ``prefixes`` is the dictionary used for
    word-prefix replacement; the process-wide default is loaded when it is
    needed and not given.
    """
    tokenization = tokenization or TokenizationConfig(locale=settings.DEFAULT_LOCALE)
    stages = [
        NormalizeTokenizeStage(
            normalizer_for(config.charset), DefaultTokenizer(tokenization)
        ),
        ReplacementStage(replacer_for(config.replacement, prefixes)),
        TokenSelectionStage(EveryNthTokenFilter(config.token_selector)),
        CharacterSelectionStage(
            CharacterIndicesFilter(
                config.character_selector, output_duplicates=False, round_robin=False
            )
        ),
    ]
    return PasswordRule(config, stages)


def rule_from_args(
    args: Sequence[str], start: int = 0, prefixes: PrefixDictionary | None = None
) -> PasswordRule:
    return build_rule(RuleConfig.from_args(args, start), prefixes)


def apply_in_steps(
    config: RuleConfig, text: str, prefixes: PrefixDictionary | None = None
) -> List[str]:
    """Apply the rule and return the text after each of its four stages."""
    return build_rule(config, prefixes).steps(text)
