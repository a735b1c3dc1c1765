from __future__ import annotations
from typing import Sequence, Tuple

from passrules.core.selectors.base import CharacterFilter
from passrules.core.selectors.grammar import parse_character_indices
from passrules.utils.exceptions import MissingInputError, ValidationError


def select_characters(
    token: str,
    indices: Sequence[int],
    output_duplicates: bool = False,
    round_robin: bool = False,
) -> str:
    """
    Pick the characters of ``token`` at ``indices`` (0 is the first character,
    -1 the last), in the order the indices are given.

    Without ``round_robin`` indices outside [-len, len) are skipped; with it
    they wrap around modulo the token length. A position is emitted at most
    once unless ``output_duplicates`` is set.
    """
    if token is None:
        raise MissingInputError("Token must not be None")
    if not token:
        return ""

    length = len(token)
    emitted = [False] * length
    out = []
    for index in indices:
        if not round_robin and not -length <= index < length:
            continue
        position = index % length  # python % is already a true modulo
        if emitted[position]:
            continue
        out.append(token[position])
        if not output_duplicates:
            emitted[position] = True
    return "".join(out)


class CharacterIndicesFilter(CharacterFilter):
    """Adapter: characters at fixed positions of each token."""

    def __init__(
        self,
        indices: Sequence[int],
        output_duplicates: bool = False,
        round_robin: bool = False,
    ):
        if indices is None:
            raise ValidationError("Character indices must not be None")
        self.indices: Tuple[int, ...] = tuple(indices)
        if not self.indices:
            raise ValidationError("At least one character index is required")
        self.output_duplicates = output_duplicates
        self.round_robin = round_robin

    def select(self, token: str) -> str:
        return select_characters(
            token, self.indices, self.output_duplicates, self.round_robin
        )

    @classmethod
    def create(
        cls,
        positions: str,
        output_duplicates: bool = False,
        round_robin: bool = False,
    ) -> "CharacterIndicesFilter":
        """Build the filter from a ``+``-joined ordinal string like ``1st+last``."""
        return cls(parse_character_indices(positions), output_duplicates, round_robin)
