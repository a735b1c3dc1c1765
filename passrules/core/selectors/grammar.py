"""Parsing of human-readable position strings.

Ordinal strings pick a character position inside a token:
``1st``, ``2nd``, ... count from the front, ``last``, ``2ndlast``, ... from
the back. Selection strings pick every nth element: ``every``, ``every2nd``,
``every3rd``, ...
"""

from __future__ import annotations
import re
from typing import Tuple

from passrules.utils.exceptions import ValidationError

KEYWORD_FROM_BACK = "last"
KEYWORD_SELECTION = "every"
INDEX_SEPARATOR = "+"

_re_number = re.compile(r"[+-]?[0-9]+")


def parse_ordinal_index(text: str) -> int:
    """
    Parse an ordinal string into a signed index.

    ``"3rd"`` -> 2, ``"3rdlast"`` -> -3, ``"last"`` -> -1.
    """
    if text is None:
        raise ValidationError("Index string must not be None")

    from_back = text.endswith(KEYWORD_FROM_BACK)
    if from_back and len(text) == len(KEYWORD_FROM_BACK):
        return -1

    # st, nd, rd or th; optionally followed by "last"
    suffix_start = len(text) - 2
    if from_back:
        suffix_start -= len(KEYWORD_FROM_BACK)
    if (
        suffix_start < 1
        or not text[suffix_start].isalpha()
        or not text[suffix_start + 1].isalpha()
    ):
        raise ValidationError(
            "Index strings must end in a two-letter number suffix, such a suffix "
            f'followed by "{KEYWORD_FROM_BACK}", or be "{KEYWORD_FROM_BACK}", '
            f"but given string does not: {text}"
        )

    number_text = text[:suffix_start]
    if not _re_number.fullmatch(number_text):
        raise ValidationError(f"Not a number in index string: {text}")
    number = int(number_text)
    if number < 1:
        raise ValidationError(f"Non-positive number in index string: {text}")

    return -number if from_back else number - 1


def parse_selection_count(text: str) -> int:
    """Parse ``every`` / ``every<ordinal>`` into the step width n (>= 1)."""
    if text is None or not text.startswith(KEYWORD_SELECTION):
        raise ValidationError(
            f'Selection strings must start with "{KEYWORD_SELECTION}", '
            f"but given string does not: {text}"
        )

    if text == KEYWORD_SELECTION:
        return 1

    index = parse_ordinal_index(text[len(KEYWORD_SELECTION) :].strip())
    if index < 0:
        raise ValidationError(
            "Selection strings must contain a positive index or be "
            f'"{KEYWORD_SELECTION}", but given string is not: {text}'
        )
    return index + 1


def parse_character_indices(text: str) -> Tuple[int, ...]:
    """Parse a ``+``-joined list of ordinal strings, keeping their order."""
    if text is None:
        raise ValidationError("Character position string must not be None")
    return tuple(
        parse_ordinal_index(part.strip()) for part in text.split(INDEX_SEPARATOR)
    )


def _ordinal_suffix(number: int) -> str:
    if 10 <= number % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def format_ordinal_index(index: int) -> str:
    """Inverse of :func:`parse_ordinal_index` producing the canonical string."""
    if index == -1:
        return KEYWORD_FROM_BACK
    if index < 0:
        number = -index
        return f"{number}{_ordinal_suffix(number)}{KEYWORD_FROM_BACK}"
    number = index + 1
    return f"{number}{_ordinal_suffix(number)}"


def format_selection_count(n: int) -> str:
    if n < 1:
        raise ValidationError(f"Non-positive selection count: {n}")
    if n == 1:
        return KEYWORD_SELECTION
    return KEYWORD_SELECTION + format_ordinal_index(n - 1)


def format_character_indices(indices: Tuple[int, ...]) -> str:
    return INDEX_SEPARATOR.join(format_ordinal_index(i) for i in indices)
