from __future__ import annotations
import re
import unicodedata
from typing import Callable, Dict, Optional, Sequence

from passrules.core.charsets.base import CharsetNormalizer
from passrules.core.charsets.config import Charset, CharsetConfig, default_ascii_map
from passrules.utils.exceptions import ValidationError

_re_non_ascii = re.compile(r"[^\x00-\x7f]")
_re_control = re.compile(r"[\x00-\x1f\x7f]")
_re_non_letters_or_spaces = re.compile(r"[^a-zA-Z \t\n]")
_re_combining_marks = re.compile(r"[\u0300-\u036f]+")

_DEFAULT_ASCII_TABLE = str.maketrans(default_ascii_map())

Step = Callable[[Optional[str]], Optional[str]]


def parse_charset(value: str | Charset) -> Charset:
    try:
        return Charset(value)
    except ValueError:
        raise ValidationError(f"No valid character set: {value}") from None


# ---- single steps; every one maps None to None ----


def ascii_dictionary_mapping(text: Optional[str], table: Dict[int, str] | None = None):
    """Replace symbols that unicode decomposition does not resolve."""
    if text is None:
        return None
    return text.translate(_DEFAULT_ASCII_TABLE if table is None else table)


def compatibility_decomposition(text: Optional[str]) -> Optional[str]:
    """NFKC: e.g. the ellipsis glyph becomes three periods."""
    if text is None:
        return None
    return unicodedata.normalize("NFKC", text)


def canonical_decomposition(text: Optional[str]) -> Optional[str]:
    """NFD: separates base letters from their combining marks."""
    if text is None:
        return None
    return unicodedata.normalize("NFD", text)


def strip_combining_marks(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return _re_combining_marks.sub("", text)


def strip_non_ascii(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return _re_non_ascii.sub("", text)


def strip_control_chars(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return _re_control.sub("", text)


def strip_non_letters_or_spaces(text: Optional[str]) -> Optional[str]:
    """Keep the 26 latin letters (both cases), space, tab and newline."""
    if text is None:
        return None
    return _re_non_letters_or_spaces.sub("", text)


def lowercase(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    return text.lower()


class StepChainNormalizer(CharsetNormalizer):
    """Adapter: runs a fixed chain of single-step conversions."""

    def __init__(self, charset: Charset, steps: Sequence[Step]):
        self.charset = charset
        self.steps = tuple(steps)

    def normalize(self, text: Optional[str]) -> Optional[str]:
        for step in self.steps:
            text = step(text)
        return text


def _build(cfg: CharsetConfig) -> StepChainNormalizer:
    table = str.maketrans(cfg.ascii_map)

    def mapping(text: Optional[str]) -> Optional[str]:
        return ascii_dictionary_mapping(text, table)

    decompose = [mapping, compatibility_decomposition, canonical_decomposition]
    if cfg.charset is Charset.ASCII:
        return StepChainNormalizer(
            cfg.charset, decompose + [strip_non_ascii, strip_control_chars]
        )
    return StepChainNormalizer(
        cfg.charset, decompose + [strip_non_letters_or_spaces, lowercase]
    )


ASCII_NORMALIZER = _build(CharsetConfig(charset=Charset.ASCII))
LOWERCASE_LETTERS_NORMALIZER = _build(CharsetConfig(charset=Charset.LOWERCASE_LETTERS))


def normalizer_for(
    charset: str | Charset, config: CharsetConfig | None = None
) -> CharsetNormalizer:
    """Get the converter for a charset key ("ascii" or "lowercase-letters")."""
    key = parse_charset(charset)
    if config is not None:
        return _build(CharsetConfig(charset=key, ascii_map=config.ascii_map))
    if key is Charset.ASCII:
        return ASCII_NORMALIZER
    return LOWERCASE_LETTERS_NORMALIZER


def normalize(charset: str | Charset, text: Optional[str]) -> Optional[str]:
    return normalizer_for(charset).normalize(text)
