import pytest

from passrules.core.charsets.config import Charset, CharsetConfig
from passrules.core.charsets.normalizer import (
    normalize,
    normalizer_for,
    strip_combining_marks,
)
from passrules.utils.exceptions import ValidationError


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello World", "Hello World"),
        ("Café crème", "Cafe creme"),
        ("Straße", "Strasse"),
        ("Æsir Þór", "AEsir Thor"),
        ("1½ €", "11/2 Euro"),
        ("wait…", "wait..."),
        ("a\tb\nc\x00d", "abcd"),
        ("日本 ok", " ok"),
        ("«quoted» ±3 ×2", '"quoted" +-3 x2'),
    ],
)
def test_ascii_charset(text, expected):
    assert normalize("ascii", text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Hello, World! 123", "hello world "),
        ("Ça va?", "ca va"),
        ("Straße", "strasse"),
        ("a\tb\nc", "a\tb\nc"),
        ("Æsir", "aesir"),
    ],
)
def test_lowercase_letters_charset(text, expected):
    assert normalize("lowercase-letters", text) == expected


@pytest.mark.parametrize("charset", ["ascii", "lowercase-letters"])
def test_none_stays_none(charset):
    assert normalize(charset, None) is None


@pytest.mark.parametrize(
    "text",
    ["Hello World", "Crème brûlée…", "¼ Pfund für 3€", "tab\there", "ǅemal ﬁne"],
)
def test_ascii_normalization_is_idempotent(text):
    once = normalize("ascii", text)
    assert normalize("ascii", once) == once
    assert all(32 <= ord(c) < 127 for c in once)


# -------------------------------------
# ❌ Unknown character set
# -------------------------------------
@pytest.mark.parametrize("charset", ["utf-8", "ASCII", "", None])
def test_unknown_charset_is_rejected(charset):
    with pytest.raises(ValidationError):
        normalizer_for(charset)


def test_normalizer_for_accepts_enum_and_custom_map():
    assert normalizer_for(Charset.ASCII).normalize("5€") == "5Euro"

    custom = normalizer_for("ascii", CharsetConfig(ascii_map={"€": "EUR"}))
    assert custom.normalize("5€") == "5EUR"


def test_strip_combining_marks():
    assert strip_combining_marks("e\u0301") == "e"
    assert strip_combining_marks(None) is None
