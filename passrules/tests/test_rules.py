from concurrent.futures import ThreadPoolExecutor
import logging

import pytest

from passrules.core.charsets.config import Charset
from passrules.core.replacement.config import Replacement
from passrules.core.rules.composer import (
    apply_in_steps,
    build_rule,
    join_password,
    rule_from_args,
)
from passrules.core.rules.config import RuleConfig, parse_bool
from passrules.utils.exceptions import MissingInputError, ValidationError


def rule(*fields, prefixes=None):
    return build_rule(RuleConfig.parse(*fields), prefixes)


def test_first_letters():
    assert rule("ascii", "none", "every", "1st")("Hello World") == "HW"


def test_first_and_last_letters_lowercase():
    assert rule("lowercase-letters", "none", "every", "1st+last")("Cat Dog") == "ctdg"


def test_spaces_between_characters():
    assert rule("ascii", "none", "every", "1st", "true")("Hello World") == "H W"
    assert (
        rule("lowercase-letters", "none", "every", "1st+last", True)("Cat Dog")
        == "c t d g"
    )


def test_every_second_word():
    r = rule("ascii", "none", "every2nd", "1st+2nd")
    assert r("The quick brown fox jumps") == "Thbrju"


def test_punctuation_tokens_are_kept_in_ascii_mode():
    r = rule("ascii", "none", "every", "1st")
    assert r("Hello, World!") == "H,W!"
    assert rule("lowercase-letters", "none", "every", "1st")("Hello, World!") == "hw"


def test_word_prefix_replacement(prefixes):
    r = rule("ascii", "word-prefixes", "every", "1st", prefixes=prefixes)
    assert r("Before we go to the cinema") == "Bwg2tc"
    r = rule("ascii", "word-prefixes", "every", "1st+2nd", prefixes=prefixes)
    assert r("Before we go to the cinema") == "B4wego2thci"


def test_empty_and_blank_input():
    r = rule("ascii", "none", "every", "1st")
    assert r("") == ""
    assert r("   ") == ""
    assert rule("ascii", "none", "every", "1st", True)("") == ""


def test_none_input_fails():
    with pytest.raises(MissingInputError):
        rule("ascii", "none", "every", "1st")(None)


def test_steps_capture_every_stage(prefixes):
    config = RuleConfig.parse("ascii", "word-prefixes", "every2nd", "1st+last")
    steps = apply_in_steps(config, "Before you go, think twice!", prefixes)
    assert steps == [
        "Before you go , think twice !",
        "B4 you go , think twice !",
        "B4 go think !",
        "B4gotk!",
    ]


@pytest.mark.parametrize("add_spaces", ["false", "true"])
def test_last_step_equals_rule_output(prefixes, add_spaces):
    config = RuleConfig.parse(
        "lowercase-letters", "none", "every", "2nd+1st", add_spaces
    )
    text = "Straße nach Köln, bitte!"
    steps = apply_in_steps(config, text, prefixes)
    assert len(steps) == 4
    assert steps[-1] == build_rule(config, prefixes)(text)


def test_steps_are_logged_by_stage_name(caplog):
    config = RuleConfig.parse("ascii", "none", "every", "1st")
    with caplog.at_level(logging.DEBUG, logger="passrules.core.rules.composer"):
        build_rule(config).steps("Hello World")

    assert caplog.messages == [
        "tokenize: 'Hello World'",
        "replace: 'Hello World'",
        "select-tokens: 'Hello World'",
        "select-characters: 'HW'",
    ]


def test_rule_can_be_shared_between_threads():
    r = rule("lowercase-letters", "none", "every", "1st+last")
    lines = [f"line number {i} of many" for i in range(200)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        parallel = list(pool.map(r, lines))
    assert parallel == [r(line) for line in lines]


def test_join_password():
    assert join_password(["ab", "c"]) == "abc"
    assert join_password(["ab", "c"], add_spaces=True) == "a b c"
    assert join_password([], add_spaces=True) == ""


# -------------------------------------
# Rule configuration
# -------------------------------------
def test_parse_config_fields():
    config = RuleConfig.parse(
        "lowercase-letters", "word-prefixes", "every3rd", "1st+2ndlast"
    )
    assert config.charset is Charset.LOWERCASE_LETTERS
    assert config.replacement is Replacement.WORD_PREFIXES
    assert config.token_selector == 3
    assert config.character_selector == (0, -2)
    assert config.add_spaces is False


def test_config_label_and_args():
    config = RuleConfig.parse(
        "lowercase-letters", "word-prefixes", "every2nd", "1st+2ndlast"
    )
    assert (
        config.label() == "lowercase-letters_word-prefixes_every2nd_1st+2ndlast_false"
    )
    assert RuleConfig.from_args(config.to_args()) == config


def test_from_args_with_offset():
    args = ["in.txt", "out.txt", "ascii", "none", "every", "1st"]
    expected = RuleConfig.parse("ascii", "none", "every", "1st")
    assert RuleConfig.from_args(args, 2) == expected
    assert rule_from_args(args, 2)("Hello World") == "HW"


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("TRUE", True), ("false", False), ("yes", False)],
)
def test_from_args_spaces_flag(value, expected):
    config = RuleConfig.from_args(["ascii", "none", "every", "1st", value])
    assert config.add_spaces is expected


@pytest.mark.parametrize(
    "value, expected",
    [(True, True), (False, False), (None, False), (1, False), (" True ", True)],
)
def test_parse_bool_accepts_any_value(value, expected):
    assert parse_bool(value) is expected


# -------------------------------------
# ❌ Invalid configurations
# -------------------------------------
@pytest.mark.parametrize(
    "args",
    [
        ["ascii", "none", "every"],
        ["ascii", "none", "every", "1st", "true", "extra"],
        [],
    ],
)
def test_from_args_rejects_wrong_arity(args):
    with pytest.raises(ValidationError, match="Invalid number of arguments"):
        RuleConfig.from_args(args)


@pytest.mark.parametrize(
    "fields",
    [
        ("utf-8", "none", "every", "1st"),
        ("ascii", "leet", "every", "1st"),
        ("ascii", "none", "each", "1st"),
        ("ascii", "none", "everylast", "1st"),
        ("ascii", "none", "every", "first"),
        ("ascii", "none", "every", "0th"),
    ],
)
def test_invalid_fields_are_rejected(fields):
    with pytest.raises(ValidationError):
        RuleConfig.parse(*fields)


def test_config_validates_direct_construction():
    with pytest.raises(ValidationError):
        RuleConfig(Charset.ASCII, Replacement.NONE, 0, (0,))
    with pytest.raises(ValidationError):
        RuleConfig(Charset.ASCII, Replacement.NONE, 1, ())


def test_config_is_immutable():
    config = RuleConfig.parse("ascii", "none", "every", "1st")
    with pytest.raises(AttributeError):
        config.add_spaces = True
