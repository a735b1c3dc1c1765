import logging

import pytest

from passrules.core.replacement.prefix_dictionary import PrefixDictionary


@pytest.fixture(autouse=True)
def restore_root_logging():
    # the CLIs call setup_logging(), which replaces the root handlers
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def prefixes() -> PrefixDictionary:
    return PrefixDictionary.from_lines(
        [
            "B4\t<-\tbefore\t",
            "2\t<-\ttwo\ttoo\tto\t",
            "@\t<-\tat\t",
        ]
    )


@pytest.fixture
def corpus(tmp_path):
    path = tmp_path / "sentences.txt"
    path.write_text(
        "Hello World\nThe quick brown fox\na\nCat Dog\n\n", encoding="utf-8"
    )
    return path
