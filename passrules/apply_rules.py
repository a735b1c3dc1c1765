"""Apply one password generation rule to a text file with one phrase per line."""

import argparse
import logging
import sys
from typing import Iterable, Iterator, List, Optional

from passrules.core.rules.composer import PasswordRule, build_rule
from passrules.core.rules.config import RuleConfig
from passrules.messages.rule_messages import RULE_PARAMETERS, RULE_PARAMETERS_HELP
from passrules.middlewares.logging import setup_logging
from passrules.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

USAGE = f"""\
  <input> <output> {RULE_PARAMETERS}
Where:
  <input>
    A file with one input string per line.
  <output>
    Output file which will contain one output string per line.
{RULE_PARAMETERS_HELP}"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m passrules.apply_rules",
        usage=USAGE,
    )
    parser.add_argument("file_input", type=str, help="Path to input text file")
    parser.add_argument("file_output", type=str, help="Path to output text file")
    parser.add_argument("rule", nargs="*", help="Rule configuration fields")
    return parser


def generate(rule: PasswordRule, lines: Iterable[str]) -> Iterator[str]:
    """One password per input line, in input order."""
    for line in lines:
        yield rule(line.rstrip("\r\n"))


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = RuleConfig.from_args(args.rule)
    except ValidationError as e:
        print(e, file=sys.stderr)
        print(f"Usage:\n{USAGE}", file=sys.stderr)
        return 1

    setup_logging(stream=sys.stderr)
    rule = build_rule(config)
    logger.info(f"Applying rule {config.label()} to {args.file_input}")

    count = 0
    with open(
        args.file_input, "r", encoding="utf-8", errors="replace"
    ) as src, open(
        args.file_output, "w", encoding="utf-8", newline="\n"
    ) as dst:
        for password in generate(rule, src):
            dst.write(password)
            dst.write("\n")
            count += 1

    logger.info(f"✅ Wrote {count} passwords to {args.file_output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
