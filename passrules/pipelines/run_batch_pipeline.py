import argparse
import logging
import sys
import time
from pathlib import Path
from typing import List, Optional

import yaml

from passrules.core.rules.config import RuleConfig
from passrules.middlewares.logging import setup_logging
from passrules.pipelines.batch_generate import run_batch
from passrules.utils.exceptions import PasswordRulesError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = Path(__file__).resolve().parent / "configs" / "batch_config.yaml"


def rule_from_action(action: dict) -> RuleConfig:
    try:
        return RuleConfig.parse(
            action["charset"],
            action["replacement"],
            action["word"],
            action["positions"],
            action.get("add_spaces", False),
        )
    except KeyError as e:
        raise ValidationError(f"Rule is missing field {e}") from None


def run_pipeline(config: dict) -> int:
    """Run one batch job per executed rule; stop at the first failing rule."""
    input_path = config["input"]
    output_root = Path(config["output_root"])
    min_length = int(config.get("min_length", 1))
    max_length = int(config.get("max_length", sys.maxsize))
    workers = config.get("workers")

    # validate every rule before the first (long) job starts
    rules = [
        (rule_from_action(action), action.get("is_execute", True))
        for action in config.get("rules", [])
    ]

    for rule, is_execute in rules:
        if not is_execute:
            logger.info(f"Skipping rule: {rule.label()}")
            continue

        logger.info(f"Running rule: {rule.label()}...")
        start_time = time.time()
        try:
            result = run_batch(
                rule,
                input_path,
                output_root / rule.label(),
                min_length=min_length,
                max_length=max_length,
                workers=workers,
            )
        except PasswordRulesError as e:
            logger.error(f"Rule {rule.label()} failed: {e}. Exiting pipeline.")
            return 1
        elapsed_time = time.time() - start_time
        logger.info(
            f"✅ Rule {rule.label()} completed in {elapsed_time:.2f} seconds "
            f"({result.passwords} passwords)."
        )

    logger.info("Pipeline execution completed.")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="python -m passrules.pipelines.run_batch_pipeline"
    )
    parser.add_argument(
        "config", nargs="?", default=str(DEFAULT_CONFIG), help="YAML job file"
    )
    args = parser.parse_args(argv)

    setup_logging(stream=sys.stderr)
    with open(args.config, "r", encoding="utf-8") as file:
        config = yaml.safe_load(file)

    try:
        return run_pipeline(config)
    except ValidationError as e:
        logger.error(f"❌ Invalid pipeline configuration: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
