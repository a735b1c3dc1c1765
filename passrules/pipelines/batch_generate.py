"""
Batch password generation over a large line-oriented corpus.

The corpus (a file or a directory of files) is cut into splits of a fixed
number of lines. Every split is one map task: each line goes through the
rule, and passwords whose length (whitespace ignored) lies in
[min_length, max_length] are written to ``length-<N>-m-<split>`` in the output
directory. Per-length counters are merged at the end and written to
``_counters.csv``.
"""

from __future__ import annotations
import argparse
import logging
import re
import sys
from collections import Counter
from concurrent.futures import FIRST_COMPLETED, Future, ProcessPoolExecutor, wait
from dataclasses import dataclass, field
from itertools import islice
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set, TextIO, Tuple

import pandas as pd

from passrules.core.config import settings
from passrules.core.replacement.prefix_dictionary import PrefixDictionary
from passrules.core.rules.composer import PasswordRule, build_rule
from passrules.core.rules.config import RuleConfig
from passrules.messages.rule_messages import RULE_PARAMETERS, RULE_PARAMETERS_HELP
from passrules.middlewares.logging import setup_logging
from passrules.utils.exceptions import ValidationError

logger = logging.getLogger(__name__)

COUNTER_GROUP = "passwords"
COUNTERS_FILE = "_counters.csv"
SUCCESS_FILE = "_SUCCESS"

_re_whitespace = re.compile(r"\s")

USAGE = f"""\
  <input> <output> <min-password-length> <max-password-length> {RULE_PARAMETERS}
Where:
  <input>
    Files or directory of files with one input string per
    line.
  <output>
    Output directory which will contain files with one
    password per line. The file names will contain
    "length-<length>" and the files will contain only
    passwords with <length> characters.
  <min-password-length>
    Minimum password length to consider the password.
  <max-password-length>
    Maximum password length to consider the password.
{RULE_PARAMETERS_HELP}"""


def password_length(password: str) -> int:
    return len(_re_whitespace.sub("", password))


def bucket_name(length: int) -> str:
    return f"length-{length}"


@dataclass(frozen=True)
class BatchResult:
    output_dir: Path
    counters: Dict[str, int] = field(default_factory=dict)
    lines: int = 0
    splits: int = 0

    @property
    def passwords(self) -> int:
        return sum(self.counters.values())


class LengthBucketMapper:
    """
    Map task for one split: applies the rule to each line and writes the
    passwords into one file per password length.
    """

    def __init__(
        self,
        rule: PasswordRule,
        min_length: int,
        max_length: int,
        output_dir: Path,
        split_id: int,
        progress_every: int = 1000,
    ):
        self.rule = rule
        self.min_length = min_length
        self.max_length = max_length
        self.output_dir = Path(output_dir)
        self.split_id = split_id
        self.progress_every = progress_every
        self.counters: Counter = Counter()
        self.processed = 0
        self._writers: Dict[str, TextIO] = {}

    def _writer(self, bucket: str) -> TextIO:
        writer = self._writers.get(bucket)
        if writer is None:
            path = self.output_dir / f"{bucket}-m-{self.split_id:05d}"
            writer = open(path, "w", encoding="utf-8", newline="\n")
            self._writers[bucket] = writer
        return writer

    def map(self, line: str):
        password = self.rule(line.rstrip("\r\n"))
        length = password_length(password)
        if self.min_length <= length <= self.max_length:
            bucket = bucket_name(length)
            self.counters[bucket] += 1
            self._writer(bucket).write(password + "\n")

        self.processed += 1
        if self.progress_every and self.processed % self.progress_every == 0:
            # keep signalling liveness during long splits
            logger.debug(f"💓 split {self.split_id}: {self.processed} lines")

    def close(self) -> Counter:
        for writer in self._writers.values():
            writer.close()
        self._writers = {}
        return self.counters

    def __enter__(self) -> "LengthBucketMapper":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def iter_input_files(input_path: Path) -> List[Path]:
    """A single file, or the visible files of a directory in name order."""
    input_path = Path(input_path)
    if input_path.is_file():
        return [input_path]
    if input_path.is_dir():
        return sorted(
            p
            for p in input_path.iterdir()
            if p.is_file() and not p.name.startswith((".", "_"))
        )
    raise ValidationError(f"Input does not exist: {input_path}")


def iter_splits(files: List[Path], split_lines: int) -> Iterator[Tuple[int, List[str]]]:
    split_id = 0
    for path in files:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            while True:
                lines = list(islice(f, split_lines))
                if not lines:
                    break
                yield split_id, lines
                split_id += 1


def map_split(
    rule: PasswordRule,
    split_id: int,
    lines: List[str],
    output_dir: Path,
    min_length: int,
    max_length: int,
    progress_every: int,
) -> Tuple[Counter, int]:
    with LengthBucketMapper(
        rule, min_length, max_length, output_dir, split_id, progress_every
    ) as mapper:
        for line in lines:
            mapper.map(line)
    return mapper.counters, mapper.processed


# ---- worker process state: one rule per process, built once ----

_worker_rule: Optional[PasswordRule] = None


def _init_worker(rule_args: List[str], prefixes: Optional[PrefixDictionary]):
    global _worker_rule
    _worker_rule = build_rule(RuleConfig.from_args(rule_args), prefixes)


def _map_split_in_worker(
    split_id: int,
    lines: List[str],
    output_dir: Path,
    min_length: int,
    max_length: int,
    progress_every: int,
) -> Tuple[Counter, int]:
    return map_split(
        _worker_rule,
        split_id,
        lines,
        output_dir,
        min_length,
        max_length,
        progress_every,
    )


def _prepare_output_dir(output_dir: Path):
    if output_dir.exists() and (not output_dir.is_dir() or any(output_dir.iterdir())):
        raise ValidationError(f"Output directory already exists: {output_dir}")
    output_dir.mkdir(parents=True, exist_ok=True)


def write_counters(counters: Dict[str, int], output_dir: Path) -> Path:
    rows = sorted(counters.items(), key=lambda kv: int(kv[0].rsplit("-", 1)[1]))
    df = pd.DataFrame(rows, columns=["counter", "count"])
    df.insert(0, "group", COUNTER_GROUP)
    path = output_dir / COUNTERS_FILE
    df.to_csv(path, index=False)
    return path


def run_batch(
    config: RuleConfig,
    input_path: str | Path,
    output_dir: str | Path,
    min_length: int = 1,
    max_length: int = sys.maxsize,
    workers: Optional[int] = None,
    split_lines: Optional[int] = None,
    progress_every: Optional[int] = None,
    prefixes: Optional[PrefixDictionary] = None,
) -> BatchResult:
    workers = workers or settings.BATCH_WORKERS
    split_lines = split_lines or settings.BATCH_SPLIT_LINES
    progress_every = (
        settings.PROGRESS_EVERY if progress_every is None else progress_every
    )
    if min_length < 0 or max_length < min_length:
        raise ValidationError(
            f"Invalid password length range: [{min_length}, {max_length}]"
        )
    if workers < 1 or split_lines < 1:
        raise ValidationError("Workers and split size must be positive")

    output_dir = Path(output_dir)
    files = iter_input_files(Path(input_path))
    _prepare_output_dir(output_dir)

    logger.info(
        f"Running password generator {config.label()} on {len(files)} file(s) "
        f"with {workers} worker(s)"
    )

    counters: Counter = Counter()
    lines = 0
    splits = 0
    task_args = (output_dir, min_length, max_length, progress_every)

    def record(split_counters: Counter, split_count: int):
        nonlocal lines, splits
        counters.update(split_counters)
        lines += split_count
        splits += 1
        logger.info(f"💓 {splits} split(s) done, {lines} lines processed")

    if workers == 1:
        rule = build_rule(config, prefixes)
        for split_id, split in iter_splits(files, split_lines):
            record(*map_split(rule, split_id, split, *task_args))
    else:
        with ProcessPoolExecutor(
            max_workers=workers,
            initializer=_init_worker,
            initargs=(config.to_args(), prefixes),
        ) as pool:
            pending: Set[Future] = set()

            def collect(done: Set[Future]):
                for future in done:
                    record(*future.result())

            for split_id, split in iter_splits(files, split_lines):
                # bound the number of splits held in memory
                if len(pending) >= 2 * workers:
                    done, pending = wait(pending, return_when=FIRST_COMPLETED)
                    collect(done)
                pending.add(
                    pool.submit(_map_split_in_worker, split_id, split, *task_args)
                )
            done, _ = wait(pending)
            collect(done)

    result = BatchResult(
        output_dir=output_dir, counters=dict(counters), lines=lines, splits=splits
    )
    write_counters(result.counters, output_dir)
    (output_dir / SUCCESS_FILE).touch()

    for name in sorted(result.counters, key=lambda n: int(n.rsplit("-", 1)[1])):
        logger.info(f"{COUNTER_GROUP}.{name} = {result.counters[name]}")
    logger.info(
        f"✅ Processed {lines} lines in {splits} splits, "
        f"kept {result.passwords} passwords"
    )
    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m passrules.pipelines.batch_generate", usage=USAGE
    )
    parser.add_argument("input", type=str, help="Input file or directory")
    parser.add_argument("output", type=str, help="Output directory")
    parser.add_argument("min_length", type=int, help="Minimum password length")
    parser.add_argument("max_length", type=int, help="Maximum password length")
    parser.add_argument("rule", nargs="*", help="Rule configuration fields")
    parser.add_argument("--workers", type=int, default=settings.BATCH_WORKERS)
    parser.add_argument("--split-lines", type=int, default=settings.BATCH_SPLIT_LINES)
    parser.add_argument(
        "--progress-every", type=int, default=settings.PROGRESS_EVERY
    )
    return parser


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
    try:
        run_batch(
            config,
            args.input,
            args.output,
            min_length=args.min_length,
            max_length=args.max_length,
            workers=args.workers,
            split_lines=args.split_lines,
            progress_every=args.progress_every,
        )
    except ValidationError as e:
        logger.error(f"❌ {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
