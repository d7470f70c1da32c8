"""Command line entry point: count vocabulary strings in each test line."""

from __future__ import annotations

import getopt
import re
import sys
import threading
from typing import List, Optional

from .counter import count_vocab_strings
from .display import display_count_progress, display_vocab_progress
from .readers import read_lines, read_vocab
from .shared import MIN_NUM_OF_MARKS, SharedData

OUTPUT_FILE = "countNumOfContainedVocab.txt"
PROG = "vocabcount"

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _atoi(text: str) -> int:
    """Parse a leading integer the lenient way; 0 if there is none."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _usage() -> None:
    print(
        f"Usage: {PROG} vocabulary.txt testfile.txt [-p progressMarks] "
        "[-m hashmarkInterval] [-v minNumOfVocabStrings]"
    )


def _can_open(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def main(argv: Optional[List[str]] = None) -> int:
    """Run the readers, the counter and the progress display; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 2:
        raise ValueError("Invalid num of arguements")

    data = SharedData()
    try:
        options, positional = getopt.gnu_getopt(args, "p:m:v:")
    except getopt.GetoptError:
        _usage()
        return 1

    for option, value in options:
        if option == "-p":
            data.num_progress_marks = _atoi(value)
            if data.num_progress_marks < MIN_NUM_OF_MARKS:
                print("Number of progress marks must be a number and at least 10.", file=sys.stderr)
                return 1
        elif option == "-m":
            data.hashmark_interval = _atoi(value)
            if not 0 < data.hashmark_interval <= 10:
                print(
                    "Hash mark interval for progress must be a number, greater than 0, "
                    "and less than or equal to 10.",
                    file=sys.stderr,
                )
                return 1
        elif option == "-v":
            data.min_vocab_strings = _atoi(value)

    if len(positional) < 2:
        _usage()
        return 1

    vocab_path, test_path = positional[0], positional[1]
    for path in (vocab_path, test_path):
        if not _can_open(path):
            print(f"Display Unable to open <<{path}>>", file=sys.stderr)
            return 1

    data.vocab_file = vocab_path
    data.test_file = test_path
    data.reset()

    workers = [
        threading.Thread(target=read_vocab, args=(data,), name="readvocab"),
        threading.Thread(target=read_lines, args=(data,), name="readlines"),
        threading.Thread(
            target=count_vocab_strings, args=(data, OUTPUT_FILE), name="countvocabstrings"
        ),
    ]
    for worker in workers:
        worker.start()

    display_vocab_progress(data, sys.stdout)
    display_count_progress(data, sys.stdout)

    for worker in workers:
        worker.join()
    return 0


if __name__ == "__main__":
    sys.exit(main())