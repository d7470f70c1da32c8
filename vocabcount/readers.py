"""Workers that load the vocabulary file and the test file."""

from __future__ import annotations

import os
import string

from .shared import SharedData

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
# One byte is one character, so lengths match the file's byte counts.
_ENCODING = "latin-1"


def _lines(path):
    """Yield the lines of ``path`` without their trailing newline."""
    with open(path, encoding=_ENCODING, newline="\n") as handle:
        for line in handle:
            yield line[:-1] if line.endswith("\n") else line


def read_vocab(data: SharedData) -> None:
    """Load the vocabulary file, lower-cased, into ``data.vocab``.

    Tracks the file size and the characters read so far for progress
    display, and sets ``data.vocab_done`` at the end.
    """
    if data.vocab_file is None:
        raise ValueError("no vocabulary file given")
    data.total_vocab_chars = os.stat(data.vocab_file).st_size
    for line in _lines(data.vocab_file):
        word = line.translate(_ASCII_LOWER)
        data.vocab.append(word)
        data.vocab_chars_read += len(word) + 1
        data.vocab_line_count += 1
    data.vocab_done.set()


def read_lines(data: SharedData) -> None:
    """Queue the lower-cased lines of the test file in ``data.line_queue``.

    Holds ``data.queue_lock`` while filling the queue and sets
    ``data.lines_done`` at the end.
    """
    if data.test_file is None:
        raise ValueError("no test file given")
    with data.queue_lock:
        for line in _lines(data.test_file):
            data.line_queue.append(line.translate(_ASCII_LOWER))
            data.test_line_count += 1
    data.lines_done.set()