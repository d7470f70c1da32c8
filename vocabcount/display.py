"""Progress bars for the vocabulary reader and the counting worker."""

from __future__ import annotations

import math
import os
from typing import Optional, TextIO

from .shared import SharedData

MAX_PERCENTAGE = 100.0
_POLL_SECONDS = 0.005


class _ProgressBar:
    """Writes '-' marks, with '#' on every ``interval``-th mark."""

    def __init__(self, marks: int, interval: int, out: TextIO) -> None:
        self.marks = marks
        self.interval = interval
        self.out = out
        self.tick = MAX_PERCENTAGE / marks
        self.count = 0

    def _write_next(self) -> None:
        symbol = "#" if (self.count + 1) % self.interval == 0 else "-"
        self.out.write(symbol)
        self.out.flush()

    def advance(self, done: int, total: int) -> None:
        if total <= 0:
            return
        progress = done / total
        if not math.isfinite(progress):
            return
        while self.count < self.marks and progress * 100 / self.tick >= self.count + 1:
            self._write_next()
            self.count += 1

    def finish(self) -> None:
        if self.count < self.marks:
            self._write_next()


def _report(out: TextIO, lines: int, path: Optional[os.PathLike]) -> None:
    name = os.fspath(path) if path is not None else ""
    out.write(f"\nThere are {lines} lines in {name}\n")
    out.flush()


def display_vocab_progress(data: SharedData, out: TextIO) -> None:
    """Show the vocabulary reader's progress until it finishes, then its line count."""
    bar = _ProgressBar(data.num_progress_marks, data.hashmark_interval, out)
    while not data.vocab_done.is_set():
        bar.advance(data.vocab_chars_read, data.total_vocab_chars)
        data.vocab_done.wait(_POLL_SECONDS)
    bar.finish()
    _report(out, data.vocab_line_count, data.vocab_file)


def display_count_progress(data: SharedData, out: TextIO) -> None:
    """Show the counting worker's progress until the line queue drains."""
    bar = _ProgressBar(data.num_progress_marks, data.hashmark_interval, out)
    while not data.lines_done.is_set() or data.line_queue:
        bar.advance(data.processed_lines, data.test_line_count)
        data.lines_done.wait(_POLL_SECONDS)
    bar.finish()
    _report(out, data.test_line_count, data.test_file)