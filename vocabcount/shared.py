"""State shared between the reader, counter and display workers."""

from __future__ import annotations

import os
import threading
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List, Optional, Union

DEFAULT_NUM_OF_MARKS = 50
MIN_NUM_OF_MARKS = 10
DEFAULT_HASHMARK_INTERVAL = 10
DEFAULT_MIN_VOCAB_STRINGS = 0

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class SharedData:
    """Settings, progress counters and buffers used by all workers.

    ``vocab_done`` and ``lines_done`` are set once the vocabulary reader
    and the test-line reader have finished.
    """

    num_progress_marks: int = DEFAULT_NUM_OF_MARKS
    hashmark_interval: int = DEFAULT_HASHMARK_INTERVAL
    min_vocab_strings: int = DEFAULT_MIN_VOCAB_STRINGS

    vocab_file: Optional[PathLike] = None
    test_file: Optional[PathLike] = None

    total_vocab_chars: int = 0
    vocab_chars_read: int = 0
    vocab_line_count: int = 0
    test_line_count: int = 0
    processed_lines: int = 0

    vocab: List[str] = field(default_factory=list)
    line_queue: Deque[str] = field(default_factory=deque)
    queue_lock: threading.Lock = field(default_factory=threading.Lock, repr=False)

    vocab_done: threading.Event = field(default_factory=threading.Event, repr=False)
    lines_done: threading.Event = field(default_factory=threading.Event, repr=False)

    def reset(self) -> None:
        """Clear the completion flags and the progress counters."""
        self.vocab_done.clear()
        self.lines_done.clear()
        self.vocab_line_count = 0
        self.test_line_count = 0
        self.total_vocab_chars = 0
        self.vocab_chars_read = 0
        self.processed_lines = 0