"""Worker that counts how many vocabulary strings each test line contains."""

from __future__ import annotations

from typing import List

from .shared import PathLike, SharedData
from .trie import CharTrie


def _count_contained(line: str, vocab: List[str]) -> int:
    trie = CharTrie()
    trie.insert(line)
    return sum(1 for word in vocab if word in trie)


def count_vocab_strings(data: SharedData, output_path: PathLike) -> List[int]:
    """Count the vocabulary strings found in each queued test line.

    Waits until both readers have finished, then drains ``data.line_queue``.
    Every count reaching ``data.min_vocab_strings`` is written on its own
    line to ``output_path``. Returns the counts that were written.
    """
    data.vocab_done.wait()
    data.lines_done.wait()

    written: List[int] = []
    with open(output_path, "w", encoding="ascii") as out:
        while data.line_queue:
            line = data.line_queue[0]
            trie = CharTrie()
            trie.insert(line)
            with data.queue_lock:
                count = sum(1 for word in data.vocab if word in trie)
                data.line_queue.popleft()

            if count >= data.min_vocab_strings:
                out.write(f"{count}\n")
                written.append(count)

            data.processed_lines += 1
    return written