import threading

from vocabcount.counter import count_vocab_strings
from vocabcount.shared import SharedData


def _ready(vocab, lines, minimum=0):
    data = SharedData(min_vocab_strings=minimum)
    data.vocab.extend(vocab)
    data.line_queue.extend(lines)
    data.test_line_count = len(lines)
    data.vocab_done.set()
    data.lines_done.set()
    return data


def test_every_substring_counted(tmp_path):
    vocab = ["abc", "bc", "c", "ab"]
    data = _ready(vocab, ["abc"])
    out = tmp_path / "out.txt"
    result = count_vocab_strings(data, out)
    assert result == [len(vocab)]
    assert out.read_text() == f"{len(vocab)}\n"


def test_absent_words_not_counted(tmp_path):
    data = _ready(["zzz", "qq"], ["abc"])
    out = tmp_path / "out.txt"
    assert count_vocab_strings(data, out) == [0]
    assert out.read_text() == "0\n"


def test_queue_drained_and_progress_counted(tmp_path):
    lines = ["one", "two", "three"]
    data = _ready(["o"], lines)
    count_vocab_strings(data, tmp_path / "out.txt")
    assert len(data.line_queue) == 0
    assert data.processed_lines == len(lines)


def test_minimum_filters_output(tmp_path):
    vocab = ["a", "b"]
    data = _ready(vocab, ["ab", "xy"], minimum=len(vocab))
    out = tmp_path / "out.txt"
    assert count_vocab_strings(data, out) == [len(vocab)]
    assert out.read_text() == f"{len(vocab)}\n"
    assert data.processed_lines == 2


def test_minimum_above_all_counts_gives_empty_file(tmp_path):
    vocab = ["a"]
    data = _ready(vocab, ["a", "aa"], minimum=len(vocab) + 1)
    out = tmp_path / "out.txt"
    assert count_vocab_strings(data, out) == []
    assert out.read_text() == ""


def test_invalid_characters_skipped_in_lines(tmp_path):
    vocab = ["ab"]
    data = _ready(vocab, ["a.b"])
    assert count_vocab_strings(data, tmp_path / "out.txt") == [len(vocab)]


def test_waits_for_readers(tmp_path):
    data = SharedData()
    out = tmp_path / "out.txt"
    results = []
    worker = threading.Thread(target=lambda: results.append(count_vocab_strings(data, out)))
    worker.start()
    worker.join(0.05)
    assert worker.is_alive()
    data.vocab.append("x")
    data.line_queue.append("x")
    data.vocab_done.set()
    data.lines_done.set()
    worker.join(5)
    assert results == [[1]]