# vocabcount

This tool reads a vocabulary file and a test file. For each line of the test file, it
counts how many vocabulary strings appear in that line as substrings. It draws one
progress bar while it reads the vocabulary file and a second one while it counts the lines.

Both files are read one byte per character. The letters `A`–`Z` are lower-cased before
matching. Only the letters `a`–`z`, space, `'`, `-` and `_` take part in a match:

- Any other character in a test line is skipped, so the characters on either side of it become neighbours.
- A vocabulary string that holds any other character never matches.

## Install

```
pip install .
```

## Usage

```
countvocabstrings vocabulary.txt testfile.txt [-p progressMarks] [-m hashmarkInterval] [-v minNumOfVocabStrings]
```

- `-p N`: the number of marks in a full progress bar. N must be at least 10. The default is 50.
- `-m N`: every Nth mark is drawn as `#` and the other marks as `-`. N must be from 1 to 10. The default is 10.
- `-v N`: a line's count is written only when it is at least N. The default is 0.

The counts go to `countNumOfContainedVocab.txt` in the current directory, one count per
line. When a bar is complete, the command prints the number of lines in the file it
belongs to. With the defaults, the output looks like this:

```
---------#---------#---------#---------#---------#
There are 2000 lines in vocabulary.txt
---------#---------#---------#---------#---------#
There are 500 lines in testfile.txt
```

The command exits with status 1 in any of these cases, after printing a message:

- a file cannot be opened;
- an option value is out of range;
- an option is not recognised.

If fewer than two arguments are given, it raises `ValueError`.

## Library use

```python
from vocabcount.trie import CharTrie

trie = CharTrie()
trie.insert("great")
trie.search("re")   # True
"eat" in trie       # True
trie.search("rg")   # False
```

The worker functions all share one `vocabcount.shared.SharedData`:

- `vocabcount.readers.read_vocab(data)` reads the vocabulary into `data.vocab`.
- `vocabcount.readers.read_lines(data)` queues the test lines in `data.line_queue`.
- `vocabcount.counter.count_vocab_strings(data, output_path)` waits for both readers to finish. It then writes the counts to `output_path` and returns the counts it wrote.
- `vocabcount.display.display_vocab_progress(data, out)` draws a progress bar on `out`.
- `vocabcount.display.display_count_progress(data, out)` draws a progress bar on `out`.

`vocabcount.cli.main(argv)` runs each of them on its own thread, the same way the command does.

## Tests

```
pip install .[test]
pytest
```