"""Count vocabulary strings contained in each line of a text file."""

__version__ = "1.0.0"