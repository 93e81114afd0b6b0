"""Classic algorithms, data structures, puzzles and small console programs."""

__version__ = "0.1.0"