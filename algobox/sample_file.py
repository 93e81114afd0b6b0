"""Write a small text file and read it back."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Union

DEFAULT_FILENAME = "sample_output.txt"
LINES = (
    "Hello from sample_file!\n",
    "This file was written by a Python program.\n",
)

PathLike = Union[str, "os.PathLike[str]"]


def write_sample(path: PathLike) -> None:
    """Create or overwrite ``path`` with the sample lines."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(LINES)


def read_back(path: PathLike) -> str:
    """Return the whole text of ``path``."""
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Optional[list[str]] = None) -> int:
    """Write the sample file, then print what it holds."""
    parser = argparse.ArgumentParser(prog="sample_file", description=__doc__)
    parser.add_argument("filename", nargs="?", default=DEFAULT_FILENAME)
    filename = parser.parse_args(argv).filename
    try:
        write_sample(filename)
    except OSError as exc:
        print(f"open for write: {exc}", file=sys.stderr)
        return 1
    try:
        contents = read_back(filename)
    except OSError as exc:
        print(f"open for read: {exc}", file=sys.stderr)
        return 1
    print(f"Contents of {filename}:")
    print(contents, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())