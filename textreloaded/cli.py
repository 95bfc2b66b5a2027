"""Command line entry point: correct a text file line by line."""

import sys
from collections.abc import Iterator

from .processor import process_text

_USAGE = "Usage: textreloaded <input_file> <output_file>"


def _lines(data: str) -> Iterator[str]:
    if not data:
        return
    parts = data.split("\n")
    if data.endswith("\n"):
        parts.pop()
    for part in parts:
        yield part.removesuffix("\r")


def main(argv: list[str] | None = None) -> int:
    """Read the input file, process every line and write the result to the output file."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) < 2:
        print(_USAGE)
        return 1
    input_path, output_path = args[0], args[1]

    try:
        with open(input_path, encoding="utf-8", errors="surrogateescape", newline="") as src:
            data = src.read()
    except OSError as exc:
        print(f"Error opening file: {exc}")
        return 1

    try:
        with open(
            output_path, "w", encoding="utf-8", errors="surrogateescape", newline=""
        ) as out:
            for line in _lines(data):
                out.write(process_text(line) + "\n")
    except OSError as exc:
        print(f"Error writing to output file: {exc}")
        return 1

    print("Processing complete. Check", output_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())