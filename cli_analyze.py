"""
Terminal front end for the word-frequency analyzer.
Reads text files (or stdin) and prints one report per input.
"""
import argparse
import os
import sys

from tqdm import tqdm

from korfreq import process_bytes


def read_input(path):
    """Read a file as raw bytes; '-' means stdin."""
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Top-10 Korean word frequency report")
    parser.add_argument("files", nargs="*", default=["-"], help="Text files to analyze (default: stdin)")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar over the files")
    args = parser.parse_args(argv)

    for path in args.files:
        if path != "-" and not os.path.exists(path):
            print(f"Error: {path} not found")
            return 1

    out = sys.stdout.buffer
    files = tqdm(args.files, desc="Analyzing") if args.progress else args.files
    for path in files:
        try:
            data = read_input(path)
        except OSError as exc:
            print(f"Error: cannot read {path}: {exc}")
            return 1

        sys.stdout.flush()
        if len(args.files) > 1:
            out.write(f"[Analyzer] {path} ({len(data)} bytes)\n".encode("utf-8"))
        out.write(process_bytes(data))
        out.flush()

    return 0


if __name__ == "__main__":
    sys.exit(main())
