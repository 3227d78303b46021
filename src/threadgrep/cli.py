# src/threadgrep/cli.py
import sys
import argparse
import logging
import os
import re
import time
from pathlib import Path
from typing import List

from threadgrep.config import (
    CONSOLE_LOG_FORMAT,
    DEFAULT_LOG_FILENAME,
    DEFAULT_RESULT_FILENAME,
    DEFAULT_THREAD_COUNT,
    INVALID_FILENAME_PATTERN,
    LOG_FORMAT,
    OUTPUT_ERRORS,
    PROGRAM_NAME,
)
from threadgrep.core.ignore import load_exclude_spec
from threadgrep.core.search import search
from threadgrep.errors import InvalidFilenameError, ThreadGrepError
from threadgrep.report import format_log_summary, write_results

logger = logging.getLogger(PROGRAM_NAME)


class _CollectingHandler(logging.Handler):
    """Keeps formatted records in memory so they can go into the log file after the run."""

    def __init__(self, level=logging.WARNING):
        super().__init__(level)
        self.lines: List[str] = []
        self.setFormatter(logging.Formatter(LOG_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        self.lines.append(self.format(record))


class _StoreOnce(argparse.Action):
    """Like 'store', but giving the same option twice is a usage error."""

    def __call__(self, parser, namespace, values, option_string=None):
        given = getattr(namespace, "_given_once", set())
        if self.dest in given:
            parser.error(f"multiple usage of the {option_string} option")
        given.add(self.dest)
        setattr(namespace, "_given_once", given)
        setattr(namespace, self.dest, values)


def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog=PROGRAM_NAME,
        description="Search a directory tree for files containing a literal string, using several threads.",
    )
    parser.add_argument("search_string", type=str, help="Literal string to look for (case-sensitive)")
    parser.add_argument(
        "-d", "--dir",
        action=_StoreOnce,
        type=str,
        default=None,
        help="Directory to search in (default: current directory)",
    )
    parser.add_argument(
        "-l", "--log_file",
        action=_StoreOnce,
        type=str,
        default=DEFAULT_LOG_FILENAME,
        help=f"Log filename (default: {DEFAULT_LOG_FILENAME})",
    )
    parser.add_argument(
        "-r", "--result_file",
        action=_StoreOnce,
        type=str,
        default=DEFAULT_RESULT_FILENAME,
        help=f"Result filename (default: {DEFAULT_RESULT_FILENAME})",
    )
    parser.add_argument(
        "-t", "--threads",
        action=_StoreOnce,
        type=int,
        default=DEFAULT_THREAD_COUNT,
        help=f"Number of threads to use (default: {DEFAULT_THREAD_COUNT})",
    )
    parser.add_argument(
        "-e", "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="gitignore-style pattern to skip (repeatable)",
    )
    parser.add_argument("--exclude-from", type=str, default=None, metavar="FILE", help="File of exclude patterns")
    parser.add_argument("-q", "--quiet", action="store_true", help="Don't print the summary")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def validate_filename(kind: str, filename: str, default_suffix: str) -> str:
    """
    Accepts only word characters, hyphens, dots and spaces (so no paths),
    with no leading or trailing whitespace.
    A name without an extension gets ``default_suffix``.
    """
    if (
        not filename.strip(". ")
        or filename != filename.strip()
        or re.search(INVALID_FILENAME_PATTERN, filename)
    ):
        raise InvalidFilenameError(kind, filename)
    if not Path(filename).suffix:
        filename += default_suffix
    return filename


def setup_logging(verbose: bool) -> _CollectingHandler:
    logger.setLevel(logging.DEBUG)

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(logging.Formatter(CONSOLE_LOG_FORMAT))
    logger.addHandler(console)

    collector = _CollectingHandler()
    logger.addHandler(collector)
    return collector


def teardown_logging() -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


def run(args) -> int:
    root_dir = Path(args.dir) if args.dir else Path(os.getcwd())
    root_dir = root_dir.resolve()

    log_filename = validate_filename("log", args.log_file, ".log")
    result_filename = validate_filename("result", args.result_file, ".txt")

    result_path = Path.cwd() / result_filename
    log_path = Path.cwd() / log_filename

    # Our own output files must not be searched on the next run
    patterns = list(args.exclude)
    for out_path in (result_path, log_path):
        if out_path.resolve().is_relative_to(root_dir):
            patterns.append("/" + out_path.resolve().relative_to(root_dir).as_posix())

    exclude_spec = load_exclude_spec(
        patterns,
        Path(args.exclude_from) if args.exclude_from else None,
    )
    excluded = list(patterns)
    if args.exclude_from:
        excluded.append(f"patterns from {args.exclude_from}")

    if not args.quiet:
        print(f"--- {PROGRAM_NAME} ---")
        print(f"Searching: {root_dir}")
        print(f"String:    {args.search_string!r}")
        print(f"Threads:   {args.threads}")

    collector = setup_logging(args.verbose)
    try:
        started = time.perf_counter()
        result = search(args.search_string, root_dir, args.threads, exclude_spec)
        elapsed = time.perf_counter() - started
    finally:
        teardown_logging()

    try:
        with open(result_path, "w", encoding="utf-8", errors=OUTPUT_ERRORS) as f:
            write_results(f, result, args.search_string, root_dir, excluded)

        with open(log_path, "w", encoding="utf-8", errors=OUTPUT_ERRORS) as f:
            for line in format_log_summary(result, args.search_string, root_dir, elapsed):
                f.write(line + "\n")
            f.write("# Diagnostics\n")
            for line in collector.lines:
                f.write(line + "\n")
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        return 1

    if not args.quiet:
        print("\n--- Matches per worker ---")
        print(f"{'Worker':<7} | {'Files':<7} | {'Matches'}")
        print("-" * 40)
        for wr in result.worker_results:
            print(f"{wr.worker_id:<7} | {len(wr.files):<7} | {len(wr.records)}")
        print("-" * 40)
        print(f"Total files: {result.total_files_scanned}")
        print(f"Total matches: {len(result.records)}")
        print(f"Elapsed: {elapsed:.3f}s")
        if collector.lines:
            print(f"Warnings: {len(collector.lines)} (see {log_path.name})")
        print(f"\nResults written to: {result_path.name}")

    return 0


def main():
    try:
        parser = create_arg_parser()
        args = parser.parse_args()
        code = run(args)
        if code:
            sys.exit(code)

    except ThreadGrepError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
