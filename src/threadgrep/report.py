# src/threadgrep/report.py
from collections import Counter
from pathlib import Path
from typing import List, Sequence, TextIO

from threadgrep.config import PROGRAM_NAME
from threadgrep.models import SearchResult


def write_results(
    out: TextIO,
    result: SearchResult,
    needle: str,
    root_dir: Path,
    excluded: Sequence[str] = (),
) -> None:
    """
    Writes every match as 'worker:path:line: text', in result order.
    ``excluded`` lists the patterns the file count was taken under.
    """
    out.write(f"# {PROGRAM_NAME} results\n")
    out.write(f"# Search string: {needle}\n")
    out.write(f"# Directory: {root_dir}\n")
    if excluded:
        out.write(f"# Excluded: {', '.join(excluded)}\n")
    out.write(
        f"# Files scanned: {result.total_files_scanned} | "
        f"Matches: {len(result.records)} | Workers: {len(result.worker_results)}\n"
    )
    for rec in result.records:
        out.write(f"{rec.worker_id}:{rec.file_path}:{rec.line_number}: {rec.line}\n")


def format_log_summary(result: SearchResult, needle: str, root_dir: Path, elapsed: float) -> List[str]:
    """
    Per-worker summary for the log file: how many files each worker was
    given and, for each file that matched, how many lines matched.
    """
    lines = [
        f"# {PROGRAM_NAME} log",
        f"# Search string: {needle}",
        f"# Directory: {root_dir}",
        f"# Threads: {len(result.worker_results)} | Files scanned: {result.total_files_scanned}"
        f" | Elapsed: {elapsed:.3f}s",
    ]
    for wr in result.worker_results:
        lines.append(f"Worker {wr.worker_id}: {len(wr.files)} files")
        if not wr.had_matches:
            lines.append("    no matches")
            continue
        # Counter keeps first-seen order, which is partition order here
        for file_path, count in Counter(rec.file_path for rec in wr.records).items():
            lines.append(f"    {file_path}: {count}")
    return lines
