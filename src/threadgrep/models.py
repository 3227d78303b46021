# src/threadgrep/models.py
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


@dataclass(frozen=True)
class MatchRecord:
    """One line of one file that contains the search string."""
    worker_id: int
    file_path: str
    line_number: int
    line: str


@dataclass(frozen=True)
class WorkerResult:
    """
    Everything a single worker produced for its partition.

    A worker with no matches still gets a WorkerResult (with an empty
    ``records`` tuple), so the set of workers that ran can always be
    recovered from a SearchResult.
    """
    worker_id: int
    files: Tuple[Path, ...]
    records: Tuple[MatchRecord, ...]

    @property
    def had_matches(self) -> bool:
        return bool(self.records)


@dataclass(frozen=True)
class SearchResult:
    worker_results: Tuple[WorkerResult, ...]
    total_files_scanned: int

    @property
    def records(self) -> Tuple[MatchRecord, ...]:
        """All matches, worker 0 first, then worker 1, and so on."""
        return tuple(r for wr in self.worker_results for r in wr.records)

    @property
    def worker_ids(self) -> Tuple[int, ...]:
        return tuple(wr.worker_id for wr in self.worker_results)

    @property
    def idle_workers(self) -> Tuple[int, ...]:
        return tuple(wr.worker_id for wr in self.worker_results if not wr.had_matches)
