# src/threadgrep/core/worker.py
import logging
from pathlib import Path
from typing import List, Sequence

from threadgrep.core.scanner import scan_file
from threadgrep.models import MatchRecord, WorkerResult

logger = logging.getLogger(__name__)


def run_worker(worker_id: int, files: Sequence[Path], needle: str) -> WorkerResult:
    """Scans a partition in order and tags every record with ``worker_id``."""
    records: List[MatchRecord] = []
    for path in files:
        records.extend(scan_file(path, needle, worker_id=worker_id))

    logger.debug("Worker %d: %d file(s), %d match(es)", worker_id, len(files), len(records))
    return WorkerResult(worker_id=worker_id, files=tuple(files), records=tuple(records))
