# src/threadgrep/core/search.py
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Optional, Union

import pathspec

from threadgrep.core.enumerator import enumerate_files
from threadgrep.core.partition import partition
from threadgrep.core.worker import run_worker
from threadgrep.errors import WorkerFault
from threadgrep.models import SearchResult

logger = logging.getLogger(__name__)


def search(
    needle: str,
    root: Union[str, Path],
    thread_count: int,
    exclude_spec: Optional[pathspec.PathSpec] = None,
) -> SearchResult:
    """
    Searches every regular file under ``root`` for ``needle`` using
    ``thread_count`` worker threads.

    Files are split into contiguous partitions up front, one per worker.
    Results come back in partition order, whatever order the workers finish
    in. A bad root or thread count fails before any thread starts; a worker
    that raises aborts the whole search with WorkerFault.
    """
    files = enumerate_files(root, exclude_spec)
    partitions = partition(files, thread_count)

    with ThreadPoolExecutor(max_workers=thread_count, thread_name_prefix="threadgrep-worker") as executor:
        futures = [
            executor.submit(run_worker, worker_id, subset, needle)
            for worker_id, subset in enumerate(partitions)
        ]

        worker_results = []
        for worker_id, future in enumerate(futures):
            try:
                worker_results.append(future.result())
            except Exception as e:
                raise WorkerFault(worker_id, e) from e

    result = SearchResult(worker_results=tuple(worker_results), total_files_scanned=len(files))
    logger.info(
        "Search for %r finished: %d file(s), %d match(es), %d worker(s)",
        needle, result.total_files_scanned, len(result.records), len(worker_results),
    )
    return result
