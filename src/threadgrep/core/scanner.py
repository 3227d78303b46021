# src/threadgrep/core/scanner.py
import logging
from pathlib import Path
from typing import List, Union

from threadgrep.config import TEXT_ENCODING
from threadgrep.models import MatchRecord

logger = logging.getLogger(__name__)


def scan_file(path: Union[str, Path], needle: str, worker_id: int = 0) -> List[MatchRecord]:
    """
    Returns one MatchRecord per line of ``path`` containing ``needle``
    (literal, case-sensitive). Lines are numbered from 1.

    A file that cannot be opened or read is logged as a warning and yields
    no records; the error never propagates.
    """
    file_path = str(path)
    records: List[MatchRecord] = []
    try:
        # errors="replace": binary or mis-encoded content must not kill the worker
        with open(file_path, "r", encoding=TEXT_ENCODING, errors="replace") as f:
            for line_number, raw_line in enumerate(f, start=1):
                line = raw_line.rstrip("\n")
                if needle in line:
                    records.append(
                        MatchRecord(
                            worker_id=worker_id,
                            file_path=file_path,
                            line_number=line_number,
                            line=line,
                        )
                    )
    except OSError as e:
        logger.warning("could not open file %s: %s", file_path, e.strerror or e)
        return []
    return records
