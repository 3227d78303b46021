# src/threadgrep/core/partition.py
from typing import List, Sequence, TypeVar

from threadgrep.errors import InvalidThreadCountError

T = TypeVar("T")


def partition(files: Sequence[T], n: int) -> List[List[T]]:
    """
    Splits ``files`` into exactly ``n`` contiguous slices.

    Every slice but the last holds ``len(files) // n`` items; the last one
    takes whatever remains. With fewer files than slices the leading slices
    are empty.
    """
    if isinstance(n, bool) or not isinstance(n, int) or n <= 0:
        raise InvalidThreadCountError(n)

    base = len(files) // n
    partitions = []
    for i in range(n):
        start = i * base
        end = len(files) if i == n - 1 else start + base
        partitions.append(list(files[start:end]))
    return partitions
