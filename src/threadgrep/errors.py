# src/threadgrep/errors.py


class ThreadGrepError(Exception):
    """Base class for errors that abort a search."""


class DirectoryNotFoundError(ThreadGrepError):
    """The search root is missing, not a directory, or cannot be listed."""

    def __init__(self, path, reason: str = "directory does not exist"):
        self.path = path
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class InvalidThreadCountError(ThreadGrepError, ValueError):
    def __init__(self, thread_count):
        self.thread_count = thread_count
        super().__init__(f"invalid thread count: {thread_count!r} (must be a positive integer)")


class WorkerFault(ThreadGrepError):
    """A worker died with something other than a file open failure."""

    def __init__(self, worker_id: int, cause: BaseException):
        self.worker_id = worker_id
        super().__init__(f"worker {worker_id} failed: {cause}")


class InvalidFilenameError(ThreadGrepError, ValueError):
    def __init__(self, kind: str, filename: str):
        self.filename = filename
        super().__init__(f"invalid {kind} filename: {filename!r}")
