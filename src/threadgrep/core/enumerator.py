# src/threadgrep/core/enumerator.py
import logging
import os
from pathlib import Path
from typing import List, Optional, Union

import pathspec

from threadgrep.core.ignore import is_excluded
from threadgrep.errors import DirectoryNotFoundError

logger = logging.getLogger(__name__)


def enumerate_files(
    root: Union[str, Path],
    exclude_spec: Optional[pathspec.PathSpec] = None,
) -> List[Path]:
    """
    Walks the directory tree under ``root`` and returns every regular file,
    in walk order.

    Raises DirectoryNotFoundError if ``root`` is missing, is not a directory
    or cannot be listed. Unlistable subdirectories are logged and skipped.
    """
    root_dir = Path(root)
    if not root_dir.exists():
        raise DirectoryNotFoundError(root_dir)
    if not root_dir.is_dir():
        raise DirectoryNotFoundError(root_dir, "not a directory")

    def _on_walk_error(err: OSError) -> None:
        if err.filename is not None and Path(err.filename) == root_dir:
            raise DirectoryNotFoundError(root_dir, "directory is not readable") from err
        logger.warning("could not read directory %s: %s", err.filename, err.strerror or err)

    files: List[Path] = []
    for current, dirs, names in os.walk(root_dir, onerror=_on_walk_error):
        current_path = Path(current)

        if exclude_spec is not None:
            # Pruning dirs in place keeps os.walk out of excluded subtrees
            for d in list(dirs):
                if is_excluded((current_path / d).relative_to(root_dir), exclude_spec, is_directory=True):
                    dirs.remove(d)

        for name in names:
            file_path = current_path / name
            # is_file() follows symlinks: links to regular files count, dangling links don't
            if not file_path.is_file():
                continue
            if is_excluded(file_path.relative_to(root_dir), exclude_spec):
                continue
            files.append(file_path)

    logger.info("Found %d file(s) under %s", len(files), root_dir)
    return files
