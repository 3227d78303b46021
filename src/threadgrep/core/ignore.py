# src/threadgrep/core/ignore.py
import logging
from pathlib import Path
from typing import Iterable, Optional

import pathspec

logger = logging.getLogger(__name__)


def load_exclude_spec(
    patterns: Optional[Iterable[str]] = None,
    exclude_file: Optional[Path] = None,
) -> Optional[pathspec.PathSpec]:
    """
    Builds a PathSpec from gitwildmatch patterns given on the command line
    and/or read from an exclude file (one pattern per line, '#' comments).
    Returns None when there is nothing to exclude.
    """
    lines = []

    if exclude_file is not None:
        with open(exclude_file, "r", encoding="utf-8") as f:
            lines.extend(f.read().splitlines())

    if patterns:
        lines.extend(patterns)

    if not any(line.strip() and not line.lstrip().startswith("#") for line in lines):
        return None

    spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
    logger.debug("Loaded %d exclude pattern(s)", len(spec.patterns))
    return spec


def is_excluded(rel_path: Path, spec: Optional[pathspec.PathSpec], is_directory: bool = False) -> bool:
    """Checks a root-relative path against the exclude spec."""
    if spec is None:
        return False
    path_str = rel_path.as_posix()
    # "build/" style patterns only match directory paths with a trailing slash
    if is_directory:
        path_str += "/"
    return spec.match_file(path_str)
