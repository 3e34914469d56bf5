"""Writing generated units to disk."""

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Mapping, Tuple, Union

logger = logging.getLogger(__name__)


def write_sources(output_dir: Union[str, Path], sources: Mapping[str, str]) -> List[Path]:
    """Write each generated unit to its own file, replacing any previous version.

    Every unit is first written to a temporary file beside its target. Only
    when all of them have been written are they moved into place, so a failed
    write leaves the previous output untouched.

    Args:
        output_dir: Directory to write into (created if missing)
        sources: Output file name to source text

    Returns:
        Paths written, in the order of ``sources``
    """
    directory = Path(output_dir)
    directory.mkdir(parents=True, exist_ok=True)
    # mkstemp creates owner-only files; give the output the usual umask-derived mode
    umask = os.umask(0)
    os.umask(umask)
    mode = 0o666 & ~umask

    staged: List[Tuple[Path, Path]] = []
    try:
        for filename, text in sources.items():
            staged.append((_write_temporary(directory, filename, text, mode), directory / filename))
    except Exception:
        for temporary, _ in staged:
            temporary.unlink(missing_ok=True)
        raise

    written = []
    for temporary, path in staged:
        os.replace(temporary, path)
        logger.debug("Wrote %s", path)
        written.append(path)
    return written


def _write_temporary(directory: Path, filename: str, text: str, mode: int) -> Path:
    fd, name = tempfile.mkstemp(dir=directory, prefix=f".{filename}.", suffix=".tmp")
    temporary = Path(name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as handle:
            handle.write(text)
        os.chmod(temporary, mode)
    except Exception:
        temporary.unlink(missing_ok=True)
        raise
    return temporary
