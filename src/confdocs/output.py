"""Writing rendered documents to disk."""

import os
import stat
import tempfile
from pathlib import Path

# Mode for newly created documents before the umask is applied
NEW_FILE_MODE = 0o666


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def document_mode(path: Path) -> int:
    """Return the permission bits a document written to ``path`` should get.

    An existing document keeps its mode; a new one gets the usual
    ``0o666`` minus the process umask.
    """
    if path.exists():
        return stat.S_IMODE(path.stat().st_mode)
    return NEW_FILE_MODE & ~_current_umask()


def write_document(path: Path, content: str) -> None:
    """Write a rendered document, replacing any previous version.

    Missing parent directories are created. The text goes to a sibling temp
    file first and is renamed over ``path``, so readers never see half a
    document.

    Args:
        path: Target document path
        content: Rendered document text
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    mode = document_mode(path)

    fd, temp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    temp_path = Path(temp_name)

    try:
        with open(fd, "w", encoding="utf-8") as f:
            f.write(content)
        # mkstemp always creates 0600
        os.chmod(temp_path, mode)
        temp_path.replace(path)
    except Exception:
        temp_path.unlink(missing_ok=True)
        raise
