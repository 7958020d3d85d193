import os
import tempfile
from pathlib import Path

from core.exceptions.artifact_write_error import ArtifactWriteError


def write_text_atomically(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` so readers see either the old or the new file.

    The content goes to a temporary file in the same directory, is flushed to
    disk, then renamed over the target. A failure at any point leaves the
    previous file untouched.
    """
    tmp_path: Path | None = None

    try:
        path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            tmp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()
            os.fsync(tmp_file.fileno())

        os.replace(tmp_path, path)
    except OSError as e:
        if tmp_path is not None:
            tmp_path.unlink(missing_ok=True)

        raise ArtifactWriteError(str(path), str(e)) from e
