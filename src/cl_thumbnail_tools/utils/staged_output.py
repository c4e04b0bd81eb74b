"""All-or-nothing output writes.

A backend writes into a temporary file next to the target. The file is moved
onto the target path only once it exists and is non-empty; otherwise it is
removed, so a failed attempt never leaves a partial thumbnail behind.
"""

import glob
import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path


class StagedOutput:
    def __init__(self, target: Path, staging: Path) -> None:
        self.target: Path = target
        self.path: Path = staging
        self.committed: bool = False

    def is_written(self) -> bool:
        """True if the staging file exists, is readable and has non-zero size."""
        return (
            self.path.is_file()
            and os.access(self.path, os.R_OK)
            and self.path.stat().st_size > 0
        )

    def commit(self) -> bool:
        if not self.is_written():
            return False
        # mkstemp files are private; thumbnails get regular file permissions
        os.chmod(self.path, 0o644)
        os.replace(self.path, self.target)
        self.committed = True
        return True


@contextmanager
def staged_output(target_file: str | Path) -> Iterator[StagedOutput]:
    """Yield a :class:`StagedOutput` whose ``path`` is a fresh temp file.

    Raises:
        FileNotFoundError: If the target directory does not exist
    """
    target = Path(target_file)
    if not target.parent.exists():
        raise FileNotFoundError(f"Output directory not found: {target.parent}")

    fd, name = tempfile.mkstemp(
        prefix=f".{target.name}.", suffix=".part", dir=target.parent
    )
    os.close(fd)
    staging = Path(name)

    staged = StagedOutput(target, staging)
    try:
        yield staged
    finally:
        if not staged.committed:
            staging.unlink(missing_ok=True)
        # Tools may split multi-frame output into numbered siblings
        for sibling in staging.parent.glob(f"{glob.escape(staging.stem)}-*{staging.suffix}"):
            sibling.unlink(missing_ok=True)


def remove_stale(target_file: str | Path) -> None:
    """Delete a leftover file at ``target_file`` before a new attempt."""
    Path(target_file).unlink(missing_ok=True)
