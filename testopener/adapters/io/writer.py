"""
Writer adapter that writes generated test files.

Content is written to a temporary file in the target directory and renamed
over the target, so a failed write never leaves a partial file behind.
"""

import asyncio
import logging
import os
import tempfile
from pathlib import Path

from ...ports.writer_port import WriterError

logger = logging.getLogger(__name__)


class AtomicFileWriter:
    """WriterPort implementation with atomic replace and dry-run support."""

    def __init__(self, project_root: Path | None = None, dry_run: bool = False) -> None:
        """
        Initialize the writer.

        Args:
            project_root: If set, writes outside this directory are refused
            dry_run: Log what would be written instead of writing
        """
        self.project_root = project_root.resolve() if project_root else None
        self.dry_run = dry_run

    async def write_file(self, path: str, data: bytes) -> None:
        await asyncio.to_thread(self.write_file_sync, path, data)

    def write_file_sync(self, path: str, data: bytes) -> None:
        """
        Blocking write used by `write_file`.

        Raises:
            WriterError: If the path is not allowed or the write fails
        """
        target = Path(path).resolve()
        self._validate_target(target)

        if self.dry_run:
            logger.info(f"[dry-run] Would write {len(data)} bytes to {target}")
            return

        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
            )
            with os.fdopen(fd, "wb") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            # mkstemp creates 0600; generated tests are ordinary source files
            mode = target.stat().st_mode & 0o777 if target.exists() else 0o644
            os.chmod(tmp_name, mode)
            os.replace(tmp_name, target)
            tmp_name = None
        except OSError as e:
            raise WriterError(f"Failed to write {target}: {e}") from e
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)

        logger.debug(f"Wrote {len(data)} bytes to {target}")

    def _validate_target(self, target: Path) -> None:
        if not target.parent.is_dir():
            raise WriterError(f"Target directory does not exist: {target.parent}")
        if target.is_dir():
            raise WriterError(f"Target is a directory: {target}")
        if self.project_root is not None:
            try:
                target.relative_to(self.project_root)
            except ValueError as e:
                raise WriterError(
                    f"Refusing to write outside project root {self.project_root}: {target}"
                ) from e
