"""
Workspace file search.

Recursive glob search over a workspace root with an exclusion glob and a
result cap, the file-finding collaborator of the open-test action.

Glob semantics:
- Patterns are matched against the workspace-relative POSIX path prefixed
  with ``/``, so ``**/name`` also matches files at the workspace root.
- ``*`` and ``**`` both match any run of characters, including inside a
  single path segment (``Foo.**.ts`` matches ``Foo.test.ts``).
- Matching is case-sensitive.
"""

import asyncio
import logging
import os
from fnmatch import fnmatchcase
from pathlib import Path

from ...ports.search_port import FileSearchError

logger = logging.getLogger(__name__)


class WorkspaceFileSearch:
    """
    FileSearchPort implementation that walks a directory tree.

    Excluded directories are pruned during the walk so their contents are
    never visited. Results are ordered by path for stable output.
    """

    def __init__(
        self, root: str | Path, exclude_dirs: list[str] | None = None
    ) -> None:
        """
        Initialize the search.

        Args:
            root: Workspace root directory
            exclude_dirs: Directory names always skipped, in addition to the
                per-call exclusion glob
        """
        self.root = Path(root)
        self.exclude_dirs = set(exclude_dirs or [])

    async def search(
        self, glob_pattern: str, exclude_glob: str | None, max_results: int
    ) -> list[str]:
        return await asyncio.to_thread(
            self.search_sync, glob_pattern, exclude_glob, max_results
        )

    def search_sync(
        self, glob_pattern: str, exclude_glob: str | None, max_results: int
    ) -> list[str]:
        """
        Blocking search used by `search`.

        Raises:
            FileSearchError: If the root is missing or not a directory
        """
        if max_results < 1:
            raise FileSearchError(f"max_results must be positive, got {max_results}")
        if not glob_pattern or not glob_pattern.strip():
            raise FileSearchError("Search pattern cannot be empty")

        if not self.root.exists():
            raise FileSearchError(f"Workspace root does not exist: {self.root}")
        if not self.root.is_dir():
            raise FileSearchError(f"Workspace root must be a directory: {self.root}")

        resolved_root = self.root.resolve()
        pattern = _anchor(glob_pattern)
        exclude = _anchor(exclude_glob) if exclude_glob else None
        # The last segment must match the file name on its own, so `**` cannot
        # reach across directories there
        name_pattern = pattern.rsplit("/", 1)[-1]
        results: list[str] = []

        logger.debug(f"Searching {resolved_root} for {pattern} (exclude={exclude})")

        def on_error(error: OSError) -> None:
            # Unreadable subdirectories are skipped, not fatal
            logger.debug(f"Skipping unreadable path: {error}")

        for dirpath, dirnames, filenames in os.walk(resolved_root, onerror=on_error):
            rel_dir = _relative(Path(dirpath), resolved_root)

            dirnames[:] = sorted(
                d
                for d in dirnames
                if not self._should_exclude_directory(f"{rel_dir}{d}/", d, exclude)
            )

            for filename in sorted(filenames):
                rel_path = f"{rel_dir}{filename}"
                if exclude and fnmatchcase(rel_path, exclude):
                    continue
                if fnmatchcase(filename, name_pattern) and fnmatchcase(
                    rel_path, pattern
                ):
                    results.append(str(Path(dirpath) / filename))
                    if len(results) >= max_results:
                        logger.debug(f"Result cap of {max_results} reached")
                        return results

        return results

    def _should_exclude_directory(
        self, rel_dir: str, name: str, exclude: str | None
    ) -> bool:
        if name in self.exclude_dirs:
            return True
        return bool(exclude) and fnmatchcase(rel_dir, exclude)


def _anchor(glob: str) -> str:
    """Prefix a workspace-relative glob with ``/`` unless it starts with ``**``."""
    glob = glob.replace("\\", "/")
    if glob.startswith("**") or glob.startswith("/"):
        return glob
    return f"/{glob}"


def _relative(path: Path, root: Path) -> str:
    """Workspace-relative directory as ``/a/b/`` (``/`` for the root)."""
    rel = path.relative_to(root).as_posix()
    return "/" if rel == "." else f"/{rel}/"
