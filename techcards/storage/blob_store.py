"""
Blob Storage

Named byte blobs with modification times. The sitemap cache, the
profile store and the document archive all work through this interface
so tests can swap the file system for memory.
"""

from __future__ import annotations

import os
import tempfile
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple


class BlobStore:
    """
    Interface for named blob storage.

    Implementations raise OSError on write/delete failure and
    FileNotFoundError when reading a missing blob.
    """

    def read(self, name: str) -> bytes:
        raise NotImplementedError

    def write(self, name: str, data: bytes) -> None:
        raise NotImplementedError

    def delete(self, name: str) -> None:
        raise NotImplementedError

    def list(self, prefix: str = "") -> List[str]:
        """Return blob names starting with prefix, sorted."""
        raise NotImplementedError

    def mtime(self, name: str) -> Optional[float]:
        """Return the modification time, or None if the blob does not exist."""
        raise NotImplementedError

    def size(self, name: str) -> int:
        raise NotImplementedError

    def exists(self, name: str) -> bool:
        return self.mtime(name) is not None

    def read_text(self, name: str) -> str:
        return self.read(name).decode("utf-8")

    def write_text(self, name: str, text: str) -> None:
        self.write(name, text.encode("utf-8"))


class FileBlobStore(BlobStore):
    """
    Blob store backed by a flat directory, one file per blob.

    Writes go to a temporary file in the same directory and are moved
    into place with os.replace, so readers never see half-written blobs.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise ValueError(f"Invalid blob name: {name!r}")
        return self.directory / name

    def read(self, name: str) -> bytes:
        return self._path(name).read_bytes()

    def write(self, name: str, data: bytes) -> None:
        target = self._path(name)
        fd, tmp_path = tempfile.mkstemp(dir=self.directory, prefix=".tmp_")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(data)
            os.replace(tmp_path, target)
        except OSError:
            if os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise

    def delete(self, name: str) -> None:
        self._path(name).unlink()

    def list(self, prefix: str = "") -> List[str]:
        return sorted(
            p.name for p in self.directory.iterdir()
            if p.is_file() and p.name.startswith(prefix) and not p.name.startswith(".tmp_")
        )

    def mtime(self, name: str) -> Optional[float]:
        try:
            return self._path(name).stat().st_mtime
        except FileNotFoundError:
            return None

    def size(self, name: str) -> int:
        return self._path(name).stat().st_size


class MemoryBlobStore(BlobStore):
    """In-memory blob store for tests; the clock is injectable."""

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self._blobs: Dict[str, Tuple[bytes, float]] = {}

    def read(self, name: str) -> bytes:
        if name not in self._blobs:
            raise FileNotFoundError(name)
        return self._blobs[name][0]

    def write(self, name: str, data: bytes) -> None:
        self._blobs[name] = (bytes(data), self.clock())

    def delete(self, name: str) -> None:
        if name not in self._blobs:
            raise FileNotFoundError(name)
        del self._blobs[name]

    def list(self, prefix: str = "") -> List[str]:
        return sorted(name for name in self._blobs if name.startswith(prefix))

    def mtime(self, name: str) -> Optional[float]:
        entry = self._blobs.get(name)
        return entry[1] if entry else None

    def size(self, name: str) -> int:
        return len(self.read(name))

    def set_mtime(self, name: str, mtime: float) -> None:
        """Backdate or forward-date a blob (test helper)."""
        data = self.read(name)
        self._blobs[name] = (data, mtime)
