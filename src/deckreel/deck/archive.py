"""Read-only access to the entries of a ZIP package."""

import io
import logging
import threading
import zipfile
import zlib
from pathlib import Path
from typing import Union

from ..errors import ArchiveError, EntryNotFound, MalformedXml

logger = logging.getLogger(__name__)


class Archive:
    """Byte and text lookup by internal path.

    Reads are serialized with a lock so one archive can be shared by
    worker threads.
    """

    def __init__(self, zf: zipfile.ZipFile) -> None:
        self._zip = zf
        self._lock = threading.Lock()
        self._names = frozenset(zf.namelist())

    @property
    def names(self) -> frozenset[str]:
        """Return every entry path in the archive."""
        return self._names

    def __contains__(self, path: str) -> bool:
        return path in self._names

    def read_bytes(self, path: str) -> bytes:
        """Return the raw bytes of an entry.

        Raises:
            EntryNotFound: If the entry does not exist.
            ArchiveError: If the entry data is corrupt or uses an
                unsupported compression method.
        """
        if path not in self._names:
            raise EntryNotFound(path)
        with self._lock:
            try:
                return self._zip.read(path)
            except (zipfile.BadZipFile, zlib.error, NotImplementedError) as e:
                raise ArchiveError(f"Cannot read {path}: {e}") from e

    def read_text(self, path: str, encoding: str = "utf-8") -> str:
        """Return the decoded text of an entry.

        Raises:
            EntryNotFound: If the entry does not exist.
            MalformedXml: If the entry is not valid in ``encoding``.
        """
        try:
            return self.read_bytes(path).decode(encoding)
        except UnicodeDecodeError as e:
            raise MalformedXml(str(e), source=path) from e

    def close(self) -> None:
        self._zip.close()

    def __enter__(self) -> "Archive":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def open_archive(source: Union[bytes, bytearray, str, Path]) -> Archive:
    """Open a ZIP package from raw bytes or a filesystem path.

    Args:
        source: Package bytes, or a path to a package file.

    Returns:
        Archive over the package entries.

    Raises:
        ArchiveError: If the data is not a readable ZIP container.
    """
    if isinstance(source, (bytes, bytearray)):
        stream = io.BytesIO(bytes(source))
    else:
        path = Path(source)
        try:
            stream = io.BytesIO(path.read_bytes())
        except OSError as e:
            raise ArchiveError(f"Cannot read package {path}: {e}") from e

    try:
        zf = zipfile.ZipFile(stream)
    except (zipfile.BadZipFile, zipfile.LargeZipFile) as e:
        raise ArchiveError(f"Invalid package data: {e}") from e

    logger.debug(f"Opened package with {len(zf.namelist())} entries")
    return Archive(zf)
