"""Copy embedded media out of the package."""

import logging
import posixpath
from pathlib import Path
from typing import Union

from ..errors import MediaNotFound
from .archive import Archive

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".png"


def materialize(
    archive: Archive,
    media_path: str,
    dest_dir: Union[str, Path],
    base_name: str,
) -> str:
    """Write one media entry to ``dest_dir/base_name<ext>``.

    Args:
        archive: Source package.
        media_path: Package path of the media entry.
        dest_dir: Output directory, created if absent.
        base_name: File name without extension.

    Returns:
        The written file name.

    Raises:
        MediaNotFound: If the entry is not in the package.
    """
    if media_path not in archive:
        raise MediaNotFound(media_path)

    ext = posixpath.splitext(media_path)[1] or DEFAULT_EXTENSION
    filename = f"{base_name}{ext}"

    dest = Path(dest_dir)
    dest.mkdir(parents=True, exist_ok=True)
    target = dest / filename
    target.write_bytes(archive.read_bytes(media_path))

    logger.debug(f"Wrote {media_path} -> {target}")
    return filename
