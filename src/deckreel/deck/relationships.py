"""Relationship part resolution."""

import logging
import posixpath

from .archive import Archive
from .xmltree import Element, decode

logger = logging.getLogger(__name__)

SLIDE_KIND = "slide"
IMAGE_KIND = "image"


def _strip_dot_slash(target: str) -> str:
    while target.startswith("./"):
        target = target[2:]
    return target


def resolve_relationships(rels: Element, kind: str) -> dict[str, str]:
    """Map relationship ids to targets for one relationship kind.

    Only direct children of the relationships root are considered. An
    entry matches when its Type contains ``kind``. When an id repeats,
    the last matching entry wins.

    Args:
        rels: Decoded relationships root.
        kind: Substring the relationship Type must contain.

    Returns:
        Mapping from id to target with any leading ``./`` removed.
    """
    mapping: dict[str, str] = {}
    for rel in rels.find_all("Relationship"):
        rel_id = rel.get("Id")
        rel_type = rel.get("Type", "")
        if rel_id and kind in rel_type:
            if rel_id in mapping:
                logger.debug(f"Relationship {rel_id} redefined, keeping last target")
            mapping[rel_id] = _strip_dot_slash(rel.get("Target", ""))
    return mapping


def read_relationships(archive: Archive, rels_path: str, kind: str) -> dict[str, str]:
    """Decode a relationship part from the archive and resolve it.

    Raises:
        EntryNotFound: If the relationship part is missing.
        MalformedXml: If it cannot be parsed.
    """
    rels = decode(archive.read_bytes(rels_path), source=rels_path)
    return resolve_relationships(rels, kind)


def rels_path_for(part_path: str) -> str:
    """Return the relationship part path of a package part.

    ``ppt/slides/slide1.xml`` -> ``ppt/slides/_rels/slide1.xml.rels``
    """
    directory, name = posixpath.split(part_path)
    return posixpath.join(directory, "_rels", f"{name}.rels")


def resolve_part_path(source_part: str, target: str) -> str:
    """Resolve a relationship target against the part that declares it.

    Targets starting with ``/`` are package-absolute; others are
    relative to the directory of ``source_part``.
    """
    if target.startswith("/"):
        return posixpath.normpath(target.lstrip("/"))
    base = posixpath.dirname(source_part)
    return posixpath.normpath(posixpath.join(base, target))
