"""Slide ordering and per-slide content extraction."""

import logging
from dataclasses import dataclass, field
from typing import Optional

from ..errors import EntryNotFound, NoSlidesFound
from .archive import Archive
from .relationships import (
    IMAGE_KIND,
    SLIDE_KIND,
    read_relationships,
    rels_path_for,
    resolve_part_path,
)
from .xmltree import attribute_value, collect, decode, element_text

logger = logging.getLogger(__name__)

PRESENTATION_PATH = "ppt/presentation.xml"
PRESENTATION_RELS_PATH = "ppt/_rels/presentation.xml.rels"

TEXT_RUN_TAG = "a:t"
EMBED_ATTRIBUTE = "r:embed"
RELATIONSHIP_ID_ATTRIBUTE = "r:id"


@dataclass(frozen=True)
class SlideContent:
    """Text and image extracted from one slide."""

    texts: list[str] = field(default_factory=list)
    image_target: Optional[str] = None


def resolve_slide_order(archive: Archive) -> list[str]:
    """Return slide part paths in deck order.

    Slide ids whose relationship id does not resolve are skipped.

    Raises:
        EntryNotFound: If the manifest or its relationship part is missing.
        MalformedXml: If either cannot be parsed.
        NoSlidesFound: If no slide resolves.
    """
    presentation = decode(archive.read_bytes(PRESENTATION_PATH), source=PRESENTATION_PATH)
    slide_targets = read_relationships(archive, PRESENTATION_RELS_PATH, SLIDE_KIND)

    id_list = presentation.find("p:sldIdLst")
    slide_ids = id_list.find_all("p:sldId") if id_list is not None else []
    if not slide_ids:
        raise NoSlidesFound()

    slide_paths: list[str] = []
    for slide_id in slide_ids:
        rel_id = slide_id.get(RELATIONSHIP_ID_ATTRIBUTE)
        target = slide_targets.get(rel_id) if rel_id else None
        if not target:
            logger.debug(f"Skipping slide id {slide_id.get('id')}: unresolved {rel_id!r}")
            continue
        slide_paths.append(resolve_part_path(PRESENTATION_PATH, target))

    if not slide_paths:
        raise NoSlidesFound("No slides in presentation.xml resolve to a slide part")

    logger.info(f"Resolved {len(slide_paths)} slide(s)")
    return slide_paths


def _resolve_image(archive: Archive, slide_path: str, embed_id: str) -> Optional[str]:
    rels_path = rels_path_for(slide_path)
    try:
        images = read_relationships(archive, rels_path, IMAGE_KIND)
    except EntryNotFound:
        logger.warning(f"{slide_path}: image {embed_id} referenced but {rels_path} is missing")
        return None

    target = images.get(embed_id)
    if not target:
        logger.warning(f"{slide_path}: image {embed_id} has no image relationship")
        return None
    return resolve_part_path(slide_path, target)


def extract_content(archive: Archive, slide_path: str) -> SlideContent:
    """Collect the text runs and first embedded image of a slide.

    Only the first image embed is used; further images are ignored. A
    dangling image reference leaves ``image_target`` unset, and a slide
    part missing from the package yields empty content.

    Raises:
        MalformedXml: If the slide or its relationship part cannot be parsed.
    """
    try:
        data = archive.read_bytes(slide_path)
    except EntryNotFound:
        logger.warning(f"{slide_path} is listed but missing from the package")
        return SlideContent()

    slide = decode(data, source=slide_path)

    texts = [t.strip() for t in collect(slide, element_text(TEXT_RUN_TAG))]
    texts = [t for t in texts if t]

    embed_ids = collect(slide, attribute_value(EMBED_ATTRIBUTE))
    image_target = _resolve_image(archive, slide_path, embed_ids[0]) if embed_ids else None

    logger.debug(f"{slide_path}: {len(texts)} text run(s), image={image_target}")
    return SlideContent(texts=texts, image_target=image_target)
