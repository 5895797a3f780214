"""Build a video document from a slide deck package."""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path, PurePosixPath
from typing import Any, Optional, Union

from ..models import (
    DEFAULT_CINEMATIC,
    CinematicDefaults,
    ConversionOptions,
    MediaReference,
    Transition,
    VideoDocument,
    validate_document,
)
from .archive import Archive, open_archive
from .media import materialize
from .slides import SlideContent, extract_content, resolve_slide_order

logger = logging.getLogger(__name__)

TEXT_BACKGROUND = "#0f0f1a"
CAPTION_POSITION = {"top": "85%", "left": "5%"}


def _media_reference(options: ConversionOptions, filename: str) -> str:
    if options.media_reference == MediaReference.NAME:
        return filename
    return str(PurePosixPath(options.image_dir) / filename)


def _build_scene(
    archive: Archive,
    index: int,
    slide_path: str,
    options: ConversionOptions,
    defaults: CinematicDefaults,
    media_dir: Path,
) -> dict[str, Any]:
    """Extract one slide and turn it into a raw scene mapping."""
    number = index + 1
    label = f"slide{number}"
    content: SlideContent = extract_content(archive, slide_path)
    title = " ".join(content.texts).strip() or f"Slide {number}"
    transition = defaults.transition if options.cinematic else Transition.NONE

    if content.image_target:
        filename = materialize(archive, content.image_target, media_dir, label)
        scene: dict[str, Any] = {
            "type": "image",
            "src": _media_reference(options, filename),
            "duration": options.slide_duration,
            "transition": transition,
            "overlays": (
                [{"text": title, **CAPTION_POSITION}]
                if title
                else []
            ),
        }
        if options.cinematic:
            scene["kenBurns"] = defaults.ken_burns.model_dump(by_alias=True)
        return scene

    scene = {
        "type": "text",
        "text": title,
        "duration": options.slide_duration,
        "transition": transition,
        "background": TEXT_BACKGROUND,
    }
    if options.cinematic:
        scene["textAnimation"] = defaults.text_animation.model_dump(by_alias=True)
    return scene


def build_document(
    archive: Archive,
    options: Optional[ConversionOptions] = None,
    defaults: CinematicDefaults = DEFAULT_CINEMATIC,
    dest_root: Optional[Union[str, Path]] = None,
) -> VideoDocument:
    """Convert an opened package into a validated document.

    One scene per slide, in deck order. Slides with a resolvable image
    become image scenes captioned with the slide text; other slides
    become text scenes.

    Args:
        archive: Opened package.
        options: Conversion options. Defaults to a cinematic build.
        defaults: Motion settings attached in cinematic builds.
        dest_root: Directory the image dir is created under. Only the
            write location changes, not the references in the document.

    Returns:
        Validated VideoDocument.

    Raises:
        DeckReelError: Any fatal conversion or validation failure.
    """
    options = options or ConversionOptions()
    slide_paths = resolve_slide_order(archive)
    media_dir = Path(dest_root or ".") / options.image_dir

    def build(item: tuple[int, str]) -> dict[str, Any]:
        index, slide_path = item
        return _build_scene(archive, index, slide_path, options, defaults, media_dir)

    items = list(enumerate(slide_paths))
    if options.workers > 1 and len(items) > 1:
        # map() yields in submission order, so deck order is kept.
        with ThreadPoolExecutor(max_workers=options.workers) as executor:
            scenes = list(executor.map(build, items))
    else:
        scenes = [build(item) for item in items]

    document = validate_document({
        "fps": options.fps,
        "width": 1920,
        "height": 1080,
        "output": options.output_video,
        "cinematic": options.cinematic,
        "scenes": scenes,
    })

    image_count = sum(1 for scene in document.scenes if scene.type == "image")
    logger.info(
        f"Built document: {len(document.scenes)} scene(s), {image_count} image(s), "
        f"cinematic={options.cinematic}"
    )
    return document


def convert_package(
    source: Union[bytes, str, Path],
    options: Optional[ConversionOptions] = None,
    defaults: CinematicDefaults = DEFAULT_CINEMATIC,
    dest_root: Optional[Union[str, Path]] = None,
) -> VideoDocument:
    """Open a package from bytes or a path and convert it.

    Raises:
        DeckReelError: Any fatal conversion or validation failure.
    """
    with open_archive(source) as archive:
        return build_document(archive, options, defaults=defaults, dest_root=dest_root)
