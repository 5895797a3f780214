"""Conversion options and cinematic defaults."""

from enum import Enum

from pydantic import Field

from .scene import Animation, DocumentModel, KenBurns, Transition


class MediaReference(str, Enum):
    """How materialized media is referenced from the document."""
    PATH = "path"
    NAME = "name"


class ConversionOptions(DocumentModel):
    """Options recognized by deck conversion.

    Accepts both camelCase keys (``slideDuration``) and field names.
    """

    fps: float = Field(default=30, gt=0)
    slide_duration: float = Field(default=5, gt=0, description="Seconds per slide")
    output_video: str = Field(default="out/video.mp4")
    cinematic: bool = Field(default=True)
    image_dir: str = Field(default="assets", min_length=1)
    workers: int = Field(default=1, ge=1, description="Slides processed concurrently")
    media_reference: MediaReference = Field(default=MediaReference.PATH)


class CinematicDefaults(DocumentModel):
    """Motion settings attached to scenes in a cinematic build."""

    ken_burns: KenBurns = Field(default_factory=KenBurns)
    text_animation: Animation = Field(default_factory=Animation)
    transition: Transition = Field(default=Transition.FADE)


DEFAULT_CINEMATIC = CinematicDefaults()
