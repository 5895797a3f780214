"""Data models for the video document."""

from .scene import (
    Animation,
    Entrance,
    ImageScene,
    KenBurns,
    Overlay,
    Scene,
    TextScene,
    Transition,
    VideoScene,
)
from .document import VideoDocument, validate_document
from .options import DEFAULT_CINEMATIC, CinematicDefaults, ConversionOptions, MediaReference

__all__ = [
    # Scenes
    "Animation",
    "Entrance",
    "ImageScene",
    "KenBurns",
    "Overlay",
    "Scene",
    "TextScene",
    "Transition",
    "VideoScene",
    # Document
    "VideoDocument",
    "validate_document",
    # Options
    "CinematicDefaults",
    "ConversionOptions",
    "DEFAULT_CINEMATIC",
    "MediaReference",
]
