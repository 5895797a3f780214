"""Slide deck to video timeline converter."""

__version__ = "0.1.0"

from .errors import (
    DeckReelError,
    ArchiveError,
    EntryNotFound,
    MalformedXml,
    NoSlidesFound,
    MediaNotFound,
    ValidationError,
)
from .models import VideoDocument, ConversionOptions, validate_document
from .deck import convert_package, build_document
from .timeline import total_frames, schedule

__all__ = [
    "__version__",
    "DeckReelError",
    "ArchiveError",
    "EntryNotFound",
    "MalformedXml",
    "NoSlidesFound",
    "MediaNotFound",
    "ValidationError",
    "VideoDocument",
    "ConversionOptions",
    "validate_document",
    "convert_package",
    "build_document",
    "total_frames",
    "schedule",
]
