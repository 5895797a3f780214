"""Frame counts derived from scene durations."""

import math

from ..models import Scene, VideoDocument


def to_frames(seconds: float, fps: float) -> int:
    """Convert seconds to a whole frame count, rounding halves up."""
    return int(math.floor(seconds * fps + 0.5))


def frame_window(scene: Scene, fps: float) -> int:
    """Number of frames a scene occupies on its own."""
    return to_frames(scene.duration, fps)


def total_frames(document: VideoDocument) -> int:
    """Composition length: the summed scene durations times fps, rounded.

    Transition overlaps are not subtracted; see ``Timeline.rendered_frames``
    for the laid-out length.
    """
    return to_frames(document.total_duration, document.fps)
