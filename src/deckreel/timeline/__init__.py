"""Frame timing, motion curves and transition layout."""

from .frames import to_frames, frame_window, total_frames
from .curves import (
    lerp,
    clamp01,
    ease_out_cubic,
    progress,
    MotionSample,
    EntranceSample,
    ken_burns_at,
    entrance_at,
    scene_sample,
)
from .transitions import (
    TRANSITION_FRAMES,
    Direction,
    SceneSegment,
    TransitionSegment,
    Timeline,
    schedule,
)

__all__ = [
    # Frames
    "to_frames",
    "frame_window",
    "total_frames",
    # Curves
    "lerp",
    "clamp01",
    "ease_out_cubic",
    "progress",
    "MotionSample",
    "EntranceSample",
    "ken_burns_at",
    "entrance_at",
    "scene_sample",
    # Transitions
    "TRANSITION_FRAMES",
    "Direction",
    "SceneSegment",
    "TransitionSegment",
    "Timeline",
    "schedule",
]
