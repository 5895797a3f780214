"""Per-frame interpolation curves for scene motion."""

from dataclasses import dataclass
from typing import Optional, Union

from ..models import Animation, Entrance, ImageScene, KenBurns, Scene, TextScene, VideoScene
from .frames import frame_window

FADE_UP_OFFSET = 30.0
SCALE_IN_FROM = 0.85


def lerp(start: float, end: float, t: float) -> float:
    """Linear interpolation between two values."""
    return start + (end - start) * t


def clamp01(t: float) -> float:
    return max(0.0, min(1.0, t))


def ease_out_cubic(t: float) -> float:
    """Cubic ease-out: fast start, slow finish."""
    return 1.0 - (1.0 - t) ** 3


def progress(frame: float, length: float) -> float:
    """Clamped position of ``frame`` inside a window of ``length`` frames.

    An empty window counts as already complete.
    """
    if length <= 0:
        return 1.0
    return clamp01(frame / length)


@dataclass(frozen=True)
class MotionSample:
    """Ken Burns transform at one frame. Pan values are percentages."""

    zoom: float = 1.0
    pan_x: float = 0.0
    pan_y: float = 0.0


@dataclass(frozen=True)
class EntranceSample:
    """Text entrance state at one frame."""

    opacity: float = 1.0
    translate_y: float = 0.0
    scale: float = 1.0


SceneSample = Union[MotionSample, EntranceSample]


def ken_burns_at(ken_burns: KenBurns, frame: float, window: int) -> MotionSample:
    """Sample a Ken Burns motion at a frame of its scene window.

    Zoom and both pan axes are interpolated linearly and independently
    over the whole window.
    """
    t = progress(frame, window)
    return MotionSample(
        zoom=lerp(ken_burns.zoom_from, ken_burns.zoom_to, t),
        pan_x=lerp(ken_burns.pan_x_from, ken_burns.pan_x_to, t),
        pan_y=lerp(ken_burns.pan_y_from, ken_burns.pan_y_to, t),
    )


def entrance_at(animation: Optional[Animation], frame: float) -> EntranceSample:
    """Sample a text entrance at a frame from the start of its scene.

    The effect runs over ``animation.duration_frames``, not the scene
    duration. Opacity and the fade-up offset are eased; scale-in is
    linear.
    """
    if animation is None or animation.entrance == Entrance.NONE:
        return EntranceSample()

    t = progress(frame, animation.duration_frames)
    eased = ease_out_cubic(t)

    translate_y = 0.0
    scale = 1.0
    if animation.entrance == Entrance.FADE_UP:
        translate_y = lerp(FADE_UP_OFFSET, 0.0, eased)
    elif animation.entrance == Entrance.SCALE_IN:
        scale = lerp(SCALE_IN_FROM, 1.0, t)

    return EntranceSample(opacity=lerp(0.0, 1.0, eased), translate_y=translate_y, scale=scale)


def scene_sample(scene: Scene, frame: float, fps: float) -> SceneSample:
    """Sample the motion of any scene at a frame of its own window.

    Raises:
        ValueError: If the scene type is unknown.
    """
    if isinstance(scene, ImageScene):
        if scene.ken_burns is None:
            return MotionSample()
        return ken_burns_at(scene.ken_burns, frame, frame_window(scene, fps))
    elif isinstance(scene, TextScene):
        return entrance_at(scene.text_animation, frame)
    elif isinstance(scene, VideoScene):
        return MotionSample()
    raise ValueError(f"Unknown scene type: {getattr(scene, 'type', scene)!r}")
