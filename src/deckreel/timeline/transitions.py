"""Scene layout with overlapping transitions."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from ..models import Transition, VideoDocument
from .frames import frame_window, total_frames

logger = logging.getLogger(__name__)

TRANSITION_FRAMES = 15


class Direction(str, Enum):
    """Edge a directional transition enters from."""
    FROM_RIGHT = "from-right"
    FROM_LEFT = "from-left"


TRANSITION_DIRECTIONS = {
    Transition.SLIDE: Direction.FROM_RIGHT,
    Transition.WIPE: Direction.FROM_LEFT,
}


@dataclass(frozen=True)
class SceneSegment:
    """A scene placed on the global frame axis."""

    index: int
    scene: Any
    start: int
    frames: int

    @property
    def end(self) -> int:
        return self.start + self.frames

    def contains(self, frame: int) -> bool:
        return self.start <= frame < self.end


@dataclass(frozen=True)
class TransitionSegment:
    """Overlap between scene ``after`` and the scene that follows it."""

    after: int
    kind: Transition
    direction: Optional[Direction]
    start: int
    frames: int

    @property
    def end(self) -> int:
        return self.start + self.frames

    def contains(self, frame: int) -> bool:
        return self.start <= frame < self.end

    def progress(self, frame: int) -> float:
        """Linear 0..1 progress of the transition at a global frame."""
        return max(0.0, min(1.0, (frame - self.start) / self.frames))


@dataclass(frozen=True)
class Timeline:
    """Read-only layout of a document on the frame axis."""

    scenes: tuple[SceneSegment, ...]
    transitions: tuple[TransitionSegment, ...]
    total_frames: int

    @property
    def scene_frames(self) -> int:
        """Sum of the individual scene windows."""
        return sum(s.frames for s in self.scenes)

    @property
    def overlap_frames(self) -> int:
        return sum(t.frames for t in self.transitions)

    @property
    def rendered_frames(self) -> int:
        """Length of the laid-out timeline, overlaps removed."""
        return self.scene_frames - self.overlap_frames

    def active_at(self, frame: int) -> list[tuple[SceneSegment, int]]:
        """Scenes visible at a global frame, with their local frame index."""
        return [(s, frame - s.start) for s in self.scenes if s.contains(frame)]

    def transition_at(self, frame: int) -> Optional[TransitionSegment]:
        for transition in self.transitions:
            if transition.contains(frame):
                return transition
        return None


def schedule(document: VideoDocument, transition_frames: int = TRANSITION_FRAMES) -> Timeline:
    """Lay out scenes, overlapping neighbours joined by a transition.

    A scene's transition applies between it and the next scene; the
    last scene's transition is unused. Each transition overlaps both
    scenes by ``transition_frames``, shortened so that no scene is
    overlapped for longer than its own window and transitions never
    overlap each other.

    Args:
        document: Validated document.
        transition_frames: Overlap length of every transition.

    Returns:
        Timeline with scene and transition segments.
    """
    scenes: list[SceneSegment] = []
    transitions: list[TransitionSegment] = []
    cursor = 0
    incoming = 0

    for index, scene in enumerate(document.scenes):
        frames = frame_window(scene, document.fps)
        start = cursor

        if scenes and scenes[-1].scene.transition != Transition.NONE:
            previous = scenes[-1]
            kind = Transition(previous.scene.transition)
            # Part of the previous scene may already be covered by its incoming transition.
            overlap = max(0, min(transition_frames, previous.frames - incoming, frames))
            if overlap < transition_frames:
                logger.warning(
                    f"Transition after scene {previous.index} shortened to {overlap} frame(s)"
                )
            if overlap > 0:
                start = cursor - overlap
                transitions.append(TransitionSegment(
                    after=previous.index,
                    kind=kind,
                    direction=TRANSITION_DIRECTIONS.get(kind),
                    start=start,
                    frames=overlap,
                ))

        scenes.append(SceneSegment(index=index, scene=scene, start=start, frames=frames))
        incoming = cursor - start
        cursor = start + frames

    return Timeline(
        scenes=tuple(scenes),
        transitions=tuple(transitions),
        total_frames=total_frames(document),
    )
