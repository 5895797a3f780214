"""Scene data models."""

from enum import Enum
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

HEX_COLOR_PATTERN = r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"
PERCENT_PATTERN = r"^-?\d+(?:\.\d+)?%$"


class DocumentModel(BaseModel):
    """Base for all document models.

    Fields are snake_case in Python and camelCase on the wire. Instances
    are immutable once validated.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class Transition(str, Enum):
    """Transition played between a scene and the next one."""
    NONE = "none"
    FADE = "fade"
    SLIDE = "slide"
    WIPE = "wipe"


class Entrance(str, Enum):
    """Entrance effect for text scenes."""
    FADE_UP = "fadeUp"
    SCALE_IN = "scaleIn"
    NONE = "none"


class Overlay(DocumentModel):
    """Caption drawn on top of an image scene."""

    text: str = Field(..., description="Caption text")
    font_size: Optional[float] = Field(None, gt=0, description="Caption font size")
    color: str = Field(default="#ffffff", pattern=HEX_COLOR_PATTERN)
    top: str = Field(default="85%", pattern=PERCENT_PATTERN)
    left: str = Field(default="10%", pattern=PERCENT_PATTERN)


class KenBurns(DocumentModel):
    """Linear zoom/pan applied across an image scene's full duration.

    Pan values are percentages of the frame size.
    """

    zoom_from: float = Field(default=1.0, gt=0)
    zoom_to: float = Field(default=1.08, gt=0)
    pan_x_from: float = 0.0
    pan_x_to: float = 2.0
    pan_y_from: float = 0.0
    pan_y_to: float = 1.0


class Animation(DocumentModel):
    """Entrance effect played over the first frames of a text scene."""

    entrance: Entrance = Field(default=Entrance.FADE_UP)
    duration_frames: int = Field(default=20, gt=0, description="Entrance length in frames")


class SceneBase(DocumentModel):
    """Fields shared by every scene variant."""

    duration: float = Field(..., gt=0, description="Scene duration in seconds")
    transition: Transition = Field(default=Transition.NONE)


class TextScene(SceneBase):
    """Full-frame text card."""

    type: Literal["text"] = "text"
    text: str = Field(..., min_length=1)
    font_size: float = Field(default=80, gt=0)
    color: str = Field(default="#ffffff", pattern=HEX_COLOR_PATTERN)
    background: str = Field(default="#000000", pattern=HEX_COLOR_PATTERN)
    text_animation: Optional[Animation] = None


class ImageScene(SceneBase):
    """Still image with optional captions and Ken Burns motion."""

    type: Literal["image"] = "image"
    src: str = Field(..., min_length=1, description="Image reference")
    overlays: Optional[tuple[Overlay, ...]] = None
    ken_burns: Optional[KenBurns] = None


class VideoScene(SceneBase):
    """Video clip."""

    type: Literal["video"] = "video"
    src: str = Field(..., min_length=1, description="Video reference")
    volume: float = Field(default=1.0, ge=0, le=1)


Scene = Annotated[
    Union[TextScene, ImageScene, VideoScene],
    Field(discriminator="type"),
]

SCENE_TYPES = frozenset({"text", "image", "video"})
