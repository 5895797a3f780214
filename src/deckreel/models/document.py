"""Video document model and validation gate."""

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

import yaml
from pydantic import Field
from pydantic import ValidationError as PydanticValidationError

from ..errors import ValidationError, Violation
from .scene import SCENE_TYPES, DocumentModel, Scene

logger = logging.getLogger(__name__)


class VideoDocument(DocumentModel):
    """Declarative timeline consumed by the renderer.

    Field names on the wire are part of the renderer contract and must
    not change without a version note.
    """

    fps: float = Field(default=30, gt=0, description="Frames per second")
    width: int = Field(default=1920, gt=0, description="Frame width in pixels")
    height: int = Field(default=1080, gt=0, description="Frame height in pixels")
    output: str = Field(default="out/video.mp4", description="Output video path")
    cinematic: bool = Field(default=False, description="Cinematic defaults applied")
    scenes: tuple[Scene, ...] = Field(..., min_length=1, description="Ordered scenes")

    @property
    def total_duration(self) -> float:
        """Sum of all scene durations in seconds."""
        return sum(scene.duration for scene in self.scenes)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable wire shape."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> "VideoDocument":
        """Parse and validate a JSON document."""
        return validate_document(json.loads(text))

    @classmethod
    def from_yaml(cls, path: Path) -> "VideoDocument":
        """Load and validate a document from a YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML: {e}") from e
        return validate_document(data)

    def to_yaml(self, path: Path) -> None:
        """Save document to a YAML file."""
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load(cls, path: Path) -> "VideoDocument":
        """Load a document, choosing the format from the file suffix."""
        path = Path(path)
        if path.suffix.lower() in (".yaml", ".yml"):
            return cls.from_yaml(path)
        return cls.from_json(path.read_text(encoding="utf-8"))

    def save(self, path: Path) -> Path:
        """Write the document as JSON, or YAML for .yaml/.yml paths."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        if path.suffix.lower() in (".yaml", ".yml"):
            self.to_yaml(path)
        else:
            path.write_text(self.to_json(), encoding="utf-8")
        return path


def _field_path(loc: tuple) -> str:
    """Render a pydantic error location as a dotted wire path.

    The discriminator segment pydantic inserts after a scene index
    (``scenes.0.text.text``) is dropped so paths name real fields.
    """
    parts: list[str] = []
    for i, part in enumerate(loc):
        if (
            i >= 2
            and i < len(loc) - 1
            and loc[i - 2] == "scenes"
            and isinstance(loc[i - 1], int)
            and part in SCENE_TYPES
        ):
            continue
        parts.append(str(part))
    return ".".join(parts)


def _violations(error: PydanticValidationError) -> list[Violation]:
    return [
        Violation(path=_field_path(err["loc"]), message=err["msg"], kind=err["type"])
        for err in error.errors()
    ]


def validate_document(raw: Union[Mapping[str, Any], VideoDocument]) -> VideoDocument:
    """Apply defaults and check every constraint of a raw document.

    Args:
        raw: Mapping in wire shape, or an already validated document.

    Returns:
        Validated, immutable VideoDocument.

    Raises:
        ValidationError: With every field violation found.
    """
    if isinstance(raw, VideoDocument):
        raw = raw.to_dict()

    try:
        document = VideoDocument.model_validate(raw)
    except PydanticValidationError as e:
        violations = _violations(e)
        logger.debug(f"Document rejected with {len(violations)} violation(s)")
        raise ValidationError(violations) from e

    return document
