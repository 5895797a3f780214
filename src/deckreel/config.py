"""Configuration management."""

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

from .models import ConversionOptions, MediaReference

# Load environment variables
load_dotenv()


class Config(BaseModel):
    """Application configuration.

    Environment values are passed through as strings and coerced and
    checked like any other field value.

    Raises:
        pydantic.ValidationError: On construction, if an environment
            value is not valid for its field.
    """

    model_config = ConfigDict(validate_default=True)

    # Conversion defaults
    fps: float = Field(
        default_factory=lambda: os.getenv("DECKREEL_FPS", "30"),
        description="Frames per second of converted documents",
        gt=0,
    )
    slide_duration: float = Field(
        default_factory=lambda: os.getenv("DECKREEL_SLIDE_DURATION", "5"),
        description="Seconds each slide stays on screen",
        gt=0,
    )
    output_video: str = Field(
        default_factory=lambda: os.getenv("DECKREEL_OUTPUT_VIDEO", "out/video.mp4"),
        description="Video path written into converted documents",
    )

    # Media
    image_dir: Path = Field(
        default_factory=lambda: os.getenv("DECKREEL_IMAGE_DIR", "assets"),
        description="Directory extracted slide images are written to",
    )
    media_reference: MediaReference = Field(
        default_factory=lambda: os.getenv("DECKREEL_MEDIA_REFERENCE", "path"),
        description="Reference images by relative path or bare file name",
    )

    # Processing
    workers: int = Field(
        default_factory=lambda: os.getenv("DECKREEL_WORKERS", "1"),
        description="Slides processed concurrently",
        ge=1,
    )

    def validate_paths(self) -> None:
        """Validate that the image directory can be created.

        Raises:
            ValueError: If the image directory path is an existing file.
        """
        if self.image_dir.exists() and not self.image_dir.is_dir():
            raise ValueError(
                f"DECKREEL_IMAGE_DIR must be a directory. Got existing file: {self.image_dir}"
            )

    def conversion_options(self, **overrides: Any) -> ConversionOptions:
        """Build conversion options from configured defaults.

        Args:
            **overrides: Option values that replace the defaults. None
                values are ignored.

        Returns:
            ConversionOptions for a deck conversion.
        """
        values: dict[str, Any] = {
            "fps": self.fps,
            "slide_duration": self.slide_duration,
            "output_video": self.output_video,
            "image_dir": self.image_dir.as_posix(),
            "media_reference": self.media_reference,
            "workers": self.workers,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ConversionOptions(**values)

