"""Error taxonomy for deck conversion and document validation."""

from dataclasses import dataclass
from typing import Optional


class DeckReelError(Exception):
    """Base error with a stable error code."""

    code = "DECKREEL_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class ArchiveError(DeckReelError):
    """The container could not be opened as a ZIP archive."""

    code = "ARCHIVE_ERROR"


class EntryNotFound(DeckReelError):
    """An expected internal path is missing from the archive."""

    code = "ENTRY_NOT_FOUND"

    def __init__(self, path: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"Not found in package: {path}")
        self.path = path


class MalformedXml(DeckReelError):
    """An XML part could not be parsed."""

    code = "MALFORMED_XML"

    def __init__(self, message: str, source: Optional[str] = None) -> None:
        super().__init__(f"{source}: {message}" if source else message)
        self.source = source


class NoSlidesFound(DeckReelError):
    """The manifest lists no slides that resolve to a slide part."""

    code = "NO_SLIDES"

    def __init__(self, message: str = "No slides found in presentation.xml") -> None:
        super().__init__(message)


class MediaNotFound(DeckReelError):
    """A resolved image reference points at bytes that are not in the package."""

    code = "MEDIA_NOT_FOUND"

    def __init__(self, path: str) -> None:
        super().__init__(f"Media not found in package: {path}")
        self.path = path


@dataclass(frozen=True)
class Violation:
    """A single field-level schema violation."""

    path: str
    message: str
    kind: str = "value_error"

    def __str__(self) -> str:
        return f"{self.path or '<root>'}: {self.message}"


class ValidationError(DeckReelError):
    """A document failed schema validation.

    Carries every violation found, not just the first one.
    """

    code = "VALIDATION_ERROR"

    def __init__(self, violations: list[Violation]) -> None:
        self.violations = list(violations)
        lines = "\n".join(f"  - {v}" for v in self.violations)
        super().__init__(
            f"Invalid document ({len(self.violations)} violation(s)):\n{lines}"
        )

    @property
    def paths(self) -> list[str]:
        """Return the dotted field paths of all violations."""
        return [v.path for v in self.violations]

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["violations"] = [
            {"path": v.path, "message": v.message, "kind": v.kind}
            for v in self.violations
        ]
        return data
