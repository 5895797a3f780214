"""CLI entry point for the deck to video converter."""

import logging
import typer
from pathlib import Path
from typing import Optional

from . import __version__
from .config import Config
from .errors import DeckReelError, NoSlidesFound, ValidationError
from .models import VideoDocument

app = typer.Typer(
    name="deckreel",
    help="Convert slide decks into video timeline documents",
    no_args_is_help=True
)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"deckreel version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit"
    )
) -> None:
    """Deckreel - Turn presentations into declarative video timelines."""
    pass


def _load_document(script: Path) -> VideoDocument:
    """Load a document or exit with the reason it is unusable."""
    if not script.exists():
        typer.echo(f"❌ Script not found: {script}")
        raise typer.Exit(1)

    try:
        return VideoDocument.load(script)
    except ValidationError as e:
        typer.echo(f"❌ Invalid script: {script}")
        for violation in e.violations:
            typer.echo(f"   - {violation}")
        raise typer.Exit(1)
    except ValueError as e:
        typer.echo(f"❌ Could not parse {script}: {e}")
        raise typer.Exit(1)


@app.command()
def convert(
    deck: Path = typer.Argument(
        ...,
        help="Path to the .pptx file"
    ),
    output: Path = typer.Option(
        Path("assets/script.json"),
        "--output",
        "-o",
        help="Where to write the document (.json, .yaml or .yml)"
    ),
    fps: Optional[float] = typer.Option(
        None,
        "--fps",
        help="Frames per second",
        min=1
    ),
    duration: Optional[float] = typer.Option(
        None,
        "--duration",
        "-d",
        help="Seconds per slide"
    ),
    video_output: Optional[str] = typer.Option(
        None,
        "--video-output",
        help="Video path recorded in the document"
    ),
    image_dir: Optional[str] = typer.Option(
        None,
        "--image-dir",
        "-i",
        help="Directory for extracted slide images"
    ),
    cinematic: bool = typer.Option(
        True,
        "--cinematic/--static",
        help="Attach Ken Burns motion, text entrances and fade transitions"
    ),
    workers: Optional[int] = typer.Option(
        None,
        "--workers",
        "-w",
        help="Slides processed concurrently",
        min=1,
        max=32
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
) -> None:
    """Convert a PowerPoint deck into a video document."""
    from .deck import convert_package

    setup_logging(verbose)

    if not deck.exists():
        typer.echo(f"❌ File not found: {deck}")
        raise typer.Exit(1)

    if deck.suffix.lower() != ".pptx":
        typer.echo("❌ File must have a .pptx extension")
        raise typer.Exit(1)

    # pydantic reports invalid environment values as a ValueError.
    try:
        config = Config()
        config.validate_paths()
        options = config.conversion_options(
            fps=fps,
            slide_duration=duration,
            output_video=video_output,
            image_dir=image_dir,
            cinematic=cinematic,
            workers=workers,
        )
    except ValueError as e:
        typer.echo(f"❌ Configuration error: {e}")
        raise typer.Exit(1)

    typer.echo(f"🎞️  Parsing {deck.name}...")

    try:
        document = convert_package(deck, options)
    except NoSlidesFound as e:
        typer.echo(f"❌ {e}")
        typer.echo("   The deck has no slides, or its slide list is damaged")
        raise typer.Exit(1)
    except DeckReelError as e:
        typer.echo(f"❌ {e}")
        raise typer.Exit(1)

    try:
        document.save(output)
    except OSError as e:
        typer.echo(f"❌ Error saving document: {e}")
        raise typer.Exit(1)

    typer.echo(f"✅ {len(document.scenes)} scenes written to {output}")
    typer.echo(f"   Images: {options.image_dir}")
    typer.echo(f"\nNext step:")
    typer.echo(f"   deckreel status {output}")


@app.command()
def validate(
    script: Path = typer.Argument(
        ...,
        help="Path to a JSON or YAML document"
    )
) -> None:
    """Validate a video document."""
    document = _load_document(script)
    typer.echo(f"✅ Valid document: {len(document.scenes)} scenes")


@app.command()
def status(
    script: Path = typer.Argument(
        Path("assets/script.json"),
        help="Path to a JSON or YAML document"
    )
) -> None:
    """Show document timing and scene breakdown."""
    from .timeline import schedule

    document = _load_document(script)
    timeline = schedule(document)

    typer.echo(f"📁 Document: {script}")
    typer.echo(f"   Output: {document.output}")
    typer.echo(f"   Size: {document.width}x{document.height} @ {document.fps:g} fps")
    typer.echo(f"   Cinematic: {'yes' if document.cinematic else 'no'}")
    typer.echo(f"   Scenes: {len(document.scenes)}")
    typer.echo(f"   Total duration: {document.total_duration:.1f}s")
    typer.echo(f"   Total frames: {timeline.total_frames}")
    typer.echo(f"   Rendered frames: {timeline.rendered_frames} "
               f"({timeline.overlap_frames} in transitions)")

    typer.echo("\n📽️  Scenes:")
    for segment in timeline.scenes:
        scene = segment.scene
        label = scene.text if scene.type == "text" else scene.src
        preview = label[:60] + "..." if len(label) > 60 else label
        typer.echo(f"   [{segment.index + 1}] {scene.type}: {scene.duration:g}s "
                   f"(frames {segment.start}-{segment.end})")
        typer.echo(f"      → {preview}")

    if timeline.transitions:
        typer.echo("\n🔀 Transitions:")
        for transition in timeline.transitions:
            direction = f" {transition.direction.value}" if transition.direction else ""
            typer.echo(f"   {transition.after + 1} → {transition.after + 2}: "
                       f"{transition.kind.value}{direction}, {transition.frames} frames")


if __name__ == "__main__":
    app()
