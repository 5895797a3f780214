import pytest

from deckreel.deck import build_document, convert_package, open_archive
from deckreel.errors import ArchiveError, MediaNotFound, NoSlidesFound
from deckreel.models import (
    Animation,
    CinematicDefaults,
    ConversionOptions,
    Entrance,
    ImageScene,
    KenBurns,
    TextScene,
    Transition,
    VideoDocument,
    validate_document,
)

from conftest import (
    IMAGE_TYPE,
    PNG_BYTES,
    SLIDE_TYPE,
    make_package,
    presentation_xml,
    rels_xml,
    slide_xml,
    two_slide_files,
)


def test_one_scene_per_slide_in_order(two_slide_deck, workdir) -> None:
    document = convert_package(two_slide_deck)

    assert isinstance(document, VideoDocument)
    assert [scene.type for scene in document.scenes] == ["image", "text"]


def test_image_scene_is_captioned_with_slide_text(two_slide_deck, workdir) -> None:
    scene = convert_package(two_slide_deck).scenes[0]

    assert isinstance(scene, ImageScene)
    assert len(scene.overlays) >= 1
    assert "Slide One Title" in scene.overlays[0].text
    assert scene.overlays[0].top == "85%"


def test_image_is_materialized_under_image_dir(two_slide_deck, workdir) -> None:
    scene = convert_package(two_slide_deck).scenes[0]

    assert scene.src == "assets/slide1.png"
    assert (workdir / "assets" / "slide1.png").read_bytes() == PNG_BYTES


def test_media_reference_by_name(two_slide_deck, workdir) -> None:
    options = ConversionOptions(imageDir="public", mediaReference="name")

    scene = convert_package(two_slide_deck, options).scenes[0]

    assert scene.src == "slide1.png"
    assert (workdir / "public" / "slide1.png").exists()


def test_dest_root_changes_write_location_only(two_slide_deck, tmp_path) -> None:
    scene = convert_package(two_slide_deck, dest_root=tmp_path).scenes[0]

    assert scene.src == "assets/slide1.png"
    assert (tmp_path / "assets" / "slide1.png").exists()


def test_text_scene_contains_slide_text(two_slide_deck, workdir) -> None:
    scene = convert_package(two_slide_deck).scenes[1]

    assert isinstance(scene, TextScene)
    assert "Slide Two Content" in scene.text
    assert scene.font_size == 80
    assert scene.color == "#ffffff"
    assert scene.background == "#0f0f1a"


def test_cinematic_build(two_slide_deck, workdir) -> None:
    document = convert_package(two_slide_deck, ConversionOptions(cinematic=True))

    assert document.cinematic is True
    assert all(scene.transition == Transition.FADE for scene in document.scenes)
    assert document.scenes[0].ken_burns.zoom_to == 1.08
    assert document.scenes[1].text_animation.entrance == Entrance.FADE_UP


def test_cinematic_is_the_default(two_slide_deck, workdir) -> None:
    document = convert_package(two_slide_deck)

    assert document.cinematic is True
    assert document.scenes[0].ken_burns is not None


def test_static_build(two_slide_deck, workdir) -> None:
    document = convert_package(two_slide_deck, ConversionOptions(cinematic=False))

    assert document.cinematic is False
    assert all(scene.transition == Transition.NONE for scene in document.scenes)
    assert document.scenes[0].ken_burns is None
    assert document.scenes[1].text_animation is None


def test_substitute_cinematic_defaults(two_slide_deck, workdir) -> None:
    defaults = CinematicDefaults(
        ken_burns=KenBurns(zoom_to=1.5),
        text_animation=Animation(entrance=Entrance.SCALE_IN, duration_frames=10),
        transition=Transition.WIPE,
    )

    document = convert_package(two_slide_deck, defaults=defaults)

    assert document.scenes[0].ken_burns.zoom_to == 1.5
    assert document.scenes[1].text_animation.entrance == Entrance.SCALE_IN
    assert document.scenes[1].text_animation.duration_frames == 10
    assert all(scene.transition == Transition.WIPE for scene in document.scenes)


def test_options_flow_into_document(two_slide_deck, workdir) -> None:
    options = ConversionOptions(fps=24, slideDuration=8, outputVideo="out/ad.mp4")

    document = convert_package(two_slide_deck, options)

    assert document.fps == 24
    assert document.output == "out/ad.mp4"
    assert (document.width, document.height) == (1920, 1080)
    assert all(scene.duration == 8 for scene in document.scenes)


def test_empty_slide_gets_numbered_title(workdir) -> None:
    files = two_slide_files()
    files["ppt/slides/slide2.xml"] = slide_xml([])

    document = convert_package(make_package(files))

    assert document.scenes[1].text == "Slide 2"


def test_texts_joined_with_single_space(workdir) -> None:
    files = two_slide_files()
    files["ppt/slides/slide2.xml"] = slide_xml(["Hello", "World"])

    document = convert_package(make_package(files))

    assert document.scenes[1].text == "Hello World"


def test_dangling_image_reference_becomes_text_scene(workdir) -> None:
    files = two_slide_files()
    del files["ppt/slides/_rels/slide1.xml.rels"]

    document = convert_package(make_package(files))

    assert [scene.type for scene in document.scenes] == ["text", "text"]
    assert document.scenes[0].text == "Slide One Title"


def test_missing_slide_part_becomes_numbered_text_scene(workdir) -> None:
    files = two_slide_files()
    del files["ppt/slides/slide2.xml"]

    document = convert_package(make_package(files))

    assert [scene.type for scene in document.scenes] == ["image", "text"]
    assert document.scenes[1].text == "Slide 2"


def test_missing_media_bytes_abort_conversion(workdir) -> None:
    files = two_slide_files()
    del files["ppt/media/image1.png"]

    with pytest.raises(MediaNotFound):
        convert_package(make_package(files))


def test_no_slides_aborts_conversion(workdir) -> None:
    files = two_slide_files()
    files["ppt/presentation.xml"] = presentation_xml([])

    with pytest.raises(NoSlidesFound):
        convert_package(make_package(files))


def test_invalid_container_aborts_conversion() -> None:
    with pytest.raises(ArchiveError):
        convert_package(b"not a zip")


def test_parallel_build_keeps_deck_order(workdir) -> None:
    count = 8
    files = {
        "ppt/presentation.xml": presentation_xml([f"rId{i + 10}" for i in range(count)]),
        "ppt/_rels/presentation.xml.rels": rels_xml([
            (f"rId{i + 10}", SLIDE_TYPE, f"slides/slide{i + 1}.xml") for i in range(count)
        ]),
    }
    for i in range(count):
        n = i + 1
        if n % 2:
            files[f"ppt/slides/slide{n}.xml"] = slide_xml([f"Caption {n}"], ["rId1"])
            files[f"ppt/slides/_rels/slide{n}.xml.rels"] = rels_xml([
                ("rId1", IMAGE_TYPE, f"../media/image{n}.png"),
            ])
            files[f"ppt/media/image{n}.png"] = bytes([n])
        else:
            files[f"ppt/slides/slide{n}.xml"] = slide_xml([f"Text {n}"])

    document = convert_package(make_package(files), ConversionOptions(workers=4))

    assert len(document.scenes) == count
    for i, scene in enumerate(document.scenes):
        n = i + 1
        if n % 2:
            assert scene.src == f"assets/slide{n}.png"
            assert scene.overlays[0].text == f"Caption {n}"
            assert (workdir / "assets" / f"slide{n}.png").read_bytes() == bytes([n])
        else:
            assert scene.text == f"Text {n}"


def test_build_from_open_archive(two_slide_deck, workdir) -> None:
    with open_archive(two_slide_deck) as archive:
        document = build_document(archive, ConversionOptions(cinematic=False))

    assert validate_document(document) == document
