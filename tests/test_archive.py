import pytest

from deckreel.deck import open_archive
from deckreel.errors import ArchiveError, EntryNotFound, MalformedXml

from conftest import make_package


def test_open_from_bytes_reads_text_and_bytes() -> None:
    archive = open_archive(make_package({"a.xml": "<a/>", "b.bin": b"\x00\x01"}))

    assert archive.read_text("a.xml") == "<a/>"
    assert archive.read_bytes("b.bin") == b"\x00\x01"
    assert "a.xml" in archive
    assert archive.names == frozenset({"a.xml", "b.bin"})


def test_open_from_path(tmp_path) -> None:
    path = tmp_path / "deck.pptx"
    path.write_bytes(make_package({"a.xml": "<a/>"}))

    with open_archive(path) as archive:
        assert archive.read_text("a.xml") == "<a/>"


def test_malformed_container_raises_archive_error() -> None:
    with pytest.raises(ArchiveError) as exc_info:
        open_archive(b"definitely not a zip file")

    assert exc_info.value.code == "ARCHIVE_ERROR"
    assert exc_info.value.__cause__ is not None


def test_unreadable_path_raises_archive_error(tmp_path) -> None:
    with pytest.raises(ArchiveError):
        open_archive(tmp_path / "missing.pptx")


def test_missing_entry_raises_entry_not_found() -> None:
    archive = open_archive(make_package({"a.xml": "<a/>"}))

    with pytest.raises(EntryNotFound) as exc_info:
        archive.read_text("ppt/presentation.xml")

    assert exc_info.value.path == "ppt/presentation.xml"
    with pytest.raises(EntryNotFound):
        archive.read_bytes("nope.bin")


def test_corrupt_entry_raises_archive_error() -> None:
    data = make_package({"ppt/slides/slide1.xml": "<a>hello</a>"})
    corrupted = data.replace(b"hello", b"jello")
    archive = open_archive(corrupted)

    with pytest.raises(ArchiveError) as exc_info:
        archive.read_bytes("ppt/slides/slide1.xml")

    assert "ppt/slides/slide1.xml" in str(exc_info.value)


def test_undecodable_text_raises_malformed_xml() -> None:
    archive = open_archive(make_package({"a.xml": b"<a>\xff</a>"}))

    with pytest.raises(MalformedXml) as exc_info:
        archive.read_text("a.xml")

    assert exc_info.value.source == "a.xml"
