from __future__ import annotations

import io
import zipfile
from typing import Iterable

import pytest

P_NS = "http://schemas.openxmlformats.org/presentationml/2006/main"
A_NS = "http://schemas.openxmlformats.org/drawingml/2006/main"
R_NS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
REL_NS = "http://schemas.openxmlformats.org/package/2006/relationships"
SLIDE_TYPE = f"{R_NS}/slide"
IMAGE_TYPE = f"{R_NS}/image"

PNG_BYTES = bytes([0x89, 0x50, 0x4E, 0x47])


def presentation_xml(rel_ids: Iterable[str]) -> str:
    entries = "\n".join(
        f'    <p:sldId id="{256 + i}" r:id="{rid}"/>' for i, rid in enumerate(rel_ids)
    )
    return f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<p:presentation xmlns:p="{P_NS}" xmlns:r="{R_NS}">
  <p:sldIdLst>
{entries}
  </p:sldIdLst>
</p:presentation>"""


def rels_xml(relationships: Iterable[tuple[str, str, str]]) -> str:
    entries = "\n".join(
        f'  <Relationship Id="{rid}" Type="{rtype}" Target="{target}"/>'
        for rid, rtype, target in relationships
    )
    return f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<Relationships xmlns="{REL_NS}">
{entries}
</Relationships>"""


def slide_xml(texts: Iterable[str] = (), embeds: Iterable[str] = ()) -> str:
    shapes = "\n".join(
        f"""      <p:sp>
        <p:txBody>
          <a:p><a:r><a:t>{text}</a:t></a:r></a:p>
        </p:txBody>
      </p:sp>"""
        for text in texts
    )
    pictures = "\n".join(
        f"""      <p:pic>
        <p:blipFill>
          <a:blip r:embed="{embed}"/>
        </p:blipFill>
      </p:pic>"""
        for embed in embeds
    )
    return f"""<?xml version="1.0" encoding="UTF-8" standalone="yes"?>
<p:sld xmlns:p="{P_NS}" xmlns:a="{A_NS}" xmlns:r="{R_NS}">
  <p:cSld>
    <p:spTree>
{shapes}
{pictures}
    </p:spTree>
  </p:cSld>
</p:sld>"""


def make_package(files: dict[str, str | bytes]) -> bytes:
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as zf:
        for name, content in files.items():
            zf.writestr(name, content)
    return buffer.getvalue()


def two_slide_files() -> dict[str, str | bytes]:
    """Slide 1 has an image and a title, slide 2 only text."""
    return {
        "ppt/presentation.xml": presentation_xml(["rId2", "rId3"]),
        "ppt/_rels/presentation.xml.rels": rels_xml([
            ("rId2", SLIDE_TYPE, "slides/slide1.xml"),
            ("rId3", SLIDE_TYPE, "slides/slide2.xml"),
        ]),
        "ppt/slides/slide1.xml": slide_xml(["Slide One Title"], ["rId1"]),
        "ppt/slides/_rels/slide1.xml.rels": rels_xml([
            ("rId1", IMAGE_TYPE, "../media/image1.png"),
        ]),
        "ppt/slides/slide2.xml": slide_xml(["Slide Two Content"]),
        "ppt/slides/_rels/slide2.xml.rels": rels_xml([]),
        "ppt/media/image1.png": PNG_BYTES,
    }


@pytest.fixture
def two_slide_deck() -> bytes:
    return make_package(two_slide_files())


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from an empty directory so relative media paths land there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
