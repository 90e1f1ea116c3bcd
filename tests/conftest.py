"""
Test suite initialization for DocScreen.

This module provides the shared fixtures: configuration, sample texts
and factories building PDF and DOCX documents in memory.
"""

import io
import logging
import struct
import tempfile
import zipfile
from pathlib import Path
from xml.sax.saxutils import escape

import fitz
import pytest

from docscreen.models.document import ContentType, SourceDocument
from docscreen.utils.config import Config


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format='[TEST] %(levelname)s - %(name)s - %(message)s'
)


PAPER_TEXT = (
    "Adaptive irrigation scheduling for smallholder farms in semi-arid regions. "
    "Water scarcity limits crop yields across large parts of the Sahel, where most farms "
    "rely on rain-fed agriculture and manual irrigation. This study evaluates a low-cost "
    "soil moisture sensor network that schedules irrigation events according to measured "
    "field conditions rather than fixed calendars. Sensors were deployed on forty plots over "
    "two growing seasons, and irrigation volumes were logged by a cooperative of local farmers. "
    "Plots under sensor-based scheduling used thirty percent less water while maintaining "
    "comparable maize yields. The largest savings occurred during the early vegetative stage, "
    "when evaporation losses dominate. Farmers reported that the scheduling advice was easy to "
    "follow, although sensor maintenance required occasional support from extension officers. "
    "These findings suggest that inexpensive sensing can make irrigation advice accessible to "
    "farms that cannot afford commercial decision support systems. Future work will extend the "
    "network to sorghum and millet and study the durability of the sensors over several years."
)

ORIGINAL_TEXT = "Medieval guild records reveal how apprentices negotiated wages in port cities."


def build_docx(paragraphs):
    """Build a minimal DOCX archive holding the given paragraphs."""
    body = "".join(
        f'<w:p><w:r><w:t xml:space="preserve">{escape(text)}</w:t></w:r></w:p>'
        for text in paragraphs
    )
    document_xml = (
        '<?xml version="1.0" encoding="UTF-8" standalone="yes"?>'
        '<w:document xmlns:w="http://schemas.openxmlformats.org/wordprocessingml/2006/main">'
        f'<w:body>{body}</w:body></w:document>'
    )
    content_types = (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<Types xmlns="http://schemas.openxmlformats.org/package/2006/content-types">'
        '<Override PartName="/word/document.xml" ContentType="application/'
        'vnd.openxmlformats-officedocument.wordprocessingml.document.main+xml"/>'
        '</Types>'
    )
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, 'w', zipfile.ZIP_DEFLATED) as archive:
        archive.writestr('[Content_Types].xml', content_types)
        archive.writestr('word/document.xml', document_xml)
    return buffer.getvalue()


def build_pdf(pages):
    """Build a PDF with one page per entry; each entry is a list of short lines."""
    doc = fitz.open()
    for lines in pages:
        page = doc.new_page()
        page.insert_text((72, 72), "\n".join(lines), fontsize=11)
    data = doc.tobytes()
    doc.close()
    return data


def damage_deflate_stream(data, member="word/document.xml"):
    """Overwrite the start of a member's compressed data with an invalid block header."""
    info = zipfile.ZipFile(io.BytesIO(data)).getinfo(member)
    header = info.header_offset
    name_length, extra_length = struct.unpack("<HH", data[header + 26:header + 30])
    start = header + 30 + name_length + extra_length
    return data[:start] + b"\xff" * 4 + data[start + 4:]


def set_encryption_flag(data, member="word/document.xml"):
    """Mark a member as encrypted in its local and central directory headers."""
    patched = bytearray(data)
    info = zipfile.ZipFile(io.BytesIO(data)).getinfo(member)
    patched[info.header_offset + 6] |= 0x01

    name = member.encode()
    position = data.find(b"PK\x01\x02")
    while position != -1:
        (name_length,) = struct.unpack("<H", data[position + 28:position + 30])
        if data[position + 46:position + 46 + name_length] == name:
            patched[position + 8] |= 0x01
        position = data.find(b"PK\x01\x02", position + 4)
    return bytes(patched)


def shift_pdf_offsets(data):
    """Insert a comment after the header so every xref offset points too early."""
    header_end = data.index(b"\n") + 1
    return data[:header_end] + b"% shifted\n" + data[header_end:]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config(temp_dir):
    """Create a configuration isolated from the user's config file."""
    config = Config(temp_dir / "docscreen_config.json")
    config.settings.processing["max_workers"] = 2
    config.settings.processing["timeout_seconds"] = 30
    return config


@pytest.fixture
def paper_text():
    return PAPER_TEXT


@pytest.fixture
def original_text():
    return ORIGINAL_TEXT


@pytest.fixture
def make_docx():
    """Factory fixture building DOCX bytes from paragraphs."""
    return build_docx


@pytest.fixture
def make_pdf():
    """Factory fixture building PDF bytes from pages of lines."""
    return build_pdf


@pytest.fixture
def paper_docx():
    """The sample paper as a single-paragraph DOCX upload."""
    return SourceDocument(build_docx([PAPER_TEXT]), ContentType.DOCX.value, "paper.docx")


@pytest.fixture
def original_docx():
    """An unrelated, short DOCX upload."""
    return SourceDocument(build_docx([ORIGINAL_TEXT]), ContentType.DOCX.value, "original.docx")


@pytest.fixture
def near_duplicate_docx():
    """The sample paper with its last sentence replaced."""
    text = PAPER_TEXT.rsplit("Future work", 1)[0] + "Later studies will cover other cereal crops."
    return SourceDocument(build_docx([text]), ContentType.DOCX.value, "copy.docx")


@pytest.fixture
def sample_pdf_bytes():
    """Two-page PDF."""
    return build_pdf([
        ["Soil moisture sensing", "for irrigation scheduling."],
        ["Results show thirty percent", "less water use."],
    ])


@pytest.fixture
def damaged_docx():
    """The sample paper as a DOCX whose document part no longer inflates."""
    return damage_deflate_stream(build_docx([PAPER_TEXT]))


@pytest.fixture
def encrypted_docx():
    """The sample paper as a DOCX whose document part is flagged as encrypted."""
    return set_encryption_flag(build_docx([PAPER_TEXT]))


@pytest.fixture
def shifted_pdf_bytes():
    """A readable PDF whose cross-reference offsets are all wrong."""
    return shift_pdf_offsets(build_pdf([["Readable text on page one"]]))
