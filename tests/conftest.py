# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import base64
import io
import random

import pytest
from docx import Document
from docx.opc.constants import CONTENT_TYPE as CT
from docx.opc.constants import RELATIONSHIP_TYPE as RT
from docx.opc.packuri import PackURI
from docx.oxml import parse_xml
from docx.oxml.ns import nsdecls
from docx.parts.numbering import NumberingPart

# 1x1 transparent PNG
PNG_BYTES = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=="
)

BULLET_NUM_ID = "901"
DECIMAL_NUM_ID = "902"

_NUMBERING_XML = (
    f"<w:numbering {nsdecls('w')}>"
    '<w:abstractNum w:abstractNumId="901"><w:lvl w:ilvl="0"><w:numFmt w:val="bullet"/></w:lvl></w:abstractNum>'
    '<w:abstractNum w:abstractNumId="902"><w:lvl w:ilvl="0"><w:numFmt w:val="decimal"/></w:lvl></w:abstractNum>'
    '<w:num w:numId="901"><w:abstractNumId w:val="901"/></w:num>'
    '<w:num w:numId="902"><w:abstractNumId w:val="902"/></w:num>'
    "</w:numbering>"
)


def pytest_addoption(parser):
    parser.addoption(
        "--random-selection",
        metavar="N",
        action="store",
        default=-1,
        type=int,
        help="Only run random selected subset of N tests.",
    )


def pytest_collection_modifyitems(session, config, items):
    random_sample_size = config.getoption("--random-selection")

    if random_sample_size >= 0:
        items[:] = random.sample(items, k=random_sample_size)


class DocxBuilder:
    """
    Builds real docx documents for the reader and end-to-end tests.

    Table paragraphs are given as plain strings or as ``(text, kind)`` tuples, where kind is ``"bullet"``,
    ``"number"`` or ``"underline"``.
    """

    def __init__(self):
        self.document = Document()
        self._install_numbering()

    def _install_numbering(self):
        numbering = parse_xml(_NUMBERING_XML)
        try:
            existing = self.document.part.numbering_part.element
        except (KeyError, NotImplementedError):
            part = NumberingPart(
                PackURI("/word/numbering.xml"), CT.WML_NUMBERING, numbering, self.document.part.package
            )
            self.document.part.relate_to(part, RT.NUMBERING)
            return
        for child in list(numbering):
            existing.append(child)

    @staticmethod
    def _fill_paragraph(paragraph, text, kind):
        if kind == "underline":
            paragraph.add_run(text).underline = True
            return
        if text:
            paragraph.add_run(text)
        if kind in ("bullet", "number"):
            num_id = BULLET_NUM_ID if kind == "bullet" else DECIMAL_NUM_ID
            paragraph._p.get_or_add_pPr().append(
                parse_xml(f'<w:numPr {nsdecls("w")}><w:ilvl w:val="0"/><w:numId w:val="{num_id}"/></w:numPr>')
            )

    def _fill_table(self, table, paragraphs):
        cell = table.cell(0, 0)
        for idx, spec in enumerate(paragraphs):
            text, kind = (spec, None) if isinstance(spec, str) else spec
            paragraph = cell.paragraphs[0] if idx == 0 else cell.add_paragraph()
            self._fill_paragraph(paragraph, text, kind)
        return table

    def add_table(self, *paragraphs):
        return self._fill_table(self.document.add_table(rows=1, cols=1), paragraphs)

    def add_nested_table(self, table, *paragraphs):
        """Add a one-cell table inside the first cell of ``table``."""
        return self._fill_table(table.cell(0, 0).add_table(rows=1, cols=1), paragraphs)

    def add_paragraph(self, text=""):
        return self.document.add_paragraph(text)

    def add_picture(self, blob=PNG_BYTES):
        return self.document.add_picture(io.BytesIO(blob))

    def to_bytes(self):
        stream = io.BytesIO()
        self.document.save(stream)
        return stream.getvalue()


@pytest.fixture
def docx_builder():
    return DocxBuilder()


@pytest.fixture
def png_bytes():
    return PNG_BYTES


@pytest.fixture
def other_png_bytes():
    # Trailing bytes make python-docx store it as a distinct image part
    return PNG_BYTES + b"\x00"
