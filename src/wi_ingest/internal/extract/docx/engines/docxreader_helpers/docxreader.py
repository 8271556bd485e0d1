# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


# Copyright (c) 2024, NVIDIA CORPORATION.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
from typing import Dict, IO, List, Optional, Tuple, Union

from docx import Document
from docx.enum.text import WD_UNDERLINE
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph
from docx.text.run import Run
from lxml import etree

from wi_ingest.internal.enums.common import ListItemTypeEnum
from wi_ingest.internal.enums.common import UnderlineStyleEnum
from wi_ingest.internal.primitives.parsed_document import FormattedRunBase
from wi_ingest.internal.primitives.parsed_document import FormattingReadError
from wi_ingest.internal.primitives.parsed_document import ImageBase
from wi_ingest.internal.primitives.parsed_document import ParagraphBase
from wi_ingest.internal.primitives.parsed_document import ParsedDocumentBase
from wi_ingest.internal.primitives.parsed_document import TableBase

logger = logging.getLogger(__name__)

GRAPHIC_DATA_MARKER = b"graphicData"
BULLET_NUMBER_FORMAT = "bullet"

_UNDERLINE_STYLES = {
    WD_UNDERLINE.NONE: UnderlineStyleEnum.NONE,
    WD_UNDERLINE.SINGLE: UnderlineStyleEnum.SINGLE_LINE,
    WD_UNDERLINE.WORDS: UnderlineStyleEnum.WORDS,
    WD_UNDERLINE.DOUBLE: UnderlineStyleEnum.DOUBLE_LINE,
    WD_UNDERLINE.DOTTED: UnderlineStyleEnum.DOTTED,
    WD_UNDERLINE.THICK: UnderlineStyleEnum.THICK,
    WD_UNDERLINE.DASH: UnderlineStyleEnum.DASH,
    WD_UNDERLINE.DOT_DASH: UnderlineStyleEnum.DOT_DASH,
    WD_UNDERLINE.DOT_DOT_DASH: UnderlineStyleEnum.DOT_DOT_DASH,
    WD_UNDERLINE.WAVY: UnderlineStyleEnum.WAVE,
}


def _node_has_graphic_data(node) -> bool:
    if node is None:
        return False
    return GRAPHIC_DATA_MARKER in etree.tostring(node)


class NumberingFormats:
    """
    Resolve the number format (``bullet``, ``decimal``, ...) of list paragraphs through the numbering part.

    Lookups are cached per ``(numId, ilvl)`` pair.
    """

    def __init__(self, document):
        self._cache: Dict[Tuple[str, str], Optional[str]] = {}
        try:
            self._numbering = document.part.numbering_part.element
        except (KeyError, NotImplementedError):
            logger.debug("Document has no numbering part")
            self._numbering = None

    def number_format(self, num_id: str, ilvl: str) -> Optional[str]:
        key = (num_id, ilvl)
        if key not in self._cache:
            self._cache[key] = self._lookup(num_id, ilvl)
        return self._cache[key]

    def _lookup(self, num_id: str, ilvl: str) -> Optional[str]:
        if self._numbering is None:
            return None

        abstract_ids = self._numbering.xpath(f'./w:num[@w:numId="{num_id}"]/w:abstractNumId/@w:val')
        if not abstract_ids:
            return None

        formats = self._numbering.xpath(
            f'./w:abstractNum[@w:abstractNumId="{abstract_ids[0]}"]/w:lvl[@w:ilvl="{ilvl}"]/w:numFmt/@w:val'
        )

        return formats[0] if formats else None


class DocxRun(FormattedRunBase):
    def __init__(self, run: Run):
        self._run = run

    @property
    def text(self) -> str:
        return self._run.text

    @property
    def underline_style(self) -> Optional[UnderlineStyleEnum]:
        if self._run._r.rPr is None:
            raise FormattingReadError("Run carries no formatting")

        try:
            underline = self._run.underline
        except ValueError as e:
            raise FormattingReadError(f"Unreadable underline: {e}") from e

        # python-docx reports single underline as True and explicit "none" as False
        if underline is None:
            return None
        if underline is True:
            return UnderlineStyleEnum.SINGLE_LINE
        if underline is False:
            return UnderlineStyleEnum.NONE

        return _UNDERLINE_STYLES.get(underline, UnderlineStyleEnum.OTHER)


class DocxParagraph(ParagraphBase):
    def __init__(self, paragraph: Paragraph, numbering_formats: NumberingFormats):
        self._paragraph = paragraph
        self._numbering_formats = numbering_formats

    @property
    def text(self) -> str:
        return self._paragraph.text

    def _num_pr(self):
        num_pr = self._paragraph._p.xpath("./w:pPr/w:numPr")
        return num_pr[0] if num_pr else None

    @property
    def is_list_item(self) -> bool:
        return self._num_pr() is not None

    @property
    def list_item_type(self) -> ListItemTypeEnum:
        num_pr = self._num_pr()
        if num_pr is None:
            return ListItemTypeEnum.NONE

        num_ids = num_pr.xpath("./w:numId/@w:val")
        levels = num_pr.xpath("./w:ilvl/@w:val")
        number_format = None
        if num_ids:
            number_format = self._numbering_formats.number_format(num_ids[0], levels[0] if levels else "0")

        if number_format == BULLET_NUMBER_FORMAT:
            return ListItemTypeEnum.BULLETED

        return ListItemTypeEnum.NUMBERED

    @property
    def emphasis_runs(self) -> List[DocxRun]:
        return [DocxRun(run) for run in self._paragraph.runs if run.text]


class DocxTable(TableBase):
    def __init__(self, table: Table, numbering_formats: NumberingFormats):
        self._table = table
        self._numbering_formats = numbering_formats

    @property
    def paragraphs(self) -> List[DocxParagraph]:
        # Every paragraph of the table, nested tables included, in XML order
        return [
            DocxParagraph(Paragraph(p, self._table), self._numbering_formats)
            for p in self._table._tbl.iter(qn("w:p"))
        ]

    @property
    def next_node_has_graphic_data(self) -> bool:
        return _node_has_graphic_data(self._table._tbl.getnext())

    @property
    def previous_node_has_graphic_data(self) -> bool:
        return _node_has_graphic_data(self._table._tbl.getprevious())


class DocxImage(ImageBase):
    def __init__(self, blob: bytes, content_type: str = ""):
        self._blob = blob
        self.content_type = content_type

    @property
    def blob(self) -> bytes:
        return self._blob


class DocxDocument(ParsedDocumentBase):
    """
    Parsed view of a docx file, read with python-docx.

    Parameters
    ----------
    docx : Union[str, IO]
        Path or bytestream of the docx file.
    """

    def __init__(self, docx: Union[str, IO]):
        self.document = Document(docx)
        self._numbering_formats = NumberingFormats(self.document)
        self._tables: Optional[List[DocxTable]] = None
        self._images: Optional[List[DocxImage]] = None

    @property
    def tables(self) -> List[DocxTable]:
        if self._tables is None:
            body = self.document.element.body
            self._tables = [
                DocxTable(Table(tbl, self.document), self._numbering_formats) for tbl in body.iter(qn("w:tbl"))
            ]
        return self._tables

    @property
    def images(self) -> List[DocxImage]:
        if self._images is None:
            self._images = self._extract_images()
        return self._images

    def _extract_images(self) -> List[DocxImage]:
        # Picture relationship ids, in the order the pictures appear in the body
        r_ids = []
        for r_id in self.document.element.body.xpath(".//a:blip/@r:embed"):
            if r_id not in r_ids:
                r_ids.append(r_id)

        images = []
        related_parts = self.document.part.related_parts
        for r_id in r_ids:
            try:
                part = related_parts[r_id]
            except KeyError:
                logger.warning("Failed to extract image with rId %s -- object / file may be malformed", r_id)
                continue
            images.append(DocxImage(part.blob, getattr(part, "content_type", "")))

        return images
