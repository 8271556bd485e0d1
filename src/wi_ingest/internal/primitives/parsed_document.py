# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Read-only view of an already-parsed word-processor document.

The extraction core only ever talks to these interfaces. ``DocxDocument`` implements them over python-docx;
the ``InMemory*`` classes implement them over plain Python values for callers that build the tree themselves.
"""

from abc import ABC
from abc import abstractmethod
from typing import List
from typing import Optional
from typing import Sequence
from typing import Union

from wi_ingest.internal.enums.common import ListItemTypeEnum
from wi_ingest.internal.enums.common import UnderlineStyleEnum


class FormattingReadError(Exception):
    """Raised when the formatting of a run cannot be read."""

    pass


class FormattedRunBase(ABC):
    """A run of text carrying explicit character formatting."""

    @property
    @abstractmethod
    def text(self) -> str:
        """The run's text."""

    @property
    @abstractmethod
    def underline_style(self) -> Optional[UnderlineStyleEnum]:
        """
        The run's underline style, or None when no underline is set.

        Raises
        ------
        FormattingReadError
            If the run's formatting cannot be read.
        """


class ParagraphBase(ABC):
    """A paragraph with its list metadata and formatted runs."""

    @property
    @abstractmethod
    def text(self) -> str:
        """Plain text of the paragraph."""

    @property
    @abstractmethod
    def is_list_item(self) -> bool:
        """Whether the paragraph is flagged as a list member."""

    @property
    @abstractmethod
    def list_item_type(self) -> ListItemTypeEnum:
        """The kind of list the paragraph belongs to."""

    @property
    @abstractmethod
    def emphasis_runs(self) -> Sequence[FormattedRunBase]:
        """Runs of the paragraph that carry text."""


class TableBase(ABC):
    """A table, viewed as the flat sequence of its paragraphs plus adjacency markers."""

    @property
    @abstractmethod
    def paragraphs(self) -> Sequence[ParagraphBase]:
        """Every paragraph inside the table, in document order."""

    @property
    @abstractmethod
    def next_node_has_graphic_data(self) -> bool:
        """Whether the node following the table embeds graphic data."""

    @property
    @abstractmethod
    def previous_node_has_graphic_data(self) -> bool:
        """Whether the node preceding the table embeds graphic data."""


class ImageBase(ABC):
    """An embedded image, carried as an opaque payload."""

    @property
    @abstractmethod
    def blob(self) -> bytes:
        """Raw image bytes."""


class ParsedDocumentBase(ABC):
    """A parsed document: its tables and its embedded images, each in document order."""

    @property
    @abstractmethod
    def tables(self) -> Sequence[TableBase]:
        """Body tables in document order."""

    @property
    @abstractmethod
    def images(self) -> Sequence[ImageBase]:
        """Embedded images in document order."""


class InMemoryFormattedRun(FormattedRunBase):
    def __init__(
        self,
        text: str,
        underline_style: Union[UnderlineStyleEnum, str, None] = None,
        formatting_readable: bool = True,
    ):
        self._text = text
        self._underline_style = UnderlineStyleEnum(underline_style) if underline_style is not None else None
        self._formatting_readable = formatting_readable

    @property
    def text(self) -> str:
        return self._text

    @property
    def underline_style(self) -> Optional[UnderlineStyleEnum]:
        if not self._formatting_readable:
            raise FormattingReadError(f"Formatting unavailable for run '{self._text}'")
        return self._underline_style


class InMemoryParagraph(ParagraphBase):
    def __init__(
        self,
        text: str = "",
        list_item_type: Union[ListItemTypeEnum, str] = ListItemTypeEnum.NONE,
        is_list_item: Optional[bool] = None,
        emphasis_runs: Optional[List[FormattedRunBase]] = None,
    ):
        self._text = text
        self._list_item_type = ListItemTypeEnum(list_item_type)
        # Membership follows the list kind unless stated explicitly
        self._is_list_item = is_list_item if is_list_item is not None else self._list_item_type != ListItemTypeEnum.NONE
        self._emphasis_runs = list(emphasis_runs or [])

    @property
    def text(self) -> str:
        return self._text

    @property
    def is_list_item(self) -> bool:
        return self._is_list_item

    @property
    def list_item_type(self) -> ListItemTypeEnum:
        return self._list_item_type

    @property
    def emphasis_runs(self) -> List[FormattedRunBase]:
        return self._emphasis_runs


class InMemoryTable(TableBase):
    def __init__(
        self,
        paragraphs: Optional[List[ParagraphBase]] = None,
        next_node_has_graphic_data: bool = False,
        previous_node_has_graphic_data: bool = False,
    ):
        self._paragraphs = list(paragraphs or [])
        self._next_node_has_graphic_data = next_node_has_graphic_data
        self._previous_node_has_graphic_data = previous_node_has_graphic_data

    @property
    def paragraphs(self) -> List[ParagraphBase]:
        return self._paragraphs

    @property
    def next_node_has_graphic_data(self) -> bool:
        return self._next_node_has_graphic_data

    @property
    def previous_node_has_graphic_data(self) -> bool:
        return self._previous_node_has_graphic_data


class InMemoryImage(ImageBase):
    def __init__(self, blob: bytes):
        self._blob = blob

    @property
    def blob(self) -> bytes:
        return self._blob


class InMemoryDocument(ParsedDocumentBase):
    def __init__(self, tables: Optional[List[TableBase]] = None, images: Optional[List[ImageBase]] = None):
        self._tables = list(tables or [])
        self._images = list(images or [])

    @property
    def tables(self) -> List[TableBase]:
        return self._tables

    @property
    def images(self) -> List[ImageBase]:
        return self._images
