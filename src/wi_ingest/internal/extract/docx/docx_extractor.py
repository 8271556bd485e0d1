# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import io
import logging
import os
from typing import IO, Union

from wi_ingest.internal.enums.common import DocumentTypeEnum
from wi_ingest.internal.extract.docx.engines.docxreader_helpers.docx_helper import convert_stream_with_libreoffice
from wi_ingest.internal.extract.docx.engines.docxreader_helpers.docxreader import DocxDocument

logger = logging.getLogger(__name__)


def get_document_type(filename: str) -> DocumentTypeEnum:
    """
    Determine the document type from a filename's extension.

    Raises
    ------
    ValueError
        If the extension is neither ``.doc`` nor ``.docx``.
    """
    extension = os.path.splitext(filename)[1].lstrip(".").lower()
    try:
        return DocumentTypeEnum(extension)
    except ValueError:
        raise ValueError(f"Unsupported document type '{extension}' for file '{filename}'") from None


def load_parsed_document(document: Union[bytes, IO], filename: str) -> DocxDocument:
    """
    Parse a word-processor document into the tree the extractor works on.

    Legacy DOC documents are first normalized to DOCX with LibreOffice.

    Parameters
    ----------
    document : Union[bytes, IO]
        Raw document bytes or a binary stream.
    filename : str
        The document's filename; its extension selects the format.

    Returns
    -------
    DocxDocument
        The parsed document.
    """
    document_type = get_document_type(filename)
    stream = io.BytesIO(document) if isinstance(document, (bytes, bytearray)) else document

    if document_type == DocumentTypeEnum.DOC:
        logger.info("Legacy DOC document %s, converting to DOCX", filename)
        stream = convert_stream_with_libreoffice(stream, DocumentTypeEnum.DOC.value, DocumentTypeEnum.DOCX.value)

    return DocxDocument(stream)
