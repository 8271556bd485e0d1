# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from io import BytesIO
from unittest.mock import patch

import pytest

from wi_ingest.internal.enums.common import DocumentTypeEnum
from wi_ingest.internal.extract.docx.docx_extractor import get_document_type
from wi_ingest.internal.extract.docx.docx_extractor import load_parsed_document
from wi_ingest.internal.extract.docx.engines.docxreader_helpers.docxreader import DocxDocument

MODULE_UNDER_TEST = "wi_ingest.internal.extract.docx.docx_extractor"


@pytest.mark.parametrize(
    "filename, expected",
    [("a.docx", DocumentTypeEnum.DOCX), ("A.DOC", DocumentTypeEnum.DOC), ("dir/b.c.docx", DocumentTypeEnum.DOCX)],
)
def test_get_document_type(filename, expected):
    assert get_document_type(filename) == expected


@pytest.mark.parametrize("filename", ["a.pdf", "noextension"])
def test_get_document_type_unsupported(filename):
    with pytest.raises(ValueError, match="Unsupported document type"):
        get_document_type(filename)


def test_load_docx_from_bytes(docx_builder):
    docx_builder.add_table("Work Instructions", ("Step", "bullet"))

    document = load_parsed_document(docx_builder.to_bytes(), "pump.docx")

    assert isinstance(document, DocxDocument)
    assert len(document.tables) == 1


def test_load_docx_from_stream(docx_builder):
    docx_builder.add_table("Work Instructions")

    document = load_parsed_document(BytesIO(docx_builder.to_bytes()), "pump.docx")

    assert len(document.tables) == 1


def test_load_doc_is_converted_first(docx_builder):
    docx_builder.add_table("Work Instructions")
    converted = BytesIO(docx_builder.to_bytes())

    with patch(f"{MODULE_UNDER_TEST}.convert_stream_with_libreoffice", return_value=converted) as mock_convert:
        document = load_parsed_document(b"legacy bytes", "pump.doc")

    stream, input_extension, output_format = mock_convert.call_args[0]
    assert stream.read() == b"legacy bytes"
    assert (input_extension, output_format) == ("doc", "docx")
    assert len(document.tables) == 1
