# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import pytest
from pydantic import ValidationError

from wi_ingest.interface.extract import build_extractor_config
from wi_ingest.interface.extract import convert_work_instructions
from wi_ingest.interface.extract import extract_work_instructions_from_file
from wi_ingest.interface.extract import get_extractor_config_summary
from wi_ingest.internal.enums.common import ConversionOutcomeEnum
from wi_ingest.internal.enums.common import ListItemTypeEnum
from wi_ingest.internal.primitives.parsed_document import InMemoryDocument
from wi_ingest.internal.primitives.parsed_document import InMemoryParagraph
from wi_ingest.internal.primitives.parsed_document import InMemoryTable
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema


def test_build_extractor_config_variants():
    schema = WorkInstructionExtractorSchema(initial_score=50)

    assert build_extractor_config(None) == WorkInstructionExtractorSchema()
    assert build_extractor_config(schema) is schema
    assert build_extractor_config({"image_penalty": 10}).image_penalty == 10


def test_build_extractor_config_rejects_unknown_keys():
    with pytest.raises(ValidationError):
        build_extractor_config({"bogus": 1})


def test_invalid_config_raises_validation_error():
    with pytest.raises(ValidationError):
        convert_work_instructions(document=InMemoryDocument(), filename="x.docx", extractor_config={"bogus": 1})

    with pytest.raises(ValidationError):
        extract_work_instructions_from_file(
            file_content=b"", filename="x.docx", extractor_config={"marker_phrases": []}
        )


def test_convert_work_instructions_with_dict_config():
    document = InMemoryDocument(
        [InMemoryTable([InMemoryParagraph("Procedure"), InMemoryParagraph("Step", ListItemTypeEnum.BULLETED)])]
    )

    result = convert_work_instructions(
        document=document, filename="proc.docx", extractor_config={"marker_phrases": ["procedure"]}
    )

    assert result.outcome == ConversionOutcomeEnum.SUCCESS
    assert [item.text for item in result.work_instructions.instructions_as_text] == ["Step"]


def test_extract_from_docx_file(docx_builder, png_bytes):
    docx_builder.add_paragraph("Pump maintenance")
    docx_builder.add_table(
        "Work Instructions",
        ("Group A", "underline"),
        ("1. Do X", "number"),
        ("2. Do Y", "number"),
    )
    docx_builder.add_picture(png_bytes)

    result = extract_work_instructions_from_file(file_content=docx_builder.to_bytes(), filename="pump.docx")

    items = result.work_instructions.instructions_as_text
    assert result.outcome == ConversionOutcomeEnum.SUCCESS
    assert result.conversion_score == 80
    assert [item.text for item in items[:2]] == ["1. Do X", "2. Do Y"]
    assert len(items) == 3
    assert all(item.group_name == "Group A" for item in items)


def test_marker_in_nested_table_extracts_items_for_both_tables(docx_builder):
    outer = docx_builder.add_table("Parts")
    docx_builder.add_nested_table(outer, "Tasks Executed", ("Step", "bullet"))

    result = extract_work_instructions_from_file(file_content=docx_builder.to_bytes(), filename="nested.docx")

    # The outer table sees the nested paragraphs too, so both tables qualify
    assert result.outcome == ConversionOutcomeEnum.SUCCESS
    assert [item.text for item in result.work_instructions.instructions_as_text] == ["Step", "Step"]


def test_extract_from_docx_file_without_tables(docx_builder):
    docx_builder.add_paragraph("No tables here")

    result = extract_work_instructions_from_file(file_content=docx_builder.to_bytes(), filename="plain.docx")

    assert result.outcome == ConversionOutcomeEnum.ABORTED
    assert result.rule_violations[0].rule == "Tables Required"


def test_extract_from_unsupported_file_is_reported_with_function_name():
    with pytest.raises(ValueError, match="extract_work_instructions_from_file: error: Unsupported document type"):
        extract_work_instructions_from_file(file_content=b"", filename="notes.txt")


def test_get_extractor_config_summary():
    summary = get_extractor_config_summary()

    assert summary["initial_score"] == 100
    assert summary["raise_on_failure"] is False
