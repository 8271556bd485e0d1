# SPDX-FileCopyrightText: Copyright (c) 2024-25, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import Any, Dict, IO, Optional, Union

from pydantic import BaseModel

from wi_ingest.internal.extract.docx.docx_extractor import load_parsed_document
from wi_ingest.internal.extract.work_instruction.work_instruction_extractor import (
    convert_work_instructions_from_document,
)
from wi_ingest.internal.primitives.parsed_document import ParsedDocumentBase
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.internal.schemas.meta.work_instruction_schema import ConversionResult
from wi_ingest.util.exception_handlers.decorators import unified_exception_handler

logger = logging.getLogger(__name__)


def build_extractor_config(
    extractor_config: Union[Dict[str, Any], BaseModel, None] = None,
) -> WorkInstructionExtractorSchema:
    """
    Validate an extractor configuration given as a dictionary, a schema instance, or nothing.

    Raises
    ------
    pydantic.ValidationError
        If the configuration does not conform to ``WorkInstructionExtractorSchema``.
    """
    if extractor_config is None:
        return WorkInstructionExtractorSchema()
    if isinstance(extractor_config, WorkInstructionExtractorSchema):
        return extractor_config
    if isinstance(extractor_config, BaseModel):
        extractor_config = extractor_config.model_dump()

    return WorkInstructionExtractorSchema(**extractor_config)


@unified_exception_handler
def convert_work_instructions(
    *,
    document: ParsedDocumentBase,
    filename: str,
    extractor_config: Union[Dict[str, Any], BaseModel, None] = None,
) -> ConversionResult:
    """
    Convert an already-parsed document into work instructions.

    Parameters
    ----------
    document : ParsedDocumentBase
        The parsed document: its tables, paragraphs and embedded images.
    filename : str
        Name of the source file, recorded on the result.
    extractor_config : dict or WorkInstructionExtractorSchema, optional
        Marker phrases and scoring parameters.

    Returns
    -------
    ConversionResult
        The instructions, quality score and rule violations of the conversion.
    """
    config = build_extractor_config(extractor_config)

    return convert_work_instructions_from_document(document, filename, config)


@unified_exception_handler
def extract_work_instructions_from_file(
    *,
    file_content: Union[bytes, IO],
    filename: str,
    extractor_config: Union[Dict[str, Any], BaseModel, None] = None,
) -> ConversionResult:
    """
    Parse a DOC or DOCX document and convert it into work instructions.

    Parameters
    ----------
    file_content : bytes or binary stream
        The raw document.
    filename : str
        The document's filename. Its extension selects the parser; ``.doc`` files are normalized to DOCX first.
    extractor_config : dict or WorkInstructionExtractorSchema, optional
        Marker phrases and scoring parameters.

    Returns
    -------
    ConversionResult
        The instructions, quality score and rule violations of the conversion.
    """
    config = build_extractor_config(extractor_config)
    document = load_parsed_document(file_content, filename)

    return convert_work_instructions_from_document(document, filename, config)


def get_extractor_config_summary(extractor_config: Optional[WorkInstructionExtractorSchema] = None) -> Dict[str, Any]:
    """Return the effective extractor configuration as a plain dictionary, for logging."""
    return build_extractor_config(extractor_config).model_dump()
