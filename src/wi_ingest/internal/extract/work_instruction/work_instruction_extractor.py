# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import List
from typing import Optional

from wi_ingest.internal.enums.common import InstructionExtractionStatus
from wi_ingest.internal.enums.common import RuleNameEnum
from wi_ingest.internal.extract.work_instruction.image_extractor import extract_images_from_document
from wi_ingest.internal.extract.work_instruction.instruction_extractor import TableExtractionResult
from wi_ingest.internal.extract.work_instruction.instruction_extractor import extract_instructions_from_table
from wi_ingest.internal.extract.work_instruction.instruction_extractor import (
    extract_instructions_from_table_with_images,
)
from wi_ingest.internal.extract.work_instruction.scoring import ConversionContext
from wi_ingest.internal.extract.work_instruction.table_classifier import get_tables_with_work_instructions
from wi_ingest.internal.primitives.parsed_document import ParsedDocumentBase
from wi_ingest.internal.primitives.parsed_document import TableBase
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.internal.schemas.meta.work_instruction_schema import ConversionResult
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstruction
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstructionTextItem

logger = logging.getLogger(__name__)

NO_TABLES_MESSAGE = "This document contains no tables to process"
NO_INSTRUCTIONS_MESSAGE = "Must contain instructions"
WHITESPACE_INSTRUCTIONS_MESSAGE = "Instructions found but they had no value"
EMPTY_DOCUMENT_MESSAGE = "Document must contain instructions"

_FAILURE_MESSAGES = {
    InstructionExtractionStatus.NO_INSTRUCTIONS: NO_INSTRUCTIONS_MESSAGE,
    InstructionExtractionStatus.WHITESPACE_INSTRUCTIONS: WHITESPACE_INSTRUCTIONS_MESSAGE,
}


def _extract_from_table(table: TableBase, context: ConversionContext) -> TableExtractionResult:
    # The variant is fixed for the whole document by whether it embeds images
    if context.has_images:
        return extract_instructions_from_table_with_images(table, context)
    return extract_instructions_from_table(table)


def _abort(result: ConversionResult, context: ConversionContext, rule: RuleNameEnum, message: str) -> ConversionResult:
    result.add_rule_violation(rule.value, True, message)
    result.conversion_score = context.score
    logger.info("Conversion aborted | rule=%s message=%s", rule.value, message)
    return result


def convert_work_instructions_from_document(
    document: ParsedDocumentBase,
    filename: str,
    extractor_config: Optional[WorkInstructionExtractorSchema] = None,
) -> ConversionResult:
    """
    Convert a parsed document into work instructions, a quality score and the rule violations encountered.

    Images are pulled from the document once. Tables containing a marker phrase are then processed in
    document order, and their instructions are concatenated. A document without qualifying tables, or one
    that yields no instructions, produces an aborted result carrying a critical rule violation.

    Parameters
    ----------
    document : ParsedDocumentBase
        The parsed document. It is never modified.
    filename : str
        Name of the source file, recorded on the result.
    extractor_config : WorkInstructionExtractorSchema, optional
        Marker phrases and scoring parameters. Defaults are used when omitted.

    Returns
    -------
    ConversionResult
        The conversion outcome. ``work_instructions`` is empty when the result is aborted.
    """

    config = extractor_config if extractor_config is not None else WorkInstructionExtractorSchema()
    context = ConversionContext.start(config)
    result = ConversionResult()

    context.images = extract_images_from_document(document)
    if context.has_images:
        context.apply_image_penalty()

    tables_with_work_instructions = get_tables_with_work_instructions(document.tables, config.marker_phrases)
    logger.debug(
        "Found %d table(s) with work instructions out of %d",
        len(tables_with_work_instructions),
        len(document.tables),
    )
    if len(tables_with_work_instructions) < 1:
        return _abort(result, context, RuleNameEnum.TABLES_REQUIRED, NO_TABLES_MESSAGE)

    result.filename = filename

    # Instructions can continue across sibling tables that repeat their headers
    instructions: List[WorkInstructionTextItem] = []
    if len(tables_with_work_instructions) == 1:
        extraction = _extract_from_table(tables_with_work_instructions[0], context)
        if not extraction.succeeded:
            return _abort(result, context, RuleNameEnum.HAS_INSTRUCTIONS, _FAILURE_MESSAGES[extraction.status])
        instructions = extraction.instructions
    else:
        for table in tables_with_work_instructions:
            extraction = _extract_from_table(table, context)
            if not extraction.succeeded:
                return _abort(result, context, RuleNameEnum.HAS_INSTRUCTIONS, _FAILURE_MESSAGES[extraction.status])
            if len(extraction.instructions) > 0:
                instructions.extend(extraction.instructions)

    if len(instructions) < 1:
        return _abort(result, context, RuleNameEnum.HAS_INSTRUCTIONS, EMPTY_DOCUMENT_MESSAGE)

    result.work_instructions = WorkInstruction(instructions_as_text=instructions, source_filename=filename)
    result.conversion_score = context.score

    logger.info("Converted %s | instructions=%d score=%d", filename, len(instructions), context.score)

    return result
