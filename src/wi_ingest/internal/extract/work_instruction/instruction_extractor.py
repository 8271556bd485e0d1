# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import re
from dataclasses import dataclass, field
from typing import List
from typing import Sequence

from wi_ingest.internal.enums.common import InstructionExtractionStatus
from wi_ingest.internal.enums.common import ListItemTypeEnum
from wi_ingest.internal.extract.work_instruction.group_name_resolver import get_group_name_for_table
from wi_ingest.internal.extract.work_instruction.scoring import ConversionContext
from wi_ingest.internal.primitives.parsed_document import ParagraphBase
from wi_ingest.internal.primitives.parsed_document import TableBase
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstructionTextItem

logger = logging.getLogger(__name__)

MANUAL_NUMBERING_HINT = "1."
MANUAL_NUMBERING_PATTERN = re.compile(r"\d{1,2}\.")


@dataclass
class TableExtractionResult:
    """Outcome of extracting instructions from one table."""

    status: InstructionExtractionStatus
    instructions: List[WorkInstructionTextItem] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status == InstructionExtractionStatus.SUCCESS


def get_instructions_text_from_paragraphs(paragraphs: Sequence[ParagraphBase]) -> List[WorkInstructionTextItem]:
    """Build one instruction item per paragraph, each with a fresh identity."""
    return [WorkInstructionTextItem(text=paragraph.text) for paragraph in paragraphs]


def _is_manually_numbered(paragraph: ParagraphBase) -> bool:
    # Only the first two characters are inspected, so "10." does not match
    return MANUAL_NUMBERING_PATTERN.search(paragraph.text.lstrip()[:2]) is not None


def find_manually_numbered_paragraphs(table: TableBase) -> List[ParagraphBase]:
    """
    Detect instructions written as plain text that starts with a number and a period.

    Detection only runs when some paragraph of the table contains ``"1."``; it then re-scans every paragraph
    with text.

    Parameters
    ----------
    table : TableBase
        The table to scan.

    Returns
    -------
    List[ParagraphBase]
        The manually numbered paragraphs in table order, or an empty list.
    """

    if not any(MANUAL_NUMBERING_HINT in paragraph.text for paragraph in table.paragraphs):
        return []

    with_text = [paragraph for paragraph in table.paragraphs if paragraph.text]

    return [paragraph for paragraph in with_text if _is_manually_numbered(paragraph)]


def extract_instructions_from_table(table: TableBase) -> TableExtractionResult:
    """
    Extract instructions from a table of a document without images.

    Only bulleted list paragraphs count as instructions here.

    Parameters
    ----------
    table : TableBase
        A table that contains work instructions.

    Returns
    -------
    TableExtractionResult
        ``NO_INSTRUCTIONS`` if the table has no paragraphs, ``WHITESPACE_INSTRUCTIONS`` if no bulleted paragraph
        has text, otherwise ``SUCCESS`` with the items tagged with the table's group name.
    """

    if len(table.paragraphs) < 1:
        logger.debug("Table has no paragraphs")
        return TableExtractionResult(status=InstructionExtractionStatus.NO_INSTRUCTIONS)

    only_bullet_lists = [
        paragraph
        for paragraph in table.paragraphs
        if paragraph.is_list_item and paragraph.list_item_type == ListItemTypeEnum.BULLETED
    ]
    with_text = [paragraph for paragraph in only_bullet_lists if paragraph.text]
    if len(with_text) < 1:
        logger.debug("Table has %d bulleted paragraph(s), none with text", len(only_bullet_lists))
        return TableExtractionResult(status=InstructionExtractionStatus.WHITESPACE_INSTRUCTIONS)

    group_name = get_group_name_for_table(table)
    instructions = [item.with_group_name(group_name) for item in get_instructions_text_from_paragraphs(with_text)]

    return TableExtractionResult(status=InstructionExtractionStatus.SUCCESS, instructions=instructions)


def extract_instructions_from_table_with_images(table: TableBase, context: ConversionContext) -> TableExtractionResult:
    """
    Extract instructions from a table of a document that embeds images.

    Bulleted and numbered list paragraphs count as instructions. When the table has none, the conversion is
    penalized and manually numbered text is used instead. Images the document places right before or after
    the table are then interleaved with the instructions, consuming them from ``context``.

    Parameters
    ----------
    table : TableBase
        A table that contains work instructions.
    context : ConversionContext
        The running conversion state; its score and image counter are updated.

    Returns
    -------
    TableExtractionResult
        Always ``SUCCESS``; the item list may be empty.
    """

    only_lists = [
        paragraph
        for paragraph in table.paragraphs
        if paragraph.is_list_item
        and paragraph.list_item_type in (ListItemTypeEnum.BULLETED, ListItemTypeEnum.NUMBERED)
    ]

    if len(only_lists) < 1:
        context.apply_manual_numbering_penalty()
        only_lists = find_manually_numbered_paragraphs(table)
        logger.debug("Manual numbering detection found %d paragraph(s)", len(only_lists))

    whitespace_removed = [paragraph for paragraph in only_lists if paragraph.text.strip()]
    instructions = get_instructions_text_from_paragraphs(whitespace_removed)

    # Both placements read the same slot, computed before either of them advances the counter
    consumed_index = context.images_added_count - 1 if context.images_added_count > 0 else 0

    if table.next_node_has_graphic_data and context.remaining_images > 0:
        instructions.append(context.images[consumed_index])
        context.images_added_count += 1
        logger.debug("Appended image %d after table instructions", consumed_index)

    if table.previous_node_has_graphic_data and context.remaining_images > 0:
        instructions.insert(0, context.images[consumed_index])
        context.images_added_count += 1
        logger.debug("Inserted image %d before table instructions", consumed_index)

    group_name = get_group_name_for_table(table)
    instructions = [item.with_group_name(group_name) for item in instructions]

    return TableExtractionResult(status=InstructionExtractionStatus.SUCCESS, instructions=instructions)
