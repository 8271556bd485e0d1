# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging

from wi_ingest.internal.enums.common import UnderlineStyleEnum
from wi_ingest.internal.primitives.parsed_document import FormattingReadError
from wi_ingest.internal.primitives.parsed_document import TableBase

logger = logging.getLogger(__name__)


def get_group_name_for_table(table: TableBase) -> str:
    """
    Derive the group name shared by all instructions of a table.

    The group name is the text of the first paragraph holding a singly underlined formatted run. A paragraph
    whose formatting cannot be read is skipped; formatting problems never fail the conversion.

    Parameters
    ----------
    table : TableBase
        The table to inspect.

    Returns
    -------
    str
        The group name, or an empty string when no paragraph qualifies.
    """

    formatted_paragraphs = (paragraph for paragraph in table.paragraphs if len(paragraph.emphasis_runs) > 0)
    for paragraph in formatted_paragraphs:
        try:
            if any(run.underline_style == UnderlineStyleEnum.SINGLE_LINE for run in paragraph.emphasis_runs):
                return paragraph.text
        except FormattingReadError as e:
            logger.debug("Skipping paragraph with unreadable formatting: %s", e)

    return ""
