# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from typing import Iterable, List, Optional

from wi_ingest.internal.primitives.parsed_document import TableBase
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import DEFAULT_MARKER_PHRASES


def does_table_contain_work(table: TableBase, marker_phrases: Optional[Iterable[str]] = None) -> bool:
    """
    Check whether a table holds work instructions.

    A table qualifies when any of its paragraphs, compared case-insensitively, is exactly one of the marker
    phrases.

    Parameters
    ----------
    table : TableBase
        The table to inspect.
    marker_phrases : Iterable[str], optional
        Lower-case marker phrases. Defaults to ``DEFAULT_MARKER_PHRASES``.

    Returns
    -------
    bool
        True if the table contains a marker paragraph.
    """

    phrases = set(marker_phrases if marker_phrases is not None else DEFAULT_MARKER_PHRASES)

    return any(paragraph.text.lower() in phrases for paragraph in table.paragraphs)


def get_tables_with_work_instructions(
    tables: Iterable[TableBase], marker_phrases: Optional[Iterable[str]] = None
) -> List[TableBase]:
    """Return the qualifying tables, in document order."""
    phrases = list(marker_phrases) if marker_phrases is not None else None
    return [table for table in tables if does_table_contain_work(table, phrases)]
