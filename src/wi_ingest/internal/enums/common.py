# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import logging
from enum import Enum

logger = logging.getLogger(__name__)


class ListItemTypeEnum(str, Enum):
    """
    Enum for the list kind of a paragraph, as reported by the document's structural metadata.

    Attributes
    ----------
    NONE : str
        The paragraph is not part of a list.
    BULLETED : str
        The paragraph belongs to a bulleted list.
    NUMBERED : str
        The paragraph belongs to a numbered list (any non-bullet numbering format).
    """

    NONE: str = "none"
    BULLETED: str = "bulleted"
    NUMBERED: str = "numbered"


class UnderlineStyleEnum(str, Enum):
    """
    Enum for the underline styles a formatted run may carry.

    Only ``SINGLE_LINE`` is significant when resolving group names; the other members exist so that
    adapters can report what they read without losing information.
    """

    NONE: str = "none"
    SINGLE_LINE: str = "singleLine"
    WORDS: str = "words"
    DOUBLE_LINE: str = "doubleLine"
    DOTTED: str = "dotted"
    THICK: str = "thick"
    DASH: str = "dash"
    DOT_DASH: str = "dotDash"
    DOT_DOT_DASH: str = "dotDotDash"
    WAVE: str = "wave"
    OTHER: str = "other"


class InstructionExtractionStatus(str, Enum):
    """
    Enum for the outcome of extracting instructions from a single table.

    Attributes
    ----------
    SUCCESS : str
        Extraction completed; the item list may still be empty for the image-aware variant.
    NO_INSTRUCTIONS : str
        The table has no paragraphs at all.
    WHITESPACE_INSTRUCTIONS : str
        Candidate list paragraphs were found but none of them carried text.
    """

    SUCCESS: str = "success"
    NO_INSTRUCTIONS: str = "no_instructions"
    WHITESPACE_INSTRUCTIONS: str = "whitespace_instructions"


class ConversionOutcomeEnum(str, Enum):
    """
    Enum for the outcome category a conversion result is filed under.

    Attributes
    ----------
    SUCCESS : str
        Converted without any rule violation.
    SUCCESS_WITH_WARNINGS : str
        Converted, but at least one non-critical rule violation was recorded.
    ABORTED : str
        At least one critical rule violation was recorded.
    """

    SUCCESS: str = "Success"
    SUCCESS_WITH_WARNINGS: str = "SuccessWithWarnings"
    ABORTED: str = "Aborted"


class RuleNameEnum(str, Enum):
    """
    Enum for the rule names recorded on conversion results.

    The values are part of the persisted result format, spelling included.
    """

    TABLES_REQUIRED: str = "Tables Required"
    HAS_INSTRUCTIONS: str = "HasInstuctions"


class DocumentTypeEnum(str, Enum):
    """
    Enum for the word-processor document formats accepted by the parser.

    Attributes
    ----------
    DOC : str
        Legacy binary word document, normalized to DOCX before parsing.
    DOCX : str
        Office Open XML word document.
    """

    DOC: str = "doc"
    DOCX: str = "docx"
