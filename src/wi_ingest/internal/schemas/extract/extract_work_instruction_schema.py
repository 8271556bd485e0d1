# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import logging
from typing import List

from pydantic import ConfigDict, BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

DEFAULT_MARKER_PHRASES = [
    "work instruction",
    "work instructions",
    "tasks executed",
    "additional work required",
]


class WorkInstructionExtractorSchema(BaseModel):
    """
    Configuration schema for the work instruction extractor.

    Parameters
    ----------
    marker_phrases : List[str]
        Phrases that mark a table as holding work instructions. A table qualifies when one of its paragraphs,
        lower-cased, equals one of these phrases.

    initial_score : int, default=100
        Quality score every conversion starts from.

    image_penalty : int, default=20
        Deducted once when the document embeds any image.

    manual_numbering_penalty : int, default=50
        Deducted for each table that falls back to manual numbered-text detection.

    raise_on_failure : bool, default=False
        A flag indicating whether batch processing re-raises a per-document failure instead of recording it.
    """

    marker_phrases: List[str] = Field(default_factory=lambda: list(DEFAULT_MARKER_PHRASES))
    initial_score: int = 100
    image_penalty: int = Field(20, ge=0)
    manual_numbering_penalty: int = Field(50, ge=0)
    raise_on_failure: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("marker_phrases")
    @classmethod
    def normalize_marker_phrases(cls, value: List[str]) -> List[str]:
        phrases = [phrase.lower() for phrase in value if phrase]
        if not phrases:
            raise ValueError("At least one marker phrase is required.")
        return phrases
