# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from dataclasses import dataclass, field
from typing import List

from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstructionTextItem

logger = logging.getLogger(__name__)


@dataclass
class ConversionContext:
    """
    Mutable state scoped to the conversion of a single document.

    Holds the running quality score, the images pulled from the document and how many of them have been
    placed next to tables so far. A fresh context is created for every conversion and never shared.
    """

    config: WorkInstructionExtractorSchema
    score: int
    images: List[WorkInstructionTextItem] = field(default_factory=list)
    images_added_count: int = 0

    @classmethod
    def start(cls, config: WorkInstructionExtractorSchema) -> "ConversionContext":
        return cls(config=config, score=config.initial_score)

    @property
    def has_images(self) -> bool:
        return len(self.images) > 0

    @property
    def remaining_images(self) -> int:
        return len(self.images) - self.images_added_count

    def apply_image_penalty(self) -> None:
        self.score -= self.config.image_penalty
        logger.debug("Document embeds %d image(s), score now %d", len(self.images), self.score)

    def apply_manual_numbering_penalty(self) -> None:
        # Not clamped; several fallback tables can push the score below zero
        self.score -= self.config.manual_numbering_penalty
        logger.debug("Falling back to manual numbering detection, score now %d", self.score)
