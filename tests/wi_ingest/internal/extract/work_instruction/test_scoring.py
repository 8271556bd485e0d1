# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from wi_ingest.internal.extract.work_instruction.scoring import ConversionContext
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstructionTextItem


def test_start_uses_initial_score():
    context = ConversionContext.start(WorkInstructionExtractorSchema(initial_score=90))

    assert context.score == 90
    assert context.images == []
    assert context.images_added_count == 0
    assert context.has_images is False


def test_penalties_are_not_clamped():
    context = ConversionContext.start(WorkInstructionExtractorSchema())

    context.apply_image_penalty()
    context.apply_manual_numbering_penalty()
    context.apply_manual_numbering_penalty()

    assert context.score == -20


def test_remaining_images():
    context = ConversionContext.start(WorkInstructionExtractorSchema())
    context.images = [WorkInstructionTextItem(text="a"), WorkInstructionTextItem(text="b")]
    context.images_added_count = 1

    assert context.has_images is True
    assert context.remaining_images == 1


def test_contexts_do_not_share_images():
    config = WorkInstructionExtractorSchema()
    first = ConversionContext.start(config)
    second = ConversionContext.start(config)

    first.images.append(WorkInstructionTextItem(text="a"))

    assert second.images == []
