# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
from typing import List

from wi_ingest.internal.primitives.parsed_document import ParsedDocumentBase
from wi_ingest.internal.schemas.meta.work_instruction_schema import WorkInstructionTextItem
from wi_ingest.util.converters import bytetools

logger = logging.getLogger(__name__)


def extract_images_from_document(document: ParsedDocumentBase) -> List[WorkInstructionTextItem]:
    """
    Turn every embedded image of a document into an instruction item.

    Parameters
    ----------
    document : ParsedDocumentBase
        The parsed document to read images from.

    Returns
    -------
    List[WorkInstructionTextItem]
        One item per image, in document order, each with a fresh identity and the base64 encoding of the
        image bytes as its text. Empty when the document has no images.
    """

    images = []
    for image in document.images:
        images.append(WorkInstructionTextItem(text=bytetools.base64frombytes(image.blob)))

    logger.debug("Extracted %d image(s) from document", len(images))

    return images
