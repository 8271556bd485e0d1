# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import base64

from wi_ingest.internal.extract.work_instruction.image_extractor import extract_images_from_document
from wi_ingest.internal.primitives.parsed_document import InMemoryDocument
from wi_ingest.internal.primitives.parsed_document import InMemoryImage


def test_no_images():
    assert extract_images_from_document(InMemoryDocument()) == []


def test_images_become_base64_items_in_order():
    document = InMemoryDocument(images=[InMemoryImage(b"\x89PNG first"), InMemoryImage(b"second")])

    items = extract_images_from_document(document)

    assert [base64.b64decode(item.text) for item in items] == [b"\x89PNG first", b"second"]
    assert all(item.group_name == "" for item in items)
    assert all(item.sub_text is None for item in items)
    assert items[0].work_instruction_item_id != items[1].work_instruction_item_id
