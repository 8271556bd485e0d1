# SPDX-FileCopyrightText: Copyright (c) 2024-25, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import os
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from wi_ingest.data_handlers.result_writer import FilesystemResultWriter
from wi_ingest.interface.extract import build_extractor_config
from wi_ingest.internal.extract.docx.docx_extractor import load_parsed_document
from wi_ingest.internal.extract.work_instruction.work_instruction_extractor import (
    convert_work_instructions_from_document,
)
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.internal.schemas.meta.work_instruction_schema import ConversionResult

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".doc", ".docx")


@dataclass
class BatchSummary:
    """Results and per-file errors of a batch run."""

    results: List[ConversionResult] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    @property
    def successful(self) -> int:
        return sum(1 for result in self.results if not result.aborted)

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if result.aborted)

    @property
    def with_warnings(self) -> int:
        return sum(1 for result in self.results if result.has_rule_violations)

    def report(self) -> str:
        return (
            f"Processed {len(self.results)} docs. {self.successful} successful, {self.failed} failed. "
            f"{self.with_warnings} had warnings"
        )


def get_document_files(path: str) -> List[str]:
    """
    List the word-processor documents directly inside ``path``, sorted by name.

    Sub-directories are not searched, so documents filed into outcome directories by a previous run are
    not picked up again.
    """
    return sorted(
        os.path.join(path, name)
        for name in os.listdir(path)
        if name.endswith(DOCUMENT_SUFFIXES) and os.path.isfile(os.path.join(path, name))
    )


def process_document(
    file_path: str, writer: FilesystemResultWriter, extractor_config: WorkInstructionExtractorSchema
) -> ConversionResult:
    """
    Convert one document and file it, together with its result record, under its outcome directory.
    """
    filename = os.path.basename(file_path)
    with open(file_path, "rb") as f:
        file_bytes = f.read()

    document = load_parsed_document(file_bytes, filename)
    result = convert_work_instructions_from_document(document, filename, extractor_config)
    writer.write(filename, file_bytes, result)

    return result


def _record_failure(summary: BatchSummary, file_path: str, e: Exception) -> None:
    msg = f"Error processing filename '{file_path}': {e}"
    logger.error(msg)
    summary.errors.append(msg)


def process_documents(
    path: str,
    concurrency_n: int = 1,
    extractor_config: Union[Dict[str, Any], BaseModel, None] = None,
    output_root: Optional[str] = None,
) -> BatchSummary:
    """
    Convert every DOC and DOCX document in a directory.

    Each document is copied to ``<output_root>/<outcome>/<filename>`` next to a
    ``<filename>.result.json`` record, where the outcome is ``Success``, ``SuccessWithWarnings`` or
    ``Aborted``. A document that cannot be processed is recorded as an error and the batch moves on,
    unless ``raise_on_failure`` is set in the extractor configuration. In that case the first failure stops the
    batch: no further document is loaded, except those already being converted by other workers.

    Parameters
    ----------
    path : str
        Directory containing the documents.
    concurrency_n : int, default=1
        Number of documents converted concurrently.
    extractor_config : dict or WorkInstructionExtractorSchema, optional
        Marker phrases, scoring parameters and failure handling.
    output_root : str, optional
        Local path or fsspec URL receiving the outcome directories. Defaults to ``path``.

    Returns
    -------
    BatchSummary
        The conversion results, in file name order, and the error messages of failed documents.
    """
    if concurrency_n < 1:
        raise ValueError(f"concurrency_n must be >= 1, got {concurrency_n}")

    config = build_extractor_config(extractor_config)
    writer = FilesystemResultWriter(output_root or path)
    file_paths = get_document_files(path)
    logger.info("Found %d document(s) in %s", len(file_paths), path)

    summary = BatchSummary()
    if concurrency_n == 1:
        for file_path in file_paths:
            try:
                summary.results.append(process_document(file_path, writer, config))
            except Exception as e:
                _record_failure(summary, file_path, e)
                if config.raise_on_failure:
                    raise
    else:
        executor = ThreadPoolExecutor(max_workers=concurrency_n)
        try:
            futures = [executor.submit(process_document, file_path, writer, config) for file_path in file_paths]

            for file_path, future in zip(file_paths, futures):
                try:
                    summary.results.append(future.result())
                except Exception as e:
                    _record_failure(summary, file_path, e)
                    if config.raise_on_failure:
                        # Documents already being converted still finish; queued ones are dropped
                        executor.shutdown(wait=False, cancel_futures=True)
                        raise
        finally:
            executor.shutdown(wait=True)

    logger.info(summary.report())

    return summary
