# SPDX-FileCopyrightText: Copyright (c) 2024-25, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Filesystem writer for conversion results.

Each converted document is filed under a directory named after its outcome category, next to a
``<filename>.result.json`` record of its conversion result.
"""

import logging

from wi_ingest.data_handlers.errors import ConfigurationError
from wi_ingest.data_handlers.errors import DependencyError
from wi_ingest.internal.schemas.meta.work_instruction_schema import ConversionResult

logger = logging.getLogger(__name__)

RESULT_SUFFIX = ".result.json"


class FilesystemResultWriter:
    """
    Writes documents and their conversion results to any fsspec destination.

    Parameters
    ----------
    output_root : str
        Local path or fsspec URL of the directory the outcome directories are created in.
    """

    def __init__(self, output_root: str):
        if not output_root:
            raise ConfigurationError("An output root is required to write conversion results.")
        self.output_root = output_root.rstrip("/")

    def is_available(self) -> bool:
        """Check if fsspec is available."""
        try:
            import fsspec

            return fsspec is not None
        except ImportError:
            return False

    def write(self, filename: str, document_bytes: bytes, result: ConversionResult) -> str:
        """
        Write the original document and its result record under the result's outcome directory.

        Parameters
        ----------
        filename : str
            Name of the source document.
        document_bytes : bytes
            Original document content, copied unchanged.
        result : ConversionResult
            The conversion result to serialize.

        Returns
        -------
        str
            Path of the written document copy.
        """
        if not self.is_available():
            raise DependencyError(
                "fsspec library is not available. Install fsspec for filesystem destination support: "
                "pip install fsspec"
            )

        import fsspec

        fs, root = fsspec.core.url_to_fs(self.output_root)
        outcome_dir = f"{root}/{result.outcome.value}"
        fs.makedirs(outcome_dir, exist_ok=True)

        output_path = f"{outcome_dir}/{filename}"
        with fs.open(output_path, "wb") as f:
            f.write(document_bytes)

        with fs.open(output_path + RESULT_SUFFIX, "w") as f:
            f.write(result.to_json(indent=2))

        logger.debug("Wrote %s and its result to %s", filename, outcome_dir)

        return output_path
