# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0
# Copyright (c) 2024, NVIDIA CORPORATION.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import io
import logging
import os
import subprocess
import tempfile
from typing import IO

logger = logging.getLogger(__name__)

SUPPORTED_OUTPUT_FORMATS = ("docx",)


def convert_stream_with_libreoffice(file_stream: IO, input_extension: str, output_format: str = "docx") -> io.BytesIO:
    """
    Converts a legacy document stream (e.g. DOC) to DOCX using headless LibreOffice in a temporary directory.

    Args:
        file_stream: A binary stream of the input file.
        input_extension: The file extension of the input (e.g., 'doc').
        output_format: The desired output format. Only 'docx' is supported.

    Returns:
        A BytesIO stream of the converted document.

    Raises:
        ValueError: If the output format is not supported.
        RuntimeError: If LibreOffice is missing, fails, or produces no output.
    """
    if output_format not in SUPPORTED_OUTPUT_FORMATS:
        raise ValueError(f"Unsupported output format for LibreOffice conversion: {output_format}")

    with tempfile.TemporaryDirectory() as temp_dir:
        input_path = os.path.join(temp_dir, f"input.{input_extension}")
        with open(input_path, "wb") as f:
            f.write(file_stream.read())

        command = [
            "libreoffice",
            "--headless",
            "--convert-to",
            output_format,
            input_path,
            "--outdir",
            temp_dir,
        ]

        try:
            subprocess.run(
                command,
                check=True,
                capture_output=True,
                text=True,
            )
        except subprocess.CalledProcessError as e:
            raise RuntimeError(f"LibreOffice conversion to {output_format.upper()} failed: {e.stderr}") from e
        except FileNotFoundError:
            raise RuntimeError("LibreOffice command not found. Is it installed and in the system's PATH?") from None

        output_path = os.path.join(temp_dir, f"input.{output_format}")
        if not os.path.exists(output_path):
            raise RuntimeError(f"LibreOffice {output_format.upper()} conversion failed to produce an output file.")

        logger.debug("Converted %s stream to %s", input_extension, output_format)

        with open(output_path, "rb") as f:
            return io.BytesIO(f.read())
