# SPDX-FileCopyrightText: Copyright (c) 2024-25, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
Error definitions for persisting conversion results.
"""


class ResultWriterError(Exception):
    """Base exception for result writer errors."""

    pass


class ConfigurationError(ResultWriterError):
    """Configuration-related errors (invalid destination, missing required parameters)."""

    pass


class DependencyError(ConfigurationError):
    """Error raised when required dependencies are not available."""

    pass
