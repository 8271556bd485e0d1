# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import logging
import os

import click

logger = logging.getLogger(__name__)


def click_validate_concurrency(ctx, param, value):
    if value < 1:
        raise click.BadParameter("Concurrency must be >= 1.")
    return value


def click_validate_directory_exists(ctx, param, value):
    if not value:
        return value

    if not os.path.isdir(value):
        raise click.BadParameter(f"Directory does not exist: {value}")

    return value
