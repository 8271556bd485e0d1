# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import logging
import functools

logger = logging.getLogger(__name__)


def unified_exception_handler(func):
    """
    Decorator that logs any exception raised by ``func`` and re-raises it with the function name prefixed.

    The re-raised exception keeps the original type and chains the original exception as its cause. Exceptions whose
    type cannot be built from a single message propagate unchanged.
    """

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except Exception as e:
            func_name = func.__name__
            err_msg = f"{func_name}: error: {e}"
            logger.exception(err_msg, exc_info=True)
            try:
                wrapped = type(e)(err_msg)
            except TypeError:
                # Types that cannot be built from a message, such as pydantic's ValidationError
                wrapped = None
            if wrapped is None:
                raise
            raise wrapped from e

    return sync_wrapper
