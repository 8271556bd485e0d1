# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import base64


def bytesfrombase64(base64_input):
    """
    Function to convert base64 encoded string to bytes.

    Parameters
    ----------
    base64_input : str
        Base64 encoded string, e.g. the text of an image item.

    Returns
    -------
    bytes
        Base64 encoded string converted to bytes.
    """

    return base64.b64decode(base64_input)


def base64frombytes(bytes_input, encoding="utf-8"):
    """
    Function to bytes to base64 string.

    Parameters
    ----------
    bytes_input : bytes
        Raw bytes of object.

    Returns
    -------
    str
        base64 encoded string carried as the text of an image item.
    """

    return base64.b64encode(bytes_input).decode(encoding)
