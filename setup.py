# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0
import os
from setuptools import find_packages
from setuptools import setup


def get_version():
    version_file = os.path.join(os.path.dirname(__file__), "src", "version.py")
    with open(version_file) as f:
        # Execute the content of version.py
        namespace = {}
        exec(f.read(), namespace)
    return namespace["get_version"]()


setup(
    description="Work instruction extraction from legacy and OOXML word-processor documents",
    license="Apache-2.0",
    name="wi-ingest",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.10",
    version=get_version(),
    install_requires=[
        "click>=8.1",
        "fsspec>=2023.1.0",
        "lxml>=4.9",
        "pydantic>=2.0",
        "python-docx>=1.1",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "wi-ingest-cli=wi_ingest.wi_ingest_cli:main",
        ],
    },
)
