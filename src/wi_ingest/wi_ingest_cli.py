# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0


import json
import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as package_version

import click

from wi_ingest.cli.util.click import click_validate_concurrency
from wi_ingest.cli.util.click import click_validate_directory_exists
from wi_ingest.interface.batch import process_documents
from wi_ingest.interface.extract import get_extractor_config_summary
from wi_ingest.internal.schemas.extract.extract_work_instruction_schema import WorkInstructionExtractorSchema
from wi_ingest.util.logging.configuration import LogLevel
from wi_ingest.util.logging.configuration import configure_logging

try:
    WI_INGEST_VERSION = package_version("wi-ingest")
except PackageNotFoundError:
    WI_INGEST_VERSION = "Unknown -- No Distribution found."

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--input_directory",
    type=click.Path(exists=False),
    default=None,
    help="Directory containing the .doc/.docx documents to convert.",
    callback=click_validate_directory_exists,
)
@click.option(
    "--output_directory",
    type=click.Path(),
    default=None,
    help="Directory or fsspec URL receiving the outcome directories. Defaults to the input directory.",
)
@click.option(
    "--concurrency_n",
    default=1,
    show_default=True,
    type=int,
    help="Number of documents converted at one time.",
    callback=click_validate_concurrency,
)
@click.option("--fail_on_error", is_flag=True, help="Stop at the first document that cannot be processed.")
@click.option(
    "--log_level",
    type=click.Choice([level.value for level in LogLevel], case_sensitive=False),
    default="INFO",
    show_default=True,
    help="Log level.",
)
@click.option("--version", is_flag=True, help="Show version.")
@click.pass_context
def main(
    ctx,
    input_directory: str,
    output_directory: str,
    concurrency_n: int,
    fail_on_error: bool,
    log_level: str,
    version: bool,
):
    if version:
        click.echo(f"wi-ingest-cli : {WI_INGEST_VERSION}")
        return

    if not input_directory:
        raise click.UsageError("--input_directory is required.")

    configure_logging(log_level)
    logger.debug(f"wi-ingest-cli:params:\n{json.dumps(ctx.params, indent=2, default=repr)}")

    extractor_config = WorkInstructionExtractorSchema(raise_on_failure=fail_on_error)
    logger.debug(f"Extractor configuration: {get_extractor_config_summary(extractor_config)}")

    summary = process_documents(
        input_directory,
        concurrency_n=concurrency_n,
        extractor_config=extractor_config,
        output_root=output_directory,
    )

    click.echo(summary.report())
    if summary.errors:
        for error in summary.errors:
            click.echo(error, err=True)
        ctx.exit(1)


if __name__ == "__main__":
    main()
