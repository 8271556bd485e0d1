# SPDX-FileCopyrightText: Copyright (c) 2024, NVIDIA CORPORATION & AFFILIATES.
# All rights reserved.
# SPDX-License-Identifier: Apache-2.0

from unittest.mock import patch

from click.testing import CliRunner

from wi_ingest.interface.batch import BatchSummary
from wi_ingest.wi_ingest_cli import main

MODULE_UNDER_TEST = "wi_ingest.wi_ingest_cli"


def test_version():
    result = CliRunner().invoke(main, ["--version"])

    assert result.exit_code == 0
    assert result.output.startswith("wi-ingest-cli : ")


def test_input_directory_required():
    result = CliRunner().invoke(main, [])

    assert result.exit_code == 2
    assert "--input_directory is required" in result.output


def test_input_directory_must_exist(tmp_path):
    result = CliRunner().invoke(main, ["--input_directory", str(tmp_path / "missing")])

    assert result.exit_code == 2
    assert "Directory does not exist" in result.output


def test_concurrency_must_be_positive(tmp_path):
    result = CliRunner().invoke(main, ["--input_directory", str(tmp_path), "--concurrency_n", "0"])

    assert result.exit_code == 2
    assert "Concurrency must be >= 1" in result.output


@patch(f"{MODULE_UNDER_TEST}.configure_logging")
def test_processes_directory(mock_logging, tmp_path, docx_builder):
    docx_builder.add_table("Work Instructions", ("Step", "bullet"))
    (tmp_path / "pump.docx").write_bytes(docx_builder.to_bytes())

    result = CliRunner().invoke(main, ["--input_directory", str(tmp_path), "--log_level", "debug"])

    assert result.exit_code == 0, result.output
    assert "Processed 1 docs. 1 successful, 0 failed. 0 had warnings" in result.output
    assert (tmp_path / "Success" / "pump.docx.result.json").exists()
    mock_logging.assert_called_once_with("DEBUG")


@patch(f"{MODULE_UNDER_TEST}.configure_logging")
@patch(f"{MODULE_UNDER_TEST}.process_documents")
def test_errors_exit_non_zero(mock_process, mock_logging, tmp_path):
    mock_process.return_value = BatchSummary(errors=["Error processing filename 'x.docx': boom"])

    result = CliRunner().invoke(
        main,
        ["--input_directory", str(tmp_path), "--output_directory", str(tmp_path / "out"), "--concurrency_n", "4"],
    )

    assert result.exit_code == 1
    assert "Error processing filename 'x.docx': boom" in result.output
    _, kwargs = mock_process.call_args
    assert kwargs["concurrency_n"] == 4
    assert kwargs["output_root"] == str(tmp_path / "out")
    assert kwargs["extractor_config"].raise_on_failure is False


@patch(f"{MODULE_UNDER_TEST}.configure_logging")
@patch(f"{MODULE_UNDER_TEST}.process_documents", return_value=BatchSummary())
def test_fail_on_error_flag(mock_process, mock_logging, tmp_path):
    result = CliRunner().invoke(main, ["--input_directory", str(tmp_path), "--fail_on_error"])

    assert result.exit_code == 0
    assert mock_process.call_args[1]["extractor_config"].raise_on_failure is True
