"""Unit tests for fzf selection."""

import subprocess
from unittest.mock import patch

import pytest

from pfp.exceptions import CommandError, EmptyPickError
from pfp.selector import execute_fzf_command, select_from_list


def completed(stdout):
    return subprocess.CompletedProcess(args=["fzf"], returncode=0, stdout=stdout)


@patch("pfp.selector.subprocess.run")
def test_execute_fzf_command(mock_run):
    mock_run.return_value = completed("/repo/a\n")

    assert execute_fzf_command(["--layout", "reverse"], "/repo/a\n/repo/b") == "/repo/a\n"
    mock_run.assert_called_once_with(
        ["fzf", "--layout", "reverse"],
        input="/repo/a\n/repo/b",
        stdout=subprocess.PIPE,
        text=True,
        check=False,
    )


@patch("pfp.selector.subprocess.run", side_effect=FileNotFoundError(2, "No such file or directory"))
def test_execute_fzf_command_missing_binary(mock_run):
    with pytest.raises(CommandError, match="Failed to run fzf"):
        execute_fzf_command([], "")


@patch("pfp.selector.subprocess.run")
def test_select_from_list_joins_items_and_adds_header(mock_run):
    mock_run.return_value = completed("b\n")

    assert select_from_list(["a", "b"], "Projects:", ["--layout", "reverse"]) == "b\n"
    args, kwargs = mock_run.call_args
    assert args[0] == ["fzf", "--layout", "reverse", "--header", "Projects:"]
    assert kwargs["input"] == "a\nb"


@patch("pfp.selector.subprocess.run")
def test_select_from_list_accepts_text(mock_run):
    mock_run.return_value = completed("x\n")
    select_from_list("x\ny", "Header")
    assert mock_run.call_args.kwargs["input"] == "x\ny"


@patch("pfp.selector.subprocess.run")
def test_select_from_list_cancelled(mock_run):
    mock_run.return_value = subprocess.CompletedProcess(args=["fzf"], returncode=130, stdout="")
    with pytest.raises(EmptyPickError):
        select_from_list(["a"], "Header")
