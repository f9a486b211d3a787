"""Unit tests for the CLI entry point."""

import logging
from unittest.mock import patch

import pytest

from pfp.cli.main import EXIT_DATAERR, EXIT_PERMISSION_DENIED, main
from pfp.exceptions import CommandError, EmptyPickError
from pfp.log import TRACE


@pytest.fixture(autouse=True)
def quiet_process():
    """Keep main() from installing signal handlers or reconfiguring the root logger."""
    with patch("pfp.cli.main.setup_signal_handling"), patch("pfp.cli.main.configure_logging") as mock_logging, patch(
        "pfp.cli.main.signal_handler"
    ) as mock_handler:
        mock_handler.exit_code.return_value = None
        yield mock_logging


@pytest.fixture
def config_file(tmp_path, monkeypatch):
    (tmp_path / "work" / "app" / ".git").mkdir(parents=True)
    monkeypatch.setenv("PFP_TEST_ROOT", str(tmp_path))
    path = tmp_path / "config.json"
    path.write_text('{\n  // test\n  "include": [{"paths": ["$PFP_TEST_ROOT/work"]}],\n}\n', encoding="utf-8")
    return path


def test_no_command_prints_help(capsys):
    main([])
    assert "usage: pfp" in capsys.readouterr().out


def test_list_writes_paths(config_file, tmp_path):
    output = tmp_path / "out.txt"
    main(["-c", str(config_file), "list", "-o", str(output)])
    assert output.read_text(encoding="utf-8").splitlines() == [str(tmp_path / "work"), str(tmp_path / "work" / "app")]


@pytest.mark.parametrize("flags,level", [([], None), (["-v"], logging.INFO), (["-vvv"], TRACE)])
def test_verbosity_sets_log_level(quiet_process, config_file, tmp_path, flags, level):
    main([*flags, "-c", str(config_file), "list", "-o", str(tmp_path / "out.txt")])
    quiet_process.assert_called_once_with(level)


def test_config_error_exit_code(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text('{"include": [{"paths": ["/a"], "depth": 999}]}', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(bad), "list"])
    assert excinfo.value.code == EXIT_DATAERR
    assert capsys.readouterr().err.startswith("Config error: Invalid config")


def test_invalid_pattern_is_a_config_error(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text('{"include": [{"paths": ["/a"], "markers": {"pattern": ["[a-"]}}]}', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(bad), "list"])
    assert excinfo.value.code == EXIT_DATAERR
    assert "Invalid pattern '[a-'" in capsys.readouterr().err


def test_missing_explicit_config(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(tmp_path / "missing.json"), "list"])
    assert excinfo.value.code == EXIT_DATAERR
    assert "Read config" in capsys.readouterr().err


def test_cancelled_pick_exits_quietly(config_file, capsys):
    with patch("pfp.cli.commands.pick_project", side_effect=EmptyPickError()):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(config_file), "new-session"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err == ""


def test_permission_denied_exit_code(config_file, capsys):
    with patch("pfp.cli.commands.collect_paths", side_effect=PermissionError("Access denied to /x")):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(config_file), "-P", "fail", "list"])
    assert excinfo.value.code == EXIT_PERMISSION_DENIED
    assert "Access denied to /x" in capsys.readouterr().err


def test_other_errors_exit_with_one(config_file, capsys):
    with patch("pfp.cli.commands.pick_project", side_effect=CommandError("fzf", "not found")):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(config_file), "new-pane"])
    assert excinfo.value.code == 1
    assert capsys.readouterr().err.strip() == "Error: Failed to run fzf: not found"


def test_unset_variable_in_root(tmp_path, monkeypatch, capsys):
    monkeypatch.delenv("PFP_TEST_UNSET", raising=False)
    path = tmp_path / "config.json"
    path.write_text('{"include": [{"paths": ["$PFP_TEST_UNSET/work"]}]}', encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        main(["-c", str(path), "list"])
    assert excinfo.value.code == 1
    assert "environment variable not found: PFP_TEST_UNSET" in capsys.readouterr().err


def test_signal_exit_code(config_file, tmp_path):
    with patch("pfp.cli.main.signal_handler") as mock_handler:
        mock_handler.exit_code.return_value = 141
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(config_file), "list", "-o", str(tmp_path / "out.txt")])
    assert excinfo.value.code == 141
