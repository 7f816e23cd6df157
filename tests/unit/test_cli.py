"""Tests for the ``dapcs`` command line."""

from __future__ import annotations

import json

import pytest

from dapcs import cli


def test_adapter_command_prints_definition(capsys) -> None:
    assert cli.main(["--netcoredbg", "/opt/ncdbg", "adapter"]) == cli.EXIT_OK

    payload = json.loads(capsys.readouterr().out)
    assert payload == {"type": "executable", "command": "/opt/ncdbg", "args": ["--interpreter=vscode"]}


def test_resolve_prints_launch_configuration(workspace, capsys, make_profile) -> None:
    project_dir = workspace.project("App", launch_settings=make_profile(environmentVariables={"FOO": "bar"}))

    assert cli.main(["resolve", "--cwd", str(workspace.root)]) == cli.EXIT_OK

    payload = json.loads(capsys.readouterr().out)
    assert payload["name"] == "Launch Project"
    assert payload["cwd"] == str(project_dir)
    assert payload["program"] == str(workspace.dll(project_dir, "App"))
    assert payload["env"] == {"FOO": "bar"}


def test_resolve_uses_language_server_root(workspace, capsys, tmp_path_factory) -> None:
    project_dir = workspace.project("App")
    elsewhere = tmp_path_factory.mktemp("elsewhere")

    code = cli.main(
        [
            "resolve",
            "--cwd",
            str(elsewhere),
            "--language-server",
            f"roslyn={workspace.root}",
        ]
    )

    assert code == cli.EXIT_OK
    assert json.loads(capsys.readouterr().out)["cwd"] == str(project_dir)


def test_resolve_empty_workspace_aborts(workspace, capsys) -> None:
    assert cli.main(["resolve", "--cwd", str(workspace.root)]) == cli.EXIT_ABORTED

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Is the project built?" in captured.err


def test_resolve_with_release_build(workspace, capsys) -> None:
    workspace.project("App", build_config="Release")

    assert cli.main(["resolve", "--cwd", str(workspace.root), "--build-config", "Release"]) == cli.EXIT_OK
    assert "Release" in json.loads(capsys.readouterr().out)["program"]


def test_invalid_option_is_a_setup_error(workspace, caplog) -> None:
    assert cli.main(["--netcoredbg", "", "adapter"]) == cli.EXIT_ERROR
    assert cli.main(["resolve", "--cwd", str(workspace.root), "--build-config", ""]) == cli.EXIT_ERROR
    assert "setup failed" in caplog.text
    assert "netcoredbg.path" in caplog.text


def test_attach_without_processes_aborts(monkeypatch) -> None:
    monkeypatch.setattr("dapcs.cli.list_processes", lambda: [])

    assert cli.main(["attach"]) == cli.EXIT_ABORTED


def test_bad_language_server_argument() -> None:
    with pytest.raises(SystemExit):
        cli.main(["resolve", "--language-server", "roslyn"])
