"""Tests for the default collaborator services."""

from __future__ import annotations

import io
import subprocess

from dapcs.resolution import SelectionRequest
from dapcs.services import ConsoleNotifier
from dapcs.services import ConsolePrompt
from dapcs.services import LanguageServerClient
from dapcs.services import LocalFileSystem
from dapcs.services import ProcessInfo
from dapcs.services import ProcessPicker
from dapcs.services import WorkspaceRootResolver
from dapcs.services import list_processes
from dapcs.services.processes import parse_ps_output
from dapcs.services.prompt import render_request


def _request() -> SelectionRequest:
    return SelectionRequest("Select .NET Version:", (("net6.0", "a"), ("net8.0", "b")))


class TestLocalFileSystem:
    def test_find_by_name_and_predicate(self, tmp_path) -> None:
        (tmp_path / "a" / "b").mkdir(parents=True)
        (tmp_path / "a" / "b" / "App.dll").write_bytes(b"")
        (tmp_path / "a" / "App.dll").write_bytes(b"")
        (tmp_path / "a" / "App.pdb").write_bytes(b"")
        fs = LocalFileSystem()

        by_name = fs.find("App.dll", str(tmp_path))
        by_predicate = fs.find(lambda name, _path: name.startswith("App."), str(tmp_path))

        assert sorted(by_name) == sorted(
            [str(tmp_path / "a" / "App.dll"), str(tmp_path / "a" / "b" / "App.dll")]
        )
        assert len(by_predicate) == 3

    def test_find_respects_limit_and_type(self, tmp_path) -> None:
        (tmp_path / "one").mkdir()
        (tmp_path / "two").mkdir()
        (tmp_path / "one" / "x").write_text("")
        (tmp_path / "two" / "x").write_text("")
        fs = LocalFileSystem()

        assert len(fs.find("x", str(tmp_path), limit=1)) == 1
        assert fs.find("x", str(tmp_path), limit=0) == []
        assert fs.find("one", str(tmp_path), type="directory") == [str(tmp_path / "one")]

    def test_read_bytes(self, tmp_path) -> None:
        target = tmp_path / "f.bin"
        target.write_bytes(b"\x01\x02")
        fs = LocalFileSystem()

        assert fs.read_bytes(str(target)) == b"\x01\x02"
        assert fs.read_bytes(str(tmp_path / "missing")) is None
        assert fs.is_file(str(target)) is True
        assert fs.is_file(str(tmp_path)) is False


class TestConsolePrompt:
    def test_render_request(self) -> None:
        assert render_request(_request()) == [
            "Select .NET Version:",
            "",
            "1: net6.0",
            "2: net8.0",
            "",
        ]

    def test_numeric_answer(self) -> None:
        output = io.StringIO()
        prompt = ConsolePrompt(input_func=lambda _message: " 2 ", output=output)

        assert prompt.choose(_request()) == 2
        assert "1: net6.0" in output.getvalue()

    def test_empty_or_garbage_answer_cancels(self) -> None:
        assert ConsolePrompt(input_func=lambda _m: "", output=io.StringIO()).choose(_request()) == 0
        assert ConsolePrompt(input_func=lambda _m: "abc", output=io.StringIO()).choose(_request()) == 0

    def test_eof_cancels(self) -> None:
        def raise_eof(_message: str) -> str:
            raise EOFError

        assert ConsolePrompt(input_func=raise_eof, output=io.StringIO()).choose(_request()) == 0


def test_console_notifier_writes_line() -> None:
    stream = io.StringIO()

    ConsoleNotifier(stream).notify("Could not find DLL")

    assert stream.getvalue() == "Could not find DLL\n"


class TestWorkspaceRootResolver:
    def test_known_language_server_wins(self) -> None:
        resolver = WorkspaceRootResolver(
            [LanguageServerClient("pyright", "/py"), LanguageServerClient("omnisharp", "/sln")],
            cwd=lambda: "/cwd",
        )

        assert resolver.resolve() == "/sln"

    def test_falls_back_to_cwd(self) -> None:
        resolver = WorkspaceRootResolver(
            lambda: [LanguageServerClient("roslyn", None), LanguageServerClient("pyright", "/py")],
            cwd=lambda: "/cwd",
        )

        assert resolver.resolve() == "/cwd"

    def test_custom_known_servers(self) -> None:
        resolver = WorkspaceRootResolver(
            [LanguageServerClient("csharp_ls", "/ls")],
            known_servers=("csharp_ls",),
            cwd=lambda: "/cwd",
        )

        assert resolver.resolve() == "/ls"


class TestProcesses:
    def test_parse_ps_output(self) -> None:
        output = "    1 systemd\n  420 dotnet\nbogus line\n  x  y\n"

        assert parse_ps_output(output) == [ProcessInfo(1, "systemd"), ProcessInfo(420, "dotnet")]

    def test_list_processes_uses_ps(self) -> None:
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0, stdout="  7 dotnet\n", stderr="")

        assert list_processes(run=fake_run) == [ProcessInfo(7, "dotnet")]
        assert calls[0][0][0] == "ps"
        assert calls[0][1]["check"] is True

    def test_list_processes_failure_is_empty(self) -> None:
        def failing_run(cmd, **_kwargs):
            raise FileNotFoundError(cmd[0])

        assert list_processes(run=failing_run) == []

    def test_picker_returns_chosen_pid(self, make_prompt) -> None:
        prompt = make_prompt(2)
        picker = ProcessPicker(prompt, lister=lambda: [ProcessInfo(1, "init"), ProcessInfo(42, "dotnet")])

        assert picker.pick() == 42
        assert prompt.requests[0].labels() == ["1 init", "42 dotnet"]

    def test_picker_cancel_and_empty(self, make_prompt) -> None:
        assert ProcessPicker(make_prompt(0), lister=lambda: [ProcessInfo(1, "init")]).pick() is None
        assert ProcessPicker(make_prompt(), lister=list).pick() is None
