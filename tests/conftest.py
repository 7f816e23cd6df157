from __future__ import annotations

import json
from pathlib import Path
import sys
from typing import Any

import pytest


# Use a fixture to temporarily add the parent directory to sys.path for tests
@pytest.fixture(autouse=True, scope="session")
def add_parent_to_syspath():
    parent_dir = str(Path(__file__).resolve().parent.parent)
    sys.path.insert(0, parent_dir)
    yield
    try:
        sys.path.remove(parent_dir)
    except ValueError:
        pass


class ScriptedPrompt:
    """Prompt that replays canned answers and records every request."""

    def __init__(self, *answers: int | None) -> None:
        self._answers = list(answers)
        self.requests: list[Any] = []

    def choose(self, request: Any) -> int | None:
        self.requests.append(request)
        if not self._answers:
            raise AssertionError(f"Unexpected prompt: {request.prompt_title}")
        return self._answers.pop(0)


class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def notify(self, message: str) -> None:
        self.messages.append(message)


class WorkspaceBuilder:
    """Lay out .NET-style project trees under a temporary directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def project(
        self,
        name: str,
        *,
        folder: str | None = None,
        built: bool = True,
        frameworks: tuple[str, ...] = ("net8.0",),
        with_dll: bool = True,
        build_config: str = "Debug",
        launch_settings: dict[str, Any] | bytes | None = None,
    ) -> Path:
        project_dir = self.root / (folder or name)
        project_dir.mkdir(parents=True, exist_ok=True)
        (project_dir / f"{name}.csproj").write_text("<Project Sdk=\"Microsoft.NET.Sdk\" />\n")

        for framework in frameworks:
            out_dir = project_dir / "bin" / build_config / framework
            out_dir.mkdir(parents=True, exist_ok=True)
            if with_dll:
                (out_dir / f"{name}.dll").write_bytes(b"MZ")
            if built:
                (out_dir / f"{name}.runtimeconfig.json").write_text("{}")

        if launch_settings is not None:
            properties = project_dir / "Properties"
            properties.mkdir(exist_ok=True)
            settings_path = properties / "launchSettings.json"
            if isinstance(launch_settings, bytes):
                settings_path.write_bytes(launch_settings)
            else:
                settings_path.write_text(json.dumps(launch_settings))
        return project_dir

    def dll(self, project_dir: Path, name: str, framework: str = "net8.0") -> Path:
        return project_dir / "bin" / "Debug" / framework / f"{name}.dll"


def project_profile(**extra: Any) -> dict[str, Any]:
    entry = {"commandName": "Project"}
    entry.update(extra)
    return {"profiles": {"App": entry}}


@pytest.fixture
def workspace(tmp_path: Path) -> WorkspaceBuilder:
    return WorkspaceBuilder(tmp_path)


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def make_prompt():
    return ScriptedPrompt


@pytest.fixture
def make_profile():
    return project_profile
