"""Shared fixtures: a fake host that records commands instead of running them."""

import logging
import os
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

import pytest

from macos_setup.host import Host

DASH_TO_DOCK_SCHEMA = "org.gnome.shell.extensions.dash-to-dock"
INTEL_LSCPU = "Architecture: x86_64\nVendor ID: GenuineIntel\nModel name: Intel(R) Core(TM) i7\n"
AMD_LSCPU = "Architecture: x86_64\nVendor ID: AuthenticAMD\nModel name: AMD Ryzen 7 7840U\n"


@dataclass
class RecordedCommand:
    argv: List[str]
    cwd: Optional[str] = None
    input_text: Optional[str] = None
    workspace_present: Optional[bool] = None

    @property
    def line(self) -> str:
        return " ".join(self.argv)


class FakeHost(Host):
    """Host double: records every command, fakes the few outputs the phases read."""

    def __init__(
        self,
        home: Path,
        root: bool = False,
        cpu_info: str = INTEL_LSCPU,
        fail_on: Optional[Callable[[List[str]], bool]] = None,
        schema_ready_after: int = 0,
        watch_path: Optional[Path] = None,
    ):
        super().__init__(logger=logging.getLogger("tests.fake_host"))
        self._home = home
        self.root = root
        self.cpu_info = cpu_info
        self.fail_on = fail_on
        self.schema_ready_after = schema_ready_after
        self.watch_path = watch_path
        self.schema_polls = 0
        self.clock = 0.0
        self.sleeps: List[float] = []
        self.commands: List[RecordedCommand] = []

    def is_root(self) -> bool:
        return self.root

    @property
    def home(self) -> Path:
        return self._home

    @property
    def lines(self) -> List[str]:
        return [command.line for command in self.commands]

    def run(self, command, sudo=False, cwd=None, input_text=None, capture_output=False, check=True):
        argv = [str(part) for part in command]
        if sudo:
            argv.insert(0, "sudo")
        self.commands.append(RecordedCommand(
            argv,
            cwd=str(cwd) if cwd else None,
            input_text=input_text,
            workspace_present=self.watch_path.is_dir() if self.watch_path else None,
        ))

        if self.fail_on and self.fail_on(argv):
            if check:
                raise subprocess.CalledProcessError(1, argv, output="", stderr="simulated failure")
            return subprocess.CompletedProcess(argv, 1, "", "simulated failure")
        return subprocess.CompletedProcess(argv, 0, self._stdout_for(argv), "")

    def _stdout_for(self, argv: List[str]) -> str:
        if argv[:3] == ["rpm", "-E", "%fedora"]:
            return "40\n"
        if argv == ["lscpu"]:
            return self.cpu_info
        if argv[0] == "gsettings" and argv[-1] == "list-schemas":
            self.schema_polls += 1
            schemas = ["org.gnome.desktop.interface"]
            if self.schema_polls > self.schema_ready_after:
                schemas.append(DASH_TO_DOCK_SCHEMA)
            return "\n".join(schemas) + "\n"
        if argv[:2] == ["git", "clone"]:
            dest = Path(argv[-1])
            dest.mkdir(parents=True, exist_ok=True)
            if "Fonts" in dest.name:
                (dest / "SF-Fonts").mkdir(exist_ok=True)
                (dest / "SF-Fonts" / "SF-Pro-Display-Regular.otf").write_bytes(b"OTTO")
                (dest / "SF-Fonts" / "SF-Pro-Text-Bold.otf").write_bytes(b"OTTO")
        return ""

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self.clock += seconds

    def monotonic(self) -> float:
        return self.clock


@pytest.fixture
def fake_home(tmp_path):
    home = tmp_path / "home" / "user"
    home.mkdir(parents=True)
    return home


@pytest.fixture
def fake_host(fake_home):
    return FakeHost(home=fake_home)


@pytest.fixture
def temp_root(tmp_path, monkeypatch):
    """Points tempfile.gettempdir() at a private directory so workspaces land there."""
    root = tmp_path / "tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def expected_workspace(temp_root):
    return temp_root / f"macos-setup-{os.getpid()}"


@pytest.fixture
def make_host(fake_home):
    """Factory for FakeHost with per-test options."""
    def _make(**kwargs):
        return FakeHost(home=fake_home, **kwargs)
    return _make
