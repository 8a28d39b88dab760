# Fedora-macOS-Setup/macos_setup/models.py

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class Step:
    """One external effect. `action` raises on failure; `condition` gates optional steps."""
    description: str
    action: Callable[[], Any]
    condition: Optional[Callable[[], bool]] = None


@dataclass
class Phase:
    name: str
    steps: List[Step] = field(default_factory=list)
    description: str = ""


@dataclass
class InstallScript:
    """
    Contract for a third-party install script that is fetched and executed as-is.

    Either `repo_url` (cloned, then `script` is run from inside the clone) or
    `url` (downloaded straight to `script`) must be set.
    """
    name: str
    script: str
    repo_url: Optional[str] = None
    url: Optional[str] = None
    args: List[str] = field(default_factory=list)
    expected_returncode: int = 0

    @classmethod
    def from_config(cls, entry: Dict[str, Any]) -> "InstallScript":
        return cls(
            name=entry["name"],
            script=entry["script"],
            repo_url=entry.get("repo_url"),
            url=entry.get("url"),
            args=list(entry.get("args", [])),
            expected_returncode=entry.get("expected_returncode", 0),
        )

    @property
    def clone_dir_name(self) -> str:
        if not self.repo_url:
            raise ValueError(f"Install script '{self.name}' has no repository to clone.")
        name = self.repo_url.rstrip("/").rsplit("/", 1)[-1]
        return name[:-4] if name.endswith(".git") else name


@dataclass
class RunReport:
    phases_completed: List[str] = field(default_factory=list)
    steps_run: int = 0
    steps_skipped: int = 0
    elapsed_seconds: float = 0.0
