# Fedora-macOS-Setup/macos_setup/workspace.py

import os
import shutil
import signal
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

from macos_setup.config import WORKSPACE_PREFIX
from macos_setup.logger_utils import app_logger

# Signals that would otherwise kill the process without unwinding `finally` blocks.
# SIGINT already arrives as KeyboardInterrupt.
TERMINATING_SIGNALS = tuple(
    sig for sig in (getattr(signal, "SIGTERM", None), getattr(signal, "SIGHUP", None)) if sig is not None
)


def _raise_system_exit(signum, frame):
    app_logger.warning(f"Received signal {signum}. Aborting run.")
    raise SystemExit(128 + signum)


class ScopedWorkspace:
    """
    A temporary directory named after the current process, removed on every exit path.

    Usage:
        with ScopedWorkspace() as workspace:
            git_clone(host, url, workspace / "repo")
    """

    def __init__(self, prefix: str = WORKSPACE_PREFIX, base_dir: Optional[Union[str, Path]] = None):
        self.prefix = prefix
        self.base_dir = Path(base_dir) if base_dir else Path(tempfile.gettempdir())
        self._path: Optional[Path] = None
        self._previous_handlers: Dict[int, object] = {}

    @property
    def path(self) -> Path:
        if self._path is None:
            raise RuntimeError("Workspace is not active. Use it inside a 'with' block.")
        return self._path

    def __enter__(self) -> Path:
        path = self.base_dir / f"{self.prefix}-{os.getpid()}"
        if path.exists():
            # Leftover from an earlier process with the same pid
            app_logger.warning(f"Removing stale workspace {path}.")
            shutil.rmtree(path)
        path.mkdir(parents=True, mode=0o700)
        self._path = path
        self._install_signal_handlers()
        app_logger.info(f"Workspace created: {path}")
        return path

    def __exit__(self, exc_type, exc, tb) -> bool:
        try:
            self.cleanup()
        finally:
            self._restore_signal_handlers()
        return False  # never swallow the exception that ended the run

    def cleanup(self) -> None:
        if self._path is None:
            return
        shutil.rmtree(self._path, ignore_errors=True)
        if self._path.exists():
            app_logger.error(f"Workspace {self._path} could not be fully removed.")
        else:
            app_logger.info(f"Workspace removed: {self._path}")
        self._path = None

    def _install_signal_handlers(self) -> None:
        for sig in TERMINATING_SIGNALS:
            try:
                self._previous_handlers[sig] = signal.signal(sig, _raise_system_exit)
            except ValueError:
                # signal.signal only works from the main thread
                app_logger.debug(f"Cannot install handler for signal {sig} outside the main thread.")

    def _restore_signal_handlers(self) -> None:
        for sig, handler in self._previous_handlers.items():
            signal.signal(sig, handler)
        self._previous_handlers.clear()
