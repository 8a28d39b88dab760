# Fedora-macOS-Setup/macos_setup/host.py

import logging
import os
import subprocess
import time
from pathlib import Path
from typing import List, Optional, Sequence, Union

from rich.markup import escape

from macos_setup import console_output as con
from macos_setup.logger_utils import app_logger
from macos_setup.system_utils import run_command


class Host:
    """
    The machine being provisioned. Every external effect goes through `run`,
    so tests can substitute a fake and never touch a real system.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or app_logger

    def is_root(self) -> bool:
        return os.geteuid() == 0

    @property
    def home(self) -> Path:
        return Path.home()

    def run(
        self,
        command: Sequence[Union[str, Path]],
        sudo: bool = False,
        cwd: Optional[Union[str, Path]] = None,
        input_text: Optional[str] = None,
        capture_output: bool = False,
        check: bool = True
    ) -> subprocess.CompletedProcess:
        """Runs one command, elevating with sudo for this command only when asked."""
        cmd: List[str] = [str(part) for part in command]
        if sudo:
            cmd.insert(0, "sudo")
        return run_command(
            cmd,
            capture_output=capture_output,
            check=check,
            cwd=cwd,
            input_text=input_text,
            print_fn_error=lambda msg: con.print_error(escape(msg)),
            logger=self.logger
        )

    def cpu_vendor_info(self) -> str:
        """lscpu output; empty when the probe is unavailable so optional steps are skipped."""
        try:
            proc = self.run(["lscpu"], capture_output=True, check=False)
        except FileNotFoundError:
            self.logger.warning("'lscpu' not found. CPU vendor could not be determined.")
            con.print_warning("'lscpu' not found. Hardware-specific steps will be skipped.")
            return ""
        if proc.returncode != 0:
            return ""
        return proc.stdout or ""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def monotonic(self) -> float:
        return time.monotonic()
