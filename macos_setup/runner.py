# Fedora-macOS-Setup/macos_setup/runner.py

import subprocess
from typing import Sequence

from macos_setup import console_output as con
from macos_setup.errors import PrivilegeError, ProvisioningError, StepFailedError
from macos_setup.host import Host
from macos_setup.models import Phase, RunReport

ROOT_REFUSAL_MESSAGE = "Please run as a regular user (not root/sudo)."

# Failures a step action may raise. Anything else is a bug and propagates unchanged.
STEP_FAILURES = (subprocess.CalledProcessError, OSError, ValueError, ProvisioningError)


def ensure_regular_user(host: Host) -> None:
    """Each step elevates on its own, so the run itself must not start as root."""
    if host.is_root():
        host.logger.critical("Refusing to run with superuser identity.")
        raise PrivilegeError(ROOT_REFUSAL_MESSAGE)


class Runner:
    """
    Runs phases in declared order and their steps in declared order.
    The first failing step aborts the whole run with StepFailedError.
    """

    def __init__(self, host: Host, phases: Sequence[Phase]):
        self.host = host
        self.phases = list(phases)
        self.log = host.logger

    def run(self) -> RunReport:
        ensure_regular_user(self.host)

        report = RunReport()
        started = self.host.monotonic()
        for phase in self.phases:
            self.log.info(f"Starting '{phase.name}' ({len(phase.steps)} steps). {phase.description}".rstrip())
            con.print_step(phase.name)
            for step in phase.steps:
                if step.condition is not None and not step.condition():
                    self.log.info(f"Skipping '{step.description}': condition not met.")
                    con.print_skipped(step.description)
                    report.steps_skipped += 1
                    continue

                con.print_sub_step(step.description)
                self.log.info(f"Step: {step.description}")
                try:
                    step.action()
                except STEP_FAILURES as e:
                    self.log.error(f"'{phase.name}' aborted at '{step.description}': {e}", exc_info=True)
                    raise StepFailedError(phase.name, step.description, e) from e
                report.steps_run += 1

            report.phases_completed.append(phase.name)
            con.print_success(f"{phase.name} completed.")
            self.log.info(f"'{phase.name}' completed.")

        report.elapsed_seconds = self.host.monotonic() - started
        return report
