# Fedora-macOS-Setup/macos_setup/main.py

import sys
from typing import Optional

from rich.markup import escape
from rich.text import Text

from macos_setup import console_output as con
from macos_setup.config import LOG_DIR, LOG_FILE_NAME
from macos_setup.errors import PrivilegeError, StepFailedError
from macos_setup.host import Host
from macos_setup.logger_utils import app_logger
from macos_setup.models import RunReport
from macos_setup.phases import build_phases
from macos_setup.runner import Runner, ensure_regular_user
from macos_setup.workspace import ScopedWorkspace

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def print_final_instructions(report: RunReport):
    """Shows the run summary and the reboot banner."""
    summary = Text.assemble(
        ("The entire macOS transformation and optimization is complete.\n", "default"),
        ("All settings have been applied automatically.\n\n", "default"),
        (f"Phases completed: {len(report.phases_completed)}  ", "dim"),
        (f"Steps run: {report.steps_run}  ", "dim"),
        (f"Skipped: {report.steps_skipped}  ", "dim"),
        (f"Elapsed: {report.elapsed_seconds:.0f}s\n\n", "dim"),
        ("To finish the process, please REBOOT your computer now.\n", "bold yellow"),
        ("After rebooting, your new desktop will be ready.", "default"),
    )
    con.print_rule()
    con.print_panel(summary, title="✅ Setup Complete! A Reboot is Required.", style="green")


def main(host: Optional[Host] = None) -> int:
    """Runs every phase inside a scoped workspace. Returns the process exit code."""
    host = host or Host()
    app_logger.info("Fedora macOS Setup started.")
    try:
        ensure_regular_user(host)
        with ScopedWorkspace() as workspace:
            report = Runner(host, build_phases(host, workspace)).run()
        app_logger.info(
            f"Run completed: {report.steps_run} steps run, {report.steps_skipped} skipped "
            f"in {report.elapsed_seconds:.1f}s."
        )
        print_final_instructions(report)
        return EXIT_OK
    except PrivilegeError as e:
        con.print_error(e)
        return EXIT_FAILURE
    except StepFailedError as e:
        app_logger.error(f"Run aborted: {e}")
        con.print_error(f"{e.phase_name}: '{e.step_description}' failed. No further steps were run.")
        if e.cause is not None:
            con.print_error(f"Cause: {escape(str(e.cause))}", icon=False)
        con.print_info(f"See the log file for details: {LOG_DIR / LOG_FILE_NAME}")
        return EXIT_FAILURE
    finally:
        app_logger.info("Fedora macOS Setup finished.")


def run():
    """Console-script entry point."""
    try:
        exit_code = main()
    except KeyboardInterrupt:
        app_logger.warning("Run cancelled by user.")
        con.print_info("\nOperation cancelled by user. Exiting.")
        exit_code = EXIT_INTERRUPTED
    except Exception as e:
        app_logger.critical(f"An unexpected critical error occurred: {e}", exc_info=True)
        con.console.print_exception(show_locals=False)
        con.print_error(f"An unexpected critical error occurred: {escape(str(e))}. Check the log file for details.")
        exit_code = EXIT_FAILURE
    sys.exit(exit_code)
