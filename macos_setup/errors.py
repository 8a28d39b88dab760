# Fedora-macOS-Setup/macos_setup/errors.py

from typing import Optional


class ProvisioningError(Exception):
    """Base class for every failure that stops a provisioning run."""


class PrivilegeError(ProvisioningError):
    """Raised when the run is started with superuser identity."""


class SchemaTimeoutError(ProvisioningError):
    """A gsettings schema did not become visible before the deadline."""

    def __init__(self, schema: str, timeout: float):
        self.schema = schema
        self.timeout = timeout
        super().__init__(f"GSettings schema '{schema}' was not available after {timeout:g}s.")


class InstallScriptError(ProvisioningError):
    """A third-party install script exited with an unexpected code."""

    def __init__(self, name: str, returncode: int, expected_returncode: int = 0):
        self.name = name
        self.returncode = returncode
        self.expected_returncode = expected_returncode
        super().__init__(
            f"Install script '{name}' exited with {returncode} (expected {expected_returncode})."
        )


class StepFailedError(ProvisioningError):
    """
    The one runtime failure kind: a step's external effect did not succeed.
    Carries where the run stopped and the original exception as `cause`.
    """

    def __init__(self, phase_name: str, step_description: str, cause: Optional[BaseException] = None):
        self.phase_name = phase_name
        self.step_description = step_description
        self.cause = cause
        message = f"Step '{step_description}' in '{phase_name}' failed"
        if cause is not None:
            message += f": {cause}"
        super().__init__(message)
