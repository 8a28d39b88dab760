# Fedora-macOS-Setup/macos_setup/phases/power_user_apps.py

from pathlib import Path

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import Phase, Step


def _install_ulauncher(host: Host) -> None:
    util.enable_copr_repo(host, config.ULAUNCHER_COPR)
    util.install_dnf_packages(host, [config.ULAUNCHER_PACKAGE])
    util.systemctl_enable_now(host, config.ULAUNCHER_USER_SERVICE, user=True)


def build(host: Host, workspace: Path) -> Phase:
    return Phase(
        name="Phase 5: Power User Application Setup",
        description="Ulauncher as a Spotlight replacement and Sushi for Quick Look.",
        steps=[
            Step("Installing Ulauncher (Spotlight Replacement)...",
                 lambda: _install_ulauncher(host)),
            Step("Installing 'Sushi' for macOS-like File Preview (press Spacebar)...",
                 lambda: util.install_dnf_packages(host, [config.QUICK_LOOK_PACKAGE])),
        ],
    )
