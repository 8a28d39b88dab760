# Fedora-macOS-Setup/macos_setup/phases/system_update.py

from pathlib import Path

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import Phase, Step


def build(host: Host, workspace: Path) -> Phase:
    """
    Phase 1: System Update & Prerequisites.
    Refreshes the system, enables RPM Fusion and installs the tools later phases rely on.
    """
    return Phase(
        name="Phase 1: System Update & Prerequisites",
        description="System update, RPM Fusion repositories and essential tools.",
        steps=[
            Step("Updating all system packages...",
                 lambda: util.upgrade_system_dnf(host)),
            Step("Enabling RPM Fusion (Free and Non-Free) repositories...",
                 lambda: util.enable_rpmfusion(host)),
            Step("Installing essential tools and dependencies...",
                 lambda: util.install_dnf_packages(host, config.ESSENTIAL_PACKAGES)),
        ],
    )
