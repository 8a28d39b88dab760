# Fedora-macOS-Setup/macos_setup/phases/power_and_security.py

from pathlib import Path

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import Phase, Step


def _configure_zram(host: Host) -> None:
    util.install_dnf_packages(host, [config.ZRAM_PACKAGE])
    util.write_system_file(host, config.ZRAM_CONF_PATH, config.ZRAM_CONF_CONTENT)
    util.systemctl_daemon_reload(host)


def build(host: Host, workspace: Path) -> Phase:
    """
    Phase 6: Security, Battery & Performance.
    Config files are written wholesale; whatever was there before is replaced.
    """
    return Phase(
        name="Phase 6: Automated Security, Battery & Performance Tuning",
        description="Firewall, TLP, ZRAM, swappiness, multimedia drivers and Flathub.",
        steps=[
            Step("Ensuring Firewall is active...",
                 lambda: util.systemctl_enable_now(host, config.FIREWALL_SERVICE)),
            Step("Installing TLP for advanced power management...",
                 lambda: util.install_dnf_packages(host, config.TLP_PACKAGES)),
            Step("Masking conflicting power-profiles-daemon service...",
                 lambda: util.systemctl_mask(host, config.CONFLICTING_POWER_SERVICE)),
            Step("Applying aggressive battery-saving TLP configuration...",
                 lambda: util.write_system_file(host, config.TLP_CONF_PATH, config.TLP_CONF_CONTENT)),
            Step("Enabling and starting TLP service...",
                 lambda: util.systemctl_enable_now(host, config.TLP_SERVICE)),
            Step("Optimizing RAM management with ZRAM...",
                 lambda: _configure_zram(host)),
            Step("Reducing swappiness to prioritize RAM...",
                 lambda: util.write_system_file(host, config.SWAPPINESS_CONF_PATH, config.SWAPPINESS_CONF_CONTENT)),
            Step("Installing hardware video acceleration drivers...",
                 lambda: util.install_dnf_groups(host, [config.MULTIMEDIA_GROUP], with_optional=True)),
            Step("AMD Ryzen CPU detected. Installing P-State tools for monitoring...",
                 lambda: util.install_dnf_packages(host, [config.AMD_PSTATE_PACKAGE]),
                 condition=lambda: util.cpu_is_amd(host)),
            Step("Setting up Flatpak and Flathub repository...",
                 lambda: util.ensure_flathub_remote(host)),
        ],
    )
