# Fedora-macOS-Setup/macos_setup/config.py

import os
from pathlib import Path

# --- Constants ---
APP_NAME = "fedora-macos-setup"
WORKSPACE_PREFIX = "macos-setup"

LOG_DIR = Path.home() / ".config" / APP_NAME
LOG_FILE_NAME = "fedora_macos_setup.log"
LOG_LEVEL_ENV_VAR = "FEDORA_MACOS_SETUP_LOG_LEVEL"
LOG_LEVEL = os.environ.get(LOG_LEVEL_ENV_VAR, "DEBUG").upper()

# Readiness check for schemas registered by freshly installed extensions
SCHEMA_WAIT_TIMEOUT = 30.0   # seconds
SCHEMA_POLL_INTERVAL = 1.0   # seconds

# --- Phase 1: System Update & Prerequisites ---
RPMFUSION_RELEASE_URLS = [
    "https://mirrors.rpmfusion.org/free/fedora/rpmfusion-free-release-{version}.noarch.rpm",
    "https://mirrors.rpmfusion.org/nonfree/fedora/rpmfusion-nonfree-release-{version}.noarch.rpm",
]

ESSENTIAL_PACKAGES = [
    "gnome-tweaks", "git", "sassc", "wget", "p7zip", "p7zip-plugins", "curl", "flatpak",
    "gnome-shell-extension-user-theme", "gnome-extensions-app",
]

# --- Phase 2: Themes & Fonts ---
# Each entry is the contract for a vendor install script: the repo to clone,
# the script inside the clone, its arguments and the exit code that means success.
THEME_INSTALLERS = [
    {
        "name": "WhiteSur GTK Theme",
        "repo_url": "https://github.com/vinceliuice/WhiteSur-gtk-theme.git",
        "script": "install.sh",
        "args": ["-m", "-N", "glassy", "--round", "-l"],
        "expected_returncode": 0,
    },
    {
        "name": "WhiteSur Icon Theme",
        "repo_url": "https://github.com/vinceliuice/WhiteSur-icon-theme.git",
        "script": "install.sh",
        "args": ["-a"],
        "expected_returncode": 0,
    },
    {
        "name": "McMojave Cursor Theme",
        "repo_url": "https://github.com/vinceliuice/McMojave-cursors.git",
        "script": "install.sh",
        "args": [],
        "expected_returncode": 0,
    },
]

FONTS_REPO_URL = "https://github.com/sahibjotsaggu/San-Francisco-Pro-Fonts.git"
FONT_FILE_PATTERN = "*.otf"
USER_FONTS_REL_PATH = Path(".local/share/fonts")

# --- Phase 3: Look & Feel ---
# (schema, key, value, description)
INTERFACE_SETTINGS = [
    ("org.gnome.desktop.interface", "gtk-theme", "WhiteSur-Dark", "GTK theme"),
    ("org.gnome.desktop.interface", "icon-theme", "WhiteSur", "icon theme"),
    ("org.gnome.desktop.interface", "cursor-theme", "McMojave-cursors", "cursor theme"),
    ("org.gnome.desktop.interface", "font-name", "SF Pro Display 11", "interface font"),
]
BUTTON_LAYOUT_SETTING = (
    "org.gnome.desktop.wm.preferences", "button-layout", "close,minimize,maximize:", "window buttons on the left",
)
NATURAL_SCROLL_SETTINGS = [
    ("org.gnome.desktop.peripherals.mouse", "natural-scroll", "true", "mouse natural scrolling"),
    ("org.gnome.desktop.peripherals.touchpad", "natural-scroll", "true", "touchpad natural scrolling"),
]

# --- Phase 4: GNOME Extensions ---
EXTENSION_INSTALLER = {
    "name": "gnome-shell-extension-installer",
    "url": "https://git.io/Jv5kl",
    "script": "gnome-ext-install.sh",
    "expected_returncode": 0,
}

GNOME_EXTENSIONS = [
    {"name": "Dash to Dock", "id": "307", "uuid": "dash-to-dock@micxgx.gmail.com"},
    {"name": "Blur my Shell", "id": "3193", "uuid": "blur-my-shell@aunetx"},
]

USER_EXTENSIONS_REL_PATH = Path(".local/share/gnome-shell/extensions")

DASH_TO_DOCK_UUID = "dash-to-dock@micxgx.gmail.com"
DASH_TO_DOCK_SCHEMA ="org.gnome.shell.extensions.dash-to-dock"
DASH_TO_DOCK_SETTINGS = [
    (DASH_TO_DOCK_SCHEMA, "dock-position", "'BOTTOM'", "dock at the bottom"),
    (DASH_TO_DOCK_SCHEMA, "extend-height", "false", "dock does not span the screen"),
    (DASH_TO_DOCK_SCHEMA, "dash-max-icon-size", "48", "dock icon size"),
    (DASH_TO_DOCK_SCHEMA, "show-apps-at-top", "true", "apps button first"),
]

# --- Phase 5: Power User Apps ---
ULAUNCHER_COPR = "atim/ulauncher"
ULAUNCHER_PACKAGE = "ulauncher"
ULAUNCHER_USER_SERVICE = "ulauncher"
QUICK_LOOK_PACKAGE = "gnome-sushi"

# --- Phase 6: Security, Battery & Performance ---
FIREWALL_SERVICE = "firewalld"
TLP_PACKAGES = ["tlp", "tlp-rdw"]
CONFLICTING_POWER_SERVICE = "power-profiles-daemon"
TLP_SERVICE = "tlp.service"
TLP_CONF_PATH = Path("/etc/tlp.conf")
TLP_SETTINGS = [
    ("CPU_SCALING_GOVERNOR_ON_AC", "performance"),
    ("CPU_SCALING_GOVERNOR_ON_BAT", "powersave"),
    ("CPU_ENERGY_PERF_POLICY_ON_AC", "performance"),
    ("CPU_ENERGY_PERF_POLICY_ON_BAT", "power"),
    ("SOUND_POWER_SAVE_ON_BAT", "1"),
    ("PCIE_ASPM_ON_BAT", "powersupersave"),
    ("RUNTIME_PM_ON_BAT", "auto"),
    ("USB_AUTOSUSPEND", "1"),
    ("WOL_DISABLE", "Y"),
    ("WIFI_PWR_ON_BAT", "on"),
]
TLP_CONF_CONTENT = "# --- Automated Max Battery Configuration ---\n" + "".join(
    f"{key}={value}\n" for key, value in TLP_SETTINGS
)

ZRAM_PACKAGE = "zram-generator"
ZRAM_CONF_PATH = Path("/etc/systemd/zram-generator.conf")
ZRAM_CONF_CONTENT = "[zram0]\nzram-size = ram / 2\ncompression-algorithm = zstd\n"

SWAPPINESS_CONF_PATH = Path("/etc/sysctl.d/99-swappiness.conf")
SWAPPINESS_CONF_CONTENT = "vm.swappiness=10\n"

MULTIMEDIA_GROUP = "multimedia"
AMD_CPU_MARKER = "AMD"
AMD_PSTATE_PACKAGE = "amd-pstate-utils"

FLATHUB_REMOTE_NAME = "flathub"
FLATHUB_REPO_URL = "https://flathub.org/repo/flathub.flatpakrepo"
