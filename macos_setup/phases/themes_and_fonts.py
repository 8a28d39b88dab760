# Fedora-macOS-Setup/macos_setup/phases/themes_and_fonts.py

from pathlib import Path

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import InstallScript, Phase, Step

FONTS_CLONE_DIR_NAME = "San-Francisco-Pro-Fonts"


def _install_theme(host: Host, workspace: Path, script: InstallScript) -> None:
    script_path = util.fetch_install_script(host, script, workspace)
    util.run_install_script(host, script, script_path)


def _install_fonts(host: Host, workspace: Path) -> None:
    clone_dir = workspace / FONTS_CLONE_DIR_NAME
    fonts_dir = host.home / config.USER_FONTS_REL_PATH

    util.git_clone(host, config.FONTS_REPO_URL, clone_dir)
    util.ensure_dir_exists(host, fonts_dir)
    font_files = util.find_files(clone_dir, config.FONT_FILE_PATTERN)
    host.logger.info(f"Found {len(font_files)} font files in {clone_dir}.")
    util.copy_files(host, font_files, fonts_dir)
    util.refresh_font_cache(host)


def build(host: Host, workspace: Path) -> Phase:
    steps = []
    for entry in config.THEME_INSTALLERS:
        script = InstallScript.from_config(entry)
        steps.append(Step(
            f"Installing {script.name}...",
            lambda script=script: _install_theme(host, workspace, script),
        ))
    steps.append(Step("Installing SF Pro Fonts...", lambda: _install_fonts(host, workspace)))

    return Phase(
        name="Phase 2: Installing macOS Theme & Fonts",
        description="WhiteSur GTK and icon themes, McMojave cursors, SF Pro fonts.",
        steps=steps,
    )
