# Fedora-macOS-Setup/macos_setup/phases/look_and_feel.py

from pathlib import Path
from typing import Iterable, Tuple

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import Phase, Step


def _apply_settings(host: Host, settings: Iterable[Tuple[str, str, str, str]]) -> None:
    for schema, key, value, description in settings:
        host.logger.info(f"Setting {schema} {key} to {value} ({description}).")
        util.set_gsetting(host, schema, key, value)


def build(host: Host, workspace: Path) -> Phase:
    return Phase(
        name="Phase 3: Applying The New Look & Feel",
        description="Themes, fonts, window buttons and natural scrolling.",
        steps=[
            Step("Applying GTK, icon, and cursor themes...",
                 lambda: _apply_settings(host, config.INTERFACE_SETTINGS)),
            Step("Setting window button layout to the left...",
                 lambda: _apply_settings(host, [config.BUTTON_LAYOUT_SETTING])),
            Step("Enabling macOS-style 'Natural Scrolling'...",
                 lambda: _apply_settings(host, config.NATURAL_SCROLL_SETTINGS)),
        ],
    )
