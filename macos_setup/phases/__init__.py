# Fedora-macOS-Setup/macos_setup/phases/__init__.py

from pathlib import Path
from typing import List

from macos_setup.host import Host
from macos_setup.models import Phase

from . import system_update
from . import themes_and_fonts
from . import look_and_feel
from . import extensions
from . import power_user_apps
from . import power_and_security

# Declared order is execution order.
PHASES = {
    "system_update": system_update.build,
    "themes_and_fonts": themes_and_fonts.build,
    "look_and_feel": look_and_feel.build,
    "extensions": extensions.build,
    "power_user_apps": power_user_apps.build,
    "power_and_security": power_and_security.build,
}


def build_phases(host: Host, workspace: Path) -> List[Phase]:
    return [handler(host, workspace) for handler in PHASES.values()]
