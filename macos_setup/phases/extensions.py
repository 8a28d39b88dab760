# Fedora-macOS-Setup/macos_setup/phases/extensions.py

from pathlib import Path

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.host import Host
from macos_setup.models import InstallScript, Phase, Step


def _schema_locations(host: Host):
    # The installer puts extensions under the user's data dir, whose schemas
    # gsettings only sees through --schemadir.
    schemadir = util.extension_schemadir(host, config.DASH_TO_DOCK_UUID)
    return (None, schemadir) if schemadir else (None,)


def _enable_extensions(host: Host) -> None:
    for extension in config.GNOME_EXTENSIONS:
        util.enable_gnome_extension(host, extension["uuid"])


def _configure_dash_to_dock(host: Host) -> None:
    schemadir = util.extension_schemadir(host, config.DASH_TO_DOCK_UUID)
    for schema, key, value, description in config.DASH_TO_DOCK_SETTINGS:
        host.logger.info(f"Dash to Dock: {key}={value} ({description}).")
        util.set_gsetting(host, schema, key, value, schemadir=schemadir)


def build(host: Host, workspace: Path) -> Phase:
    """
    Phase 4: GNOME Extensions.
    Installs extensions through the extensions.gnome.org installer script, waits
    until their settings schema is registered, enables them and configures the dock.
    """
    installer = InstallScript.from_config(config.EXTENSION_INSTALLER)
    installer_path = workspace / installer.script

    steps = [
        Step("Downloading the GNOME extension installer...",
             lambda: util.fetch_install_script(host, installer, workspace)),
    ]
    for extension in config.GNOME_EXTENSIONS:
        steps.append(Step(
            f"Installing '{extension['name']}' (ID {extension['id']})...",
            lambda extension=extension: util.run_install_script(
                host, installer, installer_path, extra_args=[extension["id"]]
            ),
        ))
    steps.extend([
        Step("Waiting for extension settings schemas to be registered...",
             lambda: util.wait_for_gsettings_schema(
                 host, config.DASH_TO_DOCK_SCHEMA, schemadirs=lambda: _schema_locations(host)
             )),
        Step("Enabling new extensions...",
             lambda: _enable_extensions(host)),
        Step("Configuring Dash to Dock to act like the macOS dock...",
             lambda: _configure_dash_to_dock(host)),
    ])

    return Phase(
        name="Phase 4: Automating GNOME Extension Setup",
        description="Dash to Dock and Blur my Shell, installed, enabled and configured.",
        steps=steps,
    )
