# Fedora-macOS-Setup/macos_setup/system_utils.py

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Sequence, Set, Union

from macos_setup import config
from macos_setup.errors import InstallScriptError, SchemaTimeoutError
from macos_setup.logger_utils import app_logger as default_script_logger
from macos_setup.models import InstallScript

if TYPE_CHECKING:
    from macos_setup.host import Host

OUTPUT_SUMMARY_LIMIT = 150


def _summarize(text: str) -> str:
    text = text.strip()
    return (text[:OUTPUT_SUMMARY_LIMIT] + '...') if len(text) > OUTPUT_SUMMARY_LIMIT else text


def run_command(
    command: List[str],
    capture_output: bool = False,
    check: bool = True,
    cwd: Optional[Union[str, Path]] = None,
    input_text: Optional[str] = None,
    print_fn_error: Optional[Callable[[str], None]] = None,
    logger: Optional[logging.Logger] = None
) -> subprocess.CompletedProcess:
    """
    Runs a command with logging. Raises CalledProcessError on a non-zero exit
    when `check` is set, and FileNotFoundError when the executable is missing.
    """
    log = logger or default_script_logger

    if not isinstance(command, list):
        log.error("Invalid command type. Must be a list.")
        raise TypeError("Command must be a list of strings.")
    command = [str(item) for item in command]
    display_command_str = subprocess.list2cmdline(command)

    log.info(f"Executing: {display_command_str}{f' (cwd: {cwd})' if cwd else ''}")

    try:
        process = subprocess.run(
            command,
            check=False,  # checked below so the failure is logged with its output
            capture_output=capture_output,
            input=input_text,
            text=True,
            cwd=str(cwd) if cwd else None
        )
    except FileNotFoundError:
        log.error(f"Command executable not found: '{command[0]}' (Full command attempted: '{display_command_str}')")
        if print_fn_error:
            print_fn_error(f"Command executable not found: '{command[0]}'. Ensure it's installed and in PATH.")
        raise

    if process.stdout and process.stdout.strip():
        log.debug(f"CMD STDOUT for '{display_command_str}':\n{process.stdout.strip()}")

    if process.stderr and process.stderr.strip():
        # Some tools report progress on stderr
        log.warning(f"CMD STDERR for '{display_command_str}':\n{process.stderr.strip()}")

    if check and process.returncode != 0:
        log.error(f"Command '{display_command_str}' returned non-zero exit status {process.returncode}.")
        if print_fn_error:
            details = _summarize(process.stderr or process.stdout or "")
            print_fn_error(
                f"Command failed: '{display_command_str}' (Exit code: {process.returncode})."
                + (f" {details}" if details else " Check logs.")
            )
        raise subprocess.CalledProcessError(
            returncode=process.returncode,
            cmd=command,
            output=process.stdout,
            stderr=process.stderr
        )

    return process


# --- DNF Operations ---

def upgrade_system_dnf(host: "Host") -> None:
    host.run(["dnf", "update", "-y", "--refresh"], sudo=True)

def get_fedora_version(host: "Host") -> str:
    """Returns the Fedora release number as reported by `rpm -E %fedora`."""
    version = host.run(["rpm", "-E", "%fedora"], capture_output=True).stdout.strip()
    if not version.isdigit():
        raise ValueError(f"Could not determine the Fedora release (rpm reported '{version}').")
    return version

def enable_rpmfusion(host: "Host") -> None:
    version = get_fedora_version(host)
    install_dnf_packages(host, [url.format(version=version) for url in config.RPMFUSION_RELEASE_URLS])

def install_dnf_packages(host: "Host", packages: Sequence[str], extra_args: Optional[Sequence[str]] = None) -> None:
    if not packages:
        host.logger.info("No DNF packages specified for installation.")
        return
    cmd = ["dnf", "install", "-y"]
    if extra_args:
        cmd.extend(extra_args)
    cmd.extend(packages)
    host.logger.info(f"Installing DNF packages: {', '.join(packages)}")
    host.run(cmd, sudo=True)

def install_dnf_groups(host: "Host", groups: Sequence[str], with_optional: bool = False) -> None:
    for group in groups:
        cmd = ["dnf", "group", "install", "-y"]
        if with_optional:
            cmd.append("--with-optional")
        cmd.append(group)
        host.logger.info(f"Installing DNF group: {group}")
        host.run(cmd, sudo=True)

def enable_copr_repo(host: "Host", repo: str) -> None:
    host.run(["dnf", "copr", "enable", "-y", repo], sudo=True)


# --- Fetching & Vendor Install Scripts ---

def git_clone(host: "Host", url: str, dest: Path, depth: int = 1) -> None:
    host.run(["git", "clone", url, f"--depth={depth}", str(dest)])

def download_file(host: "Host", url: str, dest: Path) -> None:
    host.run(["wget", "-O", str(dest), url])

def make_executable(host: "Host", path: Path) -> None:
    host.run(["chmod", "+x", str(path)])

def fetch_install_script(host: "Host", script: InstallScript, workspace: Path) -> Path:
    """Clones or downloads an install script into the workspace and returns its path."""
    if script.repo_url:
        clone_dir = workspace / script.clone_dir_name
        git_clone(host, script.repo_url, clone_dir)
        return clone_dir / script.script
    if script.url:
        script_path = workspace / script.script
        download_file(host, script.url, script_path)
        make_executable(host, script_path)
        return script_path
    raise ValueError(f"Install script '{script.name}' has neither a repository nor a download URL.")

def run_install_script(
    host: "Host",
    script: InstallScript,
    script_path: Path,
    extra_args: Sequence[str] = ()
) -> None:
    """Runs a fetched install script and enforces its expected exit code."""
    args = list(script.args) + list(extra_args)
    proc = host.run([str(script_path), *args], cwd=script_path.parent, check=False)
    if proc.returncode != script.expected_returncode:
        host.logger.error(
            f"Install script '{script.name}' exited with {proc.returncode}, expected {script.expected_returncode}."
        )
        raise InstallScriptError(script.name, proc.returncode, script.expected_returncode)
    host.logger.info(f"Install script '{script.name}' completed.")


# --- Filesystem ---

def ensure_dir_exists(host: "Host", dir_path: Path) -> None:
    host.run(["mkdir", "-p", str(dir_path)])

def find_files(root: Path, pattern: str) -> List[Path]:
    return sorted(root.rglob(pattern)) if root.is_dir() else []

def copy_files(host: "Host", sources: Iterable[Path], dest_dir: Path) -> None:
    sources = [str(source) for source in sources]
    if not sources:
        raise FileNotFoundError(f"Nothing to copy into {dest_dir}.")
    host.run(["cp", *sources, str(dest_dir)])

def refresh_font_cache(host: "Host") -> None:
    host.run(["fc-cache", "-f", "-v"], capture_output=True)

def write_system_file(host: "Host", file_path: Path, content: str) -> None:
    """Writes a root-owned file wholesale (full overwrite) through `sudo tee`."""
    host.logger.info(f"Writing {file_path} ({len(content.splitlines())} lines).")
    host.run(["tee", str(file_path)], sudo=True, input_text=content, capture_output=True)


# --- GNOME Settings & Extensions ---

def set_gsetting(host: "Host", schema: str, key: str, value: str, schemadir: Optional[Path] = None) -> None:
    cmd = ["gsettings"]
    if schemadir:
        cmd.extend(["--schemadir", str(schemadir)])
    cmd.extend(["set", schema, key, value])
    host.run(cmd)

def list_gsettings_schemas(host: "Host", schemadir: Optional[Path] = None) -> Set[str]:
    cmd = ["gsettings"]
    if schemadir:
        cmd.extend(["--schemadir", str(schemadir)])
    cmd.append("list-schemas")
    proc = host.run(cmd, capture_output=True, check=False)
    if proc.returncode != 0:
        return set()
    return set(proc.stdout.split())

def extension_schemadir(host: "Host", uuid: str) -> Optional[Path]:
    """The compiled schema directory of a per-user extension, if it is installed there."""
    schemadir = host.home / config.USER_EXTENSIONS_REL_PATH / uuid / "schemas"
    return schemadir if schemadir.is_dir() else None

def wait_for_gsettings_schema(
    host: "Host",
    schema: str,
    schemadirs: Callable[[], Iterable[Optional[Path]]] = lambda: (None,),
    timeout: float = config.SCHEMA_WAIT_TIMEOUT,
    interval: float = config.SCHEMA_POLL_INTERVAL
) -> None:
    """
    Polls until `schema` is listed by gsettings, in the default schema path or
    in any of the directories yielded by `schemadirs` (re-evaluated every poll).
    Raises SchemaTimeoutError once `timeout` seconds have passed.
    """
    deadline = host.monotonic() + timeout
    attempt = 0
    while True:
        attempt += 1
        for schemadir in schemadirs():
            if schema in list_gsettings_schemas(host, schemadir):
                host.logger.info(f"Schema '{schema}' available after {attempt} check(s).")
                return
        if host.monotonic() >= deadline:
            raise SchemaTimeoutError(schema, timeout)
        host.logger.debug(f"Schema '{schema}' not yet available, retrying in {interval:g}s.")
        host.sleep(interval)

def enable_gnome_extension(host: "Host", uuid: str) -> None:
    host.run(["gnome-extensions", "enable", uuid])


# --- Services ---

def systemctl_enable_now(host: "Host", service: str, user: bool = False) -> None:
    if user:
        host.run(["systemctl", "--user", "enable", "--now", service])
    else:
        host.run(["systemctl", "enable", "--now", service], sudo=True)

def systemctl_mask(host: "Host", service: str) -> None:
    host.run(["systemctl", "mask", service], sudo=True)

def systemctl_daemon_reload(host: "Host") -> None:
    host.run(["systemctl", "daemon-reload"], sudo=True)


# --- Flatpak ---

def ensure_flathub_remote(host: "Host") -> None:
    host.run(["flatpak", "remote-add", "--if-not-exists", config.FLATHUB_REMOTE_NAME, config.FLATHUB_REPO_URL])


# --- Hardware ---

def cpu_is_amd(host: "Host") -> bool:
    return config.AMD_CPU_MARKER in host.cpu_vendor_info()
