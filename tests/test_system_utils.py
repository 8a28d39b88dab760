"""Tests for command execution and the external collaborator wrappers."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from macos_setup import config
from macos_setup import system_utils as util
from macos_setup.errors import InstallScriptError, SchemaTimeoutError
from macos_setup.models import InstallScript


class TestRunCommand:

    @pytest.fixture
    def completed(self):
        def _completed(returncode=0, stdout="", stderr=""):
            return subprocess.CompletedProcess(["cmd"], returncode, stdout, stderr)
        return _completed

    def test_returns_completed_process(self, completed):
        with patch("macos_setup.system_utils.subprocess.run", return_value=completed(stdout="40\n")) as mock_run:
            proc = util.run_command(["rpm", "-E", "%fedora"], capture_output=True)

        assert proc.stdout == "40\n"
        args, kwargs = mock_run.call_args
        assert args[0] == ["rpm", "-E", "%fedora"]
        assert kwargs["check"] is False
        assert kwargs["capture_output"] is True

    def test_non_zero_exit_raises_and_reports(self, completed):
        printed = MagicMock()
        with patch("macos_setup.system_utils.subprocess.run", return_value=completed(1, stderr="No match for argument: tlp")):
            with pytest.raises(subprocess.CalledProcessError) as excinfo:
                util.run_command(["sudo", "dnf", "install", "-y", "tlp"], print_fn_error=printed)

        assert excinfo.value.returncode == 1
        assert excinfo.value.stderr == "No match for argument: tlp"
        printed.assert_called_once()
        assert "sudo dnf install -y tlp" in printed.call_args[0][0]

    def test_non_zero_exit_allowed_without_check(self, completed):
        with patch("macos_setup.system_utils.subprocess.run", return_value=completed(3)):
            proc = util.run_command(["false"], check=False)
        assert proc.returncode == 3

    def test_missing_executable_propagates(self):
        printed = MagicMock()
        with patch("macos_setup.system_utils.subprocess.run", side_effect=FileNotFoundError("lscpu")):
            with pytest.raises(FileNotFoundError):
                util.run_command(["lscpu"], print_fn_error=printed)
        assert "lscpu" in printed.call_args[0][0]

    def test_paths_are_stringified_and_input_passed(self, completed):
        with patch("macos_setup.system_utils.subprocess.run", return_value=completed()) as mock_run:
            util.run_command(["tee", Path("/etc/tlp.conf")], input_text="WOL_DISABLE=Y\n", capture_output=True)
        args, kwargs = mock_run.call_args
        assert args[0] == ["tee", "/etc/tlp.conf"]
        assert kwargs["input"] == "WOL_DISABLE=Y\n"

    @pytest.mark.parametrize("command", [42, "sudo dnf update -y --refresh"])
    def test_only_argument_lists_are_accepted(self, command):
        with patch("macos_setup.system_utils.subprocess.run") as mock_run:
            with pytest.raises(TypeError):
                util.run_command(command)
        mock_run.assert_not_called()

    def test_output_is_logged_not_printed(self, completed, caplog):
        printed = MagicMock()
        with patch("macos_setup.system_utils.subprocess.run", return_value=completed(stdout="40\n", stderr="progress")):
            with caplog.at_level("DEBUG", logger="FedoraMacosSetup"):
                util.run_command(["rpm", "-E", "%fedora"], capture_output=True, print_fn_error=printed)

        levels = {r.levelname for r in caplog.records if "CMD STD" in r.getMessage()}
        assert levels == {"DEBUG", "WARNING"}
        printed.assert_not_called()


class TestDnf:

    def test_rpmfusion_uses_detected_release(self, fake_host):
        util.enable_rpmfusion(fake_host)
        install = fake_host.commands[-1].argv
        assert install[:4] == ["sudo", "dnf", "install", "-y"]
        assert any("rpmfusion-free-release-40.noarch.rpm" in arg for arg in install)
        assert any("rpmfusion-nonfree-release-40.noarch.rpm" in arg for arg in install)

    def test_bad_release_is_an_error(self, fake_host):
        fake_host._stdout_for = lambda argv: "%fedora\n"
        with pytest.raises(ValueError):
            util.get_fedora_version(fake_host)

    def test_empty_package_list_runs_nothing(self, fake_host):
        util.install_dnf_packages(fake_host, [])
        assert fake_host.commands == []

    def test_group_install_with_optional(self, fake_host):
        util.install_dnf_groups(fake_host, ["multimedia"], with_optional=True)
        assert fake_host.lines == ["sudo dnf group install -y --with-optional multimedia"]


class TestInstallScripts:

    def test_clone_dir_name_strips_git_suffix(self):
        script = InstallScript(name="x", script="install.sh",
                               repo_url="https://github.com/vinceliuice/WhiteSur-gtk-theme.git")
        assert script.clone_dir_name == "WhiteSur-gtk-theme"

    def test_from_config_copies_contract(self):
        script = InstallScript.from_config(config.THEME_INSTALLERS[0])
        assert script.args == ["-m", "-N", "glassy", "--round", "-l"]
        assert script.expected_returncode == 0

    def test_fetch_from_repo_clones_shallow(self, fake_host, tmp_path):
        script = InstallScript.from_config(config.THEME_INSTALLERS[1])
        path = util.fetch_install_script(fake_host, script, tmp_path)

        assert path == tmp_path / "WhiteSur-icon-theme" / "install.sh"
        assert fake_host.commands[0].argv == [
            "git", "clone", "https://github.com/vinceliuice/WhiteSur-icon-theme.git", "--depth=1",
            str(tmp_path / "WhiteSur-icon-theme"),
        ]

    def test_fetch_from_url_downloads_and_marks_executable(self, fake_host, tmp_path):
        script = InstallScript.from_config(config.EXTENSION_INSTALLER)
        path = util.fetch_install_script(fake_host, script, tmp_path)

        assert path == tmp_path / "gnome-ext-install.sh"
        assert fake_host.lines == [
            f"wget -O {path} https://git.io/Jv5kl",
            f"chmod +x {path}",
        ]

    def test_fetch_without_source_is_rejected(self, fake_host, tmp_path):
        with pytest.raises(ValueError):
            util.fetch_install_script(fake_host, InstallScript(name="x", script="x.sh"), tmp_path)

    def test_run_passes_contract_and_extra_args(self, fake_host, tmp_path):
        script = InstallScript(name="ext", script="gnome-ext-install.sh", url="https://example.invalid", args=["--yes"])
        util.run_install_script(fake_host, script, tmp_path / "gnome-ext-install.sh", extra_args=["307"])

        recorded = fake_host.commands[-1]
        assert recorded.argv == [str(tmp_path / "gnome-ext-install.sh"), "--yes", "307"]
        assert recorded.cwd == str(tmp_path)

    def test_unexpected_exit_code_raises(self, make_host, tmp_path):
        host = make_host(fail_on=lambda argv: argv[0].endswith("install.sh"))
        script = InstallScript(name="McMojave Cursor Theme", script="install.sh", repo_url="https://x/McMojave-cursors.git")

        with pytest.raises(InstallScriptError) as excinfo:
            util.run_install_script(host, script, tmp_path / "install.sh")

        assert excinfo.value.returncode == 1
        assert excinfo.value.expected_returncode == 0


class TestSchemaReadiness:

    def test_returns_once_schema_appears(self, make_host):
        host = make_host(schema_ready_after=3)
        util.wait_for_gsettings_schema(host, config.DASH_TO_DOCK_SCHEMA, timeout=30, interval=1)

        assert host.schema_polls == 4
        assert host.sleeps == [1, 1, 1]

    def test_immediately_available(self, fake_host):
        util.wait_for_gsettings_schema(fake_host, config.DASH_TO_DOCK_SCHEMA)
        assert fake_host.sleeps == []

    def test_times_out_with_distinct_error(self, make_host):
        host = make_host(schema_ready_after=1000)
        with pytest.raises(SchemaTimeoutError) as excinfo:
            util.wait_for_gsettings_schema(host, config.DASH_TO_DOCK_SCHEMA, timeout=5, interval=1)

        assert excinfo.value.schema == config.DASH_TO_DOCK_SCHEMA
        assert sum(host.sleeps) == 5

    def test_checks_extension_schemadir(self, fake_host):
        schemadir = fake_host.home / config.USER_EXTENSIONS_REL_PATH / config.DASH_TO_DOCK_UUID / "schemas"
        schemadir.mkdir(parents=True)

        assert util.extension_schemadir(fake_host, config.DASH_TO_DOCK_UUID) == schemadir
        util.wait_for_gsettings_schema(fake_host, config.DASH_TO_DOCK_SCHEMA, schemadirs=lambda: (schemadir,))
        assert fake_host.lines == [f"gsettings --schemadir {schemadir} list-schemas"]

    def test_failed_listing_counts_as_not_ready(self, make_host):
        host = make_host(fail_on=lambda argv: argv[-1] == "list-schemas")
        assert util.list_gsettings_schemas(host) == set()


class TestFilesAndServices:

    def test_write_system_file_overwrites_through_sudo_tee(self, fake_host):
        util.write_system_file(fake_host, config.TLP_CONF_PATH, config.TLP_CONF_CONTENT)

        recorded = fake_host.commands[-1]
        assert recorded.argv == ["sudo", "tee", "/etc/tlp.conf"]
        assert recorded.input_text == config.TLP_CONF_CONTENT

    def test_copy_files_requires_sources(self, fake_host, tmp_path):
        with pytest.raises(FileNotFoundError):
            util.copy_files(fake_host, [], tmp_path)
        assert fake_host.commands == []

    def test_find_files_is_recursive_and_sorted(self, tmp_path):
        (tmp_path / "SF-Fonts" / "b").mkdir(parents=True)
        (tmp_path / "SF-Fonts" / "b" / "Z.otf").touch()
        (tmp_path / "SF-Fonts" / "A.otf").touch()
        (tmp_path / "README.md").touch()

        found = util.find_files(tmp_path, "*.otf")
        assert [p.name for p in found] == ["A.otf", "Z.otf"]
        assert util.find_files(tmp_path / "missing", "*.otf") == []

    def test_user_service_runs_without_sudo(self, fake_host):
        util.systemctl_enable_now(fake_host, "ulauncher", user=True)
        util.systemctl_enable_now(fake_host, "firewalld")
        assert fake_host.lines == [
            "systemctl --user enable --now ulauncher",
            "sudo systemctl enable --now firewalld",
        ]

    def test_gsetting_with_schemadir(self, fake_host, tmp_path):
        util.set_gsetting(fake_host, "org.x", "dock-position", "'BOTTOM'", schemadir=tmp_path)
        assert fake_host.commands[-1].argv == [
            "gsettings", "--schemadir", str(tmp_path), "set", "org.x", "dock-position", "'BOTTOM'",
        ]


class TestCpuProbe:

    def test_amd_detected(self, make_host):
        assert util.cpu_is_amd(make_host(cpu_info="Vendor ID: AuthenticAMD\n")) is True

    def test_intel_not_detected(self, fake_host):
        assert util.cpu_is_amd(fake_host) is False

    def test_failed_probe_means_not_amd(self, make_host):
        host = make_host(cpu_info="AMD", fail_on=lambda argv: argv == ["lscpu"])
        assert util.cpu_is_amd(host) is False
