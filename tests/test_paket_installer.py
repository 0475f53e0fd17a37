"""Tests for PaketPackageInstaller."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from paket.environment import HostEnvironment
from paket.errors import ConfigurationError, UnsupportedSchemeError
from paket.installer import PaketPackageInstaller
from paket.models import DirectoryPath, PackageReference, PackageType


def _reference(scheme="paket", package="Foo", **parameters):
    return PackageReference(scheme=scheme, package=package, parameters=parameters)


@pytest.fixture
def resolver():
    res = MagicMock()
    res.get_files.return_value = ()
    return res


@pytest.fixture
def log():
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def installer(resolver, log):
    env = HostEnvironment(working_directory="/home/build", target_framework=".NETCoreApp,Version=v8.0")
    return PaketPackageInstaller(env, resolver, log)


class TestConstruction:
    """Collaborators are required at construction time."""

    def test_missing_environment(self, resolver, log):
        with pytest.raises(ConfigurationError, match="environment"):
            PaketPackageInstaller(None, resolver, log)

    def test_missing_content_resolver(self, log):
        with pytest.raises(ConfigurationError, match="content_resolver"):
            PaketPackageInstaller(HostEnvironment(), None, log)

    def test_missing_log(self, resolver):
        with pytest.raises(ConfigurationError, match="log"):
            PaketPackageInstaller(HostEnvironment(), resolver, None)


class TestCanInstall:
    """Test scheme checks."""

    @pytest.mark.parametrize("scheme", ["paket", "PAKET", "Paket"])
    def test_paket_scheme_is_supported(self, installer, scheme):
        assert installer.can_install(_reference(scheme=scheme), PackageType.ADDIN) is True

    @pytest.mark.parametrize("scheme", ["nuget", "NuGet", "NUGET"])
    def test_nuget_scheme_is_rejected(self, installer, scheme):
        with pytest.raises(UnsupportedSchemeError, match="Perhaps you need to include the schema"):
            installer.can_install(_reference(scheme=scheme), PackageType.TOOL)

    @pytest.mark.parametrize("scheme", ["npm", "file", "pakett"])
    def test_other_schemes_are_not_supported(self, installer, scheme):
        assert installer.can_install(_reference(scheme=scheme), PackageType.ADDIN) is False

    def test_reference_is_required(self, installer):
        with pytest.raises(ValueError):
            installer.can_install(None, PackageType.ADDIN)


class TestGetPackagePath:
    """Test package directory computation."""

    def test_without_group_appends_package(self, installer):
        path = installer.get_package_path("/work/packages", _reference())

        assert path == DirectoryPath("/work/packages/Foo")

    def test_group_replaces_existing_group_folder(self, installer):
        path = installer.get_package_path("/work/packages/groupA", _reference(group=["groupB"]))

        assert path == DirectoryPath("/work/packages/groupB")

    def test_group_without_packages_segment(self, installer):
        path = installer.get_package_path("/srv/tools", _reference(group=["g1"]))

        assert path == DirectoryPath("/srv/tools/packages/g1")

    def test_only_first_group_is_honored(self, installer):
        path = installer.get_package_path("/work/packages", _reference(group=["first", "second"]))

        assert path == DirectoryPath("/work/packages/first")

    def test_string_group_is_not_split(self, installer):
        ref = PackageReference(scheme="paket", package="Foo", parameters={"group": "groupB"})

        path = installer.get_package_path("/work/packages", ref)

        assert path == DirectoryPath("/work/packages/groupB")

    def test_blank_group_falls_back_to_package_folder(self, installer):
        path = installer.get_package_path("/work/packages", _reference(group=[""]))

        assert path == DirectoryPath("/work/packages/Foo")

    def test_relative_root_is_made_absolute(self, installer):
        path = installer.get_package_path("./tools", _reference())

        assert path == DirectoryPath("/home/build/tools/Foo")

    def test_relative_root_with_group(self, installer):
        path = installer.get_package_path("packages/build", _reference(group=["main"]))

        assert path == DirectoryPath("/home/build/packages/main")

    def test_is_idempotent(self, installer):
        ref = _reference(group=["groupB"])
        root = DirectoryPath("/work/packages/groupA")

        assert installer.get_package_path(root, ref) == installer.get_package_path(root, ref)


class TestInstall:
    """Test install delegation and diagnostics."""

    def test_passes_resolver_result_through(self, installer, resolver, log):
        files = (Path("/work/packages/Foo/lib/Foo.dll"), Path("/work/packages/Foo/lib/Bar.dll"))
        resolver.get_files.return_value = files

        result = installer.install(_reference(), PackageType.ADDIN, "/work/packages")

        assert result is files
        log.warning.assert_not_called()

    def test_resolver_receives_package_directory(self, installer, resolver):
        ref = _reference(group=["build"])

        installer.install(ref, PackageType.TOOL, "/work/packages/main")

        resolver.get_files.assert_called_once_with(
            DirectoryPath("/work/packages/build"), ref, PackageType.TOOL
        )

    def test_empty_addin_warns_with_framework(self, installer, log):
        result = installer.install(_reference(), PackageType.ADDIN, "/work/packages")

        assert len(result) == 0
        log.warning.assert_called_once()
        message = log.warning.call_args[0][0] % log.warning.call_args[0][1:]
        assert ".NETCoreApp,Version=v8.0" in message
        assert "include parameter" in message

    def test_empty_tool_warns_with_package(self, installer, log):
        result = installer.install(_reference(package="Cake.Tool"), PackageType.TOOL, "/work/packages")

        assert len(result) == 0
        log.warning.assert_called_once()
        message = log.warning.call_args[0][0] % log.warning.call_args[0][1:]
        assert "'Cake.Tool'" in message
        assert "include parameter" in message

    def test_unknown_type_is_silent(self, installer, log):
        result = installer.install(_reference(), "other", "/work/packages")

        assert len(result) == 0
        log.warning.assert_not_called()

    def test_warning_reaches_logging(self, resolver, caplog):
        env = HostEnvironment(working_directory="/home/build", target_framework="net48")
        inst = PaketPackageInstaller(env, resolver, logging.getLogger("paket.test"))

        with caplog.at_level(logging.WARNING, logger="paket.test"):
            inst.install(_reference(), PackageType.ADDIN, "/work/packages")

        warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
        assert len(warnings) == 1
        assert "net48" in warnings[0].getMessage()

    def test_arguments_are_required(self, installer):
        with pytest.raises(ValueError):
            installer.install(None, PackageType.ADDIN, "/work")
        with pytest.raises(ValueError):
            installer.install(_reference(), PackageType.ADDIN, None)


class TestHostEnvironment:
    """HostEnvironment configuration checks."""

    def test_relative_working_directory_is_rejected(self):
        with pytest.raises(ConfigurationError, match="absolute"):
            HostEnvironment(working_directory="relative/dir")

    def test_configured_values_are_used(self):
        env = HostEnvironment(working_directory="/home/build", target_framework="net48")

        assert env.working_directory == DirectoryPath("/home/build")
        assert env.target_framework == "net48"
