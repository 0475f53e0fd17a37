"""Installer for ``paket:`` package references.

Maps a reference and an install root to the directory holding the package,
honoring the ``group`` parameter, and delegates file lookup to a content
resolver. An empty lookup is not an error: it is reported as a warning and
the empty collection is returned.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Union

from common.logging_utils import extra_context, is_debug_enabled
from constants import Constants
from .content import ContentResolver
from .environment import Environment
from .errors import ConfigurationError, UnsupportedSchemeError
from .models import DirectoryPath, PackageReference, PackageType, truncate_at_packages

logger = logging.getLogger(__name__)


class PaketPackageInstaller:
    """Installer for paket URI resources.

    Holds only its three collaborators, so one instance can serve
    concurrent calls as long as the collaborators allow it.
    """

    def __init__(self, environment: Environment, content_resolver: ContentResolver, log: logging.Logger):
        """Initialize the installer.

        Args:
            environment: Supplies the working directory and target framework.
            content_resolver: Lists the files found in a package directory.
            log: Receives the warning emitted when no files are found.

        Raises:
            ConfigurationError: if any collaborator is missing.
        """
        if environment is None:
            raise ConfigurationError("environment is required")
        if content_resolver is None:
            raise ConfigurationError("content_resolver is required")
        if log is None:
            raise ConfigurationError("log is required")
        self._environment = environment
        self._content_resolver = content_resolver
        self._log = log

    def can_install(self, reference: PackageReference, package_type: PackageType) -> bool:
        """Return True when ``reference`` uses the paket scheme.

        Raises:
            UnsupportedSchemeError: for the nuget scheme, which usually means
                the paket prefix was left out.
        """
        if reference is None:
            raise ValueError("reference is required")

        scheme = reference.scheme.lower()
        if scheme == Constants.REJECTED_SCHEME:
            raise UnsupportedSchemeError("nuget is not supported. Perhaps you need to include the schema?")

        supported = scheme == Constants.SUPPORTED_SCHEME
        if is_debug_enabled(logger):
            logger.debug("Checked scheme", extra=extra_context(
                event="decision", component="installer", action="can_install",
                target=reference.scheme, outcome="supported" if supported else "unsupported",
                package=reference.package
            ))
        return supported

    def install(
        self,
        reference: PackageReference,
        package_type: PackageType,
        install_root: Union[str, DirectoryPath],
    ) -> Sequence:
        """Resolve the files of ``reference`` below ``install_root``.

        The resolver's result is returned as is. When it is empty a warning
        is logged and the empty collection is still returned.
        """
        if reference is None:
            raise ValueError("reference is required")
        if install_root is None:
            raise ValueError("install_root is required")

        package_path = self.get_package_path(install_root, reference)
        files = self._content_resolver.get_files(package_path, reference, package_type)
        if is_debug_enabled(logger):
            logger.debug("Content resolved", extra=extra_context(
                event="function_exit", component="installer", action="install",
                target=str(package_path), count=len(files), package=reference.package
            ))
        if len(files) != 0:
            return files

        if package_type == PackageType.ADDIN:
            self._log.warning(
                "Could not find any assemblies compatible with %s. Perhaps you need an include parameter?",
                self._environment.target_framework,
            )
        elif package_type == PackageType.TOOL:
            self._log.warning(
                "Could not find any relevant files for tool '%s'. Perhaps you need an include parameter?",
                reference.package,
            )
        return files

    def get_package_path(self, install_root: Union[str, DirectoryPath], reference: PackageReference) -> DirectoryPath:
        """Directory the content resolver should search for ``reference``."""
        root = DirectoryPath.from_string(install_root).make_absolute(self._environment)
        grouped = _group_directory(root, reference)
        if grouped is not None:
            return grouped
        return root.combine(reference.package)


def _group_directory(root: DirectoryPath, reference: PackageReference) -> Optional[DirectoryPath]:
    # Only the first declared group is honored; extra values are ignored.
    groups = reference.get_parameter(Constants.GROUP_PARAMETER)
    if not groups or not groups[0].strip():
        return None
    packages = DirectoryPath.from_segments(truncate_at_packages(root.segments))
    return packages.combine(groups[0].strip())
