"""Paket package resolution.

This package locates the files of ``paket:`` addin and tool references:
- models.py: package references, directory paths and package types
- environment.py: host environment collaborator
- content.py: content resolvers listing the files of a package directory
- installer.py: scheme checks and group-aware package directory lookup
- push.py: settings for paket push
"""

from .content import ContentResolver, FileSystemContentResolver
from .environment import Environment, HostEnvironment
from .errors import ConfigurationError, PaketError, UnsupportedSchemeError
from .installer import PaketPackageInstaller
from .models import DirectoryPath, PackageReference, PackageType, truncate_at_packages
from .push import PaketPushSettings

__all__ = [
    "ContentResolver",
    "FileSystemContentResolver",
    "Environment",
    "HostEnvironment",
    "ConfigurationError",
    "PaketError",
    "UnsupportedSchemeError",
    "PaketPackageInstaller",
    "DirectoryPath",
    "PackageReference",
    "PackageType",
    "truncate_at_packages",
    "PaketPushSettings",
]
