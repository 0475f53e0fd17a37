"""Content resolution: turn a package directory into the files it provides."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Protocol, Sequence

from common.logging_utils import Timer, extra_context, is_debug_enabled
from constants import Constants
from .models import DirectoryPath, InstalledFiles, PackageReference, PackageType

logger = logging.getLogger(__name__)


class ContentResolver(Protocol):
    """Lists the files a package provides. Returns an empty sequence, never raises, when nothing is found."""

    def get_files(
        self, directory: DirectoryPath, reference: PackageReference, package_type: PackageType
    ) -> Sequence[Path]:
        ...


class FileSystemContentResolver:
    """Content resolver reading packages already restored on local disk.

    Grouped layouts hand over ``.../packages/<group>``; the package folder
    below it is used when present. ``include`` parameters are glob patterns
    relative to the package folder. Without them addins resolve to the
    assemblies under ``lib/`` and tools to every file in the package.
    """

    def get_files(
        self, directory: DirectoryPath, reference: PackageReference, package_type: PackageType
    ) -> InstalledFiles:
        root = self._package_root(directory, reference)
        if not root.is_dir():
            if is_debug_enabled(logger):
                logger.debug("Package directory missing", extra=extra_context(
                    event="decision", component="content", action="get_files",
                    target=str(root), outcome="missing", package=reference.package
                ))
            return ()

        with Timer() as t:
            includes = reference.get_parameter(Constants.INCLUDE_PARAMETER)
            if includes:
                files = self._glob_includes(root, includes)
            elif package_type == PackageType.ADDIN:
                files = sorted(root.glob(f"{Constants.ADDIN_LIB_FOLDER}/**/*{Constants.ADDIN_EXTENSION}"))
            else:
                files = sorted(p for p in root.rglob("*") if p.is_file())
            result = tuple(dict.fromkeys(p for p in files if p.is_file()))

        if is_debug_enabled(logger):
            logger.debug("Resolved package content", extra=extra_context(
                event="function_exit", component="content", action="get_files",
                target=str(root), count=len(result), duration_ms=t.duration_ms(),
                package=reference.package, package_type=getattr(package_type, "value", package_type)
            ))
        return result

    @staticmethod
    def _package_root(directory: DirectoryPath, reference: PackageReference) -> Path:
        base = directory.to_path()
        nested = base / reference.package
        if nested.is_dir():
            return nested
        return base

    @staticmethod
    def _glob_includes(root: Path, patterns: Iterable[str]) -> List[Path]:
        matched: List[Path] = []
        for pattern in patterns:
            cleaned = pattern.strip().replace("\\", "/")
            while cleaned.startswith("./"):
                cleaned = cleaned[2:]
            if not cleaned:
                continue
            if cleaned.startswith("/") or Path(cleaned).is_absolute():
                logger.warning("Ignoring absolute include pattern '%s'", pattern)
                continue
            matched.extend(sorted(root.glob(cleaned)))
        return matched
