"""Data models for package references and install locations."""

from __future__ import annotations

import re
import urllib.parse
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import TYPE_CHECKING, Iterable, Mapping, Optional, Sequence, Tuple, Union

from constants import Constants

if TYPE_CHECKING:
    from .environment import Environment

_DRIVE = re.compile(r"^[A-Za-z]:")
_SLASHES = re.compile(r"/{2,}")
_UNC = re.compile(r"^//[^/]")


class PackageType(Enum):
    """Kind of dependency being installed."""
    ADDIN = "addin"
    TOOL = "tool"


@dataclass(frozen=True)
class PackageReference:
    """A requested dependency: scheme, package identifier and named parameters.

    Parameters keep declaration order and map each key to one or more values.
    Key lookup is case-sensitive; the scheme is compared case-insensitively
    by consumers.
    """
    scheme: str
    package: str
    parameters: Mapping[str, Tuple[str, ...]] = field(default_factory=dict, hash=False)
    address: Optional[str] = None

    def __post_init__(self):
        if not self.scheme or not self.scheme.strip():
            raise ValueError("Package reference scheme must not be empty")
        if not self.package or not self.package.strip():
            raise ValueError("Package reference identifier must not be empty")
        frozen = {key: _parameter_values(key, values) for key, values in self.parameters.items()}
        object.__setattr__(self, "parameters", MappingProxyType(frozen))

    @classmethod
    def parse(cls, uri: str) -> "PackageReference":
        """Parse a reference such as ``paket:?package=Cake.Foo&group=build``.

        Repeated query keys accumulate values in declaration order. The
        ``package`` parameter supplies the identifier and is kept in the
        parameter map.
        """
        if not uri or not uri.strip():
            raise ValueError("Package reference must not be empty")
        scheme, sep, rest = uri.strip().partition(":")
        if not sep or not scheme:
            raise ValueError(f"Package reference '{uri}' has no scheme")
        address, _, query = rest.partition("?")

        parameters = {}
        for key, value in urllib.parse.parse_qsl(query, keep_blank_values=True):
            parameters.setdefault(key, []).append(value)

        package_values = parameters.get(Constants.PACKAGE_PARAMETER) or [""]
        return cls(
            scheme=scheme,
            package=package_values[0],
            parameters=parameters,
            address=address or None,
        )

    def get_parameter(self, key: str) -> Tuple[str, ...]:
        """Values declared for ``key``, empty when absent."""
        return self.parameters.get(key, ())

    def has_parameter(self, key: str) -> bool:
        return key in self.parameters

    def __str__(self) -> str:
        pairs = [(key, value) for key, values in self.parameters.items() for value in values]
        if Constants.PACKAGE_PARAMETER not in self.parameters:
            pairs.insert(0, (Constants.PACKAGE_PARAMETER, self.package))
        query = urllib.parse.urlencode(pairs, quote_via=urllib.parse.quote, safe="/*:")
        return f"{self.scheme}:{self.address or ''}?{query}"


def _parameter_values(key: str, values) -> Tuple[str, ...]:
    if isinstance(values, str):
        return (values,)
    try:
        result = tuple(values)
    except TypeError:
        raise ValueError(f"Parameter '{key}' must be a string or a sequence of strings") from None
    if not all(isinstance(value, str) for value in result):
        raise ValueError(f"Parameter '{key}' must be a string or a sequence of strings")
    return result


def _normalize(path: str) -> str:
    text = path.strip().replace("\\", "/")
    if not text:
        raise ValueError("Path must not be empty")
    root = ""
    if _UNC.match(text):
        root, text = "//", text[2:]
    text = _SLASHES.sub("/", text)
    parts = [part for part in text.split("/") if part != "."]
    text = root + "/".join(parts)
    if len(text) > 1:
        text = text.rstrip("/")
    return text or "."


@dataclass(frozen=True)
class DirectoryPath:
    """A directory path held as forward-slash separated segments.

    A leading root (``/``, a UNC ``//`` or a drive like ``C:``) is its own first
    segment, and ``from_segments(path.segments)`` gives back an equal path.
    """
    full_path: str

    def __post_init__(self):
        object.__setattr__(self, "full_path", _normalize(self.full_path))

    @classmethod
    def from_string(cls, path: Union[str, "DirectoryPath"]) -> "DirectoryPath":
        if isinstance(path, DirectoryPath):
            return path
        return cls(path)

    @classmethod
    def from_segments(cls, segments: Iterable[str]) -> "DirectoryPath":
        segments = list(segments)
        if segments and segments[0] in ("/", "//"):
            return cls(segments[0] + "/".join(segments[1:]))
        return cls("/".join(segments))

    @property
    def segments(self) -> Tuple[str, ...]:
        parts = [part for part in self.full_path.split("/") if part]
        if self.full_path.startswith("//"):
            parts.insert(0, "//")
        elif self.full_path.startswith("/"):
            parts.insert(0, "/")
        return tuple(parts)

    @property
    def is_relative(self) -> bool:
        return not (self.full_path.startswith("/") or _DRIVE.match(self.full_path))

    def combine(self, other: Union[str, "DirectoryPath"]) -> "DirectoryPath":
        """Append a relative path, returning a new value."""
        other = DirectoryPath.from_string(other)
        if not other.is_relative:
            raise ValueError("Cannot combine a directory path with an absolute directory path.")
        return DirectoryPath(f"{self.full_path}/{other.full_path}")

    def make_absolute(self, environment: "Environment") -> "DirectoryPath":
        """Resolve against the environment's working directory when relative."""
        if not self.is_relative:
            return self
        return environment.working_directory.combine(self)

    def to_path(self) -> Path:
        return Path(self.full_path)

    def __str__(self) -> str:
        return self.full_path


def truncate_at_packages(segments: Sequence[str], marker: str = Constants.PACKAGES_FOLDER) -> Tuple[str, ...]:
    """Rebuild a canonical ``.../packages`` segment list.

    Segments are kept up to, but excluding, the first one literally equal to
    ``marker``; ``marker`` is then appended. A list with no marker is kept
    whole, so the result ends in ``<all segments>/packages``.
    """
    kept = []
    for segment in segments:
        if segment == marker:
            break
        kept.append(segment)
    kept.append(marker)
    return tuple(kept)


InstalledFiles = Tuple[Path, ...]
