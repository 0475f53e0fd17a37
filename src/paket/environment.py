"""Host environment collaborator: working directory and target framework."""

from __future__ import annotations

import os
from typing import Optional, Protocol

from constants import Constants
from .errors import ConfigurationError
from .models import DirectoryPath


class Environment(Protocol):
    """What the installer needs to know about the running host."""

    @property
    def working_directory(self) -> DirectoryPath:
        ...

    @property
    def target_framework(self) -> str:
        ...


class HostEnvironment:
    """Environment backed by the current process.

    The working directory is read on each access so callers that change
    directory see the new value. The target framework defaults to the
    configured ``Constants.TARGET_FRAMEWORK``.
    """

    def __init__(self, working_directory: Optional[str] = None, target_framework: Optional[str] = None):
        if working_directory is not None and DirectoryPath.from_string(working_directory).is_relative:
            raise ConfigurationError(f"Working directory must be absolute: {working_directory}")
        self._working_directory = working_directory
        self._target_framework = target_framework

    @property
    def working_directory(self) -> DirectoryPath:
        return DirectoryPath.from_string(self._working_directory or os.getcwd())

    @property
    def target_framework(self) -> str:
        return self._target_framework or Constants.TARGET_FRAMEWORK
