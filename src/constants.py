"""Constants used in the project."""

import logging
import os
from enum import Enum
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    UNSUPPORTED = 2
    NO_FILES = 3


class Schemes(Enum):
    """URI schemes known to the resolver.

    Args:
        Enum (string): Scheme names, compared case-insensitively.
    """

    PAKET = "paket"
    NUGET = "nuget"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    SUPPORTED_SCHEME = Schemes.PAKET.value
    REJECTED_SCHEME = Schemes.NUGET.value
    PACKAGE_PARAMETER = "package"
    GROUP_PARAMETER = "group"
    INCLUDE_PARAMETER = "include"
    PACKAGES_FOLDER = "packages"
    ADDIN_LIB_FOLDER = "lib"
    ADDIN_EXTENSION = ".dll"
    DEFAULT_INSTALL_ROOT = "./tools"
    DEFAULT_TARGET_FRAMEWORK = ".NETStandard,Version=v2.0"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    CONFIG_FILES = ["paketresolve.yml", "paketresolve.yaml"]

    # Environment variables
    ENV_LOG_LEVEL = "PAKETRESOLVE_LOG_LEVEL"
    ENV_CONFIG = "PAKETRESOLVE_CONFIG"
    ENV_TARGET_FRAMEWORK = "PAKETRESOLVE_TARGET_FRAMEWORK"
    ENV_PUSH_API_KEY = "PAKET_PUSH_API_KEY"
    ENV_PUSH_ENDPOINT = "PAKET_PUSH_ENDPOINT"
    ENV_PUSH_URL = "PAKET_PUSH_URL"

    # Runtime values, overridden by YAML config, environment and CLI
    TARGET_FRAMEWORK = DEFAULT_TARGET_FRAMEWORK
    PUSH: Dict[str, Any] = {}


def _find_config_file(explicit: Optional[str] = None) -> Optional[str]:
    """Return the first config file that exists, honoring an explicit path."""
    candidate = explicit or os.environ.get(Constants.ENV_CONFIG)
    if candidate:
        return candidate if os.path.isfile(candidate) else None
    for name in Constants.CONFIG_FILES:
        path = os.path.join(os.getcwd(), name)
        if os.path.isfile(path):
            return path
    return None


def _load_yaml_config(path: Optional[str] = None) -> Dict[str, Any]:
    """Load the YAML configuration file into a dict.

    Returns an empty dict when no file is found. A file that cannot be parsed
    or whose top level is not a mapping is reported and ignored.
    """
    config_path = _find_config_file(path)
    if not config_path:
        if path:
            logger.warning("Config file not found: %s", path)
        return {}

    import yaml  # pylint: disable=import-outside-toplevel

    try:
        with open(config_path, "r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        logger.error("Failed to load config %s: %s", config_path, exc)
        return {}
    if not isinstance(data, dict):
        logger.error("Config %s must contain a mapping at the top level", config_path)
        return {}
    logger.debug("Loaded config from %s", config_path)
    return data


def apply_config(data: Dict[str, Any]) -> None:
    """Apply a loaded config mapping, then environment overrides, onto Constants."""
    framework = data.get("target_framework")
    if isinstance(framework, str) and framework.strip():
        Constants.TARGET_FRAMEWORK = framework.strip()
    push = data.get("push")
    if isinstance(push, dict):
        Constants.PUSH = dict(push)

    env_framework = os.environ.get(Constants.ENV_TARGET_FRAMEWORK)
    if env_framework and env_framework.strip():
        Constants.TARGET_FRAMEWORK = env_framework.strip()
