"""CLI configuration: logging setup and runtime overrides.

Kept apart from the entrypoint so precedence stays in one place:
CLI arguments win over environment variables, which win over the YAML
config file, which wins over the defaults in Constants.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict

from common.logging_utils import configure_logging
from constants import Constants, _load_yaml_config, apply_config

logger = logging.getLogger(__name__)


def setup_logging(args: Any, config: Dict[str, Any]) -> None:
    """Configure logging from CLI arguments, environment and config.

    Args:
        args: Parsed CLI arguments.
        config: Loaded YAML config mapping.
    """
    level = getattr(args, "LOG_LEVEL", None)
    if not level and not os.environ.get(Constants.ENV_LOG_LEVEL):
        level = config.get("log_level") if isinstance(config.get("log_level"), str) else None
    configure_logging(level)

    log_file = getattr(args, "LOG_FILE", None)
    if log_file:
        file_handler = logging.FileHandler(log_file)
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s"
        )
        file_handler.setFormatter(formatter)
        logging.getLogger().addHandler(file_handler)
        logger.info("Logging to file: %s", log_file)


def load_config(args: Any) -> Dict[str, Any]:
    """Load the YAML config and apply it, then CLI overrides, onto Constants."""
    config = _load_yaml_config(getattr(args, "CONFIG", None))
    apply_config(config)
    if getattr(args, "TARGET_FRAMEWORK", None):
        Constants.TARGET_FRAMEWORK = args.TARGET_FRAMEWORK
    return config
