"""Settings for ``paket push``.

Only the configuration surface lives here; uploading packages is left to
the host that runs paket.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from constants import Constants
from .errors import ConfigurationError


@dataclass
class PaketPushSettings:
    """Settings used when pushing a package to a feed."""

    api_key: Optional[str] = field(default=None, repr=False)
    end_point: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_config(
        cls, config: Optional[Mapping[str, Any]] = None, environ: Optional[Mapping[str, str]] = None
    ) -> "PaketPushSettings":
        """Build settings from a ``push`` config section, then environment overrides.

        Accepts ``api_key``/``apikey``, ``end_point``/``endpoint`` and ``url``
        keys. Non-string values raise ConfigurationError.
        """
        config = dict(config if config is not None else Constants.PUSH)
        environ = os.environ if environ is None else environ
        aliases = {"apikey": "api_key", "endpoint": "end_point"}

        values: Dict[str, Optional[str]] = {"api_key": None, "end_point": None, "url": None}
        for key, value in config.items():
            name = aliases.get(str(key).lower().replace("-", ""), str(key).lower())
            if name not in values:
                continue
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(f"push.{key} must be a string")
            values[name] = value

        for name, env_var in (
            ("api_key", Constants.ENV_PUSH_API_KEY),
            ("end_point", Constants.ENV_PUSH_ENDPOINT),
            ("url", Constants.ENV_PUSH_URL),
        ):
            env_value = environ.get(env_var)
            if env_value:
                values[name] = env_value

        return cls(**{k: (v.strip() or None) if v else None for k, v in values.items()})

    def to_arguments(self) -> List[str]:
        """Render the settings as ``paket push`` command-line arguments."""
        args: List[str] = []
        if self.url:
            args += ["--url", self.url]
        if self.api_key:
            args += ["--api-key", self.api_key]
        if self.end_point:
            args += ["--endpoint", self.end_point]
        return args
