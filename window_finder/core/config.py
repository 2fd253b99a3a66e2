"""Configuration for window lookups.

Only one setting affects matching: whether local paths are compared
case-insensitively. It is detected from the platform and can be overridden
by the config file and then by the environment.
"""

import json
import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

from .platform import ignores_case

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = Path.home() / ".config/window-finder/config.json"
IGNORE_CASE_ENV = "WINDOW_FINDER_IGNORE_CASE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: str) -> bool:
    """Parse a boolean environment value.

    Raises:
        ValueError: If value is not a recognised boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(
        f"Invalid boolean '{value}'. Expected one of: "
        f"{', '.join(sorted(_TRUE_VALUES | _FALSE_VALUES))}"
    )


class FinderConfig(BaseModel):
    """Settings threaded into every lookup.

    Attributes:
        ignore_case: Explicit case rule for local paths (None = platform default)
        platform: Platform name used for detection (default: sys.platform)

    Examples:
        >>> FinderConfig(platform="darwin").effective_ignore_case()
        True
        >>> FinderConfig(platform="darwin", ignore_case=False).effective_ignore_case()
        False
    """

    ignore_case: Optional[bool] = None
    platform: str = Field(default_factory=lambda: sys.platform, min_length=1)

    def effective_ignore_case(self) -> bool:
        """Case rule to pass to the lookups."""
        if self.ignore_case is not None:
            return self.ignore_case
        return ignores_case(self.platform)

    @classmethod
    def load(cls, config_file: Optional[Path] = None, use_env: bool = True) -> "FinderConfig":
        """Load configuration from disk and the environment.

        A missing config file is not an error; defaults are used.

        Args:
            config_file: Path to config.json (default: ~/.config/window-finder/config.json)
            use_env: Apply the WINDOW_FINDER_IGNORE_CASE override

        Returns:
            FinderConfig instance

        Raises:
            ValueError: If the file or environment value is invalid
        """
        if config_file is None:
            config_file = DEFAULT_CONFIG_FILE
        config_file = Path(config_file).expanduser()

        data = {}
        if config_file.exists():
            try:
                with config_file.open("r") as f:
                    data = json.load(f)
            except (json.JSONDecodeError, IOError) as e:
                raise ValueError(f"Failed to load config {config_file}: {e}")
            if not isinstance(data, dict):
                raise ValueError(f"Config {config_file} must be a JSON object")
            logger.debug(f"Loaded config from {config_file}")
        else:
            logger.debug(f"No config file at {config_file}, using defaults")

        try:
            config = cls.model_validate(data)
        except ValidationError as e:
            raise ValueError(f"Invalid config {config_file}: {e}")

        if use_env:
            env_value = os.environ.get(IGNORE_CASE_ENV)
            if env_value:
                try:
                    ignore_case = parse_bool(env_value)
                except ValueError as e:
                    raise ValueError(f"{IGNORE_CASE_ENV}: {e}")
                config = config.model_copy(update={"ignore_case": ignore_case})
                logger.debug(f"{IGNORE_CASE_ENV} overrides ignore_case={ignore_case}")

        return config
