"""
Settings

Structured configuration for logging and rendering, built with OmegaConf.

Precedence (lowest to highest):
1. Dataclass defaults below
2. Optional YAML config file
3. Environment variables (a .env file is loaded first)
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

load_dotenv()

# Environment variable -> dotted settings key
ENV_OVERRIDES = {
    "RSB_LOG_LEVEL": "logging.level",
    "RSB_LOGS_PATH": "logging.log_dir",
    "RSB_INLINE_CSS": "render.inline_css",
    "RSB_TITLE_DATE": "render.title_date",
}


class SettingsError(ValueError):
    """Raised when a config file or environment override is invalid."""


@dataclass
class LoggingSettings:
    """
    Attributes:
        level: Console log level
        log_dir: Directory for detailed log files (None disables file logging)
    """

    level: str = "INFO"
    log_dir: Optional[str] = None


@dataclass
class RenderOptions:
    """
    Options passed to the HTML renderer.

    Attributes:
        inline_css: Embed the bundled stylesheet in a <style> tag
        title_date: Date shown in the page title (defaults to today, UTC)
    """

    inline_css: bool = True
    title_date: Optional[str] = None


@dataclass
class Settings:
    logging: LoggingSettings = field(default_factory=LoggingSettings)
    render: RenderOptions = field(default_factory=RenderOptions)


def load_settings(config_path: Optional[Union[Path, str]] = None) -> Settings:
    """
    Load settings from defaults, an optional YAML file and the environment.

    Args:
        config_path: Optional YAML file with 'logging' and/or 'render' keys

    Returns:
        Settings instance

    Raises:
        SettingsError: If the file is missing, has unknown keys, or a value
            has the wrong type

    Example:
        settings = load_settings("rsb.yaml")
        settings.render.inline_css  # True
    """
    conf = OmegaConf.structured(Settings)

    try:
        if config_path is not None:
            config_path = Path(config_path)
            if not config_path.exists():
                raise SettingsError(f"Config file not found: {config_path}")
            conf = OmegaConf.merge(conf, OmegaConf.load(config_path))

        for env_name, key in ENV_OVERRIDES.items():
            value = os.getenv(env_name)
            if value is not None:
                OmegaConf.update(conf, key, value)

        return OmegaConf.to_object(conf)
    except OmegaConfBaseException as e:
        raise SettingsError(f"Invalid settings: {e}") from e
