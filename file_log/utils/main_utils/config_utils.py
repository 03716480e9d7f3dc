import os
import sys
from typing import Any, Dict, Optional

import yaml
from dotenv import load_dotenv

from file_log.constants import file_logger as constants
from file_log.entity.config_entity import FileLoggerConfig
from file_log.exception.exception import FileLogException
from file_log.logging.logger import get_logger
from file_log.utils.main_utils.general_utils import parse_bool

log = get_logger(__name__)

# keys accepted in the YAML file, mapped to FileLoggerConfig fields
_CONFIG_KEYS = (
    "base_name",
    "log_dir",
    "use_date",
    "use_prefix",
    "retention_days",
    "shutdown_timeout",
    "encoding",
    "mark_queued_lines",
)
_BOOL_KEYS = ("use_date", "use_prefix", "mark_queued_lines")


def read_config_yaml(config_file_path: str) -> Dict[str, Any]:
    """
    Read logger settings from a YAML file and return them as a dictionary.

    The file may hold the settings at the top level or under a
    ``file_log:`` section.

    Parameters
    ----------
    config_file_path : str
        Path to the YAML config file.

    Returns
    -------
    dict
        Settings as a dictionary (empty for an empty file).
    """
    try:
        log.debug(f"Reading logger config from YAML file: {config_file_path}")
        with open(config_file_path, "r", encoding="utf-8") as file:
            content = yaml.safe_load(file) or {}
        if not isinstance(content, dict):
            raise ValueError(f"expected a mapping in {config_file_path}")
        section = content.get("file_log", content)
        if not isinstance(section, dict):
            raise ValueError(f"'file_log' section in {config_file_path} must be a mapping")
        unknown = sorted(set(section) - set(_CONFIG_KEYS))
        if unknown:
            raise ValueError(f"unknown logger settings: {', '.join(unknown)}")
        return dict(section)
    except FileLogException:
        raise
    except Exception as e:
        raise FileLogException(e, sys)


def _env_overrides() -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    env_map = {
        "base_name": constants.ENV_BASE_NAME,
        "log_dir": constants.ENV_LOG_DIR,
        "use_date": constants.ENV_USE_DATE,
        "use_prefix": constants.ENV_USE_PREFIX,
        "retention_days": constants.ENV_RETENTION_DAYS,
    }
    for key, env_name in env_map.items():
        value = os.getenv(env_name)
        if value is not None and value != "":
            overrides[key] = value
    return overrides


def load_logger_config(
    base_name: Optional[str] = None,
    config_file_path: Optional[str] = None,
    **overrides,
) -> FileLoggerConfig:
    """
    Build a FileLoggerConfig from layered sources.

    Later sources win: YAML file, then environment variables (a .env file
    is loaded first), then explicit keyword arguments.

    Parameters
    ----------
    base_name : Optional[str]
        Base file name; may instead come from the YAML file or FILE_LOG_BASE_NAME.
    config_file_path : Optional[str]
        YAML file to read. Defaults to config/file_log.yaml when that file exists.
    **overrides
        Any FileLoggerConfig field.
    """
    load_dotenv()

    settings: Dict[str, Any] = {}
    if config_file_path is None and os.path.exists(constants.DEFAULT_CONFIG_FILE_PATH):
        config_file_path = constants.DEFAULT_CONFIG_FILE_PATH
    if config_file_path is not None:
        settings.update(read_config_yaml(config_file_path))

    settings.update(_env_overrides())
    if base_name is not None:
        settings["base_name"] = base_name
    settings.update({k: v for k, v in overrides.items() if v is not None})

    try:
        for key in _BOOL_KEYS:
            if key in settings:
                settings[key] = parse_bool(settings[key], key)
        if "retention_days" in settings:
            settings["retention_days"] = int(settings["retention_days"])
        if "shutdown_timeout" in settings:
            settings["shutdown_timeout"] = float(settings["shutdown_timeout"])
        if "log_dir" in settings:
            settings["log_dir"] = str(settings["log_dir"])
    except FileLogException:
        raise
    except (TypeError, ValueError) as e:
        raise FileLogException(e, sys)

    if "base_name" not in settings:
        raise FileLogException("no base_name given and none found in config or environment", sys)

    return FileLoggerConfig(**settings)
