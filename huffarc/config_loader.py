# config_loader.py
import os

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "config.yaml")
CONFIG_ENV_VAR = "HUFFARC_CONFIG"

SCHEMA = {
    "compression": {"strict_frequencies": bool},
    "files": {"archive_suffix": str, "restored_suffix": str},
    "output": {"verbose": bool},
}


def _read(config_path):
    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e
    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigError(f"Config {config_path} must be a mapping")
    return config


def _merge(defaults, overrides, config_path):
    merged = {section: dict(values) for section, values in defaults.items()}
    for section, values in overrides.items():
        if section not in SCHEMA:
            raise ConfigError(f"Unknown section '{section}' in {config_path}")
        if not isinstance(values, dict):
            raise ConfigError(f"Section '{section}' in {config_path} must be a mapping")
        for key, value in values.items():
            expected = SCHEMA[section].get(key)
            if expected is None:
                raise ConfigError(f"Unknown key '{section}.{key}' in {config_path}")
            if not isinstance(value, expected):
                raise ConfigError(
                    f"'{section}.{key}' in {config_path} must be {expected.__name__}"
                )
            merged[section][key] = value
    return merged


def load_config(config_path=None):
    """
    Loads the configuration.

    The file is taken from config_path, else from the HUFFARC_CONFIG
    environment variable, else the packaged defaults are used alone. A user
    file only needs the keys it changes.

    Parameters:
    config_path (str, optional): Path of a YAML config file.

    Returns:
    dict: Configuration sections.
    """
    defaults = _read(DEFAULT_CONFIG_PATH)
    config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
    if not config_path:
        return defaults
    return _merge(defaults, _read(config_path), config_path)
